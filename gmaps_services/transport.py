"""
HTTP transport

Opens a GET request with httpx and hands the response body to the decoders
as a file-like byte stream. The response is released when the with-block
exits, whether decoding finished or failed.
"""

from contextlib import contextmanager
from typing import Iterator, Optional

import httpx

from . import config
from .exceptions import TransportError

USER_AGENT = "gmaps-services/1.0"


class ResponseStream:
    """File-like reader over the body of a streamed httpx response."""

    def __init__(self, response: httpx.Response, chunk_size: int = 16384):
        self._chunks = response.iter_bytes(chunk_size)
        self._buffer = b""
        self._done = False

    def read(self, size: int = -1) -> bytes:
        while not self._done and (size < 0 or len(self._buffer) < size):
            try:
                self._buffer += next(self._chunks)
            except StopIteration:
                self._done = True
            except httpx.HTTPError as e:
                raise TransportError(f"Error reading response: {e}") from e

        if size < 0:
            data, self._buffer = self._buffer, b""
        else:
            data, self._buffer = self._buffer[:size], self._buffer[size:]
        return data


def create_client(timeout: Optional[float] = None, **kwargs) -> httpx.Client:
    """Create an httpx client with the configured timeout and proxy."""
    client_kwargs = {
        'timeout': timeout if timeout is not None else config.REQUEST_TIMEOUT,
        'headers': {'User-Agent': USER_AGENT},
        'follow_redirects': True,
    }
    proxy_url = config.get_proxy_url()
    if proxy_url:
        client_kwargs['proxy'] = proxy_url
    client_kwargs.update(kwargs)
    return httpx.Client(**client_kwargs)


@contextmanager
def open_stream(url: str, client: Optional[httpx.Client] = None) -> Iterator[ResponseStream]:
    """
    Open a GET request and yield its body as a byte stream.

    Args:
        url: Fully formatted request URL
        client: Client to send the request with. A temporary one is created
                (and closed) if not given.

    Raises:
        TransportError: If the connection fails or the server answers with
                        an HTTP error status
    """
    own_client = client is None
    if own_client:
        client = create_client()

    try:
        with client.stream("GET", url) as response:
            try:
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                raise TransportError(
                    f"HTTP {response.status_code} from {response.url.host}"
                ) from e
            yield ResponseStream(response)
    except httpx.HTTPError as e:
        raise TransportError(f"Request failed: {e}") from e
    finally:
        if own_client:
            client.close()
