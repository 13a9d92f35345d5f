from urllib.parse import parse_qs, urlsplit

import httpx
import pytest

from gmaps_services import GoogleMapsClient, config
from gmaps_services.exceptions import MissingParameterError, ResponseParseError, TransportError
from gmaps_services.keys import Status
from gmaps_services.params import DistanceMatrixParams, GeocodingParams
from gmaps_services.transport import ResponseStream, create_client

from .conftest import load_fixture


class RecordingStream(httpx.SyncByteStream):
    """Response body that remembers whether it was closed."""

    def __init__(self, chunks):
        self.chunks = chunks
        self.closed = False

    def __iter__(self):
        yield from self.chunks

    def close(self):
        self.closed = True


def test_distances_decodes_response(mock_http):
    requests = []

    def handler(request):
        requests.append(request)
        return httpx.Response(200, content=load_fixture("distance_matrix_2x2.json"))

    params = DistanceMatrixParams().origins("Schwedenplatz, Wien", "Albertina, Wien") \
        .destinations("Staatsoper, Wien", "Rathaus, Wien").mode("walking")

    with GoogleMapsClient(http_client=mock_http(handler)) as maps:
        response = maps.distances(params)

    assert response.status is Status.OK
    assert len(response.results) == 4
    assert response.results[3].origin_address == "Albertinaplatz 1, 1010 Wien, Austria"

    sent = parse_qs(urlsplit(str(requests[0].url)).query)
    assert requests[0].method == "GET"
    assert requests[0].url.path == "/maps/api/distancematrix/json"
    assert sent["origins"] == ["Schwedenplatz, Wien|Albertina, Wien"]
    assert sent["mode"] == ["walking"]


def test_geocode_decodes_response(mock_http):
    def handler(request):
        assert request.url.path == "/maps/api/geocode/json"
        return httpx.Response(200, content=load_fixture("geocoding_stephansdom.json"))

    with GoogleMapsClient(http_client=mock_http(handler)) as maps:
        response = maps.geocode(GeocodingParams().address("Stephansdom, Wien").language("de"))

    assert response.status is Status.OK
    assert response.results[0].latitude == 48.2084114
    assert response.results[0].longitude == 16.3734707


def test_body_is_read_in_chunks(mock_http):
    body = load_fixture("geocoding_stephansdom.json")
    chunks = [body[i:i + 7] for i in range(0, len(body), 7)]

    def handler(request):
        return httpx.Response(200, stream=RecordingStream(chunks))

    maps = GoogleMapsClient(http_client=mock_http(handler))
    response = maps.geocode(GeocodingParams().latlng(48.2084114, 16.3734707))

    assert response.results[0].formatted_address == "Stephansplatz 3, 1010 Wien, Österreich"


def test_stream_is_closed_after_success(mock_http):
    stream = RecordingStream([load_fixture("geocoding_stephansdom.json")])

    maps = GoogleMapsClient(http_client=mock_http(lambda request: httpx.Response(200, stream=stream)))
    maps.geocode(GeocodingParams().address("Wien"))

    assert stream.closed


def test_stream_is_closed_when_decoding_fails(mock_http):
    stream = RecordingStream([b'{"status": "OK", "results": [{"geometry": '])

    maps = GoogleMapsClient(http_client=mock_http(lambda request: httpx.Response(200, stream=stream)))
    with pytest.raises(ResponseParseError):
        maps.geocode(GeocodingParams().address("Wien"))

    assert stream.closed


def test_http_error_status_raises_transport_error(mock_http):
    stream = RecordingStream([b"Server Error"])

    maps = GoogleMapsClient(http_client=mock_http(lambda request: httpx.Response(500, stream=stream)))
    with pytest.raises(TransportError) as e:
        maps.geocode(GeocodingParams().address("Wien"))

    assert "500" in str(e.value)
    assert stream.closed


def test_connection_failure_raises_transport_error(mock_http):
    def handler(request):
        raise httpx.ConnectError("Name or service not known", request=request)

    maps = GoogleMapsClient(http_client=mock_http(handler))
    with pytest.raises(TransportError) as e:
        maps.distances(DistanceMatrixParams().origins("A").destinations("B"))

    assert isinstance(e.value.__cause__, httpx.ConnectError)
    assert isinstance(e.value, IOError)


def test_missing_parameters_fail_before_any_request(mock_http):
    def handler(request):
        raise AssertionError("no request expected")

    maps = GoogleMapsClient(http_client=mock_http(handler))
    with pytest.raises(MissingParameterError):
        maps.distances(DistanceMatrixParams().origins("A"))
    with pytest.raises(MissingParameterError):
        maps.geocode(GeocodingParams())


def test_verbose_prints_progress(mock_http, capsys):
    def handler(request):
        return httpx.Response(200, content=b'{"status": "ZERO_RESULTS", "results": []}')

    maps = GoogleMapsClient(http_client=mock_http(handler), verbose=True)
    maps.geocode(GeocodingParams().address("Nowhere"))

    assert "[Geocoding] ZERO_RESULTS: 0 results" in capsys.readouterr().out


def test_close_leaves_passed_client_open(mock_http):
    http = mock_http(lambda request: httpx.Response(200, content=b"{}"))

    GoogleMapsClient(http_client=http).close()

    assert not http.is_closed


def test_response_stream_read_sizes():
    response = httpx.Response(200, stream=RecordingStream([b"abc", b"defg", b"h"]))
    stream = ResponseStream(response, chunk_size=2)

    assert stream.read(2) == b"ab"
    assert stream.read(4) == b"cdef"
    assert stream.read() == b"gh"
    assert stream.read(10) == b""


def test_create_client_uses_config(monkeypatch):
    monkeypatch.setattr(config, "REQUEST_TIMEOUT", 12.5)

    with create_client() as client:
        assert client.timeout.read == 12.5
        assert client.headers["User-Agent"].startswith("gmaps-services/")
