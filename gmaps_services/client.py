"""
GoogleMapsClient - calls the Distance Matrix and Geocoding web services.

Usage:
    from gmaps_services import GoogleMapsClient, DistanceMatrixParams

    with GoogleMapsClient() as maps:
        response = maps.distances(
            DistanceMatrixParams().origin(48.2116039, 16.37701)
            .destinations("Staatsoper, Wien", "Rathaus, Wien").mode("walking")
        )
        for distance in response.results:
            print(distance.destination_address, distance.duration_text)

Each call blocks until the response has been fetched and decoded. Any
failure aborts the call; the HTTP response is released either way.
"""

import logging
from typing import Optional

import httpx

from .decoder import JsonReader, decode_distance_matrix, decode_geocoding
from .models import DistanceMatrixResponse, GeocodingResponse
from .params import DistanceMatrixParams, GeocodingParams
from .transport import create_client, open_stream

logger = logging.getLogger(__name__)


class GoogleMapsClient:
    """Client for the Google Maps Distance Matrix and Geocoding services.

    Args:
        http_client: httpx client to send requests with. If None, one is
                     created from the configured timeout and proxy and
                     closed by close().
        verbose: Whether to print progress output (default: False).

    Example:
        with GoogleMapsClient() as maps:
            response = maps.geocode(GeocodingParams().address("Stephansdom, Wien"))
            print(response.status, len(response.results))
    """

    def __init__(self, http_client: Optional[httpx.Client] = None, verbose: bool = False):
        self._owns_client = http_client is None
        self._http = http_client if http_client is not None else create_client()
        self.verbose = verbose

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def close(self):
        """Close the underlying httpx client if this instance created it."""
        if self._owns_client:
            self._http.close()

    def distances(self, params: DistanceMatrixParams) -> DistanceMatrixResponse:
        """
        Get travel distances and times between origins and destinations.

        Args:
            params: Request parameters; origins and destinations are required

        Returns:
            DistanceMatrixResponse

        Raises:
            MissingParameterError: If origins or destinations are not set
            TransportError: If the service can't be reached
            ResponseParseError: If the response is not valid JSON
        """
        url = params.format()
        logger.debug("Distance Matrix request: %s", url)
        if self.verbose:
            print(f"[DistanceMatrix] {params.origin_count} origins x "
                  f"{params.destination_count} destinations...")

        with open_stream(url, self._http) as stream:
            response = decode_distance_matrix(
                params.origin_count, params.destination_count, JsonReader(stream)
            )

        if self.verbose:
            print(f"[DistanceMatrix] {response.status.name}: {len(response.results)} elements")
        return response

    def geocode(self, params: GeocodingParams) -> GeocodingResponse:
        """
        Geocode an address into coordinates, or reverse geocode coordinates.

        Args:
            params: Request parameters; address or latlng is required

        Returns:
            GeocodingResponse

        Raises:
            MissingParameterError: If neither address nor latlng is set
            TransportError: If the service can't be reached
            ResponseParseError: If the response is not valid JSON
        """
        url = params.format()
        logger.debug("Geocoding request: %s", url)
        if self.verbose:
            print(f"[Geocoding] {params!r}...")

        with open_stream(url, self._http) as stream:
            response = decode_geocoding(JsonReader(stream))

        if self.verbose:
            print(f"[Geocoding] {response.status.name}: {len(response.results)} results")
        return response


def distances(params: DistanceMatrixParams) -> DistanceMatrixResponse:
    """Call the Distance Matrix service with a short-lived client."""
    with GoogleMapsClient() as maps:
        return maps.distances(params)


def geocode(params: GeocodingParams) -> GeocodingResponse:
    """Call the Geocoding service with a short-lived client."""
    with GoogleMapsClient() as maps:
        return maps.geocode(params)
