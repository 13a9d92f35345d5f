"""
Google Maps web services client

Builds Distance Matrix and Geocoding requests, fetches them and decodes the
JSON responses token by token into small immutable result objects.

Quick start:
    from gmaps_services import GoogleMapsClient, GeocodingParams

    with GoogleMapsClient() as maps:
        response = maps.geocode(GeocodingParams().address("Stephansdom, Wien").language("de"))
        for location in response.results:
            print(location.formatted_address, location.latitude, location.longitude)
"""

from .client import GoogleMapsClient, distances, geocode
from .config_manager import ServicesConfig
from .exceptions import (
    GMapsServicesError,
    MissingParameterError,
    TransportError,
    ResponseParseError,
    ConfigurationError,
)
from .keys import DistanceMatrixKey, GeocodingKey, Status
from .models import (
    Address,
    AddressComponent,
    GeocodedLocation,
    TravelDistance,
    DistanceMatrixResponse,
    GeocodingResponse,
)
from .params import DistanceMatrixParams, GeocodingParams

__version__ = "1.0.0"
__all__ = [
    "GoogleMapsClient",
    "distances",
    "geocode",
    "ServicesConfig",
    "DistanceMatrixParams",
    "GeocodingParams",
    "DistanceMatrixResponse",
    "GeocodingResponse",
    "TravelDistance",
    "GeocodedLocation",
    "Address",
    "AddressComponent",
    "Status",
    "DistanceMatrixKey",
    "GeocodingKey",
    "GMapsServicesError",
    "MissingParameterError",
    "TransportError",
    "ResponseParseError",
    "ConfigurationError",
]
