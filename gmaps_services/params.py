"""
Request parameters

Chainable builders for Distance Matrix and Geocoding requests. Every setter
returns the builder, so a request reads as one expression:

    params = DistanceMatrixParams().origins("Albertina, Vienna") \\
        .destinations("48.20274,16.368843", "48.2116039,16.37701").mode("walking")
    url = params.format()

A builder can be reused for another request after clear().
"""

from datetime import datetime
from typing import List, Optional, Sequence, Tuple, Union
from urllib.parse import quote_plus

from . import config
from .exceptions import MissingParameterError

# URL encoded "|", the separator of multi-value parameters
PIPE = "%7C"


def _collect(current: Optional[List[str]], values: Sequence) -> Optional[List[str]]:
    """Append values to the current list, or reset it when there are none."""
    if len(values) == 1 and isinstance(values[0], (list, tuple)):
        values = values[0]
    values = [value for value in values if value is not None]
    if not values:
        return None
    if current is None:
        return values
    return current + values


def _coordinate(value: float) -> str:
    # fixed point with at most 7 decimals, never exponent notation
    return ("%.7f" % value).rstrip("0").rstrip(".")


def _lat_lng(latitude: float, longitude: float) -> str:
    return f"{_coordinate(latitude)},{_coordinate(longitude)}"


def _join(values: Sequence[str], safe: str = "") -> str:
    return PIPE.join(quote_plus(value, safe=safe) for value in values)


def _language(language: Optional[str]) -> str:
    return language if language else config.DEFAULT_LANGUAGE


def _sensor() -> str:
    return "true" if config.LOCATION_SENSOR else "false"


def _describe(obj, fields: Sequence[Tuple[str, object]]) -> str:
    shown = ", ".join(f"{name}={value!r}" for name, value in fields if value is not None)
    return f"{type(obj).__name__}({shown})"


class DistanceMatrixParams:
    """Parameters for a Distance Matrix request.

    Required: origins and destinations.
    Optional: mode, language, avoid, units, departure_time.
    """

    def __init__(self):
        self.clear()

    def origins(self, *origins: str) -> 'DistanceMatrixParams':
        """Add locations (addresses or "lat,lng" values) as origins.

        Calling this method again appends to the list. Call it without
        values (or with None) to reset the list. None entries are ignored.
        """
        self._origins = _collect(self._origins, origins)
        return self

    def origin(self, latitude: float, longitude: float) -> 'DistanceMatrixParams':
        """Add a latitude/longitude pair as an origin."""
        self._origins = (self._origins or []) + [_lat_lng(latitude, longitude)]
        return self

    def destinations(self, *destinations: str) -> 'DistanceMatrixParams':
        """Add locations (addresses or "lat,lng" values) as destinations.

        Calling this method again appends to the list. Call it without
        values (or with None) to reset the list. None entries are ignored.
        """
        self._destinations = _collect(self._destinations, destinations)
        return self

    def destination(self, latitude: float, longitude: float) -> 'DistanceMatrixParams':
        """Add a latitude/longitude pair as a destination."""
        self._destinations = (self._destinations or []) + [_lat_lng(latitude, longitude)]
        return self

    def mode(self, mode: Optional[str]) -> 'DistanceMatrixParams':
        """Mode of transport: driving (default), walking, bicycling or transit."""
        self._mode = mode
        return self

    def language(self, language: Optional[str]) -> 'DistanceMatrixParams':
        """Return results in this language, if possible."""
        self._language = language
        return self

    def avoid(self, avoid: Optional[str]) -> 'DistanceMatrixParams':
        """Route restriction. Only one can be specified: tolls, highways or ferries."""
        self._avoid = avoid
        return self

    def units(self, units: Optional[str]) -> 'DistanceMatrixParams':
        """Unit system of the distance texts: metric (default) or imperial."""
        self._units = units
        return self

    def departure_time(self, departure_time: Union[int, datetime]) -> 'DistanceMatrixParams':
        """Desired time of departure, in seconds since the epoch. 0 leaves it unset."""
        if isinstance(departure_time, datetime):
            departure_time = departure_time.timestamp()
        self._departure_time = int(departure_time or 0)
        return self

    @property
    def origin_count(self) -> int:
        return len(self._origins) if self._origins else 0

    @property
    def destination_count(self) -> int:
        return len(self._destinations) if self._destinations else 0

    def format(self) -> str:
        """Get the request URL.

        Raises:
            MissingParameterError: If origins or destinations are not set
        """
        if not self._origins:
            raise MissingParameterError("origins")
        if not self._destinations:
            raise MissingParameterError("destinations")

        parts = [
            f"sensor={_sensor()}",
            f"origins={_join(self._origins)}",
            f"destinations={_join(self._destinations)}",
        ]
        if self._mode:
            parts.append(f"mode={quote_plus(self._mode)}")
        parts.append(f"language={quote_plus(_language(self._language))}")
        if self._avoid:
            parts.append(f"avoid={quote_plus(self._avoid)}")
        if self._units:
            parts.append(f"units={quote_plus(self._units)}")
        if self._departure_time > 0:
            parts.append(f"departure_time={self._departure_time}")

        return f"{config.DISTANCE_MATRIX_URL}?{'&'.join(parts)}"

    render = format

    def clear(self) -> 'DistanceMatrixParams':
        """Clear all parameters so that this instance can be reused for a new request."""
        self._origins: Optional[List[str]] = None
        self._destinations: Optional[List[str]] = None
        self._mode: Optional[str] = None
        self._language: Optional[str] = None
        self._avoid: Optional[str] = None
        self._units: Optional[str] = None
        self._departure_time: int = 0
        return self

    def _fields(self) -> Tuple[Tuple[str, object], ...]:
        return (
            ('origins', tuple(self._origins) if self._origins is not None else None),
            ('destinations', tuple(self._destinations) if self._destinations is not None else None),
            ('mode', self._mode),
            ('language', self._language),
            ('avoid', self._avoid),
            ('units', self._units),
            ('departure_time', self._departure_time or None),
        )

    def __eq__(self, other):
        if not isinstance(other, DistanceMatrixParams):
            return NotImplemented
        return self._fields() == other._fields()

    def __hash__(self):
        return hash(self._fields())

    def __repr__(self):
        return _describe(self, self._fields())


class GeocodingParams:
    """Parameters for a Geocoding request.

    Required: address (geocoding) or latlng (reverse geocoding). Setting one
    removes the other.
    Optional: bounds, language, region, components.
    """

    def __init__(self):
        self.clear()

    def address(self, address: Optional[str]) -> 'GeocodingParams':
        """Address to geocode. Removes any latlng."""
        self._address = address
        self._latlng = None
        return self

    def latlng(self, latitude: float, longitude: float) -> 'GeocodingParams':
        """Location to reverse geocode. Removes any address."""
        self._latlng = "%f,%f" % (latitude, longitude)
        self._address = None
        return self

    def bounds(self, south: float, west: float, north: float, east: float) -> 'GeocodingParams':
        """Viewport that results should be biased towards."""
        self._bounds = "%f,%f" % (south, west), "%f,%f" % (north, east)
        return self

    def language(self, language: Optional[str]) -> 'GeocodingParams':
        """Return results in this language, if possible."""
        self._language = language
        return self

    def region(self, region: Optional[str]) -> 'GeocodingParams':
        """ccTLD region code. Influences, but doesn't restrict, the results."""
        self._region = region
        return self

    def components(self, *components: str) -> 'GeocodingParams':
        """Add component filters like "country:AT" that restrict the results.

        Calling this method again appends to the list. Call it without
        values (or with None) to reset the list. None entries are ignored.
        """
        self._components = _collect(self._components, components)
        return self

    def format(self) -> str:
        """Get the request URL.

        Raises:
            MissingParameterError: If neither address nor latlng is set
        """
        parts = [f"sensor={_sensor()}"]
        if self._address is not None:
            parts.append(f"address={quote_plus(self._address)}")
        elif self._latlng is not None:
            parts.append(f"latlng={self._latlng}")
        else:
            raise MissingParameterError("address", "either address or latlng must be set")

        if self._bounds:
            parts.append(f"bounds={_join(self._bounds, safe=',')}")
        parts.append(f"language={quote_plus(_language(self._language))}")
        if self._region:
            parts.append(f"region={quote_plus(self._region)}")
        if self._components:
            parts.append(f"components={_join(self._components, safe=':')}")

        return f"{config.GEOCODING_URL}?{'&'.join(parts)}"

    render = format

    def clear(self) -> 'GeocodingParams':
        """Clear all parameters so that this instance can be reused for a new request."""
        self._address: Optional[str] = None
        self._latlng: Optional[str] = None
        self._bounds: Optional[Tuple[str, str]] = None
        self._language: Optional[str] = None
        self._region: Optional[str] = None
        self._components: Optional[List[str]] = None
        return self

    def _fields(self) -> Tuple[Tuple[str, object], ...]:
        return (
            ('address', self._address),
            ('latlng', self._latlng),
            ('bounds', self._bounds),
            ('language', self._language),
            ('region', self._region),
            ('components', tuple(self._components) if self._components is not None else None),
        )

    def __eq__(self, other):
        if not isinstance(other, GeocodingParams):
            return NotImplemented
        return self._fields() == other._fields()

    def __hash__(self):
        return hash(self._fields())

    def __repr__(self):
        return _describe(self, self._fields())
