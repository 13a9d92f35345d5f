"""
Response key registries

Every JSON field name a decoder understands is a member of one of the key
enums below. Lookup is total: a name that isn't known maps to UNKNOWN, so a
decoder can skip fields Google adds after this library was written.

Each web service has its own registry because their field namespaces differ.
Status codes are shared by both services.
"""

import logging
from enum import Enum
from typing import Dict, Set, Tuple, Type

logger = logging.getLogger(__name__)

# (registry name, unknown name) pairs that were already logged. Once the cap
# is reached, further unknown names are looked up silently.
_MAX_REPORTED = 1000
_reported: Set[Tuple[str, str]] = set()


class DistanceMatrixKey(Enum):
    """Field names of a Distance Matrix response, rows and elements included."""
    STATUS = 'status'
    ERROR_MESSAGE = 'error_message'
    ID = 'id'
    ORIGIN_ADDRESSES = 'origin_addresses'
    DESTINATION_ADDRESSES = 'destination_addresses'
    ROWS = 'rows'
    ELEMENTS = 'elements'
    DURATION = 'duration'
    DISTANCE = 'distance'
    VALUE = 'value'
    TEXT = 'text'
    UNKNOWN = None

    @classmethod
    def get(cls, name: str) -> 'DistanceMatrixKey':
        """Get the matching key or UNKNOWN if there is none."""
        return _lookup(cls, name, "response key")


class GeocodingKey(Enum):
    """Field names of a Geocoding response at any nesting level."""
    STATUS = 'status'
    ERROR_MESSAGE = 'error_message'
    RESULTS = 'results'
    ADDRESS_COMPONENTS = 'address_components'
    LONG_NAME = 'long_name'
    SHORT_NAME = 'short_name'
    TYPES = 'types'
    FORMATTED_ADDRESS = 'formatted_address'
    GEOMETRY = 'geometry'
    LOCATION = 'location'
    LAT = 'lat'
    LNG = 'lng'
    LOCATION_TYPE = 'location_type'
    VIEWPORT = 'viewport'
    NORTHEAST = 'northeast'
    SOUTHWEST = 'southwest'
    PLACE_ID = 'place_id'
    PARTIAL_MATCH = 'partial_match'
    UNKNOWN = None

    @classmethod
    def get(cls, name: str) -> 'GeocodingKey':
        """Get the matching key or UNKNOWN if there is none."""
        return _lookup(cls, name, "response key")


class Status(Enum):
    """Indication of the success or failure of a request or of one matrix element."""
    # request level
    OK = 'OK'
    INVALID_REQUEST = 'INVALID_REQUEST'
    MAX_ELEMENTS_EXCEEDED = 'MAX_ELEMENTS_EXCEEDED'
    OVER_QUERY_LIMIT = 'OVER_QUERY_LIMIT'
    REQUEST_DENIED = 'REQUEST_DENIED'
    UNKNOWN_ERROR = 'UNKNOWN_ERROR'
    # element level
    NOT_FOUND = 'NOT_FOUND'
    ZERO_RESULTS = 'ZERO_RESULTS'
    # a code that hasn't been added here yet
    UNKNOWN = None

    @classmethod
    def get(cls, code: str) -> 'Status':
        """Get the matching status or UNKNOWN if there is none."""
        return _lookup(cls, code, "status code")


def _build_table(enum_cls: Type[Enum]) -> Dict[str, Enum]:
    return {member.value: member for member in enum_cls if member.value is not None}


_TABLES: Dict[Type[Enum], Dict[str, Enum]] = {
    DistanceMatrixKey: _build_table(DistanceMatrixKey),
    GeocodingKey: _build_table(GeocodingKey),
    Status: _build_table(Status),
}


def _lookup(enum_cls: Type[Enum], name: str, kind: str) -> Enum:
    member = _TABLES[enum_cls].get(name)
    if member is not None:
        return member

    marker = (enum_cls.__name__, name)
    if marker not in _reported and len(_reported) < _MAX_REPORTED:
        _reported.add(marker)
        logger.info("Unknown %s: %r, skipping it", kind, name)
    return enum_cls.UNKNOWN
