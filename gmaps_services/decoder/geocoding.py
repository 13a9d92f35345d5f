"""
Geocoding response decoder

Response structure:
    status, error_message
    results[]:
        address_components[]    long_name, short_name, types[]
        formatted_address
        geometry                location{lat, lng}, location_type,
                                viewport{northeast, southwest}, bounds
        types[]
        place_id
        partial_match
"""

from typing import List, Optional, Tuple

from ..keys import GeocodingKey as Key, Status
from ..models import Address, AddressComponent, GeocodedLocation, GeocodingResponse
from .reader import JsonReader


def decode_geocoding(reader: JsonReader) -> GeocodingResponse:
    """
    Decode a Geocoding response.

    Args:
        reader: Reader positioned before the response object

    Returns:
        GeocodingResponse with one GeocodedLocation per result
    """
    status = Status.UNKNOWN
    error_message = None
    results: List[GeocodedLocation] = []

    reader.begin_object()
    while reader.has_next():
        key = Key.get(reader.next_name())
        if key is Key.STATUS:
            status = Status.get(reader.next_string())
        elif key is Key.ERROR_MESSAGE:
            error_message = reader.next_string()
        elif key is Key.RESULTS:
            reader.begin_array()
            while reader.has_next():
                results.append(_read_location(reader))
            reader.end_array()
        else:
            reader.skip_value()
    reader.end_object()

    return GeocodingResponse(status=status, error_message=error_message, results=tuple(results))


def _read_location(reader: JsonReader) -> GeocodedLocation:
    values = {}

    reader.begin_object()
    while reader.has_next():
        key = Key.get(reader.next_name())
        if key is Key.ADDRESS_COMPONENTS:
            values['address'] = _read_address(reader)
        elif key is Key.FORMATTED_ADDRESS:
            values['formatted_address'] = reader.next_string()
        elif key is Key.GEOMETRY:
            latitude, longitude, location_type = _read_geometry(reader)
            values.update(latitude=latitude, longitude=longitude, location_type=location_type)
        elif key is Key.TYPES:
            values['types'] = tuple(_read_strings(reader))
        elif key is Key.PLACE_ID:
            values['place_id'] = reader.next_string()
        elif key is Key.PARTIAL_MATCH:
            values['partial_match'] = reader.next_boolean()
        else:
            reader.skip_value()
    reader.end_object()

    return GeocodedLocation(**values)


def _read_address(reader: JsonReader) -> Address:
    components = []
    reader.begin_array()
    while reader.has_next():
        values = {}
        reader.begin_object()
        while reader.has_next():
            key = Key.get(reader.next_name())
            if key is Key.LONG_NAME:
                values['long_name'] = reader.next_string()
            elif key is Key.SHORT_NAME:
                values['short_name'] = reader.next_string()
            elif key is Key.TYPES:
                values['types'] = frozenset(_read_strings(reader))
            else:
                reader.skip_value()
        reader.end_object()
        components.append(AddressComponent(**values))
    reader.end_array()
    return Address(components=tuple(components))


def _read_geometry(reader: JsonReader) -> Tuple[float, float, Optional[str]]:
    """Read location and location_type, skipping viewport and bounds."""
    latitude, longitude, location_type = 0.0, 0.0, None
    reader.begin_object()
    while reader.has_next():
        key = Key.get(reader.next_name())
        if key is Key.LOCATION:
            reader.begin_object()
            while reader.has_next():
                coordinate = Key.get(reader.next_name())
                if coordinate is Key.LAT:
                    latitude = reader.next_double()
                elif coordinate is Key.LNG:
                    longitude = reader.next_double()
                else:
                    reader.skip_value()
            reader.end_object()
        elif key is Key.LOCATION_TYPE:
            location_type = reader.next_string()
        else:
            reader.skip_value()
    reader.end_object()
    return latitude, longitude, location_type


def _read_strings(reader: JsonReader) -> List[str]:
    strings = []
    reader.begin_array()
    while reader.has_next():
        strings.append(reader.next_string())
    reader.end_array()
    return strings
