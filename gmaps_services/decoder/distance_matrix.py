"""
Distance Matrix response decoder

Response structure:
    status                  request status code
    error_message           detail for failed requests
    origin_addresses        one formatted address per requested origin
    destination_addresses   one formatted address per requested destination
    rows[i].elements[j]     travel from origin i to destination j:
        status              element status code
        duration.value      seconds      duration.text   e.g. "5 mins"
        distance.value      meters       distance.text   e.g. "1.2 km"

The addresses and the rows arrive in separate top-level arrays, in any
order, so each TravelDistance gets its addresses after the whole document
has been read.
"""

from dataclasses import replace
from typing import List, Optional, Tuple

from ..exceptions import ResponseParseError
from ..keys import DistanceMatrixKey as Key, Status
from ..models import DistanceMatrixResponse, TravelDistance
from .reader import JsonReader


def decode_distance_matrix(origin_count: int, destination_count: int,
                           reader: JsonReader) -> DistanceMatrixResponse:
    """
    Decode a Distance Matrix response.

    Args:
        origin_count: Number of origins in the request
        destination_count: Number of destinations in the request
        reader: Reader positioned before the response object

    Returns:
        DistanceMatrixResponse with origin_count * destination_count results
        when the request succeeded
    """
    status = Status.UNKNOWN
    error_message = None
    results: List[TravelDistance] = []
    origin_addresses: List[Optional[str]] = [None] * origin_count
    destination_addresses: List[Optional[str]] = [None] * destination_count

    reader.begin_object()
    while reader.has_next():
        key = Key.get(reader.next_name())
        if key is Key.STATUS:
            status = Status.get(reader.next_string())
        elif key is Key.ERROR_MESSAGE:
            error_message = reader.next_string()
        elif key is Key.ORIGIN_ADDRESSES:
            _read_addresses(reader, origin_addresses, 'origin_addresses')
        elif key is Key.DESTINATION_ADDRESSES:
            _read_addresses(reader, destination_addresses, 'destination_addresses')
        elif key is Key.ROWS:
            _read_rows(reader, results)
        else:
            reader.skip_value()
    reader.end_object()

    results = [
        replace(
            distance,
            origin_address=_address_at(origin_addresses, distance.origin_id),
            destination_address=_address_at(destination_addresses, distance.destination_id),
        )
        for distance in results
    ]

    return DistanceMatrixResponse(
        status=status,
        error_message=error_message,
        results=tuple(results),
        origin_addresses=tuple(origin_addresses),
        destination_addresses=tuple(destination_addresses),
    )


def _read_addresses(reader: JsonReader, addresses: List[Optional[str]], name: str):
    """Fill the presized list positionally."""
    reader.begin_array()
    i = 0
    while reader.has_next():
        if i >= len(addresses):
            raise ResponseParseError(f"{name} has more than the {len(addresses)} requested entries")
        addresses[i] = reader.next_string()
        i += 1
    reader.end_array()


def _read_rows(reader: JsonReader, results: List[TravelDistance]):
    reader.begin_array()
    row = 0
    while reader.has_next():
        reader.begin_object()
        while reader.has_next():
            if Key.get(reader.next_name()) is Key.ELEMENTS:
                reader.begin_array()
                element = 0
                while reader.has_next():
                    results.append(_read_element(row, element, reader))
                    element += 1
                reader.end_array()
            else:
                reader.skip_value()
        reader.end_object()
        row += 1
    reader.end_array()


def _read_element(origin_id: int, destination_id: int, reader: JsonReader) -> TravelDistance:
    status = None
    duration, duration_text = 0, None
    distance, distance_text = 0, None

    reader.begin_object()
    while reader.has_next():
        key = Key.get(reader.next_name())
        if key is Key.STATUS:
            status = reader.next_string()
        elif key is Key.DURATION:
            duration, duration_text = _read_value_and_text(reader)
        elif key is Key.DISTANCE:
            distance, distance_text = _read_value_and_text(reader)
        else:
            reader.skip_value()
    reader.end_object()

    return TravelDistance(
        status=status,
        origin_id=origin_id,
        destination_id=destination_id,
        duration_seconds=duration,
        duration_text=duration_text,
        distance_meters=distance,
        distance_text=distance_text,
    )


def _read_value_and_text(reader: JsonReader) -> Tuple[int, Optional[str]]:
    """Read a {"value": 123, "text": "..."} object."""
    value, text = 0, None
    reader.begin_object()
    while reader.has_next():
        key = Key.get(reader.next_name())
        if key is Key.VALUE:
            value = reader.next_long()
        elif key is Key.TEXT:
            text = reader.next_string()
        else:
            reader.skip_value()
    reader.end_object()
    return value, text


def _address_at(addresses: List[Optional[str]], index: int) -> Optional[str]:
    # rows are not checked against the address counts
    return addresses[index] if index < len(addresses) else None
