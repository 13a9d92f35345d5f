"""
Result model

Immutable objects produced by the response decoders. Nothing outside the
decoder package creates them.
"""

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterator, Optional, Tuple

from .keys import Status


@dataclass(frozen=True)
class AddressComponent:
    """One part of a geocoded address, e.g. the street or the country."""
    long_name: Optional[str] = None
    short_name: Optional[str] = None
    types: FrozenSet[str] = frozenset()

    def to_dict(self) -> Dict:
        return {
            'long_name': self.long_name,
            'short_name': self.short_name,
            'types': sorted(self.types),
        }


@dataclass(frozen=True)
class Address:
    """Ordered administrative and geographic breakdown of a geocoded address."""
    components: Tuple[AddressComponent, ...] = ()

    def get(self, component_type: str) -> Optional[AddressComponent]:
        """First component carrying the type (e.g. "locality"), or None."""
        for component in self.components:
            if component_type in component.types:
                return component
        return None

    def __len__(self):
        return len(self.components)

    def __iter__(self) -> Iterator[AddressComponent]:
        return iter(self.components)

    def __getitem__(self, index):
        return self.components[index]

    def to_dict(self) -> Dict:
        return {'components': [c.to_dict() for c in self.components]}


@dataclass(frozen=True)
class GeocodedLocation:
    """A location geocoded from an address, or reverse geocoded from coordinates."""
    address: Address = field(default_factory=Address)
    formatted_address: Optional[str] = None
    latitude: float = 0.0
    longitude: float = 0.0
    types: Tuple[str, ...] = ()
    place_id: Optional[str] = None
    # ROOFTOP, RANGE_INTERPOLATED, GEOMETRIC_CENTER or APPROXIMATE
    location_type: Optional[str] = None
    partial_match: bool = False

    def to_dict(self) -> Dict:
        return {
            'address': self.address.to_dict(),
            'formatted_address': self.formatted_address,
            'latitude': self.latitude,
            'longitude': self.longitude,
            'types': list(self.types),
            'place_id': self.place_id,
            'location_type': self.location_type,
            'partial_match': self.partial_match,
        }


@dataclass(frozen=True)
class TravelDistance:
    """Travel time and distance between one origin and one destination.

    origin_id and destination_id are positions in the request's origin and
    destination lists. Two instances are equal when they describe the same
    cell with the same duration and distance.
    """
    status: Optional[str] = field(default=None, compare=False)
    origin_id: int = 0
    origin_address: Optional[str] = field(default=None, compare=False)
    destination_id: int = 0
    destination_address: Optional[str] = field(default=None, compare=False)
    duration_seconds: int = 0
    duration_text: Optional[str] = field(default=None, compare=False)
    distance_meters: int = 0
    distance_text: Optional[str] = field(default=None, compare=False)

    def to_dict(self) -> Dict:
        return {
            'status': self.status,
            'origin_id': self.origin_id,
            'origin_address': self.origin_address,
            'destination_id': self.destination_id,
            'destination_address': self.destination_address,
            'duration_seconds': self.duration_seconds,
            'duration_text': self.duration_text,
            'distance_meters': self.distance_meters,
            'distance_text': self.distance_text,
        }


@dataclass(frozen=True)
class DistanceMatrixResponse:
    """Decoded Distance Matrix response.

    results holds one TravelDistance per origin/destination pair in row-major
    order: every destination of origin 0, then every destination of origin 1...
    """
    status: Status = Status.UNKNOWN
    error_message: Optional[str] = None
    results: Tuple[TravelDistance, ...] = ()
    origin_addresses: Tuple[Optional[str], ...] = ()
    destination_addresses: Tuple[Optional[str], ...] = ()

    def element(self, origin_id: int, destination_id: int) -> TravelDistance:
        """Get the TravelDistance for a cell of the matrix."""
        columns = len(self.destination_addresses)
        if not (0 <= origin_id < len(self.origin_addresses) and 0 <= destination_id < columns):
            raise IndexError(f"No element ({origin_id}, {destination_id}) in the matrix")
        return self.results[origin_id * columns + destination_id]

    def to_dict(self) -> Dict:
        return {
            'status': self.status.name,
            'error_message': self.error_message,
            'origin_addresses': list(self.origin_addresses),
            'destination_addresses': list(self.destination_addresses),
            'results': [r.to_dict() for r in self.results],
        }


@dataclass(frozen=True)
class GeocodingResponse:
    """Decoded Geocoding response."""
    status: Status = Status.UNKNOWN
    error_message: Optional[str] = None
    results: Tuple[GeocodedLocation, ...] = ()

    def to_dict(self) -> Dict:
        return {
            'status': self.status.name,
            'error_message': self.error_message,
            'results': [r.to_dict() for r in self.results],
        }
