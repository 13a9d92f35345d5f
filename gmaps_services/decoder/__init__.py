"""
Decoder module for parsing Google Maps web service responses.

- reader.py: Pull-style JSON reader over ijson events
- distance_matrix.py: Decodes Distance Matrix responses
- geocoding.py: Decodes Geocoding responses
"""

from .reader import JsonReader
from .distance_matrix import decode_distance_matrix
from .geocoding import decode_geocoding
