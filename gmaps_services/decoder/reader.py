"""
Pull-style JSON reader

Wraps the ijson event stream in a cursor API (begin_object, next_name,
next_string, skip_value, ...) so response decoders can walk a document one
token at a time and never hold more than the current token in memory.

Any structural surprise (truncated input, malformed JSON, a value of the
wrong type where a decoder asked for one) raises ResponseParseError.
"""

from decimal import Decimal
from io import BytesIO
from typing import Any, BinaryIO, Iterator, Optional, Tuple, Union

import ijson

from ..exceptions import ResponseParseError

Event = Tuple[str, Any]

_NUMBER_EVENTS = ('number', 'integer', 'double')
_END_EVENTS = ('end_map', 'end_array')


class JsonReader:
    """Cursor over the tokens of a single JSON document."""

    def __init__(self, source: Union[BinaryIO, bytes]):
        """
        Args:
            source: File-like object with a read(size) method returning bytes,
                    or a complete document as bytes.
        """
        if isinstance(source, (bytes, bytearray)):
            source = BytesIO(bytes(source))
        self._events: Iterator[Event] = ijson.basic_parse(source)
        self._peeked: Optional[Event] = None

    def _peek(self) -> Event:
        if self._peeked is None:
            try:
                self._peeked = next(self._events)
            except StopIteration:
                raise ResponseParseError("Unexpected end of JSON input") from None
            except ijson.JSONError as e:
                raise ResponseParseError(f"Malformed JSON: {e}") from e
        return self._peeked

    def _next(self) -> Event:
        event = self._peek()
        self._peeked = None
        return event

    def _expect(self, expected: str) -> Any:
        event, value = self._next()
        if event != expected:
            raise ResponseParseError(f"Expected {expected} but was {event}")
        return value

    def peek(self) -> str:
        """Name of the next event ('start_map', 'string', 'number', ...) without consuming it."""
        return self._peek()[0]

    def begin_object(self):
        self._expect('start_map')

    def end_object(self):
        self._expect('end_map')

    def begin_array(self):
        self._expect('start_array')

    def end_array(self):
        self._expect('end_array')

    def has_next(self) -> bool:
        """True if the current object or array has another element."""
        return self.peek() not in _END_EVENTS

    def next_name(self) -> str:
        return self._expect('map_key')

    def next_string(self) -> str:
        """Consume a string value. Numbers are returned in their string form."""
        event, value = self._next()
        if event == 'string':
            return value
        if event in _NUMBER_EVENTS:
            return str(value)
        raise ResponseParseError(f"Expected a string but was {event}")

    def next_long(self) -> int:
        """Consume an integral number (or a string holding one)."""
        event, value = self._next()
        try:
            if event in _NUMBER_EVENTS:
                if isinstance(value, (Decimal, float)) and value != int(value):
                    raise ValueError(value)
                return int(value)
            if event == 'string':
                return int(value)
        except ValueError:
            raise ResponseParseError(f"Expected a long but was {value!r}") from None
        raise ResponseParseError(f"Expected a long but was {event}")

    def next_double(self) -> float:
        """Consume a number (or a string holding one)."""
        event, value = self._next()
        try:
            if event in _NUMBER_EVENTS or event == 'string':
                return float(value)
        except ValueError:
            raise ResponseParseError(f"Expected a double but was {value!r}") from None
        raise ResponseParseError(f"Expected a double but was {event}")

    def next_boolean(self) -> bool:
        return self._expect('boolean')

    def next_null(self):
        self._expect('null')

    def skip_value(self):
        """Skip the next value, the whole subtree if it is an object or array."""
        depth = 0
        while True:
            event, _ = self._next()
            if event in ('start_map', 'start_array'):
                depth += 1
            elif event in _END_EVENTS:
                depth -= 1
                if depth < 0:
                    raise ResponseParseError(f"Expected a value but was {event}")
            elif event == 'map_key':
                if depth == 0:
                    raise ResponseParseError("Expected a value but was map_key")
                continue
            if depth == 0:
                return
