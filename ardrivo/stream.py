"""Readable byte streams with Arduino-style parsing helpers."""

from __future__ import annotations

import enum
import struct
from abc import abstractmethod
from collections import deque

from .printing import Print
from .wstring import String

NO_IGNORE_CHAR = "\x01"
DEFAULT_TIMEOUT = 1000

_MINUS = ord("-")
_DOT = ord(".")
_WHITESPACE = frozenset(b" \t\r\n")


class LookaheadMode(enum.IntEnum):
    """How characters before a number are treated while parsing."""

    SKIP_ALL = 0
    SKIP_NONE = 1
    SKIP_WHITESPACE = 2


def _code(c) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected a character, got {type(c).__name__}")


def _is_digit(c: int) -> bool:
    return 48 <= c <= 57


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


class Stream(Print):
    """A :class:`Print` that can also be read from."""

    _timeout: int = DEFAULT_TIMEOUT

    @abstractmethod
    def available(self) -> int:
        """Number of bytes ready to be read."""

    @abstractmethod
    def read(self) -> int:
        """Consume and return the next byte, or -1 if there is none."""

    @abstractmethod
    def peek(self) -> int:
        """Return the next byte without consuming it, or -1 if there is none."""

    @property
    def timeout(self) -> int:
        return self._timeout

    def set_timeout(self, timeout: int) -> None:
        self._timeout = timeout

    def find(self, target) -> bool:
        """Read until ``target`` is consumed; False if the stream ran out first."""
        return self.find_until(target, NO_IGNORE_CHAR)

    def find_until(self, target, terminal) -> bool:
        """Read until ``target`` is consumed, giving up at ``terminal`` or end of data."""
        wanted, stop = _code(target), _code(terminal)
        while True:
            c = self.read()
            if c < 0 or c == stop:
                return False
            if c == wanted:
                return True

    def read_bytes(self, length: int) -> bytes:
        return self.read_bytes_until(NO_IGNORE_CHAR, length)

    def read_bytes_until(self, terminator, length: int) -> bytes:
        """Read up to ``length`` bytes, stopping at ``terminator`` (which is consumed)."""
        stop = _code(terminator)
        out = bytearray()
        while len(out) < length:
            c = self.read()
            if c < 0 or c == stop:
                break
            out.append(c & 0xFF)
        return bytes(out)

    def read_string(self) -> String:
        return self.read_string_until(NO_IGNORE_CHAR)

    def read_string_until(self, terminator) -> String:
        stop = _code(terminator)
        out = bytearray()
        while True:
            c = self.read()
            if c < 0 or c == stop:
                break
            out.append(c & 0xFF)
        return String(bytes(out))

    def peek_next_digit(self, lookahead: LookaheadMode, detect_decimal: bool) -> int:
        """Skip to the next character that can start a number and return it, or -1."""
        while True:
            c = self.peek()
            if c < 0 or c == _MINUS or _is_digit(c) or (detect_decimal and c == _DOT):
                return c
            if lookahead == LookaheadMode.SKIP_NONE:
                return -1
            if lookahead == LookaheadMode.SKIP_WHITESPACE and c not in _WHITESPACE:
                return -1
            self.read()

    def parse_int(self, lookahead: LookaheadMode = LookaheadMode.SKIP_ALL, ignore=NO_IGNORE_CHAR) -> int:
        """Parse the next integer; 0 if none is found."""
        skip = _code(ignore)
        negative = False
        value = 0
        c = self.peek_next_digit(lookahead, False)
        if c < 0:
            return 0
        while True:
            if c == skip:
                pass
            elif c == _MINUS:
                negative = True
            elif _is_digit(c):
                value = value * 10 + c - 48
            self.read()
            c = self.peek()
            if not (_is_digit(c) or c == skip):
                break
        return -value if negative else value

    def parse_float(self, lookahead: LookaheadMode = LookaheadMode.SKIP_ALL, ignore=NO_IGNORE_CHAR) -> float:
        """Parse the next single-precision number; 0.0 if none is found."""
        skip = _code(ignore)
        negative = False
        fractional = False
        value = 0
        fraction = 1.0
        tenth = _f32(0.1)
        c = self.peek_next_digit(lookahead, True)
        if c < 0:
            return 0.0
        while True:
            if c == skip:
                pass
            elif c == _MINUS:
                negative = True
            elif c == _DOT:
                fractional = True
            elif _is_digit(c):
                value = value * 10 + c - 48
                if fractional:
                    fraction = _f32(fraction * tenth)
            self.read()
            c = self.peek()
            if not (_is_digit(c) or (c == _DOT and not fractional) or c == skip):
                break
        if negative:
            value = -value
        return _f32(_f32(value) * fraction) if fractional else _f32(value)


class BytesStream(Stream):
    """An in-memory stream: reads come from fed data, writes go to ``output``."""

    def __init__(self, data=b"") -> None:
        self._incoming: deque[int] = deque()
        self.output = bytearray()
        self.feed(data)

    def feed(self, data) -> None:
        if isinstance(data, (String, str)):
            data = str(data).encode("utf-8", "surrogateescape")
        self._incoming.extend(bytes(data))

    def write_byte(self, value: int) -> int:
        self.output.append(value & 0xFF)
        return 1

    def available(self) -> int:
        return len(self._incoming)

    def read(self) -> int:
        return self._incoming.popleft() if self._incoming else -1

    def peek(self) -> int:
        return self._incoming[0] if self._incoming else -1