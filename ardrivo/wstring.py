"""Mutable text string with the Arduino ``String`` interface."""

from __future__ import annotations

import functools
import re
import string as _string
import struct
import sys

BIN = 2
DEC = 10
HEX = 16

_DIGITS = "0123456789ABCDEF"
_INT32_MIN = -(1 << 31)
_INT32_MAX = (1 << 31) - 1
_FLT_MIN = 1.1754943508222875e-38
_ENCODING = "utf-8"
_ERRORS = "surrogateescape"

_LOWER = str.maketrans(_string.ascii_uppercase, _string.ascii_lowercase)
_UPPER = str.maketrans(_string.ascii_lowercase, _string.ascii_uppercase)

_INT_RE = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)", re.ASCII)
_FLOAT_RE = re.compile(
    r"""[ \t\n\v\f\r]*
    (?P<num>[+-]?(?:
        (?P<hex>0x(?:[0-9a-f]+\.?[0-9a-f]*|\.[0-9a-f]+)(?:p[+-]?[0-9]+)?)
      | (?P<dec>(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:e[+-]?[0-9]+)?)
      | (?P<inf>inf(?:inity)?)
      | (?P<nan>nan)(?:\([0-9a-z_]*\))?
    ))""",
    re.IGNORECASE | re.VERBOSE | re.ASCII,
)


def _as_unsigned(value: int) -> int:
    """Reinterpret a negative integer as its two's-complement bit pattern."""
    if value >= 0:
        return value
    if value >= -(1 << 31):
        return value & 0xFFFFFFFF
    if value >= -(1 << 63):
        return value & 0xFFFFFFFFFFFFFFFF
    raise OverflowError(f"{value} does not fit in a 64-bit integer")


def _to_base(value: int, base: int) -> str:
    if value == 0:
        return "0"
    shift = 1 if base == BIN else 4
    mask = (1 << shift) - 1
    digits = []
    while value:
        digits.append(_DIGITS[value & mask])
        value >>= shift
    return "".join(reversed(digits))


def _text(value: object) -> str:
    if isinstance(value, String):
        return value._value
    if isinstance(value, str):
        return value
    raise TypeError(f"expected String or str, got {type(value).__name__}")


def _encoded(value: object) -> bytes:
    return _text(value).encode(_ENCODING, _ERRORS)


def _parse_double(text: str) -> float | None:
    """Parse a leading floating point number; None if nothing or out of range."""
    match = _FLOAT_RE.match(text)
    if not match:
        return None
    num = match.group("num")
    if match.group("hex"):
        result = float.fromhex(num)
    elif match.group("nan"):
        result = float("-nan" if num.startswith("-") else "nan")
    else:
        result = float(num)
    if match.group("inf") or match.group("nan"):
        return result
    if result in (float("inf"), float("-inf")):
        return None
    if result != 0.0 and abs(result) < sys.float_info.min:
        return None
    return result


@functools.total_ordering
class String:
    """A mutable string; integers may be rendered in binary, decimal or hex."""

    def __init__(self, value: object = "", base: int | None = None) -> None:
        if isinstance(value, String):
            self._value = value._value
        elif isinstance(value, str):
            self._value = value
        elif isinstance(value, (bytes, bytearray, memoryview)):
            self._value = bytes(value).decode(_ENCODING, _ERRORS)
        elif isinstance(value, int):
            number = int(value)
            if base is None or base == DEC:
                self._value = str(number)
            elif base in (BIN, HEX):
                self._value = _to_base(_as_unsigned(number), base)
            else:
                raise ValueError(f"unsupported base {base}")
        elif isinstance(value, float):
            # The precision argument is accepted but has no effect.
            self._value = f"{value:f}"
        else:
            raise TypeError(f"cannot build a String from {type(value).__name__}")

    def _bytes(self) -> bytes:
        return self._value.encode(_ENCODING, _ERRORS)

    def c_str(self) -> str:
        return self._value

    def length(self) -> int:
        return len(self._value)

    def char_at(self, index: int) -> str:
        if not 0 <= index < len(self._value):
            raise IndexError(f"index {index} out of range")
        return self._value[index]

    def set_char_at(self, index: int, char: str) -> None:
        if not isinstance(char, str) or len(char) != 1:
            raise ValueError("expected a single character")
        if not 0 <= index < len(self._value):
            raise IndexError(f"index {index} out of range")
        self._value = self._value[:index] + char + self._value[index + 1 :]

    def concat(self, value: object) -> bool:
        self._value += String(value)._value
        return True

    def compare_to(self, other: object) -> int:
        """Compare the common-length prefixes bytewise; returns -1, 0 or 1."""
        mine, theirs = self._bytes(), _encoded(other)
        common = min(len(mine), len(theirs))
        a, b = mine[:common], theirs[:common]
        return (a > b) - (a < b)

    def starts_with(self, other: object) -> bool:
        return self._value.startswith(_text(other))

    def ends_with(self, other: object) -> bool:
        return self._value.endswith(_text(other))

    def get_bytes(self, length: int) -> bytes:
        if length < 0:
            raise ValueError("length must not be negative")
        return self._bytes()[:length]

    def index_of(self, needle: object, start: int = 0) -> int:
        if start < 0:
            raise ValueError("start must not be negative")
        return self._value.find(_text(needle), start)

    def remove(self, index: int, count: int | None = None) -> None:
        """Erase from ``index``; with ``count``, ``index + count - 1`` characters go."""
        if not 0 <= index <= len(self._value):
            raise IndexError(f"index {index} out of range")
        if count is None:
            self._value = self._value[:index]
            return
        if count < 0:
            raise ValueError("count must not be negative")
        span = index + count - 1
        tail = "" if span < 0 else self._value[index + span :]
        self._value = self._value[:index] + tail

    def replace(self, old: object, new: object) -> None:
        """Cut the text at the first occurrence of ``old`` and append ``new``."""
        old_text, new_text = _text(old), _text(new)
        if not old_text:
            raise ValueError("substring to replace must not be empty")
        position = self._value.find(old_text)
        if position != -1:
            self._value = self._value[:position] + new_text

    def substring(self, start: int, end: int | None = None) -> String:
        if not 0 <= start <= len(self._value):
            raise IndexError(f"index {start} out of range")
        if end is None or end < start:
            return String(self._value[start:])
        return String(self._value[start:end])

    def to_int(self) -> int:
        match = _INT_RE.match(self._value)
        if not match:
            return 0
        number = int(match.group(1))
        if not _INT32_MIN <= number <= _INT32_MAX:
            return 0
        return number

    def to_double(self) -> float:
        result = _parse_double(self._value)
        return 0.0 if result is None else result

    def to_float(self) -> float:
        result = _parse_double(self._value)
        if result is None:
            return 0.0
        try:
            (single,) = struct.unpack("f", struct.pack("f", result))
        except OverflowError:
            return 0.0
        if single != 0.0 and abs(single) < _FLT_MIN:
            return 0.0
        return single

    def to_lower_case(self) -> None:
        self._value = self._value.translate(_LOWER)

    def to_upper_case(self) -> None:
        self._value = self._value.translate(_UPPER)

    def trim(self) -> None:
        """Strip spaces at both ends; a string of only spaces is left as it is."""
        stripped = self._value.strip(" ")
        if stripped:
            self._value = stripped

    def equals(self, other: object) -> bool:
        return self._value == _text(other)

    def equals_ignore_case(self, other: object) -> bool:
        return self._value.translate(_LOWER) == _text(other).translate(_LOWER)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, (String, str)):
            return NotImplemented
        return self._value == _text(other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, (String, str)):
            return NotImplemented
        return self._bytes() < _encoded(other)

    __hash__ = None  # type: ignore[assignment]

    def __add__(self, other: object) -> String:
        if not isinstance(other, (String, str)):
            return NotImplemented
        return String(self._value + _text(other))

    def __radd__(self, other: object) -> String:
        if not isinstance(other, (String, str)):
            return NotImplemented
        return String(_text(other) + self._value)

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"String({self._value!r})"

    def __len__(self) -> int:
        return len(self._value)

    def __getitem__(self, index):
        return self._value[index]