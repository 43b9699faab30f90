"""Byte-oriented output sink with the Arduino ``Print`` interface."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .wstring import DEC, String

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


def _encode(text: str) -> bytes:
    return text.encode(_ENCODING, _ERRORS)


class Print(ABC):
    """Base for anything that accepts bytes one at a time.

    Subclasses implement :meth:`write_byte`; everything else is built on it.
    """

    _write_error: int = 0

    @abstractmethod
    def write_byte(self, value: int) -> int:
        """Write one byte; return 1 on success and 0 on failure."""

    def write(self, data) -> int:
        """Write bytes until one fails; return how many were written."""
        if data is None:
            return 0
        if isinstance(data, int):
            return self.write_byte(data & 0xFF)
        if isinstance(data, String):
            data = _encode(str(data))
        elif isinstance(data, str):
            data = _encode(data)
        elif not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(f"cannot write {type(data).__name__}")
        count = 0
        for byte in bytes(data):
            if not self.write_byte(byte):
                break
            count += 1
        return count

    def available_for_write(self) -> int:
        """Bytes that can be written without blocking; 0 means a write may block."""
        return 0

    def print(self, value, fmt: int | None = None) -> int:
        """Write a textual rendering of ``value``.

        Integers are rendered in base ``fmt`` (decimal by default); for floats
        ``fmt`` is the precision, which is accepted but has no effect.
        """
        if isinstance(value, (String, str)):
            return self.write(_encode(str(value)))
        if isinstance(value, (bytes, bytearray, memoryview)):
            return self.write(value)
        if isinstance(value, int):
            return self.print(String(value, DEC if fmt is None else fmt))
        if isinstance(value, float):
            return self.print(String(value))
        raise TypeError(f"cannot print {type(value).__name__}")

    def println(self, value=None, fmt: int | None = None) -> int:
        """Like :meth:`print`, followed by a carriage return and line feed."""
        if value is None:
            return self.print("\r") + self.print("\n")
        return self.print(value, fmt) + self.println()

    def flush(self) -> int:
        """Wait for buffered output; return how many bytes are still pending.

        The base class writes straight through, so nothing is ever pending.
        """
        pending = 0
        return pending

    def get_write_error(self) -> int:
        return self._write_error

    def set_write_error(self, err: int = 1) -> None:
        self._write_error = err

    def clear_write_error(self) -> None:
        self.set_write_error(0)