"""Network client interface and the inert WiFi client."""

from __future__ import annotations

from abc import abstractmethod
from dataclasses import dataclass

from .stream import Stream


@dataclass(frozen=True)
class IPAddress:
    """An IP address placeholder; it carries no data."""


class Client(Stream):
    """A connectable byte stream."""

    @abstractmethod
    def connect(self, host, port: int) -> int:
        """Connect to ``host`` (a name or :class:`IPAddress`); non-zero on success."""

    @abstractmethod
    def stop(self) -> None:
        """Close the connection."""

    @abstractmethod
    def connected(self) -> int:
        """Non-zero while connected."""

    @abstractmethod
    def __bool__(self) -> bool:
        """True when the client is usable."""


class WiFiClient(Client):
    """A client with no network behind it.

    Connection attempts always fail and written bytes are discarded; the
    client only remembers the last target asked for and how many bytes it
    dropped since the last flush.
    """

    def __init__(self) -> None:
        super().__init__()
        self.last_target: tuple[object, int] | None = None
        self.discarded = 0

    def connect(self, host, port: int) -> int:
        self.last_target = (host, port)
        return 0

    def write_byte(self, value: int) -> int:
        self.discarded += 1
        return 0

    def write(self, data) -> int:
        if data is not None:
            self.discarded += 1 if isinstance(data, int) else len(data)
        return 0

    def available(self) -> int:
        return 0

    def read(self) -> int:
        return -1

    def peek(self) -> int:
        return -1

    def flush(self) -> None:
        self.discarded = 0

    def stop(self) -> None:
        self.last_target = None

    def connected(self) -> int:
        return 0

    def __bool__(self) -> bool:
        return False


WiFi = WiFiClient()