"""SD card emulation backed by a directory on the host filesystem."""

from __future__ import annotations

import enum
import io
import os
import shutil
from collections.abc import Iterator
from typing import BinaryIO

from .stream import Stream
from .wstring import String

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


class FileMode(enum.IntFlag):
    """How a file on the card is opened."""

    READ = 1 << 0
    WRITE = 1 << 1


FILE_READ = FileMode.READ
FILE_WRITE = FileMode.WRITE


class SDError(RuntimeError):
    """Raised when an SD operation is used on a file in the wrong state."""


def _open_stream(path: str, mode: FileMode) -> BinaryIO | None:
    """Open ``path`` like a C++ fstream would; None if that fails."""
    readable = bool(mode & FileMode.READ)
    writable = bool(mode & FileMode.WRITE)
    if readable and writable:
        py_mode = "r+b"
    elif readable:
        py_mode = "rb"
    elif writable:
        py_mode = "wb"
    else:
        return None
    try:
        return open(path, py_mode)  # noqa: SIM115 - owned by the File
    except OSError:
        return None


def _sorted_entries(path: str) -> Iterator[os.DirEntry]:
    try:
        with os.scandir(path) as scan:
            entries = sorted(scan, key=lambda entry: entry.name)
    except OSError:
        return iter(())
    return iter(entries)


class File(Stream):
    """An open file or directory on the card; falsy when nothing is open."""

    def __init__(self) -> None:
        self._path: str | None = None
        self._filename = ""
        self._stream: BinaryIO | None = None
        self._entries: Iterator[os.DirEntry] | None = None

    @classmethod
    def _with_stream(cls, path: str, filename: str, stream: BinaryIO) -> File:
        file = cls()
        file._path, file._filename, file._stream = path, filename, stream
        return file

    @classmethod
    def _with_directory(cls, path: str, filename: str) -> File:
        file = cls()
        file._path, file._filename = path, filename
        file._entries = _sorted_entries(path)
        return file

    def __bool__(self) -> bool:
        return self._path is not None

    def __enter__(self) -> File:
        return self

    def __exit__(self, *exc_info) -> None:
        if self:
            self.close()

    def __repr__(self) -> str:
        return f"File({self._path!r})" if self else "File()"

    def _require_open(self, operation: str) -> None:
        if not self:
            raise SDError(f"File.{operation}(): File not opened")

    def _require_stream(self, operation: str) -> BinaryIO:
        self._require_open(operation)
        if self._stream is None:
            raise SDError(f"File.{operation}(): File is a directory")
        return self._stream

    def _require_directory(self, operation: str) -> Iterator[os.DirEntry]:
        self._require_open(operation)
        if self._entries is None:
            raise SDError(f"File.{operation}(): File is not a directory")
        return self._entries

    def name(self) -> str:
        self._require_open("name")
        return self._filename

    def position(self) -> int:
        return self._require_stream("position").tell()

    def seek(self, pos: int) -> bool:
        stream = self._require_stream("seek")
        max_pos = self.size()
        if pos < 0 or pos > max_pos:
            raise SDError(
                f"File.seek({pos}): Target cursor position is out of bounds (size() == {max_pos})"
            )
        stream.seek(pos)
        return True

    def size(self) -> int:
        stream = self._require_stream("size")
        saved = stream.tell()
        end = stream.seek(0, io.SEEK_END)
        stream.seek(saved)
        return end

    def is_directory(self) -> bool:
        self._require_open("isDirectory")
        return self._entries is not None

    def open_next_file(self, mode: FileMode = FileMode.READ) -> File:
        """Open the next entry of this directory; an empty File when none is left."""
        entries = self._require_directory("openNextFile")
        entry = next(entries, None)
        if entry is None:
            return File()
        try:
            if entry.is_file():
                stream = _open_stream(entry.path, mode)
                if stream is None:
                    return File()
                return File._with_stream(entry.path, entry.name, stream)
            if entry.is_dir():
                return File._with_directory(entry.path, entry.name)
        except OSError:
            return File()
        return File()

    def rewind_directory(self) -> None:
        self._require_directory("rewindDirectory")
        self._entries = _sorted_entries(self._path)

    def close(self) -> None:
        self._require_open("close")
        if self._stream is not None:
            self._stream.close()
        self._path = None
        self._filename = ""
        self._stream = None
        self._entries = None

    def available(self) -> int:
        self._require_stream("available")
        return self.size() - self.position()

    def flush(self) -> None:
        self._require_stream("flush").flush()

    def peek(self) -> int:
        stream = self._require_stream("peek")
        saved = stream.tell()
        try:
            chunk = stream.read(1)
        except io.UnsupportedOperation:
            return -1
        stream.seek(saved)
        return chunk[0] if chunk else -1

    def read(self) -> int:
        stream = self._require_stream("read")
        try:
            chunk = stream.read(1)
        except io.UnsupportedOperation:
            return -1
        return chunk[0] if chunk else -1

    def read_buffer(self, size: int) -> bytes:
        """Read up to ``size`` bytes."""
        stream = self._require_stream("read")
        if size < 0:
            raise ValueError("size must not be negative")
        try:
            return stream.read(size)
        except io.UnsupportedOperation:
            return b""

    def write_byte(self, value: int) -> int:
        stream = self._require_stream("write")
        try:
            stream.write(bytes([value & 0xFF]))
        except (OSError, ValueError):
            return 0
        return 1

    def write(self, data) -> int:
        """Write ``data`` in one go; return the number of bytes written, 0 on failure."""
        if isinstance(data, int):
            return self.write_byte(data)
        if data is None:
            return 0
        stream = self._require_stream("write")
        if isinstance(data, (String, str)):
            data = str(data).encode(_ENCODING, _ERRORS)
        elif not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(f"cannot write {type(data).__name__}")
        payload = bytes(data)
        try:
            stream.write(payload)
        except (OSError, ValueError):
            return 0
        return len(payload)


class SDClass:
    """An SD card whose contents live under the directory ``root``."""

    def __init__(self, root: str | os.PathLike | None = None) -> None:
        self._root = os.fspath(root) if root is not None else ""
        self._begun = False
        self.cspin: int | None = None

    @property
    def root(self) -> str:
        return self._root

    def _resolve(self, path: str) -> str:
        relative = path[1:] if path.startswith("/") else path
        return os.path.join(self._root, relative)

    def begin(self, cspin: int = 0) -> bool:
        if self._begun:
            raise SDError(f"SDClass.begin({cspin}): already begun")
        if not self._root:
            raise SDError(f"SDClass.begin({cspin}): no such device")
        self.cspin = cspin
        self._begun = True
        return True

    def exists(self, path: str) -> bool:
        if not path:
            return False
        return os.path.exists(self._resolve(path))

    def open(self, path: str, mode: FileMode = FileMode.READ) -> File:
        """Open a file or directory; an empty File if it cannot be opened."""
        if not path:
            return File()
        fspath = self._resolve(path)
        filename = os.path.basename(fspath)
        if os.path.isdir(fspath):
            return File._with_directory(fspath, filename)
        stream = _open_stream(fspath, FileMode(mode))
        if stream is None:
            return File()
        return File._with_stream(fspath, filename, stream)

    def remove(self, path: str) -> bool:
        if not path:
            return False
        fspath = self._resolve(path)
        if os.path.isdir(fspath):
            return False
        try:
            os.remove(fspath)
        except FileNotFoundError:
            pass
        return True

    def mkdir(self, path: str) -> bool:
        """Create a directory and its parents; False if it already existed."""
        if not path or path == "/":
            return False
        try:
            os.makedirs(self._resolve(path))
        except FileExistsError:
            return False
        return True

    def rmdir(self, path: str) -> bool:
        """Remove ``path`` recursively, but refuse (False) when it is a directory."""
        if not path or path == "/":
            return False
        fspath = self._resolve(path)
        if os.path.isdir(fspath):
            return False
        if os.path.lexists(fspath):
            if os.path.isdir(fspath) and not os.path.islink(fspath):
                shutil.rmtree(fspath)
            else:
                os.remove(fspath)
        return True