from __future__ import annotations

import os


class InvalidOffset(ValueError):
    """Raised when an invalid (e.g., negative) offset is provided."""


class ByteBuffer:
    """Immutable in-memory view of a file's bytes.

    The whole file is read once at construction. Range reads are clamped at
    EOF so viewport math past the end of the file never raises.
    """

    def __init__(self, data: bytes | bytearray | memoryview, *, path: str | None = None) -> None:
        self._data = bytes(data)
        self._path = path

    @classmethod
    def from_path(cls, path: str) -> ByteBuffer:
        if not os.path.exists(path):
            raise FileNotFoundError(f"File not found: {path}")
        with open(path, "rb") as fh:
            return cls(fh.read(), path=path)

    @property
    def size(self) -> int:
        """Buffer length in bytes."""
        return len(self._data)

    @property
    def path(self) -> str | None:
        return self._path

    def __len__(self) -> int:
        return len(self._data)

    def slice(self, start: int, count: int) -> bytes:
        """Return up to `count` bytes starting at `start`.

        - Negative `start` or `count` raises `InvalidOffset`.
        - If `start` >= size, returns b"".
        - Reading past EOF returns the truncated data.
        """
        if start < 0:
            raise InvalidOffset("offset must be >= 0")
        if count < 0:
            raise InvalidOffset("length must be >= 0")
        if count == 0 or start >= len(self._data):
            return b""
        end = min(len(self._data), start + count)
        return self._data[start:end]

    read = slice

    def byte_at(self, offset: int) -> int | None:
        """Return the byte value at `offset`, or None if at EOF."""
        if offset < 0:
            raise InvalidOffset("offset must be >= 0")
        if offset >= len(self._data):
            return None
        return self._data[offset]

    def find(self, needle: bytes, start: int = 0) -> int | None:
        """Offset of the first `needle` at or after `start`, or None."""
        idx = self._data.find(needle, max(0, start))
        return None if idx == -1 else idx
