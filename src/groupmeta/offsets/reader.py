from __future__ import annotations

import struct
from dataclasses import dataclass

from groupmeta.offsets.errors import MalformedLength, TruncatedInput

_INT_FORMATS = {
    1: struct.Struct(">b"),
    2: struct.Struct(">h"),
    4: struct.Struct(">i"),
    8: struct.Struct(">q"),
}


@dataclass(frozen=True, slots=True)
class Cursor:
    """Read position over an immutable byte buffer.

    Every read returns the decoded value together with a new cursor placed
    after the consumed bytes; the original cursor is left untouched.
    """

    data: bytes
    position: int = 0

    @classmethod
    def over(cls, data: bytes | bytearray | memoryview) -> Cursor:
        return cls(bytes(data))

    @property
    def remaining(self) -> int:
        return len(self.data) - self.position

    def _take(self, size: int, field: str) -> tuple[bytes, Cursor]:
        if size > self.remaining:
            raise TruncatedInput(field, needed=size, available=self.remaining)
        end = self.position + size
        return self.data[self.position:end], Cursor(self.data, end)

    def read_int(self, width: int, field: str) -> tuple[int, Cursor]:
        fmt = _INT_FORMATS.get(width)
        if fmt is None:
            raise ValueError(f"unsupported integer width {width}")
        if width > self.remaining:
            raise TruncatedInput(field, needed=width, available=self.remaining)
        value = fmt.unpack_from(self.data, self.position)[0]
        return value, Cursor(self.data, self.position + width)

    def read_int16(self, field: str) -> tuple[int, Cursor]:
        return self.read_int(2, field)

    def read_int32(self, field: str) -> tuple[int, Cursor]:
        return self.read_int(4, field)

    def read_int64(self, field: str) -> tuple[int, Cursor]:
        return self.read_int(8, field)

    def read_string(self, field: str) -> tuple[str, Cursor]:
        length, cursor = self.read_int16(field)
        if length < 0:
            raise MalformedLength(field, length)
        raw, cursor = cursor._take(length, field)
        return raw.decode("utf-8", errors="replace"), cursor

    def skip(self, size: int, field: str) -> Cursor:
        if size < 0:
            raise MalformedLength(field, size)
        _, cursor = self._take(size, field)
        return cursor

    def carve(self, size: int, field: str) -> tuple[Cursor, Cursor]:
        """Split off the next ``size`` bytes as an isolated region."""
        if size < 0:
            raise MalformedLength(field, size)
        raw, cursor = self._take(size, field)
        return Cursor(raw), cursor

    def read_sized_region(self, field: str) -> tuple[Cursor, Cursor]:
        """Read an int32 length and carve that many bytes."""
        size, cursor = self.read_int32(field)
        return cursor.carve(size, field)
