"""
Bounds-checked cursor over a datagram buffer.

All multi-byte values on the wire are big-endian (network byte order).
"""

import struct
from typing import Optional, Tuple

from .errors import Truncated


class ByteReader:
    """Reads big-endian values from a bytes buffer, advancing an offset."""

    def __init__(self, data: bytes, offset: int = 0, end: Optional[int] = None):
        self.data = data
        self.offset = offset
        self.end = len(data) if end is None else end

    @property
    def remaining(self) -> int:
        return self.end - self.offset

    def _require(self, size: int, what: str):
        if size > self.remaining:
            raise Truncated(size, self.remaining, what)

    def unpack(self, fmt: str, what: str = "data") -> Tuple:
        """Unpack a struct format (network order is implied) and advance."""
        fmt = "!" + fmt
        size = struct.calcsize(fmt)
        self._require(size, what)
        values = struct.unpack_from(fmt, self.data, self.offset)
        self.offset += size
        return values

    def take(self, size: int, what: str = "data") -> bytes:
        self._require(size, what)
        chunk = self.data[self.offset:self.offset + size]
        self.offset += size
        return bytes(chunk)

    def skip(self, size: int, what: str = "padding"):
        self._require(size, what)
        self.offset += size

    def sub_reader(self, size: int, what: str = "data") -> "ByteReader":
        """Split off the next `size` bytes as an independent reader."""
        self._require(size, what)
        reader = ByteReader(self.data, self.offset, self.offset + size)
        self.offset += size
        return reader

    def rest(self) -> bytes:
        """Remaining bytes, without consuming them."""
        return bytes(self.data[self.offset:self.end])

    def u8(self, what: str = "u8") -> int:
        return self.unpack("B", what)[0]

    def u16(self, what: str = "u16") -> int:
        return self.unpack("H", what)[0]

    def u32(self, what: str = "u32") -> int:
        return self.unpack("I", what)[0]

    def u64(self, what: str = "u64") -> int:
        return self.unpack("Q", what)[0]

    def uint(self, size: int, what: str = "number") -> int:
        """Unsigned integer of any byte width."""
        return int.from_bytes(self.take(size, what), "big")

    def sint(self, size: int, what: str = "number") -> int:
        """Two's complement signed integer of any byte width."""
        return int.from_bytes(self.take(size, what), "big", signed=True)

    def f32(self, what: str = "float") -> float:
        return self.unpack("f", what)[0]

    def f64(self, what: str = "double") -> float:
        return self.unpack("d", what)[0]
