"""Sequential reader for big-endian integers, varints and length-prefixed strings."""

from __future__ import annotations

from .uuidpair import UUID


class ReadError(ValueError):
    """Base class for errors raised while reading a buffer."""


class BufferUnderflowError(ReadError):
    """Raised when a read needs more bytes than remain in the buffer."""


class MalformedVarIntError(ReadError):
    """Raised when a varint is too long or does not fit in 32 bits."""


class ReadBuffer:
    """Reads values from a byte sequence, front to back.

    ``good()`` reports whether the buffer holds data and no read has failed
    since the last ``feed``.
    """

    def __init__(self, data: bytes | bytearray | memoryview | None = None) -> None:
        self._data = b""
        self._pos = 0
        self._good = False
        if data is not None:
            self.feed(data)

    def feed(self, data: bytes | bytearray | memoryview) -> None:
        """Replace the contents to read from and clear any earlier failure."""
        self._data = bytes(data)
        self._pos = 0
        self._good = True

    def good(self) -> bool:
        return self._good

    def remaining(self) -> int:
        """Number of bytes not yet read."""
        return len(self._data) - self._pos

    def _fail(self, error: ReadError) -> ReadError:
        self._good = False
        return error

    def _take(self, count: int) -> bytes:
        if self.remaining() < count:
            raise self._fail(
                BufferUnderflowError(f"need {count} bytes, {self.remaining()} remaining")
            )
        chunk = self._data[self._pos : self._pos + count]
        self._pos += count
        return chunk

    def read_char(self) -> int:
        """Read one byte as a signed 8-bit value."""
        byte = self._take(1)[0]
        return byte - 256 if byte > 127 else byte

    def read_ulong(self) -> int:
        """Read an unsigned 64-bit big-endian integer."""
        return int.from_bytes(self._take(8), "big")

    def read_ushort(self) -> int:
        """Read an unsigned 16-bit big-endian integer."""
        return int.from_bytes(self._take(2), "big")

    def read_uuid(self) -> UUID:
        most = self.read_ulong()
        least = self.read_ulong()
        return UUID(most, least)

    def read_varint(self) -> int:
        """Read a varint of at most five bytes as a signed 32-bit integer."""
        value = 0
        for shift in range(0, 35, 7):
            byte = self._take(1)[0]
            if shift == 28:
                if byte & 0xF0:
                    raise self._fail(MalformedVarIntError("varint does not fit in 32 bits"))
                value |= (byte & 0x7F) << shift
                break
            value |= (byte & 0x7F) << shift
            if not byte & 0x80:
                break
        value &= 0xFFFFFFFF
        return value - (1 << 32) if value >= 1 << 31 else value

    def read_string(self) -> str:
        """Read a varint length followed by that many UTF-8 bytes."""
        size = self.read_varint()
        if size < 0:
            raise self._fail(MalformedVarIntError(f"negative string length {size}"))
        raw = self._take(size)
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError:
            self._good = False
            raise