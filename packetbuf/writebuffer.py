"""Packet writer that gathers output as segments behind a varint length prefix."""

from __future__ import annotations

import struct

_INT32_MIN, _INT32_MAX = -(1 << 31), (1 << 31) - 1
_INT64_MIN, _INT64_MAX = -(1 << 63), (1 << 63) - 1


def _encode_varint(value: int, bits: int) -> bytes:
    x = value & ((1 << bits) - 1)
    out = bytearray()
    while x & ~0x7F:
        out.append((x & 0x7F) | 0x80)
        x >>= 7
    out.append(x)
    return bytes(out)


def _check_range(value: int, low: int, high: int, kind: str) -> None:
    if not low <= value <= high:
        raise OverflowError(f"{value} does not fit in a {kind}")


class WriteBuffer:
    """Builds a length-prefixed packet without copying large byte payloads.

    Small values are packed into an internal sector; ``write_bytes`` closes the
    current sector and adds the payload as its own segment. ``finalize``
    returns the segments, the first carrying the varint packet length, ready
    for a scatter write such as ``os.writev``.
    """

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._sector = bytearray()
        self._segments: list[bytes] = []
        self._packet_length = 0

    def _pack(self, fmt: str, value) -> None:
        self._sector += struct.pack(fmt, value)

    def write_bool(self, x: bool) -> None:
        self._pack("?", bool(x))

    def write_byte(self, x: int) -> None:
        """Write one byte given as a signed or unsigned 8-bit value."""
        _check_range(x, -128, 255, "byte")
        self._sector.append(x & 0xFF)

    def write_short_le(self, x: int) -> None:
        self._pack("<h", x)

    def write_short(self, x: int) -> None:
        self._pack(">h", x)

    def write_int_le(self, x: int) -> None:
        self._pack("<i", x)

    def write_int(self, x: int) -> None:
        self._pack(">i", x)

    def write_long_le(self, x: int) -> None:
        self._pack("<q", x)

    def write_long(self, x: int) -> None:
        self._pack(">q", x)

    def write_float_le(self, x: float) -> None:
        self._pack("<f", x)

    def write_float(self, x: float) -> None:
        self._pack(">f", x)

    def write_double_le(self, x: float) -> None:
        self._pack("<d", x)

    def write_double(self, x: float) -> None:
        self._pack(">d", x)

    def write_varint(self, x: int) -> None:
        """Write a signed 32-bit integer as a varint of one to five bytes."""
        _check_range(x, _INT32_MIN, _INT32_MAX, "32-bit integer")
        self._sector += _encode_varint(x, 32)

    def write_varlong(self, x: int) -> None:
        """Write a signed 64-bit integer as a varint of one to ten bytes."""
        _check_range(x, _INT64_MIN, _INT64_MAX, "64-bit integer")
        self._sector += _encode_varint(x, 64)

    def write_bytes(self, data: bytes | bytearray | memoryview) -> None:
        """Close the current sector and append ``data`` as its own segment."""
        self.flush_buffer()
        segment = bytes(data)
        self._segments.append(segment)
        self._packet_length += len(segment)

    def write_string(self, text: str) -> None:
        encoded = text.encode("utf-8")
        self.write_varint(len(encoded))
        self.write_bytes(encoded)

    def iov_size(self) -> int:
        """Number of segments closed so far."""
        return len(self._segments)

    def flush_buffer(self) -> bool:
        """Close the current sector as a segment; return False if it was empty."""
        if not self._sector:
            return False
        segment = bytes(self._sector)
        self._segments.append(segment)
        self._packet_length += len(segment)
        self._sector.clear()
        return True

    def finalize(self) -> list[bytes]:
        """Flush pending data and return the packet's segments, length prefix first."""
        self.flush_buffer()
        if not self._segments:
            return []
        prefix = _encode_varint(self._packet_length, 32)
        return [prefix + self._segments[0], *self._segments[1:]]

    def reset(self) -> None:
        """Discard everything written so the buffer can build a new packet."""
        self._sector.clear()
        self._segments.clear()
        self._packet_length = 0