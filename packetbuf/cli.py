"""Demonstration: frame a packet, send it through a pipe and parse it back."""

from __future__ import annotations

import os

from .readbuffer import ReadBuffer
from .writebuffer import WriteBuffer

_READ_SIZE = 1024


def _iov_max() -> int:
    try:
        return os.sysconf("SC_IOV_MAX")
    except (ValueError, OSError, AttributeError):
        return -1


def main(argv=None) -> int:
    print(f"IOV_MAX: {_iov_max()}")

    read_fd, write_fd = os.pipe()
    try:
        wbuf = WriteBuffer(10)
        wbuf.write_varint(256)
        wbuf.write_string("Hello World")
        wbuf.write_bytes(b"Hello World")

        os.writev(write_fd, wbuf.finalize())
        wbuf.reset()
        print()

        data = os.read(read_fd, _READ_SIZE)
    finally:
        os.close(read_fd)
        os.close(write_fd)

    rbuf = ReadBuffer()
    rbuf.feed(data)
    print(f"length: {rbuf.read_varint()}")
    print(f"varint: {rbuf.read_varint()}")
    print(f"string: {rbuf.read_string()}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())