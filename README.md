# packetbuf

Small building blocks for binary, length-prefixed packets:

- `packetbuf.writebuffer.WriteBuffer` collects the fields of one packet.
  Fixed-size values and VarInts are packed into an internal sector. Each
  `write_bytes` call closes the current sector and adds the payload as a
  separate segment. `finalize()` returns the segments with the packet's
  VarInt length placed in front of the first one. The result can go straight
  to a scatter-gather write such as `os.writev`.
- `packetbuf.readbuffer.ReadBuffer` reads such data back, front to back.
- `packetbuf.uuidpair.UUID` holds a 128-bit identifier as two unsigned
  64-bit halves.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Writing a packet

```python
from packetbuf.writebuffer import WriteBuffer

wbuf = WriteBuffer(10)
wbuf.write_varint(256)
wbuf.write_string("Hello World")
wbuf.write_bytes(b"Hello World")

segments = wbuf.finalize()        # list of bytes, length prefix in the first
print(wbuf.iov_size())            # number of segments closed so far
data = b"".join(segments)         # or os.writev(fd, segments)
wbuf.reset()                      # start a new packet
```

The `size` given to `WriteBuffer` must not be negative. Beyond that check it
has no effect, because the buffer grows as needed.

Available writers:

- `write_bool`, and `write_byte`, which takes a value from -128 to 255.
- Big-endian `write_short`, `write_int`, `write_long`, `write_float` and
  `write_double`. Each has a little-endian `_le` variant, for example
  `write_int_le`.
- `write_varint`, for signed 32-bit values, written in one to five bytes.
  `write_varlong`, for signed 64-bit values, written in one to ten bytes.
  Negative values are written in two's complement.
- `write_bytes(data)`, which adds a payload as its own segment.
- `write_string(text)`, which writes the UTF-8 length as a VarInt and then
  the encoded text as its own segment.

Values outside the range of `write_byte`, `write_varint` or `write_varlong`
raise `OverflowError`. The other fixed-size writers raise `struct.error` for
values outside their range.

`flush_buffer()` closes the current sector as a segment. It returns `False`
if the sector was empty. `finalize()` flushes first. If nothing was written,
it returns an empty list. `reset()` discards everything written so far.

## Reading

```python
from packetbuf.readbuffer import ReadBuffer, ReadError

rbuf = ReadBuffer(data)
try:
    length = rbuf.read_varint()
    number = rbuf.read_varint()
    text = rbuf.read_string()
except ReadError:
    print("bad packet, good() is now", rbuf.good())
```

Available readers:

- `read_char`, which returns one byte as a signed 8-bit value.
- `read_ushort` and `read_ulong`, for unsigned big-endian 16-bit and 64-bit
  values.
- `read_uuid`, which reads two `read_ulong` values into a `UUID`.
- `read_varint`, for a VarInt of at most five bytes, returned as a signed
  32-bit integer.
- `read_string`, for a VarInt length followed by that many UTF-8 bytes.

Errors are all subclasses of `ReadError`, which is a `ValueError`:

- `BufferUnderflowError` when a read needs more bytes than remain.
- `MalformedVarIntError` when the fifth byte of a VarInt has any of its high
  four bits set, or when a string length is negative.

Invalid UTF-8 in a string raises `UnicodeDecodeError`. After any of these
errors, `good()` returns `False`.

`remaining()` gives the number of unread bytes. `feed(data)` replaces the
data being read and clears an earlier failure. A `ReadBuffer` created
without data reports `good()` as `False` until it is fed.

## UUID

`UUID(most, least)` is a frozen dataclass. Both halves must fit in an
unsigned 64-bit integer, or `ValueError` is raised. `str()` gives the two
halves in lower-case hex, one after the other, without padding.

## Command line

```
packetbuf
```

This needs a POSIX system (`os.pipe` and `os.writev`). It prints the system's
`IOV_MAX`, or -1 if that is unknown. It then writes a sample packet through a
pipe, reads it back and prints the decoded packet length, VarInt and string.

## Limits

`ReadBuffer` has no readers for booleans, signed or little-endian integers,
floats, doubles or VarLongs. Data written with those `WriteBuffer` methods
has to be decoded by other means. Neither class does any networking of its
own; sending and receiving the bytes is left to the caller.