import struct

import pytest
from hypothesis import given
from hypothesis import strategies as st

from packetbuf.readbuffer import ReadBuffer
from packetbuf.writebuffer import WriteBuffer


def _payload(wbuf):
    frame = b"".join(wbuf.finalize())
    rb = ReadBuffer(frame)
    length = rb.read_varint()
    assert length == rb.remaining()
    return frame[len(frame) - rb.remaining():]


def test_example_packet_round_trip():
    wbuf = WriteBuffer(10)
    wbuf.write_varint(256)
    wbuf.write_string("Hello World")
    wbuf.write_bytes(b"Hello World")
    segments = wbuf.finalize()
    assert wbuf.iov_size() == 3
    assert len(segments) == 3
    rb = ReadBuffer(b"".join(segments))
    length = rb.read_varint()
    assert length == rb.remaining()
    assert rb.read_varint() == 256
    assert rb.read_string() == "Hello World"
    assert rb.remaining() == len(b"Hello World")


def test_bytes_segment_is_kept_separate():
    wbuf = WriteBuffer(4)
    wbuf.write_byte(1)
    wbuf.write_bytes(b"payload")
    segments = wbuf.finalize()
    assert segments[-1] == b"payload"
    assert segments[0].endswith(b"\x01")


def test_empty_finalize():
    wbuf = WriteBuffer(10)
    assert wbuf.finalize() == []
    assert wbuf.iov_size() == 0


def test_flush_buffer_reports_whether_flushed():
    wbuf = WriteBuffer(10)
    assert wbuf.flush_buffer() is False
    wbuf.write_bool(True)
    assert wbuf.flush_buffer() is True
    assert wbuf.iov_size() == 1
    assert wbuf.flush_buffer() is False


def test_trailing_data_after_bytes_is_included():
    wbuf = WriteBuffer(10)
    wbuf.write_bytes(b"ab")
    wbuf.write_byte(7)
    assert _payload(wbuf) == b"ab\x07"


def test_write_bool():
    wbuf = WriteBuffer(1)
    wbuf.write_bool(True)
    wbuf.write_bool(False)
    assert _payload(wbuf) == b"\x01\x00"


def test_write_byte_signed_and_unsigned_agree():
    a = WriteBuffer(1)
    a.write_byte(-1)
    b = WriteBuffer(1)
    b.write_byte(255)
    assert _payload(a) == _payload(b)
    assert ReadBuffer(_payload(a)).read_char() == -1


@pytest.mark.parametrize("value", [-129, 256])
def test_write_byte_out_of_range(value):
    with pytest.raises(OverflowError):
        WriteBuffer(1).write_byte(value)


def test_reset_discards_packet():
    wbuf = WriteBuffer(10)
    wbuf.write_string("first")
    wbuf.finalize()
    wbuf.reset()
    assert wbuf.iov_size() == 0
    assert wbuf.finalize() == []
    wbuf.write_string("second")
    rb = ReadBuffer(b"".join(wbuf.finalize()))
    assert rb.read_varint() == rb.remaining()
    assert rb.read_string() == "second"


def test_growth_beyond_initial_size():
    wbuf = WriteBuffer(0)
    for value in range(100):
        wbuf.write_varint(value)
    rb = ReadBuffer(_payload(wbuf))
    assert [rb.read_varint() for _ in range(100)] == list(range(100))


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        WriteBuffer(-1)


@given(st.integers(min_value=-(1 << 31), max_value=(1 << 31) - 1))
def test_varint_round_trip(value):
    wbuf = WriteBuffer(5)
    wbuf.write_varint(value)
    payload = _payload(wbuf)
    assert 1 <= len(payload) <= 5
    rb = ReadBuffer(payload)
    assert rb.read_varint() == value
    assert rb.remaining() == 0


@pytest.mark.parametrize("value", [1 << 31, -(1 << 31) - 1])
def test_varint_out_of_range(value):
    with pytest.raises(OverflowError):
        WriteBuffer(5).write_varint(value)


@given(st.integers(min_value=0, max_value=(1 << 31) - 1))
def test_varlong_matches_varint_for_small_values(value):
    a = WriteBuffer(5)
    a.write_varint(value)
    b = WriteBuffer(10)
    b.write_varlong(value)
    assert _payload(a) == _payload(b)


def test_negative_varlong_uses_ten_bytes():
    wbuf = WriteBuffer(10)
    wbuf.write_varlong(-1)
    assert len(_payload(wbuf)) == 10


def test_varlong_out_of_range():
    with pytest.raises(OverflowError):
        WriteBuffer(10).write_varlong(1 << 63)


@given(st.integers(min_value=0, max_value=(1 << 15) - 1))
def test_short_round_trip(value):
    wbuf = WriteBuffer(2)
    wbuf.write_short(value)
    assert ReadBuffer(_payload(wbuf)).read_ushort() == value


@given(st.integers(min_value=0, max_value=(1 << 63) - 1))
def test_long_round_trip(value):
    wbuf = WriteBuffer(8)
    wbuf.write_long(value)
    assert ReadBuffer(_payload(wbuf)).read_ulong() == value


@pytest.mark.parametrize(
    "big, little, value",
    [
        ("write_short", "write_short_le", -2),
        ("write_int", "write_int_le", 123456),
        ("write_long", "write_long_le", -987654321),
        ("write_float", "write_float_le", 1.5),
        ("write_double", "write_double_le", -2.25),
    ],
)
def test_big_endian_is_reverse_of_little_endian(big, little, value):
    a = WriteBuffer(8)
    getattr(a, big)(value)
    b = WriteBuffer(8)
    getattr(b, little)(value)
    assert _payload(a) == _payload(b)[::-1]


def test_fixed_width_overflow():
    with pytest.raises(struct.error):
        WriteBuffer(2).write_short(1 << 15)


def test_string_utf8_round_trip():
    wbuf = WriteBuffer(10)
    wbuf.write_string("héllo wörld")
    rb = ReadBuffer(_payload(wbuf))
    assert rb.read_string() == "héllo wörld"
    assert rb.remaining() == 0