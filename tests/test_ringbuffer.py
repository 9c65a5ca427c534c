import struct

import pytest

from uniwar.ringbuffer import BufferEmpty, BufferFull, RingBuffer


def test_put_get_round_trip():
    buf = RingBuffer(16)
    buf.put(b"hello")
    assert len(buf) == 5
    assert bytes(buf.get() for _ in range(5)) == b"hello"
    assert len(buf) == 0


def test_wraparound_keeps_order():
    buf = RingBuffer(8)
    buf.put(b"abcdef")
    assert bytes(buf.get() for _ in range(6)) == b"abcdef"
    buf.put(b"ghijkl")
    assert bytes(buf.get() for _ in range(6)) == b"ghijkl"


def test_free_tracks_content():
    buf = RingBuffer(10)
    buf.put(b"abc")
    assert buf.free() + len(buf) == buf.size
    buf.get()
    assert buf.free() + len(buf) == buf.size


def test_overflow_raises_and_keeps_content():
    buf = RingBuffer(4)
    buf.put(b"ab")
    with pytest.raises(BufferFull):
        buf.put(b"cde")
    assert len(buf) == 2
    assert buf.get() == ord("a")


def test_put_command_appends_separator():
    buf = RingBuffer(32)
    buf.put_command("move 3 4")
    raw = bytes(buf.get() for _ in range(len(buf)))
    assert raw == b"move 3 4/"


def test_put_command_overflow():
    buf = RingBuffer(4)
    with pytest.raises(BufferFull):
        buf.put_command(b"abcd")


def test_peek_does_not_consume():
    buf = RingBuffer(4)
    buf.put(b"xy")
    assert buf.peek() == ord("x")
    assert buf.get() == ord("x")


def test_empty_get_raises():
    buf = RingBuffer(4)
    with pytest.raises(BufferEmpty):
        buf.get()
    with pytest.raises(BufferEmpty):
        buf.peek()


@pytest.mark.parametrize("value", [-2, 0, 1, 32767, -32768])
def test_short_round_trip(value):
    buf = RingBuffer(8)
    buf.put(struct.pack("<h", value))
    assert buf.get_short() == value
    assert len(buf) == 0


@pytest.mark.parametrize("value", [-100000, 0, 2147483647])
def test_long_round_trip(value):
    buf = RingBuffer(8)
    buf.put(struct.pack("<i", value))
    assert buf.get_long() == value


def test_get_string_stops_at_nul():
    buf = RingBuffer(32)
    buf.put(b"first\x00second\x00")
    assert buf.get_string() == "first"
    assert buf.get_string() == "second"
    assert len(buf) == 0


def test_clear_empties():
    buf = RingBuffer(8)
    buf.put(b"abc")
    buf.clear()
    assert len(buf) == 0
    assert buf.free() == 8


def test_size_must_be_positive():
    with pytest.raises(ValueError):
        RingBuffer(0)