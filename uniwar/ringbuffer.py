"""Fixed-capacity byte queue used for command and message buffering."""

from __future__ import annotations

import struct
from collections import deque

from .constants import CMDSEP

_SHORT = struct.Struct("<h")
_LONG = struct.Struct("<i")


class BufferFull(OverflowError):
    """Raised when data does not fit in the remaining space."""


class BufferEmpty(LookupError):
    """Raised when reading from a buffer that has run out of data."""


class RingBuffer:
    """A bounded FIFO of bytes.

    Shorts are read as 2-byte and longs as 4-byte little-endian signed values.
    """

    def __init__(self, size):
        if size <= 0:
            raise ValueError("buffer size must be positive")
        self.size = size
        self._data = deque()

    def __len__(self):
        return len(self._data)

    def free(self):
        """Return the number of bytes that can still be stored."""
        return self.size - len(self._data)

    def put(self, data):
        """Append bytes (or latin-1 text); raise BufferFull if they don't fit."""
        if isinstance(data, str):
            data = data.encode("latin-1")
        data = bytes(data)
        if len(data) > self.free():
            raise BufferFull(f"{len(data)} bytes requested, {self.free()} free")
        self._data.extend(data)

    def put_command(self, data):
        """Append a command followed by the command separator."""
        if isinstance(data, str):
            data = data.encode("latin-1")
        self.put(bytes(data) + CMDSEP.encode("latin-1"))

    def peek(self):
        """Return the next byte without removing it."""
        if not self._data:
            raise BufferEmpty("buffer is empty")
        return self._data[0]

    def get(self):
        """Remove and return the next byte."""
        if not self._data:
            raise BufferEmpty("buffer is empty")
        return self._data.popleft()

    def _take(self, count):
        return bytes(self.get() for _ in range(count))

    def get_short(self):
        """Remove and return a 2-byte signed integer."""
        return _SHORT.unpack(self._take(_SHORT.size))[0]

    def get_long(self):
        """Remove and return a 4-byte signed integer."""
        return _LONG.unpack(self._take(_LONG.size))[0]

    def get_string(self):
        """Remove and return text up to and including a NUL byte."""
        chars = bytearray()
        while (ch := self.get()) != 0:
            chars.append(ch)
        return chars.decode("latin-1")

    def clear(self):
        """Discard everything held."""
        self._data.clear()