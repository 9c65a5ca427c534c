"""Wire formats between the daemon and the terminal handlers, and a player's outgoing channel."""

from __future__ import annotations

import enum
import struct
import time

from .constants import CMDSEP, MAXMSG, MAXPEND

_SHORT = struct.Struct("<h")
_PLAYER_HEADER = struct.Struct("<hh")
_HELLO = struct.Struct("<hhh")


class MessageType(enum.IntEnum):
    """Code in the first byte of every message the daemon sends."""

    TEXT = 1
    STATUS = 2
    SCAN = 3
    CODE = 4
    LIST = 5
    POINT = 6
    SLEEP = 7
    PDIED = 8
    INIT = 9
    ROWCOL = 10


def _as_bytes(payload):
    if isinstance(payload, str):
        return payload.encode("latin-1")
    return bytes(payload)


def _short(value):
    """Wrap an integer into the signed 16-bit range."""
    return ((int(value) + 0x8000) & 0xFFFF) - 0x8000


def encode_daemon_message(kind, payload=b""):
    """Frame a daemon-to-player message: a 2-byte size, the type byte, then the payload."""
    body = bytes([MessageType(kind)]) + _as_bytes(payload)
    if len(body) + _SHORT.size > MAXMSG:
        raise ValueError(f"message of {len(body)} bytes is too long")
    return _SHORT.pack(len(body)) + body


def decode_daemon_messages(data):
    """Split a stream of daemon messages into (MessageType, payload) pairs."""
    data = bytes(data)
    messages = []
    pos = 0
    while pos < len(data):
        if pos + _SHORT.size > len(data):
            raise ValueError("truncated message header")
        (size,) = _SHORT.unpack_from(data, pos)
        pos += _SHORT.size
        if size < 1 or pos + size > len(data):
            raise ValueError(f"bad message size {size}")
        messages.append((MessageType(data[pos]), data[pos + 1:pos + size]))
        pos += size
    return messages


def encode_player_message(pid, payload):
    """Frame a player-to-daemon message: pid, payload size, then the payload."""
    payload = _as_bytes(payload)
    if not payload:
        raise ValueError("an empty payload is reserved for the hello message")
    if len(payload) + _PLAYER_HEADER.size > MAXMSG:
        raise ValueError(f"message of {len(payload)} bytes is too long")
    return _PLAYER_HEADER.pack(_short(pid), len(payload)) + payload


def encode_hello(pid, uid):
    """Frame the first message a new player sends: zero, pid and uid."""
    return _HELLO.pack(0, _short(pid), _short(uid))


def decode_player_messages(data):
    """Split a stream of player messages into (pid, uid, payload) triples.

    A hello message has uid set and payload None; any other message has
    uid None and carries its payload.
    """
    data = bytes(data)
    messages = []
    pos = 0
    while pos < len(data):
        if pos + _PLAYER_HEADER.size > len(data):
            raise ValueError("truncated message header")
        first, second = _PLAYER_HEADER.unpack_from(data, pos)
        if first == 0:
            if pos + _HELLO.size > len(data):
                raise ValueError("truncated hello message")
            _, pid, uid = _HELLO.unpack_from(data, pos)
            messages.append((pid, uid, None))
            pos += _HELLO.size
            continue
        pos += _PLAYER_HEADER.size
        if second < 1 or pos + second > len(data):
            raise ValueError(f"bad message size {second}")
        messages.append((first, None, data[pos:pos + second]))
        pos += second
    return messages


def split_commands(buffer):
    """Drain a RingBuffer of separator-terminated commands into NUL-terminated payloads.

    Raises BufferEmpty if the last command has no separator.
    """
    separator = ord(CMDSEP)
    commands = []
    while buffer:
        raw = bytearray()
        while (ch := buffer.get()) != separator:
            raw.append(ch)
        commands.append(bytes(raw) + b"\0")
    return commands


class PlayerChannel:
    """Messages from the daemon to one player, with a limit on unacknowledged ones."""

    def __init__(self, stream, max_pending=MAXPEND):
        self.stream = stream
        self.max_pending = max_pending
        self.pending = 0
        self.waiting = False

    def send(self, kind, payload=b""):
        """Write one message; return False if too many are still unacknowledged.

        A death notice is always sent.
        """
        kind = MessageType(kind)
        if self.pending >= self.max_pending and kind is not MessageType.PDIED:
            return False
        view = memoryview(encode_daemon_message(kind, payload))
        while view:
            written = self.stream.write(view)
            if written is None:
                time.sleep(1)
                continue
            view = view[written:]
        flush = getattr(self.stream, "flush", None)
        if flush is not None:
            flush()
        self.pending += 1
        return True

    def text(self, text):
        """Send a NUL-terminated text message."""
        return self.send(MessageType.TEXT, _as_bytes(text) + b"\0")

    def sleep(self, seconds, players, fastgame=False):
        """Put the player to sleep; return False when no sleep is needed.

        Nobody sleeps when alone in the game or in a fast game.
        """
        if players == 1 or fastgame:
            return False
        if not 0 <= seconds <= 0xFF:
            raise ValueError(f"cannot sleep for {seconds} seconds")
        self.waiting = True
        self.send(MessageType.SLEEP, bytes([seconds]))
        return True

    def acknowledge(self):
        """Record the player's acknowledgement of a message."""
        self.pending = max(0, self.pending - 1)
        self.waiting = False