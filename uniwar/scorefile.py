"""Persistent per-player history, guarded by a lock file."""

from __future__ import annotations

import contextlib
import os
import re
import struct
import time
from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar

from .constants import MAXPLNAME

EMPTY_UID = -1
_LAYOUT = struct.Struct(f"<{MAXPLNAME}siiqqq")
_PID = re.compile(rb"\s*([-+]?\d+)")


@dataclass
class ScoreRecord:
    """One player's career: missions flown, points, best game, last played."""

    uid: int = EMPTY_UID
    name: str = ""
    mission: int = 0
    total: int = 0
    highest: int = 0
    timelast: int = 0

    SIZE: ClassVar[int] = _LAYOUT.size

    def pack(self):
        """Return the fixed-size binary form of the record."""
        name = self.name.encode("latin-1", "replace")[:MAXPLNAME]
        return _LAYOUT.pack(name, self.uid, self.mission, self.total, self.highest, self.timelast)

    @classmethod
    def unpack(cls, data):
        """Build a record from its binary form."""
        if len(data) != cls.SIZE:
            raise ValueError(f"score record must be {cls.SIZE} bytes, got {len(data)}")
        name, uid, mission, total, highest, timelast = _LAYOUT.unpack(data)
        return cls(uid, name.rstrip(b"\0").decode("latin-1"), mission, total, highest, timelast)


class ScoreFile:
    """A file of fixed-size score records; a lock file keeps daemons from colliding."""

    LOCK_TRIES = 15
    LOCK_DELAY = 1.0

    def __init__(self, path, lockpath, pid=None):
        self.path = Path(path)
        self.lockpath = Path(lockpath)
        self.pid = os.getpid() if pid is None else pid
        self._lockfd = None

    def lock(self):
        """Create the lock file holding our pid; return False if locking was given up."""
        flags = os.O_RDWR | os.O_CREAT | os.O_EXCL
        for _ in range(self.LOCK_TRIES):
            try:
                fd = os.open(self.lockpath, flags, 0o700)
            except FileExistsError:
                time.sleep(self.LOCK_DELAY)
                continue
            except OSError:
                return False
            break
        else:
            return False
        try:
            os.write(fd, str(self.pid).encode("ascii"))
        except OSError:
            os.close(fd)
            with contextlib.suppress(OSError):
                os.unlink(self.lockpath)
            return False
        self._lockfd = fd
        return True

    def unlock(self):
        """Remove the lock file if it is ours; return True if it was removed."""
        fd = self._lockfd
        if fd is None:
            return False
        self._lockfd = None
        try:
            os.lseek(fd, 0, os.SEEK_SET)
            data = os.read(fd, 31)
        except OSError:
            return False
        finally:
            os.close(fd)
        match = _PID.match(data)
        pid = int(match.group(1)) if match else 0
        if pid != self.pid:
            return False
        with contextlib.suppress(FileNotFoundError):
            os.unlink(self.lockpath)
        return True

    @contextlib.contextmanager
    def locked(self):
        """Hold the lock for the duration of a with-block."""
        self.lock()
        try:
            yield self
        finally:
            self.unlock()

    def lookup(self, uid):
        """Return (record, offset) for uid, or (None, free offset) if there is none.

        The free offset is the first empty slot or the end of the file;
        it is -1 if the file cannot be opened or ends in a partial record.
        """
        size = ScoreRecord.SIZE
        try:
            fh = open(self.path, "a+b")
        except OSError:
            return None, -1
        with fh:
            fh.seek(0)
            free = -1
            offset = 0
            while len(chunk := fh.read(size)) == size:
                record = ScoreRecord.unpack(chunk)
                if record.uid == uid:
                    return record, offset
                if record.uid == EMPTY_UID and free < 0:
                    free = offset
                offset += size
        if not chunk and free < 0:
            free = offset
        return None, free

    def store(self, record, offset):
        """Write a record at offset; a negative offset does nothing and returns False."""
        if offset < 0:
            return False
        if offset % ScoreRecord.SIZE:
            raise ValueError(f"offset {offset} is not on a record boundary")
        with open(self.path, "r+b") as fh:
            fh.seek(offset)
            fh.write(record.pack())
        return True

    def update(self, uid, name, points, now=None):
        """Fold one finished game into a player's record and return the record."""
        record, offset = self.lookup(uid)
        if record is None:
            raise LookupError(f"no score entry for uid {uid}")
        record.name = name[:MAXPLNAME]
        record.highest = max(record.highest, points)
        record.total += points
        record.timelast = int(time.time() if now is None else now)
        record.mission += 1
        self.store(record, offset)
        return record