"""The short-range scan map drawn from the daemon's scan messages."""

from __future__ import annotations

from dataclasses import dataclass

from .constants import (
    DFLT_MCOLS,
    DFLT_MROWS,
    MAPCOLS,
    MAPROWS,
    RADIUS,
    WARNCHR,
    PlayerFlag,
)

NWARN = 30
_GRID_WIDTH = (MAPCOLS - 8) // 2
_END = -1


@dataclass(frozen=True)
class WarnMark:
    """An enemy object at (r, c) controlling the sectors within radius."""

    r: int
    c: int
    radius: int


class ScanView:
    """The map window: coordinate labels, the sector grid, barriers and warnings.

    rows and cols are the size of the galaxy.
    """

    def __init__(self, rows=DFLT_MROWS, cols=DFLT_MCOLS):
        self.rows = rows
        self.cols = cols
        self.ycorner = None
        self.xcorner = None
        self.flags = PlayerFlag(0)
        self.warnings = []
        self._grid = [[" "] * MAPCOLS for _ in range(MAPROWS)]

    def _put(self, r, c, text):
        if not 0 <= r < MAPROWS:
            return
        row = self._grid[r]
        for offset, ch in enumerate(text):
            if 0 <= c + offset < MAPCOLS:
                row[c + offset] = ch

    def _relabel_rows(self, y):
        self.ycorner = y
        for row in range(1, MAPROWS - 1):
            value = y - (row - 1)
            label = f"{value:3d}" if 0 < value <= self.rows and value % 2 == 0 else "   "
            self._put(row, 0, label)
            self._put(row, MAPCOLS - 3, label)

    def _relabel_cols(self, x):
        self.xcorner = x
        for offset, col in enumerate(range(3, MAPCOLS - 6, 2)):
            value = x + offset
            if 0 < value <= self.cols and value % 2 == 0:
                self._put(0, col, f"{value:3d}")
                self._put(MAPROWS - 1, col, f"{value:3d}")
            else:
                self._put(0, col + 1, "  ")
                self._put(MAPROWS - 1, col + 1, "  ")

    @staticmethod
    def _glyph(buffer):
        return bytes([buffer.get(), buffer.get()]).decode("latin-1")

    def _next_object(self, buffer, r, c, warnings):
        """Read past warnings for (r, c) to the next object, or None at the end."""
        while True:
            y = buffer.get_short()
            if y == _END:
                return None
            x = buffer.get_short()
            if (y, x) != (r, c):
                return y, x, self._glyph(buffer)
            radius = buffer.get_short()
            if len(warnings) + 1 < NWARN:
                warnings.append(WarnMark(r, c, radius))

    def apply(self, buffer):
        """Redraw the map from a scan message held in a RingBuffer.

        Returns the warning marks the message carried.
        """
        flags = buffer.get_long()
        y = buffer.get_short()
        x = buffer.get_short()
        if y != self.ycorner:
            self._relabel_rows(y)
        if x != self.xcorner:
            self._relabel_cols(x)

        first_y = buffer.get_short()
        pending = None
        if first_y != _END:
            pending = (first_y, buffer.get_short(), self._glyph(buffer))

        warnings = []
        for row in range(1, MAPROWS - 1):
            r = self.ycorner - row + 1
            for k in range(_GRID_WIDTH):
                c = self.xcorner + k
                col = 4 + 2 * k
                if pending is not None and pending[:2] == (r, c):
                    self._put(row, col, pending[2])
                    pending = self._next_object(buffer, r, c, warnings)
                else:
                    self._put(row, col, " .")

        self._draw_barriers()
        self.flags = PlayerFlag(flags)
        self.warnings = warnings
        self.warnmarks(flags, warnings)
        return warnings

    def _draw_barriers(self):
        ycorner, xcorner = self.ycorner, self.xcorner
        trow = ycorner - self.rows if ycorner > self.rows else None
        brow = ycorner + 1 if ycorner < 2 * RADIUS + 1 else None
        lcol = 4 - 2 * xcorner if xcorner < 1 else None
        rcol = 2 * self.cols + 6 - 2 * xcorner if xcorner > self.cols - 2 * RADIUS else None

        front = lcol if lcol is not None else 4
        back = rcol if rcol is not None else 4 * RADIUS + 4
        for barrier_row in (trow, brow):
            if barrier_row is not None:
                self._put(barrier_row, front, "--" * ((back - front) // 2 + 1))

        top = trow if trow is not None else 1
        bottom = brow if brow is not None else 2 * RADIUS + 1
        for barrier_col in (lcol, rcol):
            if barrier_col is not None:
                for r in range(top, bottom + 1):
                    self._put(r, barrier_col, " |")
        if rcol is not None:
            for corner_row in (trow, brow):
                if corner_row is not None:
                    self._put(corner_row, rcol, "-")

    def _putwarn(self, r, c):
        if 0 <= r < MAPROWS and 0 <= c < MAPCOLS and self._grid[r][c] == ".":
            self._grid[r][c] = WARNCHR

    def warnmarks(self, flags, marks):
        """Put warning marks around the given enemy objects, as flags choose.

        WARN1 marks corners, WARN2 the walls, WARN3 the whole area.
        """
        if self.ycorner is None or self.xcorner is None:
            raise ValueError("no scan has been applied yet")
        ycorner, xcorner = self.ycorner, self.xcorner
        style = PlayerFlag(flags) & PlayerFlag.WARNMASK
        for mark in marks:
            trow = max(ycorner - (mark.r + mark.radius) + 1, 1)
            if ycorner > self.rows:
                trow = max(trow, ycorner - self.rows + 1)
            brow = min(ycorner - (mark.r - mark.radius) + 1, MAPROWS - 2)
            if ycorner < 2 * RADIUS + 1:
                brow = min(brow, ycorner)
            lcol = max(((mark.c - mark.radius) - xcorner) * 2 + 5, 5)
            if xcorner < 1:
                lcol = max(lcol, 7 - 2 * xcorner)
            rcol = min(((mark.c + mark.radius) - xcorner) * 2 + 5, 2 * (2 * RADIUS + 2) + 1)
            if xcorner > self.cols - 2 * RADIUS:
                rcol = min(rcol, 2 * self.cols + 5 - 2 * xcorner)

            if style == PlayerFlag.WARN3:
                for r in range(trow, brow + 1):
                    for c in range(lcol, rcol + 1, 2):
                        self._putwarn(r, c)
            elif style == PlayerFlag.WARN2:
                for c in range(lcol, rcol + 1, 2):
                    self._putwarn(trow, c)
                    self._putwarn(brow, c)
                for r in range(trow + 1, brow):
                    self._putwarn(r, lcol)
                    self._putwarn(r, rcol)
            elif style == PlayerFlag.WARN1:
                for r in (trow, brow):
                    for c in (lcol, rcol):
                        self._putwarn(r, c)

    def render(self):
        """Return the map window as a list of full-width strings."""
        return ["".join(row) for row in self._grid]