"""Points scored by players and by each side."""

from __future__ import annotations

import enum
from collections import Counter

from .constants import Side


class ScoreKind(enum.IntEnum):
    """Categories of points, in the order they are reported."""

    ENEMY_DAMAGE = 0
    ENEMY_DESTROYED = 1
    BASE_DAMAGE = 2
    PLANET_CAPTURED = 3
    BASE_BUILT = 4
    STAR_DESTROYED = 5
    PLANET_DESTROYED = 6
    TOTAL = 7


class HitKind(enum.Enum):
    """What delivered a hit."""

    PHASER = enum.auto()
    TORPEDO = enum.auto()
    NOVA = enum.auto()


_DAMAGE_KINDS = (ScoreKind.ENEMY_DAMAGE, ScoreKind.ENEMY_DESTROYED, ScoreKind.BASE_DAMAGE)


def _hundredths(value):
    """Drop the two implied decimal places, truncating toward zero."""
    return value // 100 if value >= 0 else -(-value // 100)


class Scoreboard:
    """Keeps the per-side totals and credits players.

    flag tells who hit whom: 1 player hit player, 2 player hit port,
    3 port hit player, 4 port hit by a nova.
    """

    AWARDS = {
        ScoreKind.ENEMY_DESTROYED: 500,
        ScoreKind.PLANET_CAPTURED: 100,
        ScoreKind.BASE_BUILT: 200,
        ScoreKind.STAR_DESTROYED: 50,
        ScoreKind.PLANET_DESTROYED: 100,
    }

    def __init__(self):
        self._sides = {side: Counter() for side in (Side.NEUTRAL, Side.FEDERATION, Side.EMPIRE)}

    def side_total(self, side, kind=ScoreKind.TOTAL):
        """Return the points a side holds in one category."""
        return self._sides[Side(side)][ScoreKind(kind)]

    def _add(self, side, player, kind, amount):
        if player is not None:
            player.score[kind] += amount
            player.score[ScoreKind.TOTAL] += amount
        self._sides[Side(side)][kind] += amount
        self._sides[Side(side)][ScoreKind.TOTAL] += amount

    def score(self, what, kind, flag, hit, current, pl1=None, pl2=None, pt=None):
        """Credit points for an event; current is the player whose turn it is."""
        kind = ScoreKind(kind)
        hit = _hundredths(hit)
        if kind in _DAMAGE_KINDS:
            if kind is ScoreKind.ENEMY_DESTROYED:
                hit = self.AWARDS[kind]
            if flag in (1, 2):
                self._add(pl1.side, pl1, kind, hit)
            elif flag in (3, 4):
                myside = current.side
                victim_side = pl2.side if flag == 3 else pt.side
                if victim_side == myside:
                    self._add(myside, current, kind, -hit)
                else:
                    credited = current if what is HitKind.NOVA else None
                    self._add(myside, credited, kind, hit)
            return
        hit = self.AWARDS.get(kind, hit)
        self._add(current.side, current, kind, hit)