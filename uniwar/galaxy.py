"""The galaxy map, its planets and bases, and the players moving through it."""

from __future__ import annotations

import enum
from collections import Counter
from dataclasses import dataclass, field

from .constants import (
    DFLT_MCOLS,
    DFLT_MROWS,
    MAXBASES,
    MAXBSHIE,
    MAXFAILS,
    MAXNRGY,
    MAXPL,
    MAXSHIE,
    MAXTORP,
    NDEVS,
    PRANGE,
    ErrorKind,
    PlayerFlag,
    Side,
    UniwarError,
)
from .rng import Dice

BASE_BUILDS = 5
NEUTRAL_BUILDS = -1
SLOW_BAUD = 1200
MEDIUM_BAUD = 4800


class ObjectType(enum.Enum):
    """What occupies a map sector."""

    EMPTY = 0
    STAR = 1
    PORT = 2
    SHIP = 3


_EMPTY_CELL = (ObjectType.EMPTY, None)
_STAR_CELL = (ObjectType.STAR, None)


def distance(r1, c1, r2, c2):
    """Return the number of moves between two sectors (diagonals count as one)."""
    return max(abs(r1 - r2), abs(c1 - c2))


@dataclass(eq=False)
class Planet:
    """A planet or, when fully built, a base."""

    rpos: int
    cpos: int
    side: Side = Side.NEUTRAL
    builds: int = NEUTRAL_BUILDS
    shields: int = 0
    known_by: Side = Side.NEUTRAL
    radio: bool = False
    atime: int = 0

    @property
    def is_base(self):
        return self.builds == BASE_BUILDS


@dataclass(eq=False)
class Starship:
    """A named ship of the fleet."""

    name: str
    side: Side
    radio: bool = False


@dataclass(eq=False)
class Player:
    """A captain in the game and the state of the ship commanded."""

    name: str = ""
    side: Side = Side.FEDERATION
    ship: Starship | None = None
    uid: int = 0
    pid: int = 0
    rpos: int = -1
    cpos: int = -1
    flags: PlayerFlag = PlayerFlag(0)
    baudrate: int = 0
    energy: int = MAXNRGY
    shields: int = MAXSHIE
    torps: int = MAXTORP
    damage: list = field(default_factory=lambda: [0] * NDEVS)
    score: Counter = field(default_factory=Counter)


@dataclass
class Stats:
    """Counts of what is in the game."""

    nport: int = 0
    ships: Counter = field(default_factory=Counter)
    total_ships: Counter = field(default_factory=Counter)
    planets: Counter = field(default_factory=Counter)
    bases: Counter = field(default_factory=Counter)
    baud300: int = 0
    baud1200: int = 0

    @property
    def ship_count(self):
        return self.ships[Side.FEDERATION] + self.ships[Side.EMPIRE]


class Galaxy:
    """A rows x cols map, numbered from 1, holding stars, ports and ships."""

    def __init__(self, rows=DFLT_MROWS, cols=DFLT_MCOLS, dice=None):
        if rows < 1 or cols < 1:
            raise ValueError("galaxy needs at least one row and one column")
        self.rows = rows
        self.cols = cols
        self.dice = dice if dice is not None else Dice()
        self._grid = self._empty_grid()
        self.planets = []
        self.players = []
        self.stats = Stats()
        self.baudincr = 0

    @property
    def full_range(self):
        return max(self.rows, self.cols)

    def _empty_grid(self):
        return [[_EMPTY_CELL] * (self.cols + 1) for _ in range(self.rows + 1)]

    def _on_map(self, r, c):
        return 1 <= r <= self.rows and 1 <= c <= self.cols

    def create(self, nstars=-1, maxbases=-1, nplanets=-1):
        """Fill the galaxy with stars, bases and neutral planets.

        -1 (or an excessive value) for any count chooses a default.
        Raises UniwarError(CROWDED) if no room can be found for the ports.
        """
        rndrange = self.dice.rndrange
        if maxbases == -1 or maxbases > MAXBASES:
            maxbases = MAXBASES
        area = self.rows * self.cols
        self._grid = self._empty_grid()

        if nstars == -1 or nstars > area // 2:
            average = area // 50
            nstars = rndrange(average // 2, 3 * average // 2)
        for _ in range(nstars):
            r = rndrange(1, self.rows)
            c = rndrange(1, self.cols)
            self._grid[r][c] = _STAR_CELL

        if nplanets < 0 or nplanets > area // 10:
            nplanets = rndrange(area // 1000 + 1, area // 100 + 2)
        total = nplanets + 2 * maxbases

        self.stats = Stats(nport=total)
        planets = []
        fails = 0
        while len(planets) < total:
            r = rndrange(1, self.rows)
            c = rndrange(1, self.cols)
            if self._grid[r][c][0] is not ObjectType.EMPTY:
                fails += 1
                if fails >= MAXFAILS:
                    raise UniwarError(ErrorKind.CROWDED)
                continue
            index = len(planets)
            if index < maxbases:
                side = Side.FEDERATION
            elif index < 2 * maxbases:
                side = Side.EMPIRE
            else:
                side = Side.NEUTRAL
            if side:
                planet = Planet(r, c, side, BASE_BUILDS, MAXBSHIE, known_by=side)
            else:
                planet = Planet(r, c)
            planets.append(planet)
            self._grid[r][c] = (ObjectType.PORT, planet)
        self.planets = planets

        self.stats.planets[Side.NEUTRAL] = nplanets
        self.stats.planets[Side.FEDERATION] = 0
        self.stats.planets[Side.EMPIRE] = 0
        self.stats.bases[Side.FEDERATION] = maxbases
        self.stats.bases[Side.EMPIRE] = maxbases
        self.players = []
        self.baudincr = 0

    def object_at(self, r, c):
        """Return (ObjectType, object) for a sector; the object is None for empty space and stars."""
        if not (0 <= r <= self.rows and 0 <= c <= self.cols):
            raise IndexError(f"sector {r}-{c} is outside the galaxy")
        return self._grid[r][c]

    def add_player(self, player):
        """Bring a player into the game, placing the ship if it has a position."""
        if len(self.players) >= MAXPL:
            raise UniwarError(ErrorKind.CROWDED)
        if player in self.players:
            raise ValueError("player is already in the game")
        self.players.append(player)
        self.stats.ships[player.side] += 1
        self.stats.total_ships[player.side] += 1
        if self._on_map(player.rpos, player.cpos):
            self._grid[player.rpos][player.cpos] = (ObjectType.SHIP, player)

    def remove_player(self, player):
        """Take a player out of the game and off the map."""
        self.players.remove(player)
        self.stats.ships[player.side] -= 1
        if self._on_map(player.rpos, player.cpos):
            kind, occupant = self._grid[player.rpos][player.cpos]
            if kind is ObjectType.SHIP and occupant is player:
                self._grid[player.rpos][player.cpos] = _EMPTY_CELL

    def active_players(self):
        """Yield the players that have left the pregame."""
        return (pl for pl in self.players if PlayerFlag.ACTIVE in pl.flags)

    def needscan(self, r, c):
        """Mark every ship within phaser range of (r, c) as needing a fresh scan."""
        for pl in self.players:
            if distance(pl.rpos, pl.cpos, r, c) <= PRANGE:
                pl.flags |= PlayerFlag.DOSCAN

    def unlist(self, ships=True, ports=True):
        """Clear the list marks on active ships and/or on all ports."""
        if ships:
            for pl in self.active_players():
                if pl.ship is not None:
                    pl.ship.radio = False
        if ports:
            for planet in self.planets:
                planet.radio = False

    def newbaud(self, player, baud):
        """Record a player's line speed and recompute the pause increment."""
        if baud < SLOW_BAUD:
            self.stats.baud300 += 1
        elif baud < MEDIUM_BAUD:
            self.stats.baud1200 += 1

        if self.stats.baud300 > 0:
            slow = self.stats.baud300
            self.baudincr = 2
        elif self.stats.baud1200 > 0:
            slow = self.stats.baud1200
            self.baudincr = 1
        else:
            slow = 0
            self.baudincr = 0
        if slow == self.stats.ship_count:
            self.baudincr = 0
        player.baudrate = baud