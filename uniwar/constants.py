"""Game limits, flag sets, the device table, the fleet roster and error texts."""

from __future__ import annotations

import enum
from dataclasses import dataclass

# Message and buffer sizes.
MAXMSG = 1024
MAXPMSG = 256
MAXPEND = 20
MAXPL = 14
MAXPG = 5
MAXPLNAME = 16

# Control characters exchanged between the terminal handler and the daemon.
CMDSEP = "/"
ABORT = "\x03"
GOODBYE = "\x04"
BAUDCHR = "\x05"
RESPCHR = "\x06"
WARNCHR = "!"

# Ranges.
MRANGE = 8
TRANGE = 8
PRANGE = 9
VICINITY = 15

# Universe creation.
MAXBASES = 10
MAXFAILS = 100

# Odds (percent) that ports open fire.
SZAPPROB = 25
ZAPPROB = 30
EZAPPROB = 60

# Energy figures, all multiplied by 100.
MOVNRGY = 500
CAPNRGY = 5000
DEFPHAS = 20000
MAXPHAS = 50000
MAXTBRST = 3
TURNREP = 3000
DEFREP = 5000
SHRAISE = 10000
PAWAIT = 60
MINWAITIME = 30

# Pauses, in seconds, for commands that take time.
PBUILD = 5
PCAPTURE = 5
PDOCK = 2
PMOVE = 1
PPHASER = 2
PREPAIR = 1
PTORPEDO = 2

# Ship and base capacities.
MAXNRGY = 500000
MAXSHIE = 400000
MAXBSHIE = 300000
BPCTREGEN = MAXBSHIE // 100
MAXTORP = 10
MAXLIFE = 5
MAXDMG = 400000
INCNRGY = MAXNRGY // 10
INCSHIE = MAXSHIE // 10
INCTORP = 5
INCDMG = 5000

# Default galaxy size.
DFLT_MROWS = 100
DFLT_MCOLS = 100

# Screen layout.
RADIUS = 9
MAPROWS = 2 * RADIUS + 3
MAPCOLS = 4 * RADIUS + 10
MAPBEGY = 0
MAPBEGX = 0
STATROWS = 5
STATCOLS = 32
STATBEGY = 0
STATBEGX = MAPCOLS + 1
TEXTROWS = 16
TEXTCOLS = 32
TEXTBEGY = 6
TEXTBEGX = MAPCOLS + 1
CMDROWS = 2
CMDCOLS = 79
CMDBEGY = MAPROWS + 1
CMDBEGX = 0


class Side(enum.IntFlag):
    """Alliances; combine them to select both sides."""

    NEUTRAL = 0
    FEDERATION = 1
    EMPIRE = 2


class Target(enum.IntFlag):
    """Selectors used by the LIST and TELL commands."""

    SHIPS = enum.auto()
    BASES = enum.auto()
    PLANETS = enum.auto()
    FEDERATION = enum.auto()
    EMPIRE = enum.auto()
    NEUTRAL = enum.auto()
    FRIENDLY = enum.auto()
    ENEMY = enum.auto()
    CLOSEST = enum.auto()
    SUMMARY = enum.auto()
    NOOUTRNG = enum.auto()
    PORTS = BASES | PLANETS


class PlayerFlag(enum.IntFlag):
    """State and option bits carried by a player."""

    ACTIVE = enum.auto()
    DIED = enum.auto()
    DOSCAN = enum.auto()
    SCANON = enum.auto()
    WAITING = enum.auto()
    DOCKED = enum.auto()
    SHIELDED = enum.auto()
    OSHORT = enum.auto()
    ABSOOUT = enum.auto()
    RELOUT = enum.auto()
    RADIO = enum.auto()
    WARN1 = enum.auto()
    WARN2 = enum.auto()
    WARN3 = WARN1 | WARN2
    WARNMASK = WARN1 | WARN2


class Device(enum.IntEnum):
    """Ship devices that can be damaged."""

    WARP = 0
    IMPULSE = 1
    TUBES = 2
    PHASER = 3
    SHIELD = 4
    COMPUTER = 5
    LIFE = 6
    RADIO = 7


@dataclass(frozen=True)
class DeviceInfo:
    """Name, damage limit and cumulative selection percentage of a device."""

    name: str
    maxdmg: int
    threshold: int


_DEVICES = {
    Device.WARP: DeviceInfo("warp engines", 60000, 25),
    Device.IMPULSE: DeviceInfo("impulse engines", 90000, 45),
    Device.TUBES: DeviceInfo("torpedo tubes", 30000, 55),
    Device.PHASER: DeviceInfo("phasers", 30000, 65),
    Device.SHIELD: DeviceInfo("shield control", 30000, 80),
    Device.COMPUTER: DeviceInfo("computer", 30000, 85),
    Device.LIFE: DeviceInfo("life support", 30000, 90),
    Device.RADIO: DeviceInfo("sub-space radio", 30000, 100),
}

NDEVS = len(Device)


def device_info(device):
    """Return the DeviceInfo entry for a device."""
    return _DEVICES[Device(device)]


_FLEET = (
    ("Excalibur", Side.FEDERATION),
    ("Farragut", Side.FEDERATION),
    ("Intrepid", Side.FEDERATION),
    ("Lexington", Side.FEDERATION),
    ("Nimitz", Side.FEDERATION),
    ("Savannah", Side.FEDERATION),
    ("Trenton", Side.FEDERATION),
    ("Buzzard", Side.EMPIRE),
    ("Cobra", Side.EMPIRE),
    ("Demon", Side.EMPIRE),
    ("Goblin", Side.EMPIRE),
    ("Hawk", Side.EMPIRE),
    ("Jackal", Side.EMPIRE),
    ("Manta", Side.EMPIRE),
)


def fleet_names(side):
    """Return the ship names belonging to the given side (or sides)."""
    side = Side(side)
    if not side:
        raise ValueError("neutrals have no fleet")
    return tuple(name for name, owner in _FLEET if owner & side)


class ErrorKind(enum.IntEnum):
    """Kinds of game error, each with a fixed message."""

    NONE = 0
    UNIX = 1
    INTERNAL = 2
    BAD_COMMAND = 3
    AMBIGUOUS = 4
    PREGAME = 5
    OUT_OF_RANGE = 6
    COLLISION = 7
    LEAVE_GALAXY = 8
    CROWDED = 9
    NON_NUMERIC = 10
    BAD_SHIP = 11
    TOO_MANY_ARGS = 12
    NOT_IN_GAME = 13
    SHIP_DEAD = 14
    FRIENDLY = 15
    ILLEGAL_QUANTITY = 16
    NO_LOCK = 17
    OUT_OF_GALAXY = 18
    USAGE = 19


_ERROR_TEXT = {
    ErrorKind.NONE: "",
    ErrorKind.UNIX: "Unix error",
    ErrorKind.INTERNAL: "Internal error (bug)",
    ErrorKind.BAD_COMMAND: "Bad command",
    ErrorKind.AMBIGUOUS: "Ambiguous command",
    ErrorKind.PREGAME: "Command not available in pregame",
    ErrorKind.OUT_OF_RANGE: "Out of range",
    ErrorKind.COLLISION: '"Collision awerted, keptin!"',
    ErrorKind.LEAVE_GALAXY: "Can't leave the galaxy",
    ErrorKind.CROWDED: "Universe too crowded",
    ErrorKind.NON_NUMERIC: "Non-numeric coordinates",
    ErrorKind.BAD_SHIP: "Bad ship name",
    ErrorKind.TOO_MANY_ARGS: "Too many arguments",
    ErrorKind.NOT_IN_GAME: "Ship not in game",
    ErrorKind.SHIP_DEAD: "Ship dead",
    ErrorKind.FRIENDLY: "Tried to hit friendly object",
    ErrorKind.ILLEGAL_QUANTITY: "Illegal quantity",
    ErrorKind.NO_LOCK: "Unable to lock on target",
    ErrorKind.OUT_OF_GALAXY: "Coordinates out of galaxy",
    ErrorKind.USAGE: "Bad args passed when daemon invoked",
}


def error_message(kind):
    """Return the fixed message for an error kind."""
    return _ERROR_TEXT[ErrorKind(kind)]


class UniwarError(Exception):
    """A game error of a given kind, optionally prefixed by context."""

    def __init__(self, kind, detail=""):
        self.kind = ErrorKind(kind)
        self.detail = detail
        super().__init__(f"{detail}{error_message(self.kind)}")