"""The points table shown at the end of a game."""

from __future__ import annotations

from .constants import Side, fleet_names

PTYPES = (
    "enemy hit",
    "enemy RIP",
    "base hit ",
    "plnt cap ",
    "base blt ",
    "star RIP ",
    "plnt RIP ",
    "  TOTAL: ",
)


def _quotient(a, b):
    """Divide, truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def format_points(buffer):
    """Read a points message from a RingBuffer and return the table as text."""
    shx = buffer.get_short()
    ships = fleet_names(Side.FEDERATION | Side.EMPIRE)
    if not 0 <= shx < len(ships):
        raise ValueError(f"bad ship index {shx}")
    lines = [f"{ships[shx]:>16}    Fed    Emp\n", "-" * 30 + "\n"]

    pscr = fscr = escr = 0
    for label in PTYPES:
        pscr, fscr, escr = (buffer.get_long() for _ in range(3))
        lines.append(f"{label}{pscr:7d}{fscr:7d}{escr:7d}\n")
    lines.append("-----\n")

    fed_ships = buffer.get_short()
    emp_ships = buffer.get_short()
    lines.append(f"ships used      {fed_ships:7d}{emp_ships:7d}\n")
    lines.append(
        f"score/player    {_quotient(fscr, fed_ships or 1):7d}"
        f"{_quotient(escr, emp_ships or 1):7d}\n"
    )

    pstd, fstd, estd = (buffer.get_long() or 1 for _ in range(3))
    lines.append(
        f"score/SD {_quotient(pscr, pstd):7d}{_quotient(fscr, fstd):7d}"
        f"{_quotient(escr, estd):7d}\n"
    )
    return "".join(lines)