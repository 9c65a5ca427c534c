"""Summaries and "nothing found" reports for the LIST command."""

from __future__ import annotations

import enum

from .constants import Side, Target


class NounCase(enum.IntEnum):
    """What kind of object a list asked for."""

    FORCES = 0
    SHIPS_BASES = 1
    SHIPS_PLANETS = 2
    SHIPS = 3
    PORTS = 4
    BASES = 5
    PLANETS = 6

    @property
    def noun(self):
        return _NOUNS[self]


_NOUNS = {
    NounCase.FORCES: "forces",
    NounCase.SHIPS_BASES: "ships or bases",
    NounCase.SHIPS_PLANETS: "ships or planets",
    NounCase.SHIPS: "ships",
    NounCase.PORTS: "ports",
    NounCase.BASES: "bases",
    NounCase.PLANETS: "planets",
}

# Which of (ships, bases, planets) each noun case counts.
_COUNTED = {
    NounCase.FORCES: (True, True, True),
    NounCase.SHIPS_BASES: (True, True, False),
    NounCase.SHIPS_PLANETS: (True, False, True),
    NounCase.SHIPS: (True, False, False),
    NounCase.PORTS: (False, True, True),
    NounCase.BASES: (False, True, False),
    NounCase.PLANETS: (False, False, True),
}


def resolve_sides(flags, myside):
    """Turn FRIENDLY/ENEMY into explicit sides for a player on myside.

    Returns the rewritten Target flags and the Side bits they select.
    """
    flags = Target(flags)
    if Side(myside) == Side.FEDERATION:
        own, other = Target.FEDERATION, Target.EMPIRE
    else:
        own, other = Target.EMPIRE, Target.FEDERATION
    if Target.FRIENDLY in flags:
        flags |= own
    if Target.ENEMY in flags:
        flags |= other
    flags = flags & ~int(Target.FRIENDLY | Target.ENEMY)
    aliflags = Side.NEUTRAL
    if Target.FEDERATION in flags:
        aliflags |= Side.FEDERATION
    if Target.EMPIRE in flags:
        aliflags |= Side.EMPIRE
    return flags, aliflags


def known(stats, ally, nouncase):
    """Return " known" if any objects of the kind exist for ally, else ""."""
    ally = Side(ally)
    ships = bases = planets = 0
    if ally in (Side.FEDERATION, Side.EMPIRE):
        ships = stats.ships[ally]
        bases = stats.bases[ally]
        planets = stats.planets[ally]
    elif ally == Side.NEUTRAL:
        planets = stats.planets[Side.NEUTRAL]
    else:
        ships = stats.ships[Side.FEDERATION] + stats.ships[Side.EMPIRE]
        bases = stats.bases[Side.FEDERATION] + stats.bases[Side.EMPIRE]
        planets = sum(stats.planets[side] for side in (Side.FEDERATION, Side.EMPIRE, Side.NEUTRAL))
    want_ships, want_bases, want_planets = _COUNTED.get(nouncase, _COUNTED[NounCase.FORCES])
    total = want_ships * ships + want_bases * bases + want_planets * planets
    return " known" if total else ""


def _plural(count):
    return "" if count == 1 else "s"


def summary(stats, flags):
    """Count ships, bases and planets of the sides selected by resolved flags."""
    flags = Target(flags)
    fed, emp = Side.FEDERATION, Side.EMPIRE
    lines = []

    def add(wanted, count, label):
        if wanted and count:
            lines.append(f"{count} {label}{_plural(count)}\n")

    if Target.SHIPS in flags:
        add(Target.FEDERATION in flags, stats.ships[fed], "Federation ship")
        add(Target.EMPIRE in flags, stats.ships[emp], "Empire ship")
        if stats.ships[fed] or stats.ships[emp]:
            lines.append("\n")
    if Target.BASES in flags:
        add(Target.FEDERATION in flags, stats.bases[fed], "Federation base")
        add(Target.EMPIRE in flags, stats.bases[emp], "Empire base")
        if stats.bases[fed] or stats.bases[emp]:
            lines.append("\n")
    if Target.PLANETS in flags:
        add(Target.FEDERATION in flags, stats.planets[fed], "Federation planet")
        add(Target.EMPIRE in flags, stats.planets[emp], "Empire planet")
        add(Target.NEUTRAL in flags, stats.planets[Side.NEUTRAL], "neutral planet")
    return "".join(lines)


def noun_case(flags):
    """Return the NounCase naming the objects that flags ask for."""
    flags = Target(flags)
    ships = Target.SHIPS in flags
    bases = Target.BASES in flags
    planets = Target.PLANETS in flags
    if ships:
        if bases:
            return NounCase.FORCES if planets else NounCase.SHIPS_BASES
        return NounCase.SHIPS_PLANETS if planets else NounCase.SHIPS
    if bases:
        return NounCase.PORTS if planets else NounCase.BASES
    if planets:
        return NounCase.PLANETS
    return NounCase.FORCES


def nothing_found(stats, flags, aliflags):
    """Report that no closest object of the asked kinds could be found."""
    flags = Target(flags)
    aliflags = Side(aliflags)
    nouncase = noun_case(flags)
    lines = []
    if Side.FEDERATION in aliflags:
        lines.append(f"No{known(stats, Side.FEDERATION, nouncase)} federation {nouncase.noun}\n")
    if Side.EMPIRE in aliflags:
        lines.append(f"No{known(stats, Side.EMPIRE, nouncase)} empire {nouncase.noun}\n")
    if Target.NEUTRAL in flags and Target.PLANETS in flags:
        lines.append(f"No{known(stats, Side.NEUTRAL, nouncase)} neutral planets\n")
    return "".join(lines)