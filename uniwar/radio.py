"""Sub-space radio messages between captains."""

from __future__ import annotations

from dataclasses import dataclass, field

from .constants import PRANGE, PlayerFlag, Side, Target
from .galaxy import distance


@dataclass
class Transmission:
    """Outcome of a TELL: messages to deliver, ships out of reach, and a reply to the sender."""

    messages: list = field(default_factory=list)
    unreachable: list = field(default_factory=list)
    reply: str | None = None

    @property
    def recipients(self):
        return [player for player, _ in self.messages]


def _alliances(flags, myside):
    aliflags = Side.NEUTRAL
    if Target.FRIENDLY in flags:
        aliflags |= myside
    if Target.ENEMY in flags:
        aliflags |= Side.FEDERATION if myside == Side.EMPIRE else Side.EMPIRE
    if Target.FEDERATION in flags:
        aliflags |= Side.FEDERATION
    if Target.EMPIRE in flags:
        aliflags |= Side.EMPIRE
    return aliflags


def tell(galaxy, sender, flags, range_, text):
    """Send text from sender to the ships selected by flags within range_.

    Ships already marked for the radio are always included. When range_ is
    beyond phaser range but short of the whole galaxy, the list of
    addressees shown leaves out enemy ships out of phaser range.
    """
    flags = Target(flags)
    rangeflag = PRANGE < range_ != galaxy.full_range
    want_closest = Target.CLOSEST in flags
    myside = sender.side
    aliflags = _alliances(flags, myside)

    players = [pl for pl in galaxy.active_players() if pl.ship is not None]
    closest = None
    odist = range_ + 1
    count = 0
    for pl in players:
        if pl.ship.radio:
            count += 1
            continue
        dist = distance(sender.rpos, sender.cpos, pl.rpos, pl.cpos)
        if dist > range_ or not (pl.ship.side & aliflags):
            continue
        if want_closest:
            if (closest is not None and dist > odist) or pl is sender:
                continue
            closest = pl
            odist = dist
            count += 1
        else:
            pl.ship.radio = True
            count += 1

    if count == 0:
        return Transmission(reply="No message sent\n")
    if closest is not None:
        closest.ship.radio = True

    header = f"(+ range {range_}) " if rangeflag else ""
    for pl in players:
        far = distance(sender.rpos, sender.cpos, pl.rpos, pl.cpos) > PRANGE
        if rangeflag and far and pl.side != myside:
            continue
        if pl.ship.radio:
            header += f"{pl.ship.name[:1]} "
    header = header[:-1] + ":"

    result = Transmission()
    for pl in players:
        if not pl.ship.radio:
            continue
        if PlayerFlag.RADIO not in pl.flags:
            result.unreachable.append(pl)
        else:
            if PlayerFlag.OSHORT in pl.flags:
                line = f"<{sender.ship.name[:1]}> to {header} {text}\n"
            else:
                line = f"<{sender.name}/{sender.ship.name}> to {header} {text}\n"
            result.messages.append((pl, line))
        pl.ship.radio = False

    if result.unreachable:
        names = "".join(f"{pl.ship.name[:1]} " for pl in result.unreachable)
        result.reply = f"can't raise {names}\n"
    return result