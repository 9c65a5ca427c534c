"""Ship device damage: repairs and damage reports."""

from __future__ import annotations

from .constants import Device, PlayerFlag, device_info

DESTROYED_FACTOR = 3


def repair(player, units):
    """Repair each damaged device by up to units; return the largest amount repaired.

    Destroyed devices are only repaired while docked.
    """
    docked = PlayerFlag.DOCKED in player.flags
    most = 0
    for device, dmg in enumerate(player.damage):
        if dmg == 0:
            continue
        if docked or dmg <= DESTROYED_FACTOR * device_info(device).maxdmg:
            amount = min(units, dmg)
            most = max(most, amount)
            player.damage[device] -= amount
    return most


def damage_report(player, device=None):
    """Describe the damage to one device, or to all of them when device is None."""
    devices = list(Device) if device is None else [Device(device)]
    lines = []
    for dev in devices:
        dmg = player.damage[dev]
        info = device_info(dev)
        if dmg > DESTROYED_FACTOR * info.maxdmg:
            state = "destroyed!"
        elif dmg > info.maxdmg:
            state = f"crippled ({dmg // 100})!"
        elif dmg > 0:
            state = f"damaged {dmg // 100}"
        else:
            continue
        lines.append(f"{info.name} {state}\n")
    text = "".join(lines) or "No damage to devices\n"
    if device is None:
        text += "\n"
    return text