"""Text descriptions of map positions."""

from __future__ import annotations


def format_coords(r, c, rpos, cpos, absolute, relative, short):
    """Describe (r, c) absolutely and/or relative to (rpos, cpos).

    Absolute form is "@r-c" ("r-c" when short); relative form is " +dr,+dc".
    """
    text = ""
    if absolute:
        text = f"{'' if short else '@'}{r}-{c}"
    if relative:
        text += f" {r - rpos:+d},{c - cpos:+d}"
    return text