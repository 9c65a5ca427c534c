"""Clean-up of commands typed by players."""

from __future__ import annotations

import string

from .constants import CMDSEP

_SPACE = frozenset(" \t\n\r\v\f")
_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def matches_keyword(token, keyword):
    """Return True if token is a non-empty abbreviation of keyword."""
    return bool(token) and keyword.startswith(token)


def _squeeze(raw):
    """Collapse whitespace and put a blank on each side of every ';'."""
    out = []
    after_space = False
    for ch in raw:
        if ch in _SPACE:
            if not after_space and out:
                out.append(" ")
                after_space = True
        elif ch == ";":
            if not after_space and out:
                out.append(" ")
            out.append("; ")
            after_space = True
        else:
            out.append(ch)
            after_space = False
    return "".join(out)


def _lower(text):
    return text.translate(_LOWER)


def _fold_case(command):
    """Lower-case a command, sparing a "set name" name and a "tell" message."""
    if not any(ch in string.ascii_uppercase for ch in command):
        return command
    tokens = command.split(" ")
    if len(tokens) < 2:
        return _lower(command)
    first = _lower(tokens[0])
    if matches_keyword(first, "tell"):
        semicolon = command.find(";")
        if semicolon < 0:
            return _lower(command)
        return _lower(command[:semicolon]) + command[semicolon:]
    if (
        matches_keyword(first, "set")
        and len(tokens) >= 3
        and matches_keyword(_lower(tokens[1]), "name")
    ):
        head = f"{first} {_lower(tokens[1])} "
        return head + command[len(head):]
    return _lower(command)


def normalize_command(raw):
    """Return the cleaned form of one typed command ("" if it is blank)."""
    return _fold_case(_squeeze(raw))


def pop_command(buffer):
    """Take the next non-blank command from a RingBuffer, or None if none is left."""
    separator = ord(CMDSEP)
    while True:
        while buffer and chr(buffer.peek()) in _SPACE:
            buffer.get()
        if not buffer:
            return None
        raw = bytearray()
        while (ch := buffer.get()) != separator:
            raw.append(ch)
        command = normalize_command(raw.decode("latin-1"))
        if command:
            return command