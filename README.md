# uniwar

Building blocks for a multi-player, real-time space war game. Federation
and Empire ships fight across a grid galaxy of stars, planets and bases.

This is a library with no dependencies outside the standard library. It
has no command-line entry point.

## Modules

- `uniwar.constants`: game limits, screen layout sizes and control
  characters. It also defines the flag sets `Side`, `Target` and
  `PlayerFlag`, and `Device` with `device_info()` for each device's name
  and damage limit. `fleet_names()` gives the ships of a side, and
  `ErrorKind` with `error_message()` gives the error texts. `UniwarError`
  is the exception that carries an `ErrorKind`.
- `uniwar.rng`: `Dice` is a random number source. It is seeded from the
  clock unless a seed is given. `rnd()` returns a 15-bit value and
  `rndrange(a, b)` returns a value in the inclusive range.
- `uniwar.ringbuffer`: `RingBuffer` is a bounded FIFO of bytes.
  - Writing: `put` and `put_command`. `put_command` appends the `/`
    command separator.
  - Reading: `get`, `get_short`, `get_long` and `get_string`. Shorts and
    longs are little-endian. `get_string` reads up to a NUL byte.
  - It raises `BufferFull` and `BufferEmpty`.
- `uniwar.commands`: `normalize_command` collapses whitespace and spaces
  out `;`. It lower-cases a command, but leaves a `set name` name and a
  `tell` message as typed. `pop_command` takes the next non-blank command
  from a `RingBuffer`. `matches_keyword` tests for an abbreviation.
- `uniwar.coords`: `format_coords` gives absolute (`@r-c`) and/or relative
  (` +dr,+dc`) position text.
- `uniwar.galaxy`: `Galaxy` holds the map, its `Planet`s and its
  `Player`s. Each `Player` has a `Starship`. The galaxy also keeps `Stats`.
  - `create()` places stars, bases and neutral planets. It raises
    `UniwarError(ErrorKind.CROWDED)` when no room can be found.
  - `object_at()` looks up a sector.
  - `add_player()` and `remove_player()` bring players in and out of the
    game. `active_players()` yields the players who have left the pregame.
  - `needscan()` flags the ships near a change.
  - `unlist()` clears list marks.
  - `newbaud()` records line speeds and sets `baudincr`.
  - `distance()` counts moves between two sectors, with diagonals counting
    as one.
- `uniwar.damage`: `repair` repairs a player's devices. `damage_report`
  describes the damage to one device or to all of them.
- `uniwar.scoring`: `Scoreboard` credits points to players and sides by
  `ScoreKind`. `HitKind` says what delivered a hit.
- `uniwar.scorefile`: `ScoreRecord` is one player's history, stored in a
  fixed-size binary layout. `ScoreFile` works on the file of those records.
  - `lookup`, `store` and `update` read and write records.
  - `lock`, `unlock` and the `locked()` context manager take and release
    a lock file that holds the owner's pid.
- `uniwar.protocol`: framing of the messages that pass between the daemon
  and players.
  - Daemon messages: `encode_daemon_message` and `decode_daemon_messages`.
  - Player messages: `encode_player_message`, `encode_hello` and
    `decode_player_messages`.
  - `split_commands` turns buffered commands into NUL-terminated payloads.
  - `MessageType` holds the message codes.
  - `PlayerChannel` writes to a stream and limits the number of
    unacknowledged messages.
- `uniwar.radio`: `tell` works out who receives a message sent between
  ships. It returns a `Transmission` that holds the lines to deliver, the
  ships that can't be raised, and any reply to the sender. It does not
  send anything itself.
- `uniwar.listing`: text helpers for the list command.
  - `resolve_sides` turns friendly and enemy into explicit sides.
  - `summary` gives counts of ships, bases and planets.
  - `known`, `noun_case` and `nothing_found` build the "nothing found"
    texts. `NounCase` names the kinds of object.
- `uniwar.textwin`: `TextWindow` is a word-wrapping text grid. When it
  reaches its last line it can stop at a `--more--` pager, then wraps to
  the top. `format_error` formats an error for display.
- `uniwar.scanview`: `ScanView` draws the short-range scan map from a scan
  message. It adds coordinate labels, galaxy barriers and `!` warning
  marks (`WarnMark`), and `render()` returns the map as strings.
- `uniwar.pointsview`: `format_points` reads a points message and returns
  the score table as text.

## Example

```python
from uniwar.rng import Dice
from uniwar.galaxy import Galaxy
from uniwar.coords import format_coords

galaxy = Galaxy(rows=100, cols=100, dice=Dice(seed=1))
galaxy.create(nstars=-1, maxbases=-1, nplanets=-1)
print(galaxy.object_at(1, 1))        # (ObjectType.<kind>, object or None)
print(format_coords(12, 40, 10, 45, absolute=True, relative=True, short=False))
# @12-40 +2,-5
```

## What it does not do

The package has none of the following:

- a daemon process or main game loop;
- a terminal client, curses screen or keyboard handling;
- pipes or FIFOs between processes.

Weapons and movement are not implemented either: there are no phasers,
torpedoes, novas or ship movement, and no command dispatcher beyond
cleaning up command text. The modules cover the state, bookkeeping,
message formats and view rendering that such programs are built on.

## Running the tests

```
pip install -e .[test]
pytest
```