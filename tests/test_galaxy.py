import itertools

import pytest

from uniwar.constants import MAXBASES, MAXBSHIE, MAXPL, PRANGE, ErrorKind, PlayerFlag, Side, UniwarError
from uniwar.galaxy import Galaxy, ObjectType, Planet, Player, Starship, distance
from uniwar.rng import Dice


def make_galaxy(rows=20, cols=20, seed=1):
    return Galaxy(rows, cols, Dice(seed))


def test_distance_is_chessboard():
    assert distance(0, 0, 3, -5) == 5
    assert distance(4, 4, 4, 4) == 0


def test_create_places_bases_then_neutrals():
    galaxy = make_galaxy()
    galaxy.create(nstars=10, maxbases=2, nplanets=5)
    sides = [p.side for p in galaxy.planets]
    assert sides == [Side.FEDERATION] * 2 + [Side.EMPIRE] * 2 + [Side.NEUTRAL] * 5
    assert galaxy.stats.nport == 9
    assert galaxy.stats.planets[Side.NEUTRAL] == 5
    assert galaxy.stats.bases[Side.EMPIRE] == 2
    for planet in galaxy.planets[:4]:
        assert planet.is_base
        assert planet.shields == MAXBSHIE
        assert planet.known_by == planet.side
    for planet in galaxy.planets[4:]:
        assert not planet.is_base
        assert planet.known_by == Side.NEUTRAL


def test_create_map_matches_planets():
    galaxy = make_galaxy()
    galaxy.create(nstars=10, maxbases=2, nplanets=5)
    for planet in galaxy.planets:
        assert galaxy.object_at(planet.rpos, planet.cpos) == (ObjectType.PORT, planet)
    cells = [
        galaxy.object_at(r, c)[0]
        for r, c in itertools.product(range(1, 21), range(1, 21))
    ]
    assert cells.count(ObjectType.PORT) == 9
    assert 1 <= cells.count(ObjectType.STAR) <= 10


def test_create_defaults_bases():
    galaxy = make_galaxy(100, 100, 7)
    galaxy.create()
    assert galaxy.stats.bases[Side.FEDERATION] == MAXBASES
    assert len(galaxy.planets) == galaxy.stats.nport


def test_create_crowded_raises():
    galaxy = make_galaxy(3, 3)
    with pytest.raises(UniwarError) as info:
        galaxy.create(nstars=0, maxbases=5, nplanets=0)
    assert info.value.kind is ErrorKind.CROWDED


def test_object_at_outside_raises():
    galaxy = make_galaxy()
    with pytest.raises(IndexError):
        galaxy.object_at(21, 1)


def test_needscan_marks_ships_in_range():
    galaxy = make_galaxy(30, 30)
    near = Player(rpos=10, cpos=10)
    edge = Player(rpos=10, cpos=10 + PRANGE)
    far = Player(rpos=10, cpos=10 + PRANGE + 1)
    for pl in (near, edge, far):
        galaxy.add_player(pl)
    galaxy.needscan(10, 10)
    assert PlayerFlag.DOSCAN in near.flags
    assert PlayerFlag.DOSCAN in edge.flags
    assert PlayerFlag.DOSCAN not in far.flags


def test_unlist_clears_marks():
    galaxy = make_galaxy()
    galaxy.create(nstars=0, maxbases=1, nplanets=1)
    active = Player(ship=Starship("Excalibur", Side.FEDERATION, radio=True), flags=PlayerFlag.ACTIVE)
    waiting = Player(ship=Starship("Cobra", Side.EMPIRE, radio=True), side=Side.EMPIRE)
    galaxy.add_player(active)
    galaxy.add_player(waiting)
    for planet in galaxy.planets:
        planet.radio = True
    galaxy.unlist(ships=True, ports=False)
    assert active.ship.radio is False
    assert waiting.ship.radio is True
    assert all(p.radio for p in galaxy.planets)
    galaxy.unlist(ships=False, ports=True)
    assert not any(p.radio for p in galaxy.planets)


def test_newbaud_slowest_terminal_sets_increment():
    galaxy = make_galaxy()
    fed = Player(side=Side.FEDERATION)
    emp = Player(side=Side.EMPIRE)
    galaxy.add_player(fed)
    galaxy.add_player(emp)
    galaxy.newbaud(fed, 300)
    assert galaxy.baudincr == 2
    assert fed.baudrate == 300
    galaxy.newbaud(emp, 300)
    assert galaxy.baudincr == 0
    assert galaxy.stats.baud300 == 2


def test_newbaud_fast_terminal():
    galaxy = make_galaxy()
    pl = Player()
    galaxy.add_player(pl)
    galaxy.newbaud(pl, 9600)
    assert galaxy.baudincr == 0
    assert galaxy.stats.baud300 == 0 and galaxy.stats.baud1200 == 0


def test_add_player_limit():
    galaxy = make_galaxy()
    for _ in range(MAXPL):
        galaxy.add_player(Player())
    with pytest.raises(UniwarError) as info:
        galaxy.add_player(Player())
    assert info.value.kind is ErrorKind.CROWDED


def test_remove_player_clears_map():
    galaxy = make_galaxy()
    pl = Player(rpos=5, cpos=5, flags=PlayerFlag.ACTIVE)
    galaxy.add_player(pl)
    assert galaxy.object_at(5, 5) == (ObjectType.SHIP, pl)
    assert list(galaxy.active_players()) == [pl]
    galaxy.remove_player(pl)
    assert galaxy.object_at(5, 5)[0] is ObjectType.EMPTY
    assert galaxy.stats.ships[Side.FEDERATION] == 0
    with pytest.raises(ValueError):
        galaxy.remove_player(pl)


def test_planet_base_property():
    assert Planet(1, 1, builds=5).is_base
    assert not Planet(1, 1).is_base