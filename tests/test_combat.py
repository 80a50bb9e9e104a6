import logging

from ghosthunt.engine.events import GameEvent
from ghosthunt.engine.turn import TurnEngine
from ghosthunt.level.grid import Point
from ghosthunt.level.tiles import TileType
from ghosthunt.settings import Settings


def test_five_hits_capture_a_ghost(engine):
    state = engine.state
    ghost = state.roster[0]
    assert ghost.pos == (10, 10)
    assert ghost.health == 100
    assert state.player.pos == (23, 16)

    # the ghost wanders next to the player, who steps onto it
    ghost.move_to(22, 16)
    engine.move_left()
    assert (ghost.health, state.player.energy) == (80, 90)

    # further attacks while pressing against the bottom wall
    healths = [ghost.health]
    for _ in range(4):
        engine.move_down()
        healths.append(ghost.health)

    assert healths == [80, 60, 40, 20, 0]
    assert state.player.energy == 50
    assert state.roster[0] is None
    assert state.player.carrying_ghost is True
    assert len(state.roster) == 3


def test_hit_without_energy_changes_nothing_but_still_cleans_up(engine):
    state = engine.state
    state.player.change_energy(-state.player.energy)
    target = state.roster[0]
    already_defeated = state.roster[1]
    already_defeated.change_health(-already_defeated.health)

    engine.hit_ghost(target)

    assert target.health == 100
    assert state.player.energy == 0
    assert state.roster[0] is target
    assert state.roster[1] is None


def test_capture_emits_events(engine):
    events = []
    engine.add_listener(lambda e, eng: events.append(e))
    ghost = engine.state.roster[2]
    ghost.change_health(-80)
    engine.hit_ghost(ghost)
    assert events == [GameEvent.GHOST_HIT, GameEvent.GHOST_CAPTURED]
    assert engine.state.player.carrying_ghost is True


def test_last_capture_releases_ghosts_from_breaches(engine):
    state = engine.state
    for i in (1, 2, 3):
        state.roster.clear(i)
    last = state.roster[0]
    last.change_health(-80)

    engine.hit_ghost(last)

    assert state.player.carrying_ghost is True
    assert [g.pos for g in state.roster.slots] == [(5, 3), (11, 15), (22, 4), (28, 9)]
    assert all(g.health == 100 for g in state.roster)
    assert state.grid.count(TileType.BREACH) == 0
    assert state.grid.get(5, 3) is TileType.FLOOR1


def test_sealed_breaches_do_not_release_ghosts(engine):
    state = engine.state
    state.grid.set(5, 3, TileType.FLOOR2)
    state.grid.set(11, 15, TileType.FLOOR2)
    for i in (1, 2, 3):
        state.roster.clear(i)
    last = state.roster[0]
    last.change_health(-80)

    engine.hit_ghost(last)

    assert [g.pos if g else None for g in state.roster.slots] == [(22, 4), (28, 9), None, None]


def test_respawn_overflow_leaves_extra_breaches_active(scripted_rng, caplog):
    settings = Settings(roster_capacity=2, ghost_starts=(Point(10, 10), Point(23, 4)))
    eng = TurnEngine(settings=settings, rng=scripted_rng())
    eng.start_game()
    state = eng.state
    state.roster.clear(1)
    last = state.roster[0]
    last.change_health(-80)

    with caplog.at_level(logging.WARNING, logger="ghosthunt.engine.turn"):
        eng.hit_ghost(last)

    assert state.roster.capacity == 2
    assert [g.pos for g in state.roster] == [(5, 3), (11, 15)]
    assert state.grid.find(TileType.BREACH) == [Point(22, 4), Point(28, 9)]
    assert "Roster full" in caplog.text


def test_damage_and_cost_follow_settings(scripted_rng):
    eng = TurnEngine(settings=Settings(energy_cost=25, ghost_damage=50), rng=scripted_rng())
    eng.start_game()
    ghost = eng.state.roster[0]
    eng.hit_ghost(ghost)
    assert ghost.health == 50
    assert eng.state.player.energy == 75
