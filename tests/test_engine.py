"""Tests for tick sequencing, pause semantics and cursor handling."""

import threading

import pytest

from game.duel.engine import DuelEngine

DUEL_AT_CLOSE_RANGE = [
    {"x": 100, "y": 300, "color": "red", "facing": 1, "projectile_color": "blue"},
    {"x": 140, "y": 300, "color": "blue", "facing": -1, "projectile_color": "green"},
]


# --- Initialization ---

def test_engine_defaults():
    engine = DuelEngine()
    assert engine.arena.width == 800
    assert engine.arena.height == 600
    assert engine.period_ms == 16
    assert engine.cursor is None
    assert engine.snapshot().tick == 0


def test_engine_rejects_non_positive_period():
    with pytest.raises(ValueError):
        DuelEngine(period_ms=0)


# --- step() ---

def test_step_advances_tick_and_moves_heroes():
    engine = DuelEngine()
    assert engine.step() is True
    snap = engine.snapshot()
    assert snap.tick == 1
    assert [h.y for h in snap.heroes] == [302, 302]


def test_projectile_fired_between_ticks_moves_on_next_tick():
    engine = DuelEngine()
    engine.commands.fire(0)
    assert engine.snapshot().projectiles[0].x == 115
    engine.step()
    assert engine.snapshot().projectiles[0].x == 120


def test_projectile_leaves_field_and_is_dropped():
    engine = DuelEngine()
    engine.commands.fire(0)
    # 115 -> 800 takes 137 ticks; x == 800 is already outside
    for _ in range(136):
        engine.step()
    assert engine.snapshot().projectiles[0].x == 795
    engine.step()
    assert engine.snapshot().projectiles == ()


def test_hit_scores_during_step():
    engine = DuelEngine(heroes=DUEL_AT_CLOSE_RANGE)
    engine.commands.fire(1)  # spawns at x=125 heading left

    engine.step()  # projectile x=120, heroes y=302: distance just over 20
    assert engine.snapshot().scores == (0, 0)
    assert engine.last_hits == []

    engine.step()  # projectile x=115, heroes y=304
    snap = engine.snapshot()
    assert snap.scores == (0, 1)
    assert snap.projectiles == ()
    assert engine.last_hits == [(1, 0)]


def test_score_never_decreases():
    engine = DuelEngine(heroes=DUEL_AT_CLOSE_RANGE)
    last = engine.snapshot().scores
    for i in range(300):
        if i % 7 == 0:
            engine.commands.fire(i % 2)
        engine.step()
        scores = engine.snapshot().scores
        assert all(now >= before for now, before in zip(scores, last))
        last = scores


# --- Pause ---

def test_paused_steps_change_nothing():
    engine = DuelEngine()
    engine.commands.fire(0)
    engine.commands.fire(1)
    engine.set_cursor(100, 300)
    engine.commands.set_running(False)
    before = engine.snapshot()

    for _ in range(50):
        assert engine.step() is False

    assert engine.snapshot() == before


def test_configure_applies_while_paused():
    engine = DuelEngine()
    engine.commands.set_running(False)
    engine.commands.configure(0, {"moving_speed": 10})
    engine.commands.set_running(True)
    engine.step()
    assert engine.snapshot().heroes[0].y == 310


def test_resume_continues_from_frozen_state():
    engine = DuelEngine()
    engine.step()
    engine.commands.set_running(False)
    engine.step()
    engine.commands.set_running(True)
    engine.step()
    snap = engine.snapshot()
    assert snap.tick == 2
    assert snap.heroes[0].y == 304


# --- Cursor ---

def test_cursor_drives_evasion():
    engine = DuelEngine()
    engine.set_cursor(110, 300)
    engine.step()
    snap = engine.snapshot()
    assert snap.heroes[0].direction == -1
    assert snap.heroes[0].y == 298
    # Hero 1 is far away and keeps patrolling
    assert snap.heroes[1].direction == 1
    assert snap.cursor == (110, 300)


def test_clear_cursor():
    engine = DuelEngine()
    engine.set_cursor(110, 300)
    engine.clear_cursor()
    assert engine.cursor is None
    engine.step()
    assert engine.snapshot().heroes[0].direction == 1


# --- Atomicity ---

def test_step_waits_for_lock_holder():
    engine = DuelEngine()
    done = threading.Event()

    def tick():
        engine.step()
        done.set()

    with engine.lock:
        worker = threading.Thread(target=tick)
        worker.start()
        assert not done.wait(0.05)
        assert engine.state.tick == 0

    worker.join(1.0)
    assert done.is_set()
    assert engine.state.tick == 1


# --- reset ---

def test_reset():
    engine = DuelEngine(heroes=DUEL_AT_CLOSE_RANGE)
    engine.commands.fire(1)
    engine.set_cursor(1, 1)
    for _ in range(5):
        engine.step()
    engine.reset()
    snap = engine.snapshot()
    assert snap.tick == 0
    assert snap.scores == (0, 0)
    assert snap.projectiles == ()
    assert snap.cursor is None
    assert engine.last_hits == []
