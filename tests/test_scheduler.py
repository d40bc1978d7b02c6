"""Tests for TickScheduler."""

import pytest

from gridsnake.constants import DOWN, RIGHT, TICK_MS
from gridsnake.engine import GameEngine
from gridsnake.scheduler import TickScheduler


def test_idle_until_started():
    engine = GameEngine(seed=0)
    scheduler = TickScheduler(engine)
    assert scheduler.advance(5 * TICK_MS) == 0
    assert scheduler.running is False
    assert engine.get_state().snake == ((10, 10),)


def test_fires_once_per_period():
    engine = GameEngine(snake=[(2, 2)], direction=RIGHT, food=(0, 10))
    scheduler = TickScheduler(engine)

    assert scheduler.advance(TICK_MS - 1) == 0
    assert scheduler.running is True
    assert scheduler.advance(1) == 1
    assert engine.get_state().head == (3, 2)

    assert scheduler.advance(3 * TICK_MS) == 3
    assert engine.get_state().head == (6, 2)


def test_stops_firing_on_game_over():
    engine = GameEngine(snake=[(18, 10)], direction=RIGHT, food=(0, 0))
    scheduler = TickScheduler(engine)

    assert scheduler.advance(10 * TICK_MS) == 2
    state = engine.get_state()
    assert state.game_over is True
    assert state.head == (19, 10)
    assert scheduler.running is False


def test_restart_waits_full_period():
    engine = GameEngine(seed=4, snake=[(18, 10)], direction=RIGHT, food=(0, 0))
    scheduler = TickScheduler(engine)
    scheduler.advance(10 * TICK_MS)
    assert scheduler.running is False

    engine.reset()
    assert scheduler.advance(TICK_MS) == 0
    engine.steer(DOWN)
    assert scheduler.advance(TICK_MS - 1) == 0
    assert scheduler.running is True
    assert scheduler.advance(1) == 1
    assert engine.get_state().head == (10, 11)


def test_reset_discards_elapsed_time_within_one_frame():
    """A reset and a new first move between two advances start a fresh period."""
    engine = GameEngine(seed=5, snake=[(2, 2)], direction=RIGHT, food=(0, 10))
    scheduler = TickScheduler(engine)
    assert scheduler.advance(TICK_MS - 10) == 0

    engine.reset()
    engine.steer(DOWN)
    assert scheduler.advance(10) == 0
    assert engine.get_state().snake == ((10, 10),)

    assert scheduler.advance(TICK_MS - 10) == 1
    assert engine.get_state().head == (10, 11)


def test_rejects_non_positive_period():
    with pytest.raises(ValueError):
        TickScheduler(GameEngine(seed=0), period_ms=0)
