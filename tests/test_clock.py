"""Tests for cycle clock advancement, wrap-around and speed changes."""

import pytest
from tick_leaving.clock import CycleClock


def test_clock_initialization():
    """Clock starts at tick 0, multiplier 1, with the given direction."""
    clock = CycleClock(max_ticks=100, growing=False)
    assert clock.tick == 0
    assert clock.multiplier == 1
    assert clock.growing is False
    assert clock.max_ticks == 100
    assert clock.tick_ratio == 0.0


def test_invalid_max_ticks_raises():
    with pytest.raises(ValueError):
        CycleClock(max_ticks=0)


def test_advance_increments_by_multiplier():
    clock = CycleClock(max_ticks=100)
    assert clock.advance() == 1
    clock.set_speed(4)
    assert clock.tick == 4
    assert clock.advance() == 8


def test_tick_ratio():
    clock = CycleClock(max_ticks=200)
    for _ in range(50):
        clock.advance()
    assert clock.tick_ratio == 0.25


def test_wrap_toggles_growing_once():
    """Exactly one flip over a full cycle, tick resets and never exceeds max."""
    clock = CycleClock(max_ticks=1000, growing=True)
    flips = 0
    previous = clock.growing
    for _ in range(1000):
        clock.advance()
        assert 0 <= clock.tick < clock.max_ticks
        if clock.growing != previous:
            flips += 1
            assert clock.tick == 0
            previous = clock.growing
    assert flips == 1
    assert clock.growing is False


def test_tick_ratio_stays_below_one():
    clock = CycleClock(max_ticks=10)
    clock.set_speed(3)
    for _ in range(50):
        clock.advance()
        assert 0.0 <= clock.tick_ratio < 1.0


def test_reset_keeps_direction_and_speed():
    clock = CycleClock(max_ticks=100, growing=False)
    clock.set_speed(2)
    clock.advance()
    clock.reset()
    assert clock.tick == 0
    assert clock.growing is False
    assert clock.multiplier == 2


def test_toggle_growing_resets_tick():
    clock = CycleClock(max_ticks=100)
    clock.advance()
    clock.toggle_growing()
    assert clock.growing is False
    assert clock.tick == 0


def test_set_speed_rounds_up_to_next_multiple():
    clock = CycleClock(max_ticks=10000)
    for _ in range(7):
        clock.advance()
    assert clock.tick == 7
    clock.set_speed(5)
    assert clock.tick == 10


def test_set_speed_on_multiple_keeps_tick():
    clock = CycleClock(max_ticks=10000)
    for _ in range(10):
        clock.advance()
    clock.set_speed(5)
    assert clock.tick == 10


def test_lowering_speed_keeps_tick():
    clock = CycleClock(max_ticks=10000)
    clock.set_speed(5)
    clock.advance()
    clock.advance()
    clock.set_speed(1)
    assert clock.tick == 10
    assert clock.multiplier == 1


def test_set_speed_rounding_past_max_wraps():
    clock = CycleClock(max_ticks=10, growing=True)
    for _ in range(9):
        clock.advance()
    clock.set_speed(4)
    assert clock.tick == 0
    assert clock.growing is False


@pytest.mark.parametrize("bad", [0, -2, 1.5, True])
def test_set_speed_rejects_non_positive_integers(bad):
    clock = CycleClock(max_ticks=100)
    with pytest.raises(ValueError):
        clock.set_speed(bad)
