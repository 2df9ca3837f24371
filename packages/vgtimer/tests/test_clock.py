"""Tests for the millisecond time sources."""
import time

import pytest
from vgtimer import ManualClock, SystemClock


def test_system_clock_is_epoch_millis():
    before = time.time_ns() // 1_000_000
    now = SystemClock().now_ms()
    after = time.time_ns() // 1_000_000
    assert isinstance(now, int)
    assert before <= now <= after


def test_system_clock_non_decreasing():
    clock = SystemClock()
    readings = [clock.now_ms() for _ in range(100)]
    assert readings == sorted(readings)


def test_manual_clock_starts_where_told():
    assert ManualClock().now_ms() == 0
    assert ManualClock(5_000).now_ms() == 5_000


def test_manual_clock_advance_and_set():
    clock = ManualClock()
    assert clock.advance(100) == 100
    clock.set(250)
    assert clock.now_ms() == 250


def test_manual_clock_never_goes_backwards():
    clock = ManualClock(1_000)
    with pytest.raises(ValueError):
        clock.set(999)
    with pytest.raises(ValueError):
        clock.advance(-1)
    assert clock.now_ms() == 1_000
