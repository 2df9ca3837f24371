"""Millisecond time sources."""

import time
from typing import Protocol

from vgtimer.types import Millis


class TimeSource(Protocol):
    def now_ms(self) -> Millis: ...


class SystemClock:
    """Wall-clock time in whole milliseconds since the epoch."""

    def now_ms(self) -> Millis:
        return time.time_ns() // 1_000_000


class ManualClock:
    """Clock that only moves when told to. Never runs backwards."""

    def __init__(self, start_ms: Millis = 0) -> None:
        self._now = start_ms

    def now_ms(self) -> Millis:
        return self._now

    def set(self, ms: Millis) -> None:
        if ms < self._now:
            raise ValueError(f"clock cannot go backwards ({ms} < {self._now})")
        self._now = ms

    def advance(self, ms: Millis) -> Millis:
        if ms < 0:
            raise ValueError("advance amount must be non-negative")
        self._now += ms
        return self._now
