"""Engine - fixed-cadence polling loop that drives a TimerGroup."""
from __future__ import annotations

import time
from typing import Callable

from vgtimer.group import Readout, TimerGroup
from vgtimer.types import System, TickContext


class Engine:
    def __init__(self, group: TimerGroup, tps: int = 10) -> None:
        if tps <= 0:
            raise ValueError("tps must be positive")
        self._group = group
        self._tps = tps
        self._dt = 1.0 / tps
        self._tick_number = 0
        self._systems: list[System] = []
        self._start_hooks: list[Callable[[TimerGroup], None]] = []
        self._stop_hooks: list[Callable[[TimerGroup], None]] = []
        self._stop_requested: bool = False

    @property
    def group(self) -> TimerGroup:
        return self._group

    @property
    def tps(self) -> int:
        return self._tps

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def tick_number(self) -> int:
        return self._tick_number

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def on_start(self, hook: Callable[[TimerGroup], None]) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: Callable[[TimerGroup], None]) -> None:
        self._stop_hooks.append(hook)

    def request_stop(self) -> None:
        self._stop_requested = True

    def _tick(self) -> None:
        self._tick_number += 1
        ctx = TickContext(
            tick_number=self._tick_number,
            now=self._group.clock.now_ms(),
            request_stop=self.request_stop,
        )
        for system in self._systems:
            system(self._group, ctx)
            if self._stop_requested:
                break

    def step(self) -> None:
        self._stop_requested = False
        self._tick()

    def run(self, n: int) -> None:
        self._stop_requested = False
        for hook in self._start_hooks:
            hook(self._group)

        for _ in range(n):
            self._tick()
            if self._stop_requested:
                break

        for hook in self._stop_hooks:
            hook(self._group)

    def run_forever(self) -> None:
        self._stop_requested = False
        for hook in self._start_hooks:
            hook(self._group)

        dt = self._dt
        while not self._stop_requested:
            start = time.monotonic()
            self._tick()
            if self._stop_requested:
                break
            elapsed = time.monotonic() - start
            sleep_time = dt - elapsed
            if sleep_time > 0:
                time.sleep(sleep_time)

        for hook in self._stop_hooks:
            hook(self._group)


def make_update_system() -> Callable[[TimerGroup, TickContext], None]:
    """Return a system that rolls timers over against the tick's clock read."""

    def update_system(group: TimerGroup, ctx: TickContext) -> None:
        group.update(ctx.now)

    return update_system


def make_readout_system(
    on_readout: Callable[[list[Readout]], None],
) -> Callable[[TimerGroup, TickContext], None]:
    """Return a system that hands current readouts to a renderer.

    Nothing is reported while the group is stopped, so a display keeps
    showing the values it had when the timers stopped.
    """

    def readout_system(group: TimerGroup, ctx: TickContext) -> None:
        if not group.is_running:
            return
        on_readout(group.readouts(ctx.now))

    return readout_system
