"""TimerGroup - the fixed set of timers and the run/stop state machine."""
from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum

from vgtimer.clock import SystemClock, TimeSource
from vgtimer.kinds import DEFAULT_SPECS, PhaseSpec, TimerKind
from vgtimer.timer import PhaseTimer
from vgtimer.types import Millis

logger = logging.getLogger(__name__)


class GroupState(Enum):
    STOPPED = "stopped"
    RUNNING = "running"


@dataclass(frozen=True)
class Readout:
    """Remaining times of one timer, measured at a single instant."""

    kind: TimerKind
    label: str
    to_activation: Millis
    strike_label: str | None = None
    to_strike: Millis | None = None


class TimerGroup:
    """Owns every timer plus the global running flag.

    The set of timers is fixed at construction. Every operation takes the
    group lock, so triggers delivered from another thread are serialized
    against the polling tick.
    """

    def __init__(
        self,
        specs: Mapping[TimerKind, PhaseSpec] | None = None,
        clock: TimeSource | None = None,
    ) -> None:
        if specs is None:
            specs = DEFAULT_SPECS
        self._timers: dict[TimerKind, PhaseTimer] = {
            kind: PhaseTimer(kind, spec) for kind, spec in specs.items()
        }
        self._clock: TimeSource = clock if clock is not None else SystemClock()
        self._state = GroupState.STOPPED
        self._lock = threading.RLock()

    @property
    def clock(self) -> TimeSource:
        return self._clock

    @property
    def state(self) -> GroupState:
        with self._lock:
            return self._state

    @property
    def is_running(self) -> bool:
        return self.state is GroupState.RUNNING

    def kinds(self) -> list[TimerKind]:
        return list(self._timers)

    def _timer(self, kind: TimerKind) -> PhaseTimer:
        try:
            return self._timers[kind]
        except KeyError:
            raise KeyError(f"No timer of kind {kind} in this group") from None

    def spec(self, kind: TimerKind) -> PhaseSpec:
        return self._timer(kind).spec

    def next_activation(self, kind: TimerKind) -> Millis | None:
        """Start of the current cycle of *kind*; None before its first reset."""
        with self._lock:
            return self._timer(kind).next_activation

    def reset_all_and_start(self, now: Millis | None = None) -> None:
        """Restart every timer from a fresh cycle and start running."""
        with self._lock:
            if now is None:
                now = self._clock.now_ms()
            for timer in self._timers.values():
                timer.reset(now)
            self._state = GroupState.RUNNING
        logger.info("All timers reset and started")

    def stop(self) -> None:
        with self._lock:
            if self._state is GroupState.STOPPED:
                return
            self._state = GroupState.STOPPED
        logger.info("Timers stopped")

    def reset_one(self, kind: TimerKind, now: Millis | None = None) -> None:
        """Reset a single timer. Does not change the running state."""
        with self._lock:
            timer = self._timer(kind)
            if now is None:
                now = self._clock.now_ms()
            timer.reset(now)
        logger.info("Timer %s reset", kind)

    def update(self, now: Millis | None = None) -> list[TimerKind]:
        """Roll over every timer whose cycle has elapsed.

        A no-op while stopped. Returns the kinds that rolled over.
        """
        with self._lock:
            if self._state is not GroupState.RUNNING:
                return []
            if now is None:
                now = self._clock.now_ms()
            rolled = [
                kind
                for kind, timer in self._timers.items()
                if timer.advance_if_elapsed(now)
            ]
        for kind in rolled:
            logger.debug("Timer %s rolled over", kind)
        return rolled

    def readouts(self, now: Millis | None = None) -> list[Readout]:
        """Remaining times for every timer, in display order."""
        with self._lock:
            if now is None:
                now = self._clock.now_ms()
            result: list[Readout] = []
            for kind, timer in self._timers.items():
                spec = timer.spec
                if spec.has_strike:
                    result.append(Readout(
                        kind,
                        spec.label,
                        timer.time_to_activation(now),
                        spec.strike_label,
                        timer.time_to_strike(now),
                    ))
                else:
                    result.append(
                        Readout(kind, spec.label, timer.time_to_activation(now))
                    )
            return result
