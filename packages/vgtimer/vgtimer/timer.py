"""PhaseTimer - one recurring event and the start of its current cycle."""
from __future__ import annotations

from dataclasses import dataclass

from vgtimer.kinds import PhaseSpec, TimerKind
from vgtimer.types import Millis, TimerNotStartedError


@dataclass
class PhaseTimer:
    """A recurring event tracked by the start instant of its current cycle.

    All queries take ``now`` explicitly so that every value computed within
    one tick is measured against the same instant. Remaining times are signed:
    a negative value means the boundary has already passed in this cycle.
    """

    kind: TimerKind
    spec: PhaseSpec
    next_activation: Millis | None = None

    def _start(self) -> Millis:
        if self.next_activation is None:
            raise TimerNotStartedError(self.kind)
        return self.next_activation

    def time_to_activation(self, now: Millis) -> Millis:
        """Remaining time until the next start of this event."""
        return self._start() - now

    def time_to_strike(self, now: Millis) -> Millis:
        """Remaining time until the strike of the current cycle."""
        return self._start() + self.spec.pre_strike_delay - now

    def reset(self, now: Millis) -> None:
        """Present the timer as having just finished its settle phase.

        The start is pulled back by ``post_strike_delay`` so the next rollover
        check moves straight on to a fresh cycle instead of replaying the
        settle phase.
        """
        self.next_activation = now - self.spec.post_strike_delay

    def advance_if_elapsed(self, now: Millis) -> bool:
        """Roll over by exactly one cycle once the current one has fully elapsed.

        Advances at most one cycle per call. A timer that fell several cycles
        behind catches up one cycle per call.
        """
        start = self._start()
        spec = self.spec
        if now > start + spec.pre_strike_delay + spec.post_strike_delay:
            self.next_activation = (
                start + spec.interval + spec.pre_strike_delay + spec.post_strike_delay
            )
            return True
        return False
