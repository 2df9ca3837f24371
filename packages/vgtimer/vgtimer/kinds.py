"""Timer kinds and their phase configuration."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from vgtimer.types import Millis


class TimerKind(Enum):
    GREEN = "green"
    BREAK = "break"
    SEGMENT = "segment"
    BLUE = "blue"

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class PhaseSpec:
    """Fixed phase durations of one recurring event, in milliseconds.

    Attributes:
        interval: Idle gap between the end of one cycle and the start of the next.
        pre_strike_delay: Time from the start of a cycle to the strike.
        post_strike_delay: Time from the strike to the end of the cycle.
        label: Display label for the time until the cycle starts.
        strike_label: Display label for the time until the strike.
    """

    interval: Millis
    pre_strike_delay: Millis = 0
    post_strike_delay: Millis = 0
    label: str = ""
    strike_label: str = "Strikes in"

    def __post_init__(self) -> None:
        for name in ("interval", "pre_strike_delay", "post_strike_delay"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative")

    @classmethod
    def from_seconds(
        cls,
        interval: int,
        pre_strike_delay: int = 0,
        post_strike_delay: int = 0,
        **labels: str,
    ) -> PhaseSpec:
        return cls(
            interval * 1000,
            pre_strike_delay * 1000,
            post_strike_delay * 1000,
            **labels,
        )

    @property
    def cycle_length(self) -> Millis:
        return self.interval + self.pre_strike_delay + self.post_strike_delay

    @property
    def has_strike(self) -> bool:
        return self.pre_strike_delay > 0


# Insertion order is display order.
DEFAULT_SPECS: dict[TimerKind, PhaseSpec] = {
    TimerKind.GREEN: PhaseSpec.from_seconds(8, 7, 0, label="Green circle"),
    TimerKind.BREAK: PhaseSpec.from_seconds(30, 0, 2, label="Break"),
    TimerKind.SEGMENT: PhaseSpec.from_seconds(20, 0, 0, label="Next segment"),
    TimerKind.BLUE: PhaseSpec.from_seconds(9, 0, 0, label="Blue circles"),
}
