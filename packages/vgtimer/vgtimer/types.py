"""Shared type aliases and errors for the timer core."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

Millis = int


@dataclass(frozen=True, slots=True)
class TickContext:
    tick_number: int
    now: Millis
    request_stop: Callable[[], None]


class TimerNotStartedError(RuntimeError):
    """Raised when a timer is read or advanced before its first reset."""

    def __init__(self, kind: object) -> None:
        self.kind = kind
        super().__init__(f"Timer {kind} has not been reset yet")


if TYPE_CHECKING:
    from vgtimer.group import TimerGroup

System = Callable[["TimerGroup", TickContext], None]
