"""Trigger actions and how they apply to a TimerGroup."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from vgtimer import TimerKind

if TYPE_CHECKING:
    from vgtimer import TimerGroup
    from vgtimer.types import Millis

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResetAllAndStart:
    """Reset every timer and start the group."""


@dataclass(frozen=True)
class Stop:
    """Stop the group without touching any timer."""


@dataclass(frozen=True)
class ResetTimer:
    """Reset one timer; the group keeps its running state."""
    kind: TimerKind


TriggerAction = ResetAllAndStart | Stop | ResetTimer


def apply_action(
    group: TimerGroup, action: TriggerAction, now: Millis | None = None,
) -> None:
    """Perform *action* on *group*, resetting against *now* when given."""
    if isinstance(action, ResetAllAndStart):
        logger.info("Key pressed: reset all")
        group.reset_all_and_start(now)
    elif isinstance(action, Stop):
        logger.info("Key pressed: stop")
        group.stop()
    elif isinstance(action, ResetTimer):
        logger.info("Key pressed: reset timer %s", action.kind)
        group.reset_one(action.kind, now)
    else:
        raise TypeError(f"Unknown trigger action {type(action).__qualname__}")
