"""System factory for the trigger queue."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from vgtimer_triggers.actions import TriggerAction
from vgtimer_triggers.queue import TriggerQueue

if TYPE_CHECKING:
    from vgtimer import TickContext, TimerGroup


def make_trigger_system(
    queue: TriggerQueue,
    on_apply: Callable[[TriggerAction], None] | None = None,
) -> Callable[[TimerGroup, TickContext], None]:
    """Return a system that drains the trigger queue each tick.

    Add it before the update system so triggers land before timers are read.
    ``on_apply(action)`` fires for every applied action.
    """

    def trigger_system(group: TimerGroup, ctx: TickContext) -> None:
        for action in queue.drain(group, ctx.now):
            if on_apply is not None:
                on_apply(action)

    return trigger_system
