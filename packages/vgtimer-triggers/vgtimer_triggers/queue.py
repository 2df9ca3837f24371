"""TriggerQueue - thread-safe hand-off of triggers into the tick loop."""
from __future__ import annotations

import threading
from collections import deque
from typing import TYPE_CHECKING

from vgtimer_triggers.actions import TriggerAction, apply_action
from vgtimer_triggers.config import Bindings, resolve_bindings

if TYPE_CHECKING:
    from vgtimer import TimerGroup
    from vgtimer.types import Millis


class TriggerQueue:
    """Collects triggers from any thread; the tick loop drains and applies them.

    Triggers are applied in arrival order, before the timers are updated and
    read on the same tick.
    """

    def __init__(self, bindings: Bindings | None = None) -> None:
        self._bindings = bindings if bindings is not None else resolve_bindings()
        self._pending: deque[TriggerAction] = deque()
        self._lock = threading.Lock()

    @property
    def bindings(self) -> Bindings:
        return self._bindings

    def submit(self, identifier: str) -> bool:
        """Queue the actions bound to *identifier*.

        Unbound identifiers are ignored; returns whether anything was queued.
        """
        actions = self._bindings.resolve(identifier)
        if not actions:
            return False
        with self._lock:
            self._pending.extend(actions)
        return True

    def enqueue(self, action: TriggerAction) -> None:
        with self._lock:
            self._pending.append(action)

    def pending(self) -> int:
        with self._lock:
            return len(self._pending)

    def drain(
        self, group: TimerGroup, now: Millis | None = None,
    ) -> list[TriggerAction]:
        """Apply pending actions to *group* in order. Returns the applied ones.

        Actions are taken off one at a time; if one raises, the actions
        behind it stay queued for the next drain.
        """
        applied: list[TriggerAction] = []
        while True:
            with self._lock:
                if not self._pending:
                    break
                action = self._pending.popleft()
            apply_action(group, action, now)
            applied.append(action)
        return applied
