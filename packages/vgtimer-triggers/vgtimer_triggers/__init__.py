"""vgtimer-triggers - Key-chord triggers routed into a TimerGroup."""
from __future__ import annotations

from vgtimer_triggers.actions import (
    ResetAllAndStart,
    ResetTimer,
    Stop,
    TriggerAction,
    apply_action,
)
from vgtimer_triggers.chords import ChordError, chord_from_parts, parse_chord
from vgtimer_triggers.config import (
    DEFAULT_BINDINGS,
    Bindings,
    load_config,
    resolve_bindings,
)
from vgtimer_triggers.queue import TriggerQueue
from vgtimer_triggers.system import make_trigger_system

__all__ = [
    "ResetAllAndStart",
    "Stop",
    "ResetTimer",
    "TriggerAction",
    "apply_action",
    "ChordError",
    "parse_chord",
    "chord_from_parts",
    "DEFAULT_BINDINGS",
    "Bindings",
    "load_config",
    "resolve_bindings",
    "TriggerQueue",
    "make_trigger_system",
]
