"""Key binding configuration: loading and resolution against defaults."""
from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from os import PathLike
from types import MappingProxyType

from vgtimer import TimerKind

from vgtimer_triggers.actions import ResetAllAndStart, ResetTimer, Stop, TriggerAction
from vgtimer_triggers.chords import ChordError, parse_chord

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "vgtimer.json"

# Config key -> action. Order is resolution order, which is also the order
# actions fire in when one chord is bound to several of them.
BINDING_ACTIONS: dict[str, TriggerAction] = {
    "reset": ResetAllAndStart(),
    "stop": Stop(),
    "green": ResetTimer(TimerKind.GREEN),
    "break": ResetTimer(TimerKind.BREAK),
    "segment": ResetTimer(TimerKind.SEGMENT),
    "blue": ResetTimer(TimerKind.BLUE),
}

DEFAULT_BINDINGS: dict[str, str] = {
    "reset": "ctrl+f9",
    "stop": "ctrl+f10",
    "green": "8",
    "break": "9",
    "segment": "0",
    "blue": "-",
}


@dataclass(frozen=True)
class Bindings:
    """Resolved chord -> actions table.

    Both tables are copied into read-only views on construction.

    Attributes:
        chords: Canonical chord per config key.
        table: Actions fired by each canonical chord, in resolution order.
    """

    chords: Mapping[str, str] = field(default_factory=dict)
    table: Mapping[str, tuple[TriggerAction, ...]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "chords", MappingProxyType(dict(self.chords)))
        object.__setattr__(self, "table", MappingProxyType(dict(self.table)))

    def resolve(self, identifier: str) -> tuple[TriggerAction, ...]:
        """Actions bound to *identifier*; empty when nothing is bound."""
        return self.table.get(identifier, ())

    def chord_for(self, name: str) -> str:
        return self.chords[name]


def load_config(path: str | PathLike[str] = DEFAULT_CONFIG_PATH) -> dict[str, str]:
    """Read raw bindings from a JSON file.

    A missing, unreadable or malformed file is not fatal: a warning is logged
    and an empty mapping returned, so every binding falls back to its default.
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning("Unable to read configuration from %s: %s", path, e)
        return {}
    if not isinstance(data, dict):
        logger.warning(
            "Configuration in %s must be a JSON object, got %s",
            path, type(data).__name__,
        )
        return {}
    return data


def resolve_bindings(raw: Mapping[str, object] | None = None) -> Bindings:
    """Resolve every action's chord, substituting defaults for bad entries."""
    if raw is None:
        raw = {}
    for name in raw:
        if name not in BINDING_ACTIONS:
            logger.warning("Ignoring unknown binding %r", name)

    chords: dict[str, str] = {}
    table: dict[str, tuple[TriggerAction, ...]] = {}
    for name, action in BINDING_ACTIONS.items():
        default = DEFAULT_BINDINGS[name]
        value = raw.get(name)
        try:
            if not isinstance(value, str):
                raise ChordError(f"expected a string, got {value!r}")
            chord = parse_chord(value)
        except ChordError as e:
            logger.warning(
                "Unable to parse %r for %s (%s), using default (%s)",
                value, name, e, default,
            )
            chord = parse_chord(default)
        chords[name] = chord
        if chord in table:
            logger.warning("Key %s is bound to more than one action", chord)
        table[chord] = table.get(chord, ()) + (action,)
    return Bindings(chords=chords, table=table)
