"""System-wide hotkeys via pynput, feeding the same trigger queue.

The listener runs on its own thread; the queue hands triggers over to the
tick loop, which is the only place the timer group is driven.
"""
from __future__ import annotations

import logging

from vgtimer_triggers import TriggerQueue

logger = logging.getLogger(__name__)

# Canonical modifier/key names -> pynput hotkey syntax.
_PYNPUT_NAMES = {
    "ctrl": "<ctrl>",
    "shift": "<shift>",
    "alt": "<alt>",
    "meta": "<cmd>",
    "escape": "<esc>",
    "return": "<enter>",
    "pageup": "<page_up>",
    "pagedown": "<page_down>",
    "printscreen": "<print_screen>",
    "scrolllock": "<scroll_lock>",
    "capslock": "<caps_lock>",
    "numlock": "<num_lock>",
}


def to_pynput(chord: str) -> str:
    parts = []
    for part in chord.split("+"):
        if part in _PYNPUT_NAMES:
            parts.append(_PYNPUT_NAMES[part])
        elif len(part) > 1:
            parts.append(f"<{part}>")
        else:
            parts.append(part)
    return "+".join(parts)


def start_global_hotkeys(queue: TriggerQueue):
    """Start a pynput listener for every bound chord. Returns the listener."""
    from pynput import keyboard

    mapping = {}
    for chord in queue.bindings.table:
        combo = to_pynput(chord)
        mapping[combo] = lambda chord=chord: queue.submit(chord)
        logger.debug("Global hotkey %s -> %s", combo, chord)
    listener = keyboard.GlobalHotKeys(mapping)
    listener.start()
    logger.info("Global hotkeys registered: %s", ", ".join(sorted(mapping)))
    return listener
