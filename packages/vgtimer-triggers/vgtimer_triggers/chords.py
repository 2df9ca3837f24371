"""Key-chord parsing into canonical trigger identifiers.

A chord is zero or more modifiers and exactly one key, separated by ``+`` or
whitespace: ``"ctrl+f9"``, ``"control F9"``, ``"MINUS"``. The canonical form
lists modifiers in a fixed order followed by the key name, all lower case,
joined with ``+`` (``"ctrl+f9"``, ``"-"``).
"""
from __future__ import annotations

import re
import string

MODIFIERS = ("ctrl", "shift", "alt", "meta")

_MODIFIER_ALIASES = {
    "ctrl": "ctrl",
    "control": "ctrl",
    "shift": "shift",
    "alt": "alt",
    "meta": "meta",
    "cmd": "meta",
    "super": "meta",
}

# Named keys mapped to the names a keyboard backend reports for them.
_KEY_ALIASES = {
    "minus": "-",
    "equals": "=",
    "comma": ",",
    "period": ".",
    "slash": "/",
    "backslash": "\\",
    "semicolon": ";",
    "quote": "'",
    "backquote": "`",
    "open_bracket": "[",
    "close_bracket": "]",
    "enter": "return",
    "esc": "escape",
    "page_up": "pageup",
    "page_down": "pagedown",
}

_NAMED_KEYS = frozenset({
    "space", "tab", "return", "escape", "backspace", "insert", "delete",
    "home", "end", "pageup", "pagedown", "up", "down", "left", "right",
    "pause", "printscreen", "scrolllock", "capslock", "numlock",
})

_PUNCTUATION = frozenset(r"-=,./\;'`[]")

_FUNCTION_KEY = re.compile(r"f([1-9]|1[0-9]|2[0-4])")

_SEPARATOR = re.compile(r"[+\s]+")


class ChordError(ValueError):
    """Raised when a chord string cannot be parsed."""


def _canonical_key(token: str) -> str | None:
    key = _KEY_ALIASES.get(token, token)
    if len(key) == 1 and (key in string.ascii_lowercase or key in string.digits):
        return key
    if key in _PUNCTUATION or key in _NAMED_KEYS:
        return key
    if _FUNCTION_KEY.fullmatch(key):
        return key
    return None


def parse_chord(text: str | None) -> str:
    """Parse *text* into a canonical chord identifier. Raises ChordError."""
    if text is None or not text.strip():
        raise ChordError("empty key chord")
    raw = text.strip().lower()
    tokens = [t for t in _SEPARATOR.split(raw) if t]
    modifiers: set[str] = set()
    key: str | None = None
    for token in tokens:
        modifier = _MODIFIER_ALIASES.get(token)
        if modifier is not None:
            modifiers.add(modifier)
            continue
        canonical = _canonical_key(token)
        if canonical is None:
            raise ChordError(f"unknown key {token!r} in {text!r}")
        if key is not None:
            raise ChordError(f"more than one key in {text!r}")
        key = canonical
    if key is None:
        raise ChordError(f"no key in {text!r}")
    return "+".join([m for m in MODIFIERS if m in modifiers] + [key])


def chord_from_parts(key: str, modifiers: set[str] | frozenset[str] = frozenset()) -> str:
    """Build a canonical chord from a backend key name and modifier names.

    Raises ChordError when the key or a modifier is not recognized.
    """
    canonical = _canonical_key(key.lower().replace(" ", ""))
    if canonical is None:
        raise ChordError(f"unknown key {key!r}")
    mods: set[str] = set()
    for name in modifiers:
        modifier = _MODIFIER_ALIASES.get(name.lower())
        if modifier is None:
            raise ChordError(f"unknown modifier {name!r}")
        mods.add(modifier)
    return "+".join([m for m in MODIFIERS if m in mods] + [canonical])
