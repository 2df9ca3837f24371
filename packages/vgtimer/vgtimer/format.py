"""Text formatting of remaining times for display."""
from __future__ import annotations

from typing import TYPE_CHECKING

from vgtimer.types import Millis

if TYPE_CHECKING:
    from vgtimer.group import Readout


def format_remaining(ms: Millis) -> str:
    """Render milliseconds as seconds with one decimal, truncated.

    Negative values show as zero; they occur while a cycle is in its strike
    or settle phase.

    >>> format_remaining(8215)
    '8.2'
    >>> format_remaining(-500)
    '0.0'
    """
    if ms < 0:
        ms = 0
    return f"{ms // 1000}.{ms % 1000 // 100}"


def format_readout(readout: Readout) -> list[str]:
    lines = [f"{readout.label}: {format_remaining(readout.to_activation)}"]
    if readout.to_strike is not None:
        lines.append(f"{readout.strike_label}: {format_remaining(readout.to_strike)}")
    return lines
