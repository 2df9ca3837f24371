"""Label panel showing the remaining time of every timer."""
from __future__ import annotations

import pygame

from vgtimer import Readout, TimerGroup, format_readout

from ui.constants import (
    BG_COLOR, LINE_H, MARGIN_X, STOPPED_COLOR, STRIKE_INDENT, TEXT_COLOR,
)


class TimerPanel:
    """Holds one text line per label and redraws them each frame.

    Lines only change when new readouts arrive, so a stopped group keeps
    showing the values it had when it stopped.
    """

    def __init__(self, group: TimerGroup) -> None:
        self._lines: list[tuple[str, int]] = []
        for kind in group.kinds():
            spec = group.spec(kind)
            self._lines.append((f"{spec.label}:", 0))
            if spec.has_strike:
                self._lines.append((f"{spec.strike_label}:", STRIKE_INDENT))
        self._font: pygame.font.Font | None = None
        self._running = False

    def _get_font(self) -> pygame.font.Font:
        if self._font is None:
            self._font = pygame.font.SysFont("sans", 14)
        return self._font

    def update(self, readouts: list[Readout]) -> None:
        lines: list[tuple[str, int]] = []
        for r in readouts:
            first, *rest = format_readout(r)
            lines.append((first, 0))
            lines.extend((text, STRIKE_INDENT) for text in rest)
        self._lines = lines

    def set_running(self, running: bool) -> None:
        self._running = running

    def draw(self, surface: pygame.Surface) -> None:
        surface.fill(BG_COLOR)
        font = self._get_font()
        color = TEXT_COLOR if self._running else STOPPED_COLOR
        for i, (text, indent) in enumerate(self._lines):
            rendered = font.render(text, True, color)
            surface.blit(rendered, (MARGIN_X + indent, 10 + i * LINE_H))
