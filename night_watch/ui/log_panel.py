"""Scrolling game log under the play area."""
from __future__ import annotations

from collections import deque

import pygame

from night_watch.signals import Signal, SignalBus
from night_watch.types import SessionState
from night_watch.ui.constants import COLOR_LOG_BG, COLOR_TEXT_DIM, LOG_BG_BY_PHASE, LOG_COLORS
from night_watch.ui.messages import describe
from night_watch.view import SessionView

LINE_H = 16


class EventLogPanel:
    """Keeps the latest log lines, each tagged with the day it happened on.

    Lines from earlier days are drawn dimmed; the panel background follows
    the current phase while a game is running.
    """

    def __init__(self, max_entries: int = 100) -> None:
        self.entries: deque[tuple[int, str, str]] = deque(maxlen=max_entries)

    def attach(self, bus: SignalBus) -> None:
        bus.watch(self.on_signal)

    def on_signal(self, signal: Signal) -> None:
        text = describe(signal)
        if text is not None:
            self.entries.append((signal.day, text, signal.name))

    def draw(self, surface: pygame.Surface, font: pygame.font.Font, rect: pygame.Rect,
             view: SessionView) -> None:
        in_play = view.session is SessionState.PLAY
        background = LOG_BG_BY_PHASE[view.phase] if in_play else COLOR_LOG_BG
        pygame.draw.rect(surface, background, rect)

        visible = list(self.entries)[-max(1, (rect.height - 8) // LINE_H):]
        y = rect.y + 4
        for day, text, category in visible:
            current = in_play and day == view.day
            color = LOG_COLORS.get(category, LOG_COLORS["default"]) if current else COLOR_TEXT_DIM
            surface.blit(font.render(f"D{day:>2}  {text}", True, color), (rect.x + 6, y))
            y += LINE_H
