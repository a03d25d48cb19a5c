"""One draw function per session screen. Everything is read from a SessionView."""
from __future__ import annotations

import pygame

from night_watch.types import CyclePhase, SessionState
from night_watch.ui.constants import (
    BASE_RADIUS,
    COLOR_BASE,
    COLOR_EXPLANATION_BG,
    COLOR_GAME_OVER_BG,
    COLOR_TEXT_DARK,
    COLOR_TEXT_LIGHT,
    COLOR_TITLE_BG,
    ENEMY_COLORS,
    PHASE_COLORS,
    TITLE,
)
from night_watch.view import SessionView

EXPLANATION_LINES = (
    "HOW TO PLAY",
    "",
    "Day: spend points to get stronger",
    "   [1] Attack UP (+2)",
    "   [2] Defense UP (+2)",
    "   [3] Heal Base (+10)",
    "   [R] Undo All Actions This Turn",
    "Night: enemies attack on their own; the report comes in the morning",
)


def _text(surface, font, text, pos, color) -> None:
    surface.blit(font.render(text, True, color), pos)


def draw_title(surface: pygame.Surface, fonts: dict[str, pygame.font.Font]) -> None:
    w, h = surface.get_size()
    surface.fill(COLOR_TITLE_BG)
    _text(surface, fonts["title"], TITLE, (40, 40), COLOR_TEXT_LIGHT)
    hint = fonts["body"].render("Press ENTER", True, COLOR_TEXT_LIGHT)
    surface.blit(hint, hint.get_rect(center=(w // 2, h - 120)))


def draw_explanation(surface: pygame.Surface, fonts: dict[str, pygame.font.Font]) -> None:
    w, h = surface.get_size()
    surface.fill(COLOR_EXPLANATION_BG)
    for i, line in enumerate(EXPLANATION_LINES):
        _text(surface, fonts["body"], line, (200, 200 + i * 22), COLOR_TEXT_LIGHT)
    hint = fonts["body"].render("Press ENTER to Play", True, COLOR_TEXT_LIGHT)
    surface.blit(hint, hint.get_rect(center=(w // 2, h - 200)))


def draw_play(
    surface: pygame.Surface,
    fonts: dict[str, pygame.font.Font],
    view: SessionView,
    entity_size: int,
) -> None:
    w, h = surface.get_size()
    surface.fill(PHASE_COLORS[view.phase])
    font = fonts["body"]
    text_color = COLOR_TEXT_LIGHT if view.phase is CyclePhase.NIGHT else COLOR_TEXT_DARK

    hud = (
        f"Day: {view.day}",
        f"HP: {view.health} / {view.max_health}",
        f"Attack: {view.attack}",
        f"Defense: {view.defense}",
        f"Points: {view.points}",
    )
    for i, line in enumerate(hud):
        _text(surface, font, line, (20, 20 + i * 20), text_color)

    # The base sits at three quarters of the width by night, centered otherwise.
    cx = (w * 3) // 4 if view.phase is CyclePhase.NIGHT else w // 2
    pygame.draw.circle(surface, COLOR_BASE, (cx, h // 2), BASE_RADIUS)

    if view.phase is CyclePhase.DAY:
        panel = (
            "=== Day Phase ===",
            f"[1] Attack UP (+2)  Cost: {view.attack_cost}",
            f"[2] Defense UP (+2) Cost: {view.defense_cost}",
            "[3] Heal Base (+10) Cost: 1",
            "[R] Undo All Actions This Turn",
            "[ENTER] Skip to Night",
        )
    elif view.phase is CyclePhase.NIGHT:
        panel = (
            "=== Night Phase ===",
            "Enemies attack... Survive until morning!",
        )
        for enemy in view.enemies:
            rect = (int(enemy.x), int(enemy.y), entity_size, entity_size)
            pygame.draw.ellipse(surface, ENEMY_COLORS[enemy.kind], rect)
    else:
        panel = (
            "=== Morning Report ===",
            f"Last Earned Points: {view.last_earned_points}",
            f"HP Lost Last Night: {view.health_lost}",
            view.event_message,
            "Press ENTER to Continue",
        )
    for i, line in enumerate(panel):
        if line:
            _text(surface, font, line, (20, 140 + i * 20), text_color)


def draw_game_over(
    surface: pygame.Surface,
    fonts: dict[str, pygame.font.Font],
    view: SessionView,
) -> None:
    w, h = surface.get_size()
    surface.fill(COLOR_GAME_OVER_BG)
    lines = (
        (fonts["title"], "GAME OVER", h // 2 - 60),
        (fonts["body"], f"Survived {view.day} Days", h // 2),
        (fonts["body"], "Press ENTER to Title", h // 2 + 60),
    )
    for font, text, y in lines:
        surf = font.render(text, True, COLOR_TEXT_LIGHT)
        surface.blit(surf, surf.get_rect(center=(w // 2, y)))


def draw_session(
    surface: pygame.Surface,
    fonts: dict[str, pygame.font.Font],
    view: SessionView,
    entity_size: int,
) -> None:
    if view.session is SessionState.TITLE:
        draw_title(surface, fonts)
    elif view.session is SessionState.EXPLANATION:
        draw_explanation(surface, fonts)
    elif view.session is SessionState.PLAY:
        draw_play(surface, fonts, view, entity_size)
    else:
        draw_game_over(surface, fonts, view)
