"""Layout, color, and key-binding constants."""
from __future__ import annotations

import pygame

from night_watch.input import Button
from night_watch.types import CyclePhase, EnemyKind

TITLE = "Night Watch"

LOG_H = 84
BASE_RADIUS = 32

# Background per screen / phase
COLOR_TITLE_BG = (0, 0, 0)
COLOR_EXPLANATION_BG = (32, 32, 32)
COLOR_GAME_OVER_BG = (0, 0, 0)
PHASE_COLORS: dict[CyclePhase, tuple[int, int, int]] = {
    CyclePhase.DAY: (135, 206, 235),
    CyclePhase.NIGHT: (10, 10, 42),
    CyclePhase.RESULT: (255, 204, 153),
}

ENEMY_COLORS: dict[EnemyKind, tuple[int, int, int]] = {
    EnemyKind.RED: (220, 30, 30),
    EnemyKind.BLUE: (30, 120, 220),
    EnemyKind.GRAY: (170, 170, 170),
    EnemyKind.YELLOW: (240, 200, 40),
}

COLOR_BASE = (255, 255, 255)
COLOR_TEXT_LIGHT = (255, 255, 255)
COLOR_TEXT_DARK = (0, 0, 0)
COLOR_LOG_BG = (18, 18, 25)
COLOR_TEXT_DIM = (130, 130, 140)

# Log panel background while a game is running
LOG_BG_BY_PHASE: dict[CyclePhase, tuple[int, int, int]] = {
    CyclePhase.DAY: (24, 40, 56),
    CyclePhase.NIGHT: (8, 8, 20),
    CyclePhase.RESULT: (48, 34, 22),
}

# Event log colors
LOG_COLORS: dict[str, tuple[int, int, int]] = {
    "upgrade": (100, 200, 220),
    "undo": (180, 120, 255),
    "phase": (200, 200, 100),
    "night_report": (255, 160, 60),
    "event": (100, 220, 100),
    "game_over": (220, 60, 60),
    "session": (220, 220, 220),
    "default": (170, 170, 170),
}

# Physical keys for each logical button. Enter both confirms and skips the day.
KEY_BINDINGS: dict[Button, tuple[int, ...]] = {
    Button.CONFIRM: (pygame.K_RETURN, pygame.K_KP_ENTER),
    Button.SKIP: (pygame.K_RETURN, pygame.K_KP_ENTER),
    Button.UPGRADE_ATTACK: (pygame.K_1, pygame.K_KP1),
    Button.UPGRADE_DEFENSE: (pygame.K_2, pygame.K_KP2),
    Button.HEAL: (pygame.K_3, pygame.K_KP3),
    Button.UNDO: (pygame.K_r,),
    Button.QUIT: (pygame.K_ESCAPE,),
}
