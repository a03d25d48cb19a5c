"""Decorative enemy wave shown during the night.

The wave is flavor only: its entities carry no health or damage and nothing
here writes to the economy.
"""
from __future__ import annotations

from dataclasses import dataclass

from night_watch.config import GameConfig
from night_watch.types import EnemyKind, RandomSource

# (kind, count, first day it appears), in spawn order.
WAVE_TABLE: tuple[tuple[EnemyKind, int, int], ...] = (
    (EnemyKind.RED, 3, 1),
    (EnemyKind.BLUE, 2, 6),
    (EnemyKind.GRAY, 2, 11),
    (EnemyKind.YELLOW, 1, 16),
)

# Fraction of the gray (fastest) speed.
SPEED_RATIOS: dict[EnemyKind, float] = {
    EnemyKind.RED: 0.40,
    EnemyKind.BLUE: 0.70,
    EnemyKind.YELLOW: 0.90,
    EnemyKind.GRAY: 1.0,
}


@dataclass
class Enemy:
    x: float
    y: float
    speed: float  # px per tick
    kind: EnemyKind


def gray_speed(config: GameConfig) -> float:
    """Speed that carries an enemy half the window width over one night."""
    return (config.window_width * 0.5) / config.night_ticks


def wave_counts(day: int) -> list[tuple[EnemyKind, int]]:
    return [(kind, count) for kind, count, first_day in WAVE_TABLE if day >= first_day]


def spawn_wave(day: int, config: GameConfig, rng: RandomSource) -> list[Enemy]:
    """Build a fresh wave for ``day``. Each enemy draws x, then y."""
    base = gray_speed(config)
    max_x = config.window_width // 2 - 1
    max_y = config.window_height - config.entity_size - 1
    wave: list[Enemy] = []
    for kind, count in wave_counts(day):
        speed = base * SPEED_RATIOS[kind]
        for _ in range(count):
            x = rng.randint(0, max_x)
            y = rng.randint(0, max_y)
            wave.append(Enemy(x=float(x), y=float(y), speed=speed, kind=kind))
    return wave


def advance_wave(wave: list[Enemy], config: GameConfig) -> None:
    """Move every enemy one tick to the right, wrapping past the edge."""
    limit = config.window_width + config.wrap_margin
    for enemy in wave:
        enemy.x += enemy.speed
        if enemy.x > limit:
            enemy.x = float(-config.wrap_margin)
