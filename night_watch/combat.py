"""Night combat resolution.

Damage depends only on the day number and the player's attack and defense.
The decorative enemy wave drawn during the night is never consulted.
"""
from __future__ import annotations

from dataclasses import dataclass

ENEMIES_PER_DAY = 5
DAMAGE_PER_ENEMY = 3

# (last day of the bracket, defense rate); days past the last bracket use the floor.
DEFENSE_RATE_STEPS: tuple[tuple[int, float], ...] = (
    (5, 1.0),
    (10, 0.8),
    (15, 0.666),
)
DEFENSE_RATE_FLOOR = 0.5


@dataclass(frozen=True)
class CombatOutcome:
    enemy_count: int
    defense_rate: float
    effective_defense: int
    damage: int
    earned_points: int


def defense_rate(day: int) -> float:
    for last_day, rate in DEFENSE_RATE_STEPS:
        if day <= last_day:
            return rate
    return DEFENSE_RATE_FLOOR


def resolve_night(day: int, attack: int, defense: int) -> CombatOutcome:
    """Compute the night's damage and the points earned for surviving it.

    ``damage`` is never negative; a night fully absorbed by defense deals 0.
    """
    enemy_count = day * ENEMIES_PER_DAY
    rate = defense_rate(day)
    effective_defense = int((attack + defense) * rate)
    damage = enemy_count * DAMAGE_PER_ENEMY - effective_defense
    return CombatOutcome(
        enemy_count=enemy_count,
        defense_rate=rate,
        effective_defense=effective_defense,
        damage=max(0, damage),
        earned_points=enemy_count // 2,
    )


@dataclass(frozen=True)
class NightReport:
    """What happened between nightfall and morning, for the Result screen."""

    day: int
    damage: int
    health_lost: int
    earned_points: int
    event: str
