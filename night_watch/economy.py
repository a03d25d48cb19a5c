"""Economy state, upgrade spending and the day-start undo snapshot."""
from __future__ import annotations

from dataclasses import dataclass

from night_watch.config import GameConfig

ATTACK_STEP = 2
DEFENSE_STEP = 2
HEAL_AMOUNT = 10
HEAL_COST = 1


def upgrade_cost(stat: int) -> int:
    """Points needed to raise a stat: one more for every full hundred."""
    return stat // 100 + 1


@dataclass
class Economy:
    health: int
    attack: int
    defense: int
    points: int
    last_earned_points: int = 0
    max_health: int = 200

    @classmethod
    def starting(cls, config: GameConfig) -> Economy:
        return cls(
            health=config.start_health,
            attack=config.start_attack,
            defense=config.start_defense,
            points=config.start_points,
            last_earned_points=0,
            max_health=config.max_health,
        )

    @property
    def attack_cost(self) -> int:
        return upgrade_cost(self.attack)

    @property
    def defense_cost(self) -> int:
        return upgrade_cost(self.defense)

    def set_health(self, value: int) -> None:
        self.health = max(0, min(value, self.max_health))


def upgrade_attack(economy: Economy, cost: int | None = None) -> bool:
    """Spend points on +2 attack. No field changes when points fall short.

    ``cost`` lets the caller pin the price computed at the start of the tick.
    """
    if cost is None:
        cost = economy.attack_cost
    if economy.points < cost:
        return False
    economy.attack += ATTACK_STEP
    economy.points -= cost
    return True


def upgrade_defense(economy: Economy, cost: int | None = None) -> bool:
    """Spend points on +2 defense. No field changes when points fall short."""
    if cost is None:
        cost = economy.defense_cost
    if economy.points < cost:
        return False
    economy.defense += DEFENSE_STEP
    economy.points -= cost
    return True


def heal(economy: Economy) -> bool:
    """Spend one point on +10 health, capped at max health."""
    if economy.points < HEAL_COST:
        return False
    economy.set_health(economy.health + HEAL_AMOUNT)
    economy.points -= HEAL_COST
    return True


@dataclass(frozen=True)
class UndoSnapshot:
    """Economy values captured on the first tick of a day."""

    points: int
    attack: int
    defense: int
    health: int

    @classmethod
    def capture(cls, economy: Economy) -> UndoSnapshot:
        return cls(
            points=economy.points,
            attack=economy.attack,
            defense=economy.defense,
            health=economy.health,
        )

    def restore(self, economy: Economy) -> None:
        economy.points = self.points
        economy.attack = self.attack
        economy.defense = self.defense
        economy.health = self.health
