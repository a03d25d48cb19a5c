"""Random morning events rolled once per Result phase."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from night_watch.economy import Economy
from night_watch.types import RandomSource

# Two-stage roll: a rare global event first, then the good/bad/neutral split.
AWAKENING_RANGE = 10_000
AWAKENING_BELOW = 2
SPLIT_RANGE = 100
GOOD_BELOW = 30
BAD_BELOW = 50


@dataclass(frozen=True)
class EventDef:
    """One entry of the event table. ``apply(economy, day)`` mutates in place."""

    name: str
    message: str
    apply: Callable[[Economy, int], None]


def _awaken(economy: Economy, day: int) -> None:
    economy.attack += day * 10
    economy.defense += day * 10
    economy.last_earned_points *= 3


def _find_weapon(economy: Economy, day: int) -> None:
    economy.attack += day * 5


def _find_armor(economy: Economy, day: int) -> None:
    economy.defense += day * 5


def _good_day(economy: Economy, day: int) -> None:
    economy.last_earned_points *= 2


def _full_heal(economy: Economy, day: int) -> None:
    economy.set_health(economy.max_health)


def _weapon_broke(economy: Economy, day: int) -> None:
    economy.attack = max(0, economy.attack - day)


def _armor_broke(economy: Economy, day: int) -> None:
    economy.defense = max(0, economy.defense - day)


def _bad_day(economy: Economy, day: int) -> None:
    economy.last_earned_points //= 2


def _nothing(economy: Economy, day: int) -> None:
    pass


AWAKENING = EventDef("awakening", "[Awakening] Power surges through you! (points x3)", _awaken)

GOOD_EVENTS: tuple[EventDef, ...] = (
    EventDef("found_weapon", "You found a fine weapon!", _find_weapon),
    EventDef("found_armor", "You found sturdy armor!", _find_armor),
    EventDef("good_day", "You feel great today! (points x2)", _good_day),
    EventDef("sister_heal", "A sister tended your wounds! (HP fully restored)", _full_heal),
)

BAD_EVENTS: tuple[EventDef, ...] = (
    EventDef("weapon_broke", "Your weapon broke...", _weapon_broke),
    EventDef("armor_broke", "Your armor broke...", _armor_broke),
    EventDef("bad_day", "An off day... (points halved)", _bad_day),
)

NOTHING = EventDef("nothing", "Nothing in particular happened today...", _nothing)


def roll_event(rng: RandomSource) -> EventDef:
    """Pick an outcome. The number of draws depends on the branch taken."""
    if rng.randint(0, AWAKENING_RANGE - 1) < AWAKENING_BELOW:
        return AWAKENING
    roll = rng.randint(0, SPLIT_RANGE - 1)
    if roll < GOOD_BELOW:
        return GOOD_EVENTS[rng.randint(0, len(GOOD_EVENTS) - 1)]
    if roll < BAD_BELOW:
        return BAD_EVENTS[rng.randint(0, len(BAD_EVENTS) - 1)]
    return NOTHING


def trigger_event(rng: RandomSource, economy: Economy, day: int) -> EventDef:
    """Roll an outcome and apply it to ``economy``. Returns the outcome."""
    event = roll_event(rng)
    event.apply(economy, day)
    return event
