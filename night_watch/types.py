"""Shared enums, protocols and the per-tick context."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Protocol

if TYPE_CHECKING:
    from night_watch.input import InputEdges


class SessionState(enum.Enum):
    TITLE = "title"
    EXPLANATION = "explanation"
    PLAY = "play"
    GAME_OVER = "game_over"


class CyclePhase(enum.Enum):
    DAY = "day"
    NIGHT = "night"
    RESULT = "result"


class EnemyKind(enum.Enum):
    RED = "red"
    BLUE = "blue"
    GRAY = "gray"
    YELLOW = "yellow"


class RandomSource(Protocol):
    """Uniform integers over a closed interval. ``random.Random`` qualifies."""

    def randint(self, a: int, b: int) -> int: ...


@dataclass(frozen=True, slots=True)
class TickContext:
    tick_number: int
    dt: float
    elapsed: float
    request_stop: Callable[[], None]
    random: RandomSource
    edges: InputEdges


class ConfigError(ValueError):
    """Raised when a GameConfig holds values the simulation cannot run with."""
