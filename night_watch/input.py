"""Edge-triggered button input built from two per-tick snapshots."""
from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Iterable


class Button(enum.Enum):
    """Logical buttons. The shell decides which physical keys map to each."""

    CONFIRM = "confirm"
    UPGRADE_ATTACK = "upgrade_attack"
    UPGRADE_DEFENSE = "upgrade_defense"
    HEAL = "heal"
    UNDO = "undo"
    SKIP = "skip"
    QUIT = "quit"


@dataclass(frozen=True)
class InputEdges:
    """Buttons that went from released to pressed on this tick."""

    pressed: frozenset[Button] = field(default_factory=frozenset)

    def triggered(self, button: Button) -> bool:
        return button in self.pressed

    @classmethod
    def of(cls, *buttons: Button) -> InputEdges:
        return cls(frozenset(buttons))


NO_INPUT = InputEdges()


class ButtonTracker:
    """Holds the previous and current button snapshots.

    ``update`` is called exactly once per tick with the full set of buttons
    that are held down right now. A button held across ticks is reported only
    on the first of them.
    """

    def __init__(self) -> None:
        self._previous: frozenset[Button] = frozenset()
        self._current: frozenset[Button] = frozenset()

    @property
    def held(self) -> frozenset[Button]:
        return self._current

    def update(self, pressed: Iterable[Button]) -> InputEdges:
        self._previous = self._current
        self._current = frozenset(pressed)
        return InputEdges(self._current - self._previous)

    def clear(self) -> None:
        self._previous = frozenset()
        self._current = frozenset()
