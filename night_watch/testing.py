"""Deterministic stand-ins for driving the game from tests."""
from __future__ import annotations

from night_watch.input import Button, InputEdges
from night_watch.types import RandomSource, TickContext


class ScriptedRandom:
    """Replays a fixed sequence of draws, then returns the upper bound.

    The upper bound keeps the event table on its quiet branches (no
    awakening, "nothing happened") once the script runs out.
    """

    def __init__(self, *values: int) -> None:
        self._values = list(values)
        self.calls: list[tuple[int, int]] = []

    def randint(self, a: int, b: int) -> int:
        self.calls.append((a, b))
        if self._values:
            value = self._values.pop(0)
            if not a <= value <= b:
                raise ValueError(f"scripted draw {value} outside [{a}, {b}]")
            return value
        return b

    def push(self, *values: int) -> None:
        self._values.extend(values)

    @property
    def remaining(self) -> int:
        return len(self._values)


def make_ctx(rng: RandomSource, *buttons: Button, tick_number: int = 1) -> TickContext:
    """A 60 tps context for tick *tick_number* with *buttons* just pressed."""
    return TickContext(
        tick_number=tick_number,
        dt=1 / 60,
        elapsed=tick_number / 60,
        request_stop=lambda: None,
        random=rng,
        edges=InputEdges.of(*buttons),
    )
