"""Engine - fixed-rate tick driver around one GameState."""

import os
import random
from typing import Iterable

from night_watch.clock import Clock
from night_watch.config import GameConfig
from night_watch.input import Button, ButtonTracker
from night_watch.session import session_tick
from night_watch.signals import SignalBus
from night_watch.state import GameState, new_game
from night_watch.types import RandomSource
from night_watch.view import SessionView, build_view


class Engine:
    """Samples buttons, advances the clock and runs one game tick per step.

    ``rng`` replaces the seeded ``random.Random`` when given; tests use it to
    replay a fixed sequence of draws. ``seed`` is None in that case.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        seed: int | None = None,
        rng: RandomSource | None = None,
    ) -> None:
        self._config = config if config is not None else GameConfig()
        self._clock = Clock(self._config.tps)
        self._buttons = ButtonTracker()
        self._bus = SignalBus()
        self._game = new_game(self._config, self._bus)
        self._stop_requested: bool = False
        self._seed: int | None

        self._rng: RandomSource
        if rng is not None:
            self._seed = None
            self._rng = rng
        else:
            self._seed = seed if seed is not None else int.from_bytes(os.urandom(8))
            self._rng = random.Random(self._seed)

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def game(self) -> GameState:
        return self._game

    @property
    def bus(self) -> SignalBus:
        return self._bus

    @property
    def seed(self) -> int | None:
        return self._seed

    @property
    def stop_requested(self) -> bool:
        return self._stop_requested

    def _request_stop(self) -> None:
        self._stop_requested = True

    def step(self, pressed: Iterable[Button] = ()) -> None:
        """Run one tick with ``pressed`` as the buttons held down right now."""
        self._stop_requested = False
        edges = self._buttons.update(pressed)
        self._clock.advance()
        ctx = self._clock.context(self._request_stop, self._rng, edges)
        session_tick(self._game, ctx)
        self._bus.flush()

    def run(self, frames: Iterable[Iterable[Button]]) -> int:
        """Feed one button set per tick. Stops early on quit; returns ticks run."""
        self._stop_requested = False
        count = 0
        for pressed in frames:
            self.step(pressed)
            count += 1
            if self._stop_requested:
                break
        return count

    def view(self) -> SessionView:
        return build_view(self._game)
