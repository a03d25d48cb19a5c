"""The single owned state tree mutated by every tick."""
from __future__ import annotations

from dataclasses import dataclass, field

from night_watch.combat import NightReport
from night_watch.config import GameConfig
from night_watch.cycle import CYCLE_TRANSITIONS
from night_watch.economy import Economy, UndoSnapshot
from night_watch.fsm import FSM
from night_watch.session import SESSION_TRANSITIONS
from night_watch.signals import Signal, SignalBus
from night_watch.types import CyclePhase, SessionState
from night_watch.waves import Enemy


@dataclass
class GameState:
    """Holds everything one game needs; passed explicitly into each update."""

    config: GameConfig
    bus: SignalBus
    session: FSM[SessionState]
    cycle: FSM[CyclePhase]
    economy: Economy
    day: int = 1
    phase_remaining: int = 0
    undo: UndoSnapshot | None = None
    health_at_night_start: int = 0
    wave: list[Enemy] = field(default_factory=list)
    event_message: str = ""
    report: NightReport | None = None

    @property
    def phase(self) -> CyclePhase:
        return self.cycle.state

    @property
    def health_lost(self) -> int:
        return max(0, self.health_at_night_start - self.economy.health)

    def emit(self, name: str, **data) -> None:
        """Publish *name* stamped with the current day, and the phase while in Play."""
        phase = self.phase if self.session.state is SessionState.PLAY else None
        self.bus.publish(Signal(name, self.day, phase, data))

    def reset(self) -> None:
        """Return the whole game to its initial values. The RNG is not touched."""
        self.economy = Economy.starting(self.config)
        self.day = 1
        self.cycle.state = CyclePhase.DAY
        self.phase_remaining = self.config.day_ticks
        self.undo = None
        self.health_at_night_start = self.economy.health
        self.wave = []
        self.event_message = ""
        self.report = None


def new_game(config: GameConfig, bus: SignalBus | None = None) -> GameState:
    """Wire up a fresh GameState sitting on the title screen."""
    economy = Economy.starting(config)
    return GameState(
        config=config,
        bus=bus if bus is not None else SignalBus(),
        session=FSM(state=SessionState.TITLE, transitions=SESSION_TRANSITIONS),
        cycle=FSM(state=CyclePhase.DAY, transitions=CYCLE_TRANSITIONS),
        economy=economy,
        day=1,
        phase_remaining=config.day_ticks,
        health_at_night_start=economy.health,
    )
