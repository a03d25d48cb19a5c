"""night_watch - a day/night base-defense game on a fixed-rate tick loop."""

from night_watch.clock import Clock
from night_watch.combat import CombatOutcome, NightReport, resolve_night
from night_watch.config import GameConfig
from night_watch.economy import Economy, UndoSnapshot, upgrade_cost
from night_watch.engine import Engine
from night_watch.events import EventDef, roll_event, trigger_event
from night_watch.input import Button, ButtonTracker, InputEdges
from night_watch.signals import Signal, SignalBus
from night_watch.state import GameState, new_game
from night_watch.types import (
    ConfigError,
    CyclePhase,
    EnemyKind,
    SessionState,
    TickContext,
)
from night_watch.view import EnemyView, SessionView, build_view
from night_watch.waves import Enemy, advance_wave, spawn_wave

__all__ = [
    "Engine",
    "GameConfig",
    "GameState",
    "new_game",
    "Clock",
    "TickContext",
    "SessionState",
    "CyclePhase",
    "EnemyKind",
    "Button",
    "ButtonTracker",
    "InputEdges",
    "Economy",
    "UndoSnapshot",
    "upgrade_cost",
    "CombatOutcome",
    "NightReport",
    "resolve_night",
    "EventDef",
    "roll_event",
    "trigger_event",
    "Enemy",
    "spawn_wave",
    "advance_wave",
    "Signal",
    "SignalBus",
    "SessionView",
    "EnemyView",
    "build_view",
    "ConfigError",
]
