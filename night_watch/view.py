"""Read-only per-tick snapshot handed to the renderer."""
from __future__ import annotations

from dataclasses import dataclass

from night_watch.state import GameState
from night_watch.types import CyclePhase, EnemyKind, SessionState


@dataclass(frozen=True)
class EnemyView:
    x: float
    y: float
    kind: EnemyKind


@dataclass(frozen=True)
class SessionView:
    session: SessionState
    phase: CyclePhase
    day: int
    health: int
    max_health: int
    attack: int
    defense: int
    points: int
    last_earned_points: int
    attack_cost: int
    defense_cost: int
    phase_remaining: int
    health_at_night_start: int
    health_lost: int
    event_message: str
    enemies: tuple[EnemyView, ...] = ()


def build_view(game: GameState) -> SessionView:
    """Copy out what a frame needs. Enemies are only listed at night."""
    economy = game.economy
    enemies: tuple[EnemyView, ...] = ()
    if game.session.state is SessionState.PLAY and game.phase is CyclePhase.NIGHT:
        enemies = tuple(EnemyView(e.x, e.y, e.kind) for e in game.wave)
    return SessionView(
        session=game.session.state,
        phase=game.phase,
        day=game.day,
        health=economy.health,
        max_health=economy.max_health,
        attack=economy.attack,
        defense=economy.defense,
        points=economy.points,
        last_earned_points=economy.last_earned_points,
        attack_cost=economy.attack_cost,
        defense_cost=economy.defense_cost,
        phase_remaining=game.phase_remaining,
        health_at_night_start=game.health_at_night_start,
        health_lost=game.health_lost,
        event_message=game.event_message,
        enemies=enemies,
    )
