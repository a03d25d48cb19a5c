"""Day / Night / Result cycle played inside the Play session state.

Per-tick work of the current phase runs first, then the transition table is
evaluated. Entry actions hang off the transition callback, so each runs once
per edge no matter how long the game sits in the target phase.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from night_watch.combat import NightReport, resolve_night
from night_watch.economy import UndoSnapshot, heal, upgrade_attack, upgrade_defense
from night_watch.events import trigger_event
from night_watch.fsm import FSMGuards, make_fsm_step
from night_watch.input import Button
from night_watch.types import CyclePhase
from night_watch.waves import advance_wave, spawn_wave

if TYPE_CHECKING:
    from night_watch.state import GameState
    from night_watch.types import TickContext

CYCLE_TRANSITIONS = {
    CyclePhase.DAY: [("day_over", CyclePhase.NIGHT)],
    CyclePhase.NIGHT: [("night_over", CyclePhase.RESULT)],
    CyclePhase.RESULT: [("confirmed", CyclePhase.DAY)],
}


def make_cycle_guards() -> FSMGuards:
    guards = FSMGuards()
    guards.register(
        "day_over",
        lambda g, ctx: g.phase_remaining <= 0 or ctx.edges.triggered(Button.SKIP),
    )
    guards.register("night_over", lambda g, ctx: g.phase_remaining <= 0)
    guards.register("confirmed", lambda g, ctx: ctx.edges.triggered(Button.CONFIRM))
    return guards


# --- Per-tick phase work ---


def day_tick(game: GameState, ctx: TickContext) -> None:
    """Countdown plus the player's spending for this tick."""
    economy = game.economy
    if game.phase_remaining == game.config.day_ticks:
        game.undo = UndoSnapshot.capture(economy)
    game.phase_remaining -= 1

    # Prices are fixed at the start of the tick.
    attack_cost = economy.attack_cost
    defense_cost = economy.defense_cost
    edges = ctx.edges

    if edges.triggered(Button.UPGRADE_ATTACK) and upgrade_attack(economy, attack_cost):
        game.emit("upgrade", kind="attack", cost=attack_cost, points=economy.points)
    if edges.triggered(Button.UPGRADE_DEFENSE) and upgrade_defense(economy, defense_cost):
        game.emit("upgrade", kind="defense", cost=defense_cost, points=economy.points)
    if edges.triggered(Button.HEAL) and heal(economy):
        game.emit("upgrade", kind="heal", cost=1, points=economy.points)
    if edges.triggered(Button.UNDO) and game.undo is not None:
        game.undo.restore(economy)
        game.emit("undo", points=economy.points)


def night_tick(game: GameState, ctx: TickContext) -> None:
    game.phase_remaining -= 1
    advance_wave(game.wave, game.config)


# --- Entry actions ---


def enter_day(game: GameState, ctx: TickContext) -> None:
    """Morning after a report: next day, bank the earned points, new wave."""
    game.day += 1
    game.economy.points += game.economy.last_earned_points
    game.event_message = ""
    game.report = None
    game.wave = spawn_wave(game.day, game.config, ctx.random)
    game.phase_remaining = game.config.day_ticks


def enter_night(game: GameState, ctx: TickContext) -> None:
    game.phase_remaining = game.config.night_ticks
    game.health_at_night_start = game.economy.health


def enter_result(game: GameState, ctx: TickContext) -> None:
    """Resolve the night, then roll the morning event."""
    economy = game.economy
    outcome = resolve_night(game.day, economy.attack, economy.defense)
    economy.set_health(economy.health - outcome.damage)
    economy.last_earned_points = outcome.earned_points

    event = trigger_event(ctx.random, economy, game.day)
    game.event_message = event.message
    game.report = NightReport(
        day=game.day,
        damage=outcome.damage,
        health_lost=game.health_lost,
        earned_points=economy.last_earned_points,
        event=event.name,
    )
    game.emit(
        "night_report",
        day=game.day,
        damage=outcome.damage,
        health_lost=game.report.health_lost,
        earned_points=economy.last_earned_points,
    )
    game.emit("event", outcome=event.name, message=event.message)


_ENTRY_ACTIONS = {
    CyclePhase.DAY: enter_day,
    CyclePhase.NIGHT: enter_night,
    CyclePhase.RESULT: enter_result,
}

_PHASE_TICKS = {
    CyclePhase.DAY: day_tick,
    CyclePhase.NIGHT: night_tick,
}


def on_cycle_transition(
    game: GameState, ctx: TickContext, old: CyclePhase, new: CyclePhase,
) -> None:
    _ENTRY_ACTIONS[new](game, ctx)
    game.emit("phase", old=old.value, new=new.value)


cycle_step = make_fsm_step(make_cycle_guards(), on_transition=on_cycle_transition)


def cycle_tick(game: GameState, ctx: TickContext) -> None:
    """Advance the cycle by one tick."""
    phase_tick = _PHASE_TICKS.get(game.cycle.state)
    if phase_tick is not None:
        phase_tick(game, ctx)
    cycle_step(game.cycle, game, ctx)


def start_cycle(game: GameState, ctx: TickContext) -> None:
    """Put the cycle at the first tick of day one with a fresh wave."""
    game.reset()
    game.wave = spawn_wave(game.day, game.config, ctx.random)
