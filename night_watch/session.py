"""Outer session state machine: Title -> Explanation -> Play -> GameOver."""
from __future__ import annotations

from typing import TYPE_CHECKING

from night_watch.cycle import cycle_tick, start_cycle
from night_watch.fsm import FSMGuards, make_fsm_step
from night_watch.input import Button
from night_watch.types import SessionState

if TYPE_CHECKING:
    from night_watch.state import GameState
    from night_watch.types import TickContext

SESSION_TRANSITIONS = {
    SessionState.TITLE: [("confirmed", SessionState.EXPLANATION)],
    SessionState.EXPLANATION: [("confirmed", SessionState.PLAY)],
    SessionState.PLAY: [("base_fallen", SessionState.GAME_OVER)],
    SessionState.GAME_OVER: [("confirmed", SessionState.TITLE)],
}


def make_session_guards() -> FSMGuards:
    guards = FSMGuards()
    guards.register("confirmed", lambda g, ctx: ctx.edges.triggered(Button.CONFIRM))
    guards.register("base_fallen", lambda g, ctx: g.economy.health <= 0)
    return guards


def on_session_transition(
    game: GameState, ctx: TickContext, old: SessionState, new: SessionState,
) -> None:
    if new is SessionState.PLAY:
        start_cycle(game, ctx)
    elif new is SessionState.GAME_OVER:
        game.emit("game_over", health=game.economy.health)
    elif new is SessionState.TITLE:
        game.reset()
    game.emit("session", old=old.value, new=new.value)


session_step = make_fsm_step(make_session_guards(), on_transition=on_session_transition)


def session_tick(game: GameState, ctx: TickContext) -> None:
    """Run one tick of the whole game.

    In Play the cycle updates first; the fall of the base is checked
    afterwards, in the same tick.
    """
    if ctx.edges.triggered(Button.QUIT):
        ctx.request_stop()
        return
    if game.session.state is SessionState.PLAY:
        cycle_tick(game, ctx)
    session_step(game.session, game, ctx)
