"""Tests for FSM transition tables and make_fsm_step."""
import enum

import pytest

from night_watch.fsm import FSM, FSMGuards, make_fsm_step
from night_watch.input import Button
from night_watch.testing import ScriptedRandom, make_ctx


class Light(enum.Enum):
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"


class Junction:
    def __init__(self) -> None:
        self.cars = 0
        self.entered: list[Light] = []


def _guards() -> FSMGuards:
    guards = FSMGuards()
    guards.register("busy", lambda g, ctx: g.cars > 3)
    guards.register("pressed", lambda g, ctx: ctx.edges.triggered(Button.CONFIRM))
    guards.register("always", lambda g, ctx: True)
    guards.register("never", lambda g, ctx: False)
    return guards


class TestFSMStep:
    def test_basic_transition(self):
        fsm = FSM(state=Light.RED, transitions={Light.RED: [("busy", Light.GREEN)]})
        junction = Junction()
        junction.cars = 5
        step = make_fsm_step(_guards())

        assert step(fsm, junction, make_ctx(ScriptedRandom()))
        assert fsm.state is Light.GREEN

    def test_first_match_wins(self):
        fsm = FSM(state=Light.RED, transitions={
            Light.RED: [("always", Light.GREEN), ("always", Light.YELLOW)],
        })
        make_fsm_step(_guards())(fsm, Junction(), make_ctx(ScriptedRandom()))
        assert fsm.state is Light.GREEN

    def test_no_match_stays(self):
        fsm = FSM(state=Light.RED, transitions={Light.RED: [("never", Light.GREEN)]})
        assert not make_fsm_step(_guards())(fsm, Junction(), make_ctx(ScriptedRandom()))
        assert fsm.state is Light.RED

    def test_state_without_edges_stays(self):
        fsm = FSM(state=Light.YELLOW, transitions={Light.RED: [("always", Light.GREEN)]})
        assert not make_fsm_step(_guards())(fsm, Junction(), make_ctx(ScriptedRandom()))

    def test_one_transition_per_step(self):
        """A chain of always-true edges advances only one link per call."""
        fsm = FSM(state=Light.RED, transitions={
            Light.RED: [("always", Light.GREEN)],
            Light.GREEN: [("always", Light.YELLOW)],
        })
        step = make_fsm_step(_guards())
        step(fsm, Junction(), make_ctx(ScriptedRandom()))
        assert fsm.state is Light.GREEN

    def test_guard_sees_input_edges(self):
        fsm = FSM(state=Light.RED, transitions={Light.RED: [("pressed", Light.GREEN)]})
        step = make_fsm_step(_guards())
        step(fsm, Junction(), make_ctx(ScriptedRandom()))
        assert fsm.state is Light.RED
        step(fsm, Junction(), make_ctx(ScriptedRandom(), Button.CONFIRM))
        assert fsm.state is Light.GREEN

    def test_on_transition_fires_after_state_update(self):
        fsm = FSM(state=Light.RED, transitions={Light.RED: [("always", Light.GREEN)]})
        seen = []

        def on_transition(game, ctx, old, new):
            seen.append((old, new, fsm.state))
            game.entered.append(new)

        junction = Junction()
        step = make_fsm_step(_guards(), on_transition=on_transition)
        step(fsm, junction, make_ctx(ScriptedRandom()))
        step(fsm, junction, make_ctx(ScriptedRandom()))

        assert seen == [(Light.RED, Light.GREEN, Light.GREEN)]
        assert junction.entered == [Light.GREEN]

    def test_unknown_guard_raises(self):
        fsm = FSM(state=Light.RED, transitions={Light.RED: [("missing", Light.GREEN)]})
        with pytest.raises(KeyError):
            make_fsm_step(_guards())(fsm, Junction(), make_ctx(ScriptedRandom()))


class TestFSMGuards:
    def test_register_and_query(self):
        guards = _guards()
        assert guards.has("busy")
        assert not guards.has("idle")
        assert guards.names() == ["busy", "pressed", "always", "never"]

    def test_register_overwrites(self):
        guards = FSMGuards()
        guards.register("g", lambda g, ctx: False)
        guards.register("g", lambda g, ctx: True)
        assert guards.check("g", None, make_ctx(ScriptedRandom()))
