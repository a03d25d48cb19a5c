"""Tests for the log wording and the log panel's bookkeeping."""
import pytest

from night_watch.engine import Engine
from night_watch.input import Button
from night_watch.signals import Signal
from night_watch.testing import ScriptedRandom
from night_watch.types import CyclePhase
from night_watch.ui.messages import describe


def _signal(name, day=1, phase=CyclePhase.DAY, **data) -> Signal:
    return Signal(name, day, phase, data)


@pytest.mark.parametrize("signal,text", [
    (_signal("upgrade", kind="attack", cost=1, points=4), "Attack UP for 1 (points left 4)"),
    (_signal("upgrade", kind="heal", cost=1, points=0), "Heal for 1 (points left 0)"),
    (_signal("undo", points=5), "Undid today's purchases (points 5)"),
    (_signal("phase", phase=CyclePhase.NIGHT, old="day", new="night"), "Day -> Night"),
    (_signal("night_report", day=4, phase=CyclePhase.RESULT, damage=12, health_lost=2,
             earned_points=10), "Night 4: 12 damage, -2 HP, +10 points"),
    (_signal("event", outcome="good_day", message="You feel great today! (points x2)"),
     "You feel great today! (points x2)"),
    (_signal("game_over", day=7, phase=None, health=0), "The base fell on day 7"),
    (_signal("session", old="explanation", new="play"), "A new watch begins"),
])
def test_describe(signal, text):
    assert describe(signal) == text


def test_session_moves_outside_play_are_not_logged():
    assert describe(_signal("session", phase=None, old="title", new="explanation")) is None


class TestEventLogPanel:
    @pytest.fixture
    def panel(self):
        pytest.importorskip("pygame")
        from night_watch.ui.log_panel import EventLogPanel
        return EventLogPanel(max_entries=3)

    def test_entries_tagged_with_day_and_category(self, panel, small_config):
        engine = Engine(small_config, rng=ScriptedRandom())
        panel.attach(engine.bus)
        engine.run([[Button.CONFIRM], [], [Button.CONFIRM], [Button.HEAL]])
        assert list(panel.entries) == [
            (1, "A new watch begins", "session"),
            (1, "Heal for 1 (points left 4)", "upgrade"),
        ]

    def test_keeps_latest_entries(self, panel):
        for points in range(5):
            panel.on_signal(_signal("undo", points=points))
        assert [text for _, text, _ in panel.entries] == [
            "Undid today's purchases (points 2)",
            "Undid today's purchases (points 3)",
            "Undid today's purchases (points 4)",
        ]
