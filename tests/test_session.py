"""Tests for the outer Title / Explanation / Play / GameOver machine."""
from night_watch.engine import Engine
from night_watch.events import NOTHING
from night_watch.input import Button
from night_watch.testing import ScriptedRandom
from night_watch.types import CyclePhase, SessionState

CONFIRM = [Button.CONFIRM]
NOTHING_HELD: list[Button] = []


def _engine(config) -> Engine:
    return Engine(config, rng=ScriptedRandom())


def _enter_play(engine: Engine) -> None:
    engine.step(CONFIRM)
    engine.step(NOTHING_HELD)
    engine.step(CONFIRM)


def _fall_tonight(engine: Engine) -> int:
    """Force a lethal night and run it. Returns ticks until game over."""
    engine.game.day = 20
    engine.step([Button.SKIP])
    for n in range(1, 50):
        engine.step(NOTHING_HELD)
        if engine.game.session.state is SessionState.GAME_OVER:
            return n
    raise AssertionError("base never fell")


class TestTransitions:
    def test_starts_on_title(self, small_config):
        assert _engine(small_config).game.session.state is SessionState.TITLE

    def test_confirm_edge_moves_once(self, small_config):
        engine = _engine(small_config)
        engine.step(CONFIRM)
        assert engine.game.session.state is SessionState.EXPLANATION
        for _ in range(5):
            engine.step(CONFIRM)
        assert engine.game.session.state is SessionState.EXPLANATION

    def test_explanation_to_play(self, small_config):
        engine = _engine(small_config)
        _enter_play(engine)
        assert engine.game.session.state is SessionState.PLAY
        assert engine.game.phase is CyclePhase.DAY

    def test_other_buttons_ignored_outside_play(self, small_config):
        engine = _engine(small_config)
        engine.step([Button.UPGRADE_ATTACK, Button.UNDO, Button.SKIP, Button.HEAL])
        assert engine.game.session.state is SessionState.TITLE
        assert engine.game.economy.points == 5

    def test_held_confirm_does_not_touch_first_day(self, small_config):
        engine = _engine(small_config)
        _enter_play(engine)
        engine.step(CONFIRM)
        assert engine.game.session.state is SessionState.PLAY
        assert engine.game.phase is CyclePhase.DAY
        assert engine.game.phase_remaining == 9


class TestPlayEntry:
    def test_play_entry_resets_everything(self, small_config):
        engine = _engine(small_config)
        game = engine.game
        game.economy.attack = 77
        game.economy.points = 0
        game.day = 4
        game.event_message = "stale"
        _enter_play(engine)
        assert (game.economy.health, game.economy.attack, game.economy.defense,
                game.economy.points) == (100, 10, 5, 5)
        assert game.day == 1
        assert game.event_message == ""
        assert len(game.wave) == 3
        assert game.phase_remaining == 10


class TestGameOver:
    def test_base_falls_on_result_tick(self, small_config):
        engine = _engine(small_config)
        _enter_play(engine)
        assert _fall_tonight(engine) == 5
        assert engine.game.economy.health == 0
        assert engine.game.phase is CyclePhase.RESULT

    def test_survivable_night_stays_in_play(self, small_config):
        engine = _engine(small_config)
        _enter_play(engine)
        engine.step([Button.SKIP])
        for _ in range(5):
            engine.step(NOTHING_HELD)
        assert engine.game.session.state is SessionState.PLAY
        assert engine.game.event_message == NOTHING.message

    def test_confirm_returns_to_title_with_full_reset(self, small_config):
        engine = _engine(small_config)
        _enter_play(engine)
        _fall_tonight(engine)
        engine.step(CONFIRM)
        game = engine.game
        assert game.session.state is SessionState.TITLE
        assert game.day == 1
        assert (game.economy.health, game.economy.attack, game.economy.defense,
                game.economy.points, game.economy.last_earned_points) == (100, 10, 5, 5, 0)
        assert game.wave == []
        assert game.event_message == ""
        assert game.phase is CyclePhase.DAY

    def test_game_over_is_sticky_without_confirm(self, small_config):
        engine = _engine(small_config)
        _enter_play(engine)
        _fall_tonight(engine)
        for _ in range(10):
            engine.step([Button.UPGRADE_ATTACK])
            engine.step(NOTHING_HELD)
        assert engine.game.session.state is SessionState.GAME_OVER

    def test_new_session_after_game_over(self, small_config):
        engine = _engine(small_config)
        _enter_play(engine)
        _fall_tonight(engine)
        engine.step(CONFIRM)
        engine.step(NOTHING_HELD)
        _enter_play(engine)
        assert engine.game.session.state is SessionState.PLAY
        assert engine.game.economy.health == 100

    def test_signals(self, small_config):
        engine = _engine(small_config)
        sessions = []
        falls = []
        engine.bus.subscribe("session", lambda s: sessions.append((s.data["old"], s.data["new"])))
        engine.bus.subscribe("game_over", lambda s: falls.append((s.day, s.phase, s.data["health"])))
        _enter_play(engine)
        _fall_tonight(engine)
        engine.step(CONFIRM)
        assert sessions == [
            ("title", "explanation"),
            ("explanation", "play"),
            ("play", "game_over"),
            ("game_over", "title"),
        ]
        assert falls == [(20, None, 0)]
