"""Tests for GameConfig defaults, derived tick counts and validation."""
import pytest

from night_watch.config import GameConfig
from night_watch.types import ConfigError


def test_defaults_match_sixty_tps_pacing():
    config = GameConfig()
    assert config.tps == 60
    assert config.day_ticks == 600
    assert config.night_ticks == 300


def test_phase_lengths_scale_with_tick_rate():
    """Doubling the tick rate doubles the ticks per phase, not the real time."""
    config = GameConfig(tps=120)
    assert config.day_ticks == 1200
    assert config.night_ticks == 600


def test_config_is_frozen():
    config = GameConfig()
    with pytest.raises(AttributeError):
        config.tps = 30  # type: ignore[misc]


@pytest.mark.parametrize(
    "kwargs",
    [
        {"tps": 0},
        {"tps": -5},
        {"day_seconds": 0.0},
        {"night_seconds": 0.001},
        {"window_width": 64},
        {"window_height": 10},
        {"max_health": 0},
        {"start_health": 0},
        {"start_health": 201},
        {"start_points": -1},
    ],
)
def test_invalid_values_raise_config_error(kwargs):
    with pytest.raises(ConfigError):
        GameConfig(**kwargs)


def test_config_error_is_value_error():
    with pytest.raises(ValueError):
        GameConfig(tps=0)
