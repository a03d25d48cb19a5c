from __future__ import annotations

import pytest

from night_watch.config import GameConfig
from night_watch.testing import ScriptedRandom


@pytest.fixture
def small_config() -> GameConfig:
    """Ten-tick days and five-tick nights."""
    return GameConfig(tps=10, day_seconds=1.0, night_seconds=0.5)


@pytest.fixture
def rng() -> ScriptedRandom:
    return ScriptedRandom()
