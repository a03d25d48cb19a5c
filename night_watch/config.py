"""Game configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass

from night_watch.types import ConfigError


@dataclass(frozen=True)
class GameConfig:
    """Immutable configuration for one game.

    Phase lengths are given in seconds and converted to ticks with ``tps``,
    so changing the tick rate keeps the real-time pacing of a day and a night.

    Attributes:
        tps: Simulation ticks per second (one tick per rendered frame).
        day_seconds: Length of the Day planning phase.
        night_seconds: Length of the Night phase.
        window_width: Width of the play field in pixels.
        window_height: Height of the play field in pixels.
        entity_size: Diameter of a decorative enemy in pixels.
        wrap_margin: Distance past the right edge at which enemies wrap.
        max_health: Upper clamp for health.
    """

    tps: int = 60
    day_seconds: float = 10.0
    night_seconds: float = 5.0
    window_width: int = 1280
    window_height: int = 720
    entity_size: int = 64
    wrap_margin: int = 64
    start_health: int = 100
    start_attack: int = 10
    start_defense: int = 5
    start_points: int = 5
    max_health: int = 200

    def __post_init__(self) -> None:
        if self.tps <= 0:
            raise ConfigError(f"tps must be positive, got {self.tps}")
        if self.day_ticks <= 0 or self.night_ticks <= 0:
            raise ConfigError(
                f"phase lengths must be at least one tick "
                f"(day={self.day_ticks}, night={self.night_ticks})"
            )
        if self.window_width <= self.entity_size or self.window_height <= self.entity_size:
            raise ConfigError(
                f"window {self.window_width}x{self.window_height} is too small "
                f"for entities of size {self.entity_size}"
            )
        if self.max_health <= 0:
            raise ConfigError("max_health must be positive")
        if not 1 <= self.start_health <= self.max_health:
            raise ConfigError(
                f"start_health must be in 1..{self.max_health}, got {self.start_health}"
            )
        if min(self.start_attack, self.start_defense, self.start_points) < 0:
            raise ConfigError("starting attack, defense and points must be >= 0")

    @property
    def day_ticks(self) -> int:
        return round(self.day_seconds * self.tps)

    @property
    def night_ticks(self) -> int:
        return round(self.night_seconds * self.tps)
