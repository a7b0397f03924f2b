"""
Simulation configuration.

Tunable constants for ball flight and defensive pursuit.
All settings can be overridden via environment variables.
"""

import os
from dataclasses import dataclass, field
from typing import Optional


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    return float(raw)


@dataclass
class SimulationConfig:
    """Configuration for timeline queries."""

    # Ball flight
    ball_speed_yps: float = field(
        default_factory=lambda: _env_float("CHALKBOARD_BALL_SPEED", 18.0)
    )

    # Defensive pursuit
    cushion_radius_yards: float = field(
        default_factory=lambda: _env_float("CHALKBOARD_CUSHION_YARDS", 1.0)
    )
    default_defense_speed: float = field(
        default_factory=lambda: _env_float("CHALKBOARD_DEFENSE_SPEED", 6.0)
    )
    step_seconds: float = field(
        default_factory=lambda: _env_float("CHALKBOARD_STEP_SECONDS", 0.05)
    )
    min_separation_yards: float = field(
        default_factory=lambda: _env_float("CHALKBOARD_MIN_SEPARATION", 0.0)
    )
    zone_boundary_weight: float = field(
        default_factory=lambda: _env_float("CHALKBOARD_ZONE_BOUNDARY_WEIGHT", 10.0)
    )

    @classmethod
    def from_env(cls) -> "SimulationConfig":
        """Create config from environment variables."""
        return cls()

    def validate(self) -> list[str]:
        """Validate configuration, return list of errors."""
        errors = []
        if self.ball_speed_yps <= 0:
            errors.append("CHALKBOARD_BALL_SPEED must be positive")
        if self.cushion_radius_yards < 0:
            errors.append("CHALKBOARD_CUSHION_YARDS must not be negative")
        if self.default_defense_speed <= 0:
            errors.append("CHALKBOARD_DEFENSE_SPEED must be positive")
        if self.step_seconds <= 0:
            errors.append("CHALKBOARD_STEP_SECONDS must be positive")
        if self.min_separation_yards < 0:
            errors.append("CHALKBOARD_MIN_SEPARATION must not be negative")
        return errors


# Singleton config instance
_config: Optional[SimulationConfig] = None


def get_config() -> SimulationConfig:
    """Get the global simulation configuration."""
    global _config
    if _config is None:
        _config = SimulationConfig.from_env()
    return _config


def reset_config() -> None:
    """Drop the cached config so the next get_config() re-reads the environment."""
    global _config
    _config = None
