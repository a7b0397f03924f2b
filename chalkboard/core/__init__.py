"""Core layer - foundational types and utilities."""

from .vec2 import Vec2
from .field import (
    EPSILON,
    FIELD_LENGTH_YARDS,
    FIELD_WIDTH_YARDS,
    clamp_to_ellipse,
    distance_yards,
    from_yards,
    to_yards,
)
from .entities import (
    DefenseAssignment,
    ManAssignment,
    Play,
    Player,
    RouteAction,
    RouteActionType,
    RouteLeg,
    Team,
    ZoneAssignment,
)
from .events import BallEvent
from .config import SimulationConfig, get_config

__all__ = [
    "Vec2",
    "EPSILON",
    "FIELD_LENGTH_YARDS",
    "FIELD_WIDTH_YARDS",
    "clamp_to_ellipse",
    "distance_yards",
    "from_yards",
    "to_yards",
    "DefenseAssignment",
    "ManAssignment",
    "Play",
    "Player",
    "RouteAction",
    "RouteActionType",
    "RouteLeg",
    "Team",
    "ZoneAssignment",
    "BallEvent",
    "SimulationConfig",
    "get_config",
]
