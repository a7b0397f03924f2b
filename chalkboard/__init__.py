"""Chalkboard - play timeline simulation engine.

Given a drawn play (routes, pass/handoff actions, defensive assignments),
answers point-in-time queries:
- Where is every player?
- Who has the ball, or where is it in flight?
- Where has each defender moved under man or zone coverage?
"""

__version__ = "0.1.0"

from chalkboard.core import Play, Player, Vec2
from chalkboard.systems.route_timeline import position_at, play_duration
from chalkboard.systems.ball import (
    DEFAULT_BALL_SPEED_YPS,
    BallState,
    get_ball_end_time,
    get_ball_state,
)
from chalkboard.systems.coverage import DefenseOptions, position_with_defense

__all__ = [
    "Play",
    "Player",
    "Vec2",
    "position_at",
    "play_duration",
    "DEFAULT_BALL_SPEED_YPS",
    "BallState",
    "get_ball_end_time",
    "get_ball_state",
    "DefenseOptions",
    "position_with_defense",
]
