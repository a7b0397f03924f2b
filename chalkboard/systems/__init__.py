"""Systems - timeline queries that operate on a Play snapshot."""

from .route_timeline import MotionSegment, motion_segments, position_at
from .ball_events import collect_ball_events

__all__ = [
    "MotionSegment",
    "motion_segments",
    "position_at",
    "collect_ball_events",
]
