"""Pass intercept solver.

Finds the earliest moment a ball thrown at constant speed from a fixed
origin can meet a receiver who is running a route. The receiver's motion
is piecewise linear (see route_timeline.motion_segments), so each segment
reduces to a quadratic in t:

    |r(t) - origin| = S * (t - T)

    r(t)  = receiver position in yards, r0 + v * t on the segment
    S     = ball speed (yards/s)
    T     = release time

Squaring and collecting terms with d = r0 - origin:

    (|v|^2 - S^2) t^2 + 2 (d.v + S^2 T) t + (|d|^2 - S^2 T^2) = 0
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional

from ..core.entities import Player
from ..core.field import EPSILON, to_yards
from ..core.vec2 import Vec2
from ..systems.route_timeline import MotionSegment, motion_segments, position_at


@dataclass(frozen=True)
class Intercept:
    """Where and when the ball meets the receiver."""
    time: float
    point: Vec2


def solve_segment(
    origin: Vec2,
    release_time: float,
    ball_speed: float,
    segment: MotionSegment,
) -> Optional[float]:
    """Earliest catch time on one segment, or None.

    Args:
        origin: Release point (normalized)
        release_time: Seconds when the ball leaves the passer
        ball_speed: Yards per second
        segment: Receiver motion segment

    Returns:
        Catch time within [max(segment start, release), segment end], or None
    """
    window_start = max(segment.start_time, release_time)
    window_end = segment.end_time
    if window_start > window_end:
        return None

    v = segment.velocity_yards
    r0 = segment.start_yards - v * segment.start_time
    d = r0 - to_yards(origin)
    s2 = ball_speed * ball_speed

    a = v.length_squared() - s2
    b = 2 * (d.dot(v) + s2 * release_time)
    c = d.length_squared() - s2 * release_time * release_time

    roots: List[float] = []
    if abs(a) < EPSILON:
        # Receiver speed equals ball speed: the quadratic degenerates
        if abs(b) < EPSILON:
            return None
        roots.append(-c / b)
    else:
        disc = b * b - 4 * a * c
        if disc < 0:
            return None
        root = math.sqrt(disc)
        roots.append((-b - root) / (2 * a))
        roots.append((-b + root) / (2 * a))

    best: Optional[float] = None
    for t in roots:
        if t < window_start - EPSILON or t > window_end + EPSILON:
            continue
        if t < release_time - EPSILON:
            continue
        if best is None or t < best:
            best = t
    return best


def find_intercept(
    origin: Vec2,
    release_time: float,
    receiver: Player,
    ball_speed: float,
) -> Optional[Intercept]:
    """Earliest catchable time and point for a throw, or None.

    None means the ball can never reach the receiver (e.g. too slow to
    catch a receding target) or the ball speed is not positive.
    """
    if ball_speed <= 0:
        return None

    best_time: Optional[float] = None
    for segment in motion_segments(receiver):
        solution = solve_segment(origin, release_time, ball_speed, segment)
        if solution is None:
            continue
        if best_time is None or solution < best_time:
            best_time = solution

    if best_time is None:
        return None

    return Intercept(time=best_time, point=position_at(receiver, best_time))
