"""Route timeline - closed-form player position at any time.

An offensive player's route is a list of constant-speed legs, each
optionally followed by a wait. Position at time t is found by walking the
legs with the elapsed time budget; no state is carried between calls, so
any scrub position (including negative pre-snap times) is answered
directly.

The same legs are also exposed as a table of MotionSegments (one
constant-velocity piece per leg or wait) for the intercept solver.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, List

from ..core.entities import Play, Player, RouteLeg
from ..core.field import distance_yards, to_yards
from ..core.vec2 import Vec2


# =============================================================================
# Leg Timing
# =============================================================================

def leg_duration(origin: Vec2, leg: RouteLeg) -> float:
    """Seconds needed to run a leg starting at origin (0 for a zero-length leg)."""
    if leg.speed <= 0:
        return 0.0
    distance = distance_yards(origin, leg.to)
    if distance == 0:
        return 0.0
    return distance / leg.speed


def route_distance_yards(start: Vec2, legs: Iterable[RouteLeg]) -> float:
    """Total path length of a route in yards."""
    total = 0.0
    current = start
    for leg in legs:
        total += distance_yards(current, leg.to)
        current = leg.to
    return total


def leg_arrival_times(player: Player) -> List[float]:
    """Absolute arrival time at each leg's destination.

    Waits are included in the time of every later leg, not in the arrival
    at the leg that carries them.
    """
    arrivals: List[float] = []
    if not player.is_offense:
        return arrivals

    elapsed = player.start_delay
    origin = player.start
    for leg in player.route:
        elapsed += leg_duration(origin, leg)
        arrivals.append(elapsed)
        elapsed += leg.wait
        origin = leg.to
    return arrivals


def route_duration(player: Player) -> float:
    """Absolute time at which a player's route (including waits) ends."""
    if not player.is_offense or not player.route:
        return 0.0

    total = player.start_delay
    origin = player.start
    for leg in player.route:
        total += leg_duration(origin, leg) + leg.wait
        origin = leg.to
    return total


# =============================================================================
# Position Queries
# =============================================================================

def position_at(player: Player, t: float) -> Vec2:
    """Where a player stands at time t (route only, no coverage).

    Defenders and offensive players without a route never move. Before
    start_delay the player holds the alignment; past the end of the route
    they hold the final point.
    """
    if not player.is_offense or not player.route:
        return player.start

    remaining = max(t - player.start_delay, 0.0)
    origin = player.start

    for leg in player.route:
        duration = leg_duration(origin, leg)
        if duration > 0:
            if remaining <= duration:
                return origin.lerp(leg.to, remaining / duration)
            remaining -= duration
        origin = leg.to

        # Standing at the leg end for its wait
        if remaining <= leg.wait:
            return origin
        remaining -= leg.wait

    return origin


def play_duration(play: Play) -> float:
    """Longest route end time across the offense (never negative)."""
    longest = 0.0
    for player in play.offense:
        longest = max(longest, route_duration(player))
    return longest


def playback_start_time(play: Play) -> float:
    """Earliest time worth showing: 0 or the earliest pre-snap start."""
    earliest = 0.0
    for player in play.offense:
        earliest = min(earliest, player.start_delay)
    return earliest


# =============================================================================
# Segment Table
# =============================================================================

@dataclass(frozen=True)
class MotionSegment:
    """A time interval during which a player moves at constant velocity.

    Attributes:
        start_time: Segment start (seconds)
        end_time: Segment end (seconds, may be math.inf)
        start: Position at start_time (normalized)
        end: Position at end_time (normalized)
        velocity_yards: Velocity in yards per second
    """
    start_time: float
    end_time: float
    start: Vec2
    end: Vec2
    velocity_yards: Vec2

    @property
    def is_stationary(self) -> bool:
        return self.velocity_yards.length_squared() == 0

    @property
    def start_yards(self) -> Vec2:
        return to_yards(self.start)


def motion_segments(player: Player) -> List[MotionSegment]:
    """Break a player's motion into constant-velocity segments.

    Produces a stationary segment for a positive start_delay, one segment
    per leg, one per wait, and a final open-ended stationary segment.
    Defenders (ignoring coverage) are a single stationary segment.
    """
    still = Vec2.zero()
    if not player.is_offense:
        return [MotionSegment(0.0, math.inf, player.start, player.start, still)]

    segments: List[MotionSegment] = []
    current_time = player.start_delay
    origin = player.start

    if player.start_delay > 0:
        segments.append(MotionSegment(0.0, player.start_delay, origin, origin, still))

    for leg in player.route:
        duration = leg_duration(origin, leg)
        if duration > 0:
            velocity = (to_yards(leg.to) - to_yards(origin)) * (1.0 / duration)
        else:
            velocity = still
        segments.append(MotionSegment(current_time, current_time + duration, origin, leg.to, velocity))
        current_time += duration
        origin = leg.to

        if leg.wait > 0:
            segments.append(MotionSegment(current_time, current_time + leg.wait, origin, origin, still))
            current_time += leg.wait

    segments.append(MotionSegment(current_time, math.inf, origin, origin, still))
    return segments
