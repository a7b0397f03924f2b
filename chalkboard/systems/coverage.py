"""Coverage system - defender positions under man or zone assignments.

Defenders are integrated forward from t=0 in fixed steps on every call:
there is no cached state, so scrubbing backward or forward gives the same
answer as playing straight through.

- Man coverage: chase a cushion point a fixed distance from the target,
  on the defender's side of them.
- Zone coverage: stay inside an ellipse around the alignment and shade
  toward the most relevant offensive player.

Both may apply an optional minimum separation from the nearest offensive
player. All geometry is done in yards.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from typing import List, Optional

from ..core.config import SimulationConfig, get_config
from ..core.entities import ManAssignment, Play, Player, ZoneAssignment
from ..core.field import (
    EPSILON,
    clamp_to_ellipse,
    clamp_to_field_yards,
    distance_yards,
    from_yards,
    to_yards,
)
from ..core.vec2 import Vec2
from .route_timeline import position_at

logger = logging.getLogger(__name__)


DEFAULT_COVERAGE_RADIUS_YARDS = 1.0
DEFAULT_DEFENSE_SPEED_YPS = 6.0
DEFAULT_STEP_SECONDS = 0.05
DEFAULT_ZONE_BOUNDARY_WEIGHT = 10.0


# =============================================================================
# Options
# =============================================================================

@dataclass(frozen=True)
class DefenseOptions:
    """Pursuit tuning.

    Attributes:
        cushion_radius_yards: Distance a man defender keeps from the target
        default_speed: Used when an assignment has no speed of its own
        step_seconds: Integration step
        min_separation_yards: 0 disables the separation push-back
        zone_boundary_weight: Weight of a player's distance outside the
            zone when picking the zone target
    """
    cushion_radius_yards: float = DEFAULT_COVERAGE_RADIUS_YARDS
    default_speed: float = DEFAULT_DEFENSE_SPEED_YPS
    step_seconds: float = DEFAULT_STEP_SECONDS
    min_separation_yards: float = 0.0
    zone_boundary_weight: float = DEFAULT_ZONE_BOUNDARY_WEIGHT

    @classmethod
    def from_config(cls, config: Optional[SimulationConfig] = None) -> DefenseOptions:
        config = config or get_config()
        return cls(
            cushion_radius_yards=config.cushion_radius_yards,
            default_speed=config.default_defense_speed,
            step_seconds=config.step_seconds,
            min_separation_yards=config.min_separation_yards,
            zone_boundary_weight=config.zone_boundary_weight,
        )


@dataclass(frozen=True)
class _Zone:
    center: Vec2
    radius_x: float
    radius_y: float

    def clamp(self, point: Vec2) -> Vec2:
        return clamp_to_ellipse(point, self.center, self.radius_x, self.radius_y)


# =============================================================================
# Public Query
# =============================================================================

def position_with_defense(
    play: Play,
    player: Player,
    t: float,
    options: Optional[DefenseOptions] = None,
) -> Vec2:
    """Position of any player at time t, including defensive reactions.

    Offensive players follow their routes. Defenders without an assignment
    hold their alignment.
    """
    if not player.is_defense:
        return position_at(player, t)

    assignment = player.assignment
    if assignment is None:
        return player.start

    options = options or DefenseOptions.from_config()
    if options.step_seconds <= 0:
        logger.debug(f"Step {options.step_seconds} is not positive, using {DEFAULT_STEP_SECONDS}s")
        options = replace(options, step_seconds=DEFAULT_STEP_SECONDS)

    if assignment.type == "man":
        return _man_coverage_position(play, player, assignment, t, options)
    return _zone_coverage_position(play, player, assignment, t, options)


def _assignment_speed(speed: Optional[float], options: DefenseOptions) -> float:
    if speed is not None and speed > 0:
        return speed
    return options.default_speed


def _time_steps(t: float, step: float):
    """Yield (step_end_time, dt) pairs from 0 to t."""
    current = 0.0
    while current < t:
        dt = min(step, t - current)
        yield current + dt, dt
        current += dt


# =============================================================================
# Man Coverage
# =============================================================================

def _man_coverage_position(
    play: Play,
    defender: Player,
    assignment: ManAssignment,
    t: float,
    options: DefenseOptions,
) -> Vec2:
    target = play.get_player(assignment.target_id)
    if target is None:
        logger.debug(f"{defender.id}: man target {assignment.target_id} missing, holding alignment")
        return defender.start

    speed = _assignment_speed(assignment.speed, options)
    offense = play.offense
    position = defender.start

    for step_time, dt in _time_steps(t, options.step_seconds):
        target_pos = position_at(target, step_time)
        desired = _step_toward_cushion(position, target_pos, options.cushion_radius_yards, speed, dt)
        position = _apply_separation(
            offense, step_time, position, desired, speed * dt, options.min_separation_yards
        )

    return position


def _step_toward_cushion(
    defender: Vec2,
    target: Vec2,
    radius_yards: float,
    speed: float,
    dt: float,
) -> Vec2:
    """Move at most speed*dt toward the point radius_yards off the target."""
    defender_yards = to_yards(defender)
    target_yards = to_yards(target)
    delta = defender_yards - target_yards
    distance = delta.length()

    if distance < EPSILON:
        desired = target_yards + Vec2(radius_yards, 0.0)
    else:
        desired = target_yards + delta * (radius_yards / distance)

    to_desired = desired - defender_yards
    gap = to_desired.length()
    if gap < EPSILON:
        return defender

    max_step = max(0.0, speed * dt)
    if gap <= max_step:
        return from_yards(desired)
    return from_yards(defender_yards + to_desired * (max_step / gap))


# =============================================================================
# Zone Coverage
# =============================================================================

def _zone_coverage_position(
    play: Play,
    defender: Player,
    assignment: ZoneAssignment,
    t: float,
    options: DefenseOptions,
) -> Vec2:
    zone = _Zone(defender.start, assignment.radius_x, assignment.radius_y)
    speed = _assignment_speed(assignment.speed, options)
    offense = play.offense
    position = defender.start

    for step_time, dt in _time_steps(t, options.step_seconds):
        target = _pick_zone_target(offense, step_time, zone, position, options.zone_boundary_weight)
        desired = zone.clamp(target) if target is not None else zone.center
        stepped = _step_within_zone(position, desired, zone, speed, dt)
        position = _apply_separation(
            offense, step_time, position, stepped, speed * dt, options.min_separation_yards, zone
        )

    return position


def _pick_zone_target(
    offense: List[Player],
    t: float,
    zone: _Zone,
    defender: Vec2,
    boundary_weight: float,
) -> Optional[Vec2]:
    """Clamped point of the offensive player scoring lowest.

    Score = boundary_weight * (player's distance outside the zone)
            + defender's distance to the clamped point
    """
    best: Optional[Vec2] = None
    best_score = math.inf

    for player in offense:
        pos = position_at(player, t)
        clamped = zone.clamp(pos)
        score = distance_yards(pos, clamped) * boundary_weight + distance_yards(defender, clamped)
        if score < best_score:
            best_score = score
            best = clamped

    return best


def _step_within_zone(
    defender: Vec2,
    desired: Vec2,
    zone: _Zone,
    speed: float,
    dt: float,
) -> Vec2:
    defender_yards = to_yards(defender)
    to_desired = to_yards(desired) - defender_yards
    gap = to_desired.length()
    if gap < EPSILON:
        return defender

    max_step = max(0.0, speed * dt)
    scale = min(1.0, max_step / gap)
    return zone.clamp(from_yards(defender_yards + to_desired * scale))


# =============================================================================
# Separation
# =============================================================================

def _apply_separation(
    offense: List[Player],
    t: float,
    previous: Vec2,
    desired: Vec2,
    max_step: float,
    min_separation_yards: float,
    zone: Optional[_Zone] = None,
) -> Vec2:
    """Push the stepped point out of the nearest offensive player's bubble.

    The pushed point is clamped to the field (and the zone, if any), then
    the step from `previous` is limited to max_step again.
    """
    if min_separation_yards <= 0 or not offense:
        return desired

    desired_yards = to_yards(desired)
    previous_yards = to_yards(previous)

    closest: Optional[Vec2] = None
    closest_distance = math.inf
    for player in offense:
        pos_yards = to_yards(position_at(player, t))
        distance = desired_yards.distance_to(pos_yards)
        if distance < closest_distance:
            closest_distance = distance
            closest = pos_yards

    if closest is None or closest_distance >= min_separation_yards:
        return desired

    away = desired_yards - closest
    if away.length() < EPSILON:
        away = previous_yards - closest
    if away.length() < EPSILON:
        away = Vec2(1.0, 0.0)

    pushed = closest + away * (min_separation_yards / away.length())
    adjusted = from_yards(clamp_to_field_yards(pushed))
    if zone is not None:
        adjusted = zone.clamp(adjusted)

    step = to_yards(adjusted) - previous_yards
    step_distance = step.length()
    if step_distance <= max_step or max_step <= 0:
        return adjusted
    return from_yards(previous_yards + step * (max_step / step_distance))
