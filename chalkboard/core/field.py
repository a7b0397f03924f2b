"""Field geometry and coordinate system.

The drawing surface stores positions normalized to [0, 1] on both axes.
All physics (distances, speeds, ellipses) happens in yards, so every
calculation converts with to_yards / from_yards first.
"""

from __future__ import annotations

import math

from .vec2 import Vec2


# =============================================================================
# Field Dimensions (yards)
# =============================================================================

FIELD_BEHIND_YARDS = 10.0   # Backfield shown behind the line of scrimmage
FIELD_AHEAD_YARDS = 20.0    # Downfield shown past the line of scrimmage
FIELD_LENGTH_YARDS = FIELD_BEHIND_YARDS + FIELD_AHEAD_YARDS
FIELD_WIDTH_YARDS = 50.0

# Normalized y of the line of scrimmage (measured from the top edge)
LINE_OF_SCRIMMAGE_Y = FIELD_AHEAD_YARDS / FIELD_LENGTH_YARDS

# Tolerance used for every degenerate-geometry guard
EPSILON = 1e-6


# =============================================================================
# Conversions
# =============================================================================

def to_yards(pos: Vec2) -> Vec2:
    """Normalized field coordinate -> yards from the top-left corner."""
    return pos.scaled(FIELD_WIDTH_YARDS, FIELD_LENGTH_YARDS)


def from_yards(pos: Vec2) -> Vec2:
    """Yards from the top-left corner -> normalized field coordinate."""
    return pos.scaled(1.0 / FIELD_WIDTH_YARDS, 1.0 / FIELD_LENGTH_YARDS)


def distance_yards(a: Vec2, b: Vec2) -> float:
    """Physical distance between two normalized points."""
    dx = (b.x - a.x) * FIELD_WIDTH_YARDS
    dy = (b.y - a.y) * FIELD_LENGTH_YARDS
    return math.hypot(dx, dy)


def clamp_to_field_yards(pos: Vec2) -> Vec2:
    """Clamp a position in yards to the drawn field."""
    return Vec2(
        max(0.0, min(FIELD_WIDTH_YARDS, pos.x)),
        max(0.0, min(FIELD_LENGTH_YARDS, pos.y)),
    )


# =============================================================================
# Ellipse Geometry
# =============================================================================

def ellipse_norm(point: Vec2, center: Vec2, radius_x: float, radius_y: float) -> float:
    """Normalized ellipse distance of a point (1.0 = on the boundary).

    Radii are in yards; point and center are normalized.
    """
    delta = to_yards(point) - to_yards(center)
    nx = delta.x / radius_x if radius_x > 0 else 0.0
    ny = delta.y / radius_y if radius_y > 0 else 0.0
    return math.hypot(nx, ny)


def clamp_to_ellipse(point: Vec2, center: Vec2, radius_x: float, radius_y: float) -> Vec2:
    """Project a point outside the ellipse back onto its boundary.

    Scaling happens in yards so a non-square field does not distort the
    ellipse. Points already inside are returned unchanged.
    """
    norm = ellipse_norm(point, center, radius_x, radius_y)
    if norm <= 1.0:
        return point
    center_yards = to_yards(center)
    delta = to_yards(point) - center_yards
    return from_yards(center_yards + delta * (1.0 / norm))
