"""2D Vector implementation for the play timeline.

Positions are normalized field coordinates in [0, 1] x [0, 1].
Velocities and offsets produced inside the physics layer are in yards;
see core.field for the conversions.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Vec2:
    """Immutable 2D vector.

    Coordinate system:
        (0, 0) = Top-left corner of the drawn field
        +X = Across the field (width)
        +Y = Down the field toward the offense's backfield (length)
    """
    x: float = 0.0
    y: float = 0.0

    # =========================================================================
    # Arithmetic Operations
    # =========================================================================

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    # =========================================================================
    # Vector Operations
    # =========================================================================

    def dot(self, other: Vec2) -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y

    def length(self) -> float:
        """Magnitude of vector."""
        return math.hypot(self.x, self.y)

    def length_squared(self) -> float:
        """Squared magnitude (avoids sqrt)."""
        return self.x * self.x + self.y * self.y

    def distance_to(self, other: Vec2) -> float:
        """Euclidean distance to another point (same units as the vectors)."""
        return (other - self).length()

    def lerp(self, other: Vec2, t: float) -> Vec2:
        """Linear interpolation to another vector."""
        return Vec2(
            self.x + (other.x - self.x) * t,
            self.y + (other.y - self.y) * t
        )

    def scaled(self, sx: float, sy: float) -> Vec2:
        """Per-axis scale (used for yard conversion)."""
        return Vec2(self.x * sx, self.y * sy)

    # =========================================================================
    # Utility
    # =========================================================================

    def __repr__(self) -> str:
        return f"Vec2({self.x:.4f}, {self.y:.4f})"

    def __str__(self) -> str:
        return f"({self.x:.3f}, {self.y:.3f})"

    @classmethod
    def zero(cls) -> Vec2:
        """Zero vector."""
        return cls(0.0, 0.0)
