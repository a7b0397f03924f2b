"""Core entities - Play, Player, routes and defensive assignments.

Entities are frozen data containers. Every query function treats a Play
as a read-only snapshot; editing produces a new Play.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Literal, Optional, Union

from .vec2 import Vec2


# =============================================================================
# Enums
# =============================================================================

class Team(str, Enum):
    """Which team a player is on."""
    OFFENSE = "offense"
    DEFENSE = "defense"


class RouteActionType(str, Enum):
    """Ball-transfer trigger attached to a route point."""
    PASS = "pass"
    HANDOFF = "handoff"


# =============================================================================
# Routes
# =============================================================================

@dataclass(frozen=True)
class RouteAction:
    """Transfer the ball to target_id when the route point is reached."""
    type: RouteActionType
    target_id: str


@dataclass(frozen=True)
class RouteLeg:
    """One straight-line, constant-speed segment of a route.

    Attributes:
        to: Destination (normalized)
        speed: Yards per second, strictly positive
        delay: Seconds spent standing at `to` before the next leg
        action: Fires at arrival + delay
    """
    to: Vec2
    speed: float
    delay: float = 0.0
    action: Optional[RouteAction] = None

    @property
    def wait(self) -> float:
        return max(0.0, self.delay)


# =============================================================================
# Defensive Assignments
# =============================================================================

@dataclass(frozen=True)
class ManAssignment:
    """Shadow one offensive player at a fixed cushion.

    speed may be omitted, in which case the pursuit default applies.
    """
    target_id: str
    speed: Optional[float] = None
    type: Literal["man"] = "man"


@dataclass(frozen=True)
class ZoneAssignment:
    """Patrol an ellipse (radii in yards) centered on the defender's start."""
    radius_x: float
    radius_y: float
    speed: Optional[float] = None
    type: Literal["zone"] = "zone"


# Closed variant: callers match on `type` and handle both cases.
DefenseAssignment = Union[ManAssignment, ZoneAssignment]


# =============================================================================
# Player / Play
# =============================================================================

@dataclass(frozen=True)
class Player:
    """A player on the drawn play.

    Only offensive players carry route / start_delay / start_action; only
    defensive players carry an assignment.

    Attributes:
        id: Unique identifier
        label: Display label ("QB", "X", "CB1", ...)
        team: Offense or defense
        start: Alignment (normalized)
        route: Ordered legs, evaluated in array order
        start_delay: Shifts the route's time origin; negative values model
            pre-snap motion
        start_action: Fires at max(0, start_delay)
        assignment: Man or zone coverage
    """
    id: str
    label: str = ""
    team: Team = Team.OFFENSE
    start: Vec2 = Vec2(0.0, 0.0)
    route: tuple[RouteLeg, ...] = ()
    start_delay: float = 0.0
    start_action: Optional[RouteAction] = None
    assignment: Optional[DefenseAssignment] = None

    def __post_init__(self) -> None:
        # Accept lists from callers but keep the snapshot immutable
        if not isinstance(self.route, tuple):
            object.__setattr__(self, "route", tuple(self.route))
        if not self.label:
            object.__setattr__(self, "label", self.id)

    @property
    def is_offense(self) -> bool:
        return self.team == Team.OFFENSE

    @property
    def is_defense(self) -> bool:
        return self.team == Team.DEFENSE

    def __repr__(self) -> str:
        return f"Player({self.id}, {self.team.value}, start={self.start})"


@dataclass(frozen=True)
class Play:
    """The complete scene description."""
    players: tuple[Player, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.players, tuple):
            object.__setattr__(self, "players", tuple(self.players))

    @property
    def offense(self) -> list[Player]:
        return [p for p in self.players if p.is_offense]

    @property
    def defense(self) -> list[Player]:
        return [p for p in self.players if p.is_defense]

    def get_player(self, player_id: str) -> Optional[Player]:
        """Find a player by id, or None for a dangling reference."""
        for player in self.players:
            if player.id == player_id:
                return player
        return None

    @classmethod
    def empty(cls) -> Play:
        return cls(players=())
