"""Pydantic schemas for play input.

This is the validation boundary: everything that reaches the timeline
functions has been through these models, so the core can assume positive
speeds and radii. Keys are accepted in snake_case or in the camelCase used
by the drawing front end (startDelay, targetId, radiusX, ...).
"""

from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from chalkboard.core.entities import (
    ManAssignment,
    Play,
    Player,
    RouteAction,
    RouteActionType,
    RouteLeg,
    Team,
    ZoneAssignment,
)
from chalkboard.core.vec2 import Vec2

FiniteFloat = Annotated[float, Field(allow_inf_nan=False)]
PositiveFloat = Annotated[float, Field(gt=0, allow_inf_nan=False)]


class _Schema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class Vec2Schema(_Schema):
    """Normalized field coordinate."""

    x: FiniteFloat
    y: FiniteFloat

    def to_vec(self) -> Vec2:
        return Vec2(self.x, self.y)


class RouteActionSchema(_Schema):
    """Pass or handoff trigger."""

    type: Literal["pass", "handoff"]
    target_id: str = Field(alias="targetId")

    def to_action(self) -> RouteAction:
        return RouteAction(type=RouteActionType(self.type), target_id=self.target_id)


class RouteLegSchema(_Schema):
    """One route leg."""

    to: Vec2Schema
    speed: PositiveFloat = Field(description="Yards per second")
    delay: FiniteFloat = Field(default=0.0, ge=0, description="Wait at `to` in seconds")
    action: Optional[RouteActionSchema] = None

    def to_leg(self) -> RouteLeg:
        return RouteLeg(
            to=self.to.to_vec(),
            speed=self.speed,
            delay=self.delay,
            action=self.action.to_action() if self.action else None,
        )


class ManAssignmentSchema(_Schema):
    """Man coverage on one offensive player."""

    type: Literal["man"]
    target_id: str = Field(alias="targetId")
    speed: Optional[PositiveFloat] = None

    def to_assignment(self) -> ManAssignment:
        return ManAssignment(target_id=self.target_id, speed=self.speed)


class ZoneAssignmentSchema(_Schema):
    """Elliptical zone around the defender's alignment (radii in yards)."""

    type: Literal["zone"]
    radius_x: PositiveFloat = Field(alias="radiusX")
    radius_y: PositiveFloat = Field(alias="radiusY")
    speed: Optional[PositiveFloat] = None

    def to_assignment(self) -> ZoneAssignment:
        return ZoneAssignment(radius_x=self.radius_x, radius_y=self.radius_y, speed=self.speed)


AssignmentSchema = Annotated[
    Union[ManAssignmentSchema, ZoneAssignmentSchema],
    Field(discriminator="type"),
]


class PlayerSchema(_Schema):
    """Schema for a drawn player."""

    id: str
    label: str = ""
    team: Literal["offense", "defense"]
    start: Vec2Schema
    route: List[RouteLegSchema] = Field(default_factory=list)
    start_delay: FiniteFloat = Field(default=0.0, alias="startDelay")
    start_action: Optional[RouteActionSchema] = Field(default=None, alias="startAction")
    assignment: Optional[AssignmentSchema] = None

    def to_player(self) -> Player:
        """Build the core Player, dropping fields the team cannot carry."""
        team = Team(self.team)
        if team == Team.OFFENSE:
            return Player(
                id=self.id,
                label=self.label,
                team=team,
                start=self.start.to_vec(),
                route=tuple(leg.to_leg() for leg in self.route),
                start_delay=self.start_delay,
                start_action=self.start_action.to_action() if self.start_action else None,
            )
        return Player(
            id=self.id,
            label=self.label,
            team=team,
            start=self.start.to_vec(),
            assignment=self.assignment.to_assignment() if self.assignment else None,
        )


class PlaySchema(_Schema):
    """Schema for a complete play."""

    players: List[PlayerSchema] = Field(default_factory=list)

    def to_play(self) -> Play:
        return Play(players=tuple(p.to_player() for p in self.players))


def load_play(data: dict) -> Play:
    """Validate a decoded play payload and build the core Play.

    Raises:
        pydantic.ValidationError: if the payload is malformed
    """
    return PlaySchema.model_validate(data).to_play()
