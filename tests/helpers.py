"""Builders for compact test plays."""

from __future__ import annotations

from chalkboard.core.entities import (
    Player,
    RouteAction,
    RouteActionType,
    RouteLeg,
    Team,
)
from chalkboard.core.vec2 import Vec2


def offense(player_id, start, route=(), start_delay=0.0, start_action=None) -> Player:
    """Build an offensive player from plain tuples."""
    return Player(
        id=player_id,
        label=player_id.upper(),
        team=Team.OFFENSE,
        start=Vec2(*start),
        route=tuple(route),
        start_delay=start_delay,
        start_action=start_action,
    )


def defense(player_id, start, assignment=None) -> Player:
    """Build a defensive player from plain tuples."""
    return Player(
        id=player_id,
        label=player_id.upper(),
        team=Team.DEFENSE,
        start=Vec2(*start),
        assignment=assignment,
    )


def leg(to, speed, delay=0.0, action=None) -> RouteLeg:
    return RouteLeg(to=Vec2(*to), speed=speed, delay=delay, action=action)


def pass_to(target_id: str) -> RouteAction:
    return RouteAction(type=RouteActionType.PASS, target_id=target_id)


def handoff_to(target_id: str) -> RouteAction:
    return RouteAction(type=RouteActionType.HANDOFF, target_id=target_id)


STATIONARY_PASS_PAYLOAD = {
    "players": [
        {
            "id": "o1", "label": "QB", "team": "offense",
            "start": {"x": 0, "y": 0},
            "route": [{"to": {"x": 0, "y": 0}, "speed": 5,
                       "action": {"type": "pass", "targetId": "o2"}}],
        },
        {"id": "o2", "label": "WR", "team": "offense", "start": {"x": 1, "y": 0}},
        {
            "id": "d1", "label": "CB", "team": "defense",
            "start": {"x": 0.8, "y": 0.2},
            "assignment": {"type": "man", "targetId": "o2", "speed": 6},
        },
    ]
}
