"""Ball system - who has the ball, or where it is in flight, at time t.

The ball starts with the first offensive player. Ball events are replayed
in (time, order) order as a small state machine:

- An event only applies if the ball has landed from the previous throw
  and the event's passer currently holds it.
- The target is resolved and the intercept solver decides when the ball
  arrives. No solution means the throw never happens.
- An arrival at the release instant is a handoff: possession changes
  immediately.
- If the query time falls during the flight, the ball is reported in the
  air; otherwise possession changes and replay continues.

Every query replays from scratch, so results depend only on (play, t).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional

from ..core.entities import Play, Player
from ..core.events import BallEvent
from ..core.field import EPSILON
from ..core.vec2 import Vec2
from ..physics.intercept import Intercept, find_intercept
from .ball_events import collect_ball_events
from .route_timeline import position_at

logger = logging.getLogger(__name__)


DEFAULT_BALL_SPEED_YPS = 18.0


class BallPhase(str, Enum):
    """Coarse ball status for display."""
    NONE = "none"            # No offense on the field
    HELD = "held"
    IN_FLIGHT = "in_flight"


@dataclass(frozen=True)
class BallFlight:
    """Flight arc of a ball in the air."""
    start: Vec2
    end: Vec2
    progress: float  # 0.0 = release, 1.0 = arrival


@dataclass(frozen=True)
class BallState:
    """Ball status at one instant.

    Attributes:
        position: Ball location, None when there is no offense
        carrier_id: Holder, or the passer while the ball is in flight
        in_air: True between release and arrival
        flight: Arc endpoints and progress while in the air
    """
    position: Optional[Vec2]
    carrier_id: Optional[str]
    in_air: bool = False
    flight: Optional[BallFlight] = None

    @property
    def phase(self) -> BallPhase:
        if self.carrier_id is None:
            return BallPhase.NONE
        if self.in_air:
            return BallPhase.IN_FLIGHT
        return BallPhase.HELD

    @classmethod
    def no_ball(cls) -> BallState:
        return cls(position=None, carrier_id=None)


@dataclass(frozen=True)
class _Transfer:
    """A resolved pass/handoff before it is committed."""
    event: BallEvent
    target: Player
    origin: Vec2
    intercept: Intercept


def _initial_carrier(play: Play) -> Optional[Player]:
    for player in play.players:
        if player.is_offense:
            return player
    return None


def _resolve_transfers(play: Play, ball_speed: float) -> Iterator[_Transfer]:
    """Yield every transfer that actually happens, in order.

    Stops being consumed early by get_ball_state when a query time is
    reached; get_ball_end_time drains it.
    """
    carrier = _initial_carrier(play)
    if carrier is None:
        return

    ball_unavailable_until = 0.0
    for event in collect_ball_events(play):
        if event.time < ball_unavailable_until:
            logger.debug(f"Skipping {event}: ball in flight until {ball_unavailable_until:.2f}s")
            continue
        if event.passer_id != carrier.id:
            continue
        if event.target_id == carrier.id:
            continue

        target = play.get_player(event.target_id)
        if target is None:
            logger.debug(f"Skipping {event}: target {event.target_id} not in play")
            continue

        origin = position_at(carrier, event.time)
        intercept = find_intercept(origin, event.time, target, ball_speed)
        if intercept is None:
            logger.debug(f"Skipping {event}: ball at {ball_speed:.1f} yd/s never reaches {target.id}")
            continue

        yield _Transfer(event=event, target=target, origin=origin, intercept=intercept)

        carrier = target
        ball_unavailable_until = intercept.time


def get_ball_state(play: Play, t: float, ball_speed: float = DEFAULT_BALL_SPEED_YPS) -> BallState:
    """Ball position, carrier and flight at time t."""
    carrier = _initial_carrier(play)
    if carrier is None:
        return BallState.no_ball()

    for transfer in _resolve_transfers(play, ball_speed):
        event = transfer.event
        if event.time > t:
            break

        intercept = transfer.intercept
        if intercept.time > event.time + EPSILON and t < intercept.time:
            duration = intercept.time - event.time
            progress = min(max((t - event.time) / duration, 0.0), 1.0)
            return BallState(
                position=transfer.origin.lerp(intercept.point, progress),
                carrier_id=carrier.id,
                in_air=True,
                flight=BallFlight(start=transfer.origin, end=intercept.point, progress=progress),
            )

        carrier = transfer.target

    return BallState(position=position_at(carrier, t), carrier_id=carrier.id, in_air=False)


def get_ball_end_time(play: Play, ball_speed: float = DEFAULT_BALL_SPEED_YPS) -> float:
    """When the last completed pass or handoff arrives (0 if none)."""
    last_time = 0.0
    for transfer in _resolve_transfers(play, ball_speed):
        last_time = max(last_time, transfer.intercept.time)
    return last_time
