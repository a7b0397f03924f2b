"""Ball event collection.

Walks every offensive route and records when each pass/handoff action
fires. The result is sorted once and treated as immutable by the ball
system.
"""

from __future__ import annotations

from typing import List

from ..core.entities import Play
from ..core.events import BallEvent
from .route_timeline import leg_duration


def collect_ball_events(play: Play) -> List[BallEvent]:
    """All ball transfer triggers in the play, ordered by (time, order).

    A start_action fires at max(0, start_delay). A leg action fires at the
    leg's arrival time plus its wait, never before the snap.
    """
    events: List[BallEvent] = []
    order = 0

    for player in play.offense:
        if player.start_action is not None:
            events.append(BallEvent(
                time=max(0.0, player.start_delay),
                passer_id=player.id,
                target_id=player.start_action.target_id,
                type=player.start_action.type,
                order=order,
            ))
            order += 1

        elapsed = player.start_delay
        origin = player.start
        for leg in player.route:
            elapsed += leg_duration(origin, leg)
            origin = leg.to
            if leg.action is not None:
                events.append(BallEvent(
                    time=max(0.0, elapsed + leg.wait),
                    passer_id=player.id,
                    target_id=leg.action.target_id,
                    type=leg.action.type,
                    order=order,
                ))
                order += 1
            elapsed += leg.wait

    events.sort(key=lambda e: e.sort_key)
    return events
