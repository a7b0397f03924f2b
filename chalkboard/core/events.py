"""Ball transfer events.

Events are collected from the offense's routes and replayed in time order
by the ball system.
"""

from __future__ import annotations

from dataclasses import dataclass

from .entities import RouteActionType


@dataclass(frozen=True)
class BallEvent:
    """A pass or handoff trigger.

    Attributes:
        time: Seconds when the action fires
        passer_id: Player who must hold the ball for the event to apply
        target_id: Intended receiver
        type: Pass or handoff
        order: Collection order across all players; breaks exact time ties
    """
    time: float
    passer_id: str
    target_id: str
    type: RouteActionType
    order: int

    @property
    def sort_key(self) -> tuple[float, int]:
        return (self.time, self.order)

    def __str__(self) -> str:
        return f"[{self.time:.2f}s] {self.type.value} {self.passer_id} -> {self.target_id}"
