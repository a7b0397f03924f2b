"""Export sampled timeline frames to JSON for visualization."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from .core.config import SimulationConfig, get_config
from .core.entities import Play
from .systems.ball import BallState, get_ball_end_time, get_ball_state
from .systems.coverage import DefenseOptions, position_with_defense
from .systems.route_timeline import play_duration, playback_start_time


@dataclass
class PlayerFrame:
    """Single frame of player state."""
    id: str
    label: str
    team: str
    x: float
    y: float
    has_ball: bool = False


@dataclass
class BallFrame:
    """Single frame of ball state."""
    phase: str
    carrier_id: Optional[str]
    x: Optional[float]
    y: Optional[float]
    in_air: bool
    flight_progress: Optional[float] = None

    @classmethod
    def from_state(cls, state: BallState) -> BallFrame:
        return cls(
            phase=state.phase.value,
            carrier_id=state.carrier_id,
            x=state.position.x if state.position else None,
            y=state.position.y if state.position else None,
            in_air=state.in_air,
            flight_progress=state.flight.progress if state.flight else None,
        )


@dataclass
class PlayFrame:
    """Complete frame of the play at one instant."""
    index: int
    time: float
    players: List[PlayerFrame]
    ball: BallFrame


@dataclass
class PlayExport:
    """Complete timeline export."""
    metadata: Dict[str, Any]
    frames: List[PlayFrame] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def to_json(self) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict(), indent=2)

    def save(self, path: str) -> None:
        """Save to file."""
        with open(path, 'w') as f:
            f.write(self.to_json())


def playback_range(play: Play, ball_speed: float) -> Tuple[float, float]:
    """(start, end) of the scrubber: pre-snap motion through the last catch."""
    start = playback_start_time(play)
    end = max(play_duration(play), get_ball_end_time(play, ball_speed))
    return start, end


def frame_at(
    play: Play,
    t: float,
    ball_speed: float,
    options: DefenseOptions,
    index: int = 0,
) -> PlayFrame:
    """Every player's position and the ball at time t."""
    ball = get_ball_state(play, t, ball_speed)
    players = []
    for player in play.players:
        pos = position_with_defense(play, player, t, options)
        players.append(PlayerFrame(
            id=player.id,
            label=player.label,
            team=player.team.value,
            x=pos.x,
            y=pos.y,
            has_ball=(not ball.in_air and ball.carrier_id == player.id),
        ))
    return PlayFrame(index=index, time=t, players=players, ball=BallFrame.from_state(ball))


def sample_frames(
    play: Play,
    fps: float = 10.0,
    config: Optional[SimulationConfig] = None,
) -> PlayExport:
    """Sample the whole playback range at a fixed frame rate.

    The last frame always lands exactly on the end of the range.
    """
    config = config or get_config()
    options = DefenseOptions.from_config(config)
    start, end = playback_range(play, config.ball_speed_yps)

    frames: List[PlayFrame] = []
    frame_count = max(1, int((end - start) * fps) + 1)
    for index in range(frame_count):
        t = min(start + index / fps, end)
        frames.append(frame_at(play, t, config.ball_speed_yps, options, index))
    if frames[-1].time < end:
        frames.append(frame_at(play, end, config.ball_speed_yps, options, len(frames)))

    metadata = {
        "start_time": start,
        "end_time": end,
        "fps": fps,
        "ball_speed_yps": config.ball_speed_yps,
        "player_count": len(play.players),
    }
    return PlayExport(metadata=metadata, frames=frames)
