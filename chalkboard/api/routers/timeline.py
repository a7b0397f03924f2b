"""REST API router for play timeline queries (positions, ball, frames).

Every endpoint is stateless: the client sends the play snapshot with each
request and gets back the state at the requested time.
"""

from typing import Dict, List, Optional

from fastapi import APIRouter
from pydantic import BaseModel, Field

from chalkboard.core.config import get_config
from chalkboard.export import playback_range, sample_frames
from chalkboard.schemas import FiniteFloat, PlaySchema, Vec2Schema
from chalkboard.systems.ball import get_ball_state
from chalkboard.systems.coverage import DefenseOptions, position_with_defense

router = APIRouter(prefix="/timeline", tags=["timeline"])

# Largest |time| a query may ask for, in seconds
MAX_QUERY_SECONDS = 300.0


class DefenseOptionsRequest(BaseModel):
    """Overrides for defensive pursuit."""
    cushion_radius_yards: Optional[float] = Field(default=None, ge=0)
    default_speed: Optional[float] = Field(default=None, gt=0)
    step_seconds: Optional[float] = Field(default=None, ge=0.001, le=1.0)
    min_separation_yards: Optional[float] = Field(default=None, ge=0)

    def to_options(self) -> DefenseOptions:
        base = DefenseOptions.from_config()
        return DefenseOptions(
            cushion_radius_yards=(
                self.cushion_radius_yards
                if self.cushion_radius_yards is not None
                else base.cushion_radius_yards
            ),
            default_speed=self.default_speed or base.default_speed,
            step_seconds=self.step_seconds or base.step_seconds,
            min_separation_yards=(
                self.min_separation_yards
                if self.min_separation_yards is not None
                else base.min_separation_yards
            ),
            zone_boundary_weight=base.zone_boundary_weight,
        )


class BallQueryRequest(BaseModel):
    """Ball state at one time."""
    play: PlaySchema
    time: FiniteFloat = Field(ge=-MAX_QUERY_SECONDS, le=MAX_QUERY_SECONDS)
    ball_speed: Optional[float] = Field(default=None, gt=0)


class BallFlightResponse(BaseModel):
    start: Vec2Schema
    end: Vec2Schema
    progress: float


class BallStateResponse(BaseModel):
    """Ball state response."""
    position: Optional[Vec2Schema]
    carrier_id: Optional[str]
    in_air: bool
    phase: str
    flight: Optional[BallFlightResponse] = None


class PositionsQueryRequest(BaseModel):
    """Every player's position at one time."""
    play: PlaySchema
    time: FiniteFloat = Field(ge=-MAX_QUERY_SECONDS, le=MAX_QUERY_SECONDS)
    options: Optional[DefenseOptionsRequest] = None


class PositionsResponse(BaseModel):
    time: float
    positions: Dict[str, Vec2Schema]


class RangeQueryRequest(BaseModel):
    play: PlaySchema
    ball_speed: Optional[float] = Field(default=None, gt=0)


class RangeResponse(BaseModel):
    start_time: float
    end_time: float


class FramesQueryRequest(BaseModel):
    """Sample the full playback range."""
    play: PlaySchema
    fps: float = Field(default=10.0, gt=0, le=60)


class FramesResponse(BaseModel):
    metadata: dict
    frames: List[dict]


def _vec(v) -> Vec2Schema:
    return Vec2Schema(x=v.x, y=v.y)


@router.post("/ball", response_model=BallStateResponse)
async def query_ball(request: BallQueryRequest) -> BallStateResponse:
    """Ball carrier, position and flight at a time."""
    play = request.play.to_play()
    ball_speed = request.ball_speed or get_config().ball_speed_yps
    state = get_ball_state(play, request.time, ball_speed)

    flight = None
    if state.flight is not None:
        flight = BallFlightResponse(
            start=_vec(state.flight.start),
            end=_vec(state.flight.end),
            progress=state.flight.progress,
        )

    return BallStateResponse(
        position=_vec(state.position) if state.position is not None else None,
        carrier_id=state.carrier_id,
        in_air=state.in_air,
        phase=state.phase.value,
        flight=flight,
    )


@router.post("/positions", response_model=PositionsResponse)
async def query_positions(request: PositionsQueryRequest) -> PositionsResponse:
    """Player positions at a time, with defensive pursuit applied."""
    play = request.play.to_play()
    options = request.options.to_options() if request.options else DefenseOptions.from_config()

    positions = {
        player.id: _vec(position_with_defense(play, player, request.time, options))
        for player in play.players
    }
    return PositionsResponse(time=request.time, positions=positions)


@router.post("/range", response_model=RangeResponse)
async def query_range(request: RangeQueryRequest) -> RangeResponse:
    """Playback start and end, including the last catch."""
    play = request.play.to_play()
    ball_speed = request.ball_speed or get_config().ball_speed_yps
    start, end = playback_range(play, ball_speed)
    return RangeResponse(start_time=start, end_time=end)


@router.post("/frames", response_model=FramesResponse)
async def query_frames(request: FramesQueryRequest) -> FramesResponse:
    """Frames covering the whole playback range."""
    export = sample_frames(request.play.to_play(), fps=request.fps)
    payload = export.to_dict()
    return FramesResponse(metadata=payload["metadata"], frames=payload["frames"])
