"""Shared pytest fixtures for Chalkboard tests."""

import pytest

from chalkboard.core.config import reset_config
from chalkboard.core.entities import ManAssignment, Play, ZoneAssignment
from chalkboard.core.field import FIELD_WIDTH_YARDS
from tests.helpers import defense, leg, offense, pass_to


@pytest.fixture(autouse=True)
def fresh_config():
    """Every test sees a config built from its own environment."""
    reset_config()
    yield
    reset_config()


# =============================================================================
# Play Fixtures
# =============================================================================


@pytest.fixture
def stationary_pass_play() -> Play:
    """Passer at the left edge throws at t=0 to a receiver 50 yards away."""
    return Play(players=(
        offense("o1", (0, 0), route=[leg((0, 0), 5, action=pass_to("o2"))]),
        offense("o2", (1, 0)),
    ))


@pytest.fixture
def half_field_ball_speed() -> float:
    """Ball speed that covers the 50-yard width in 2 seconds."""
    return FIELD_WIDTH_YARDS / 2


@pytest.fixture
def man_play() -> Play:
    """Defender 50 yards from a stationary receiver."""
    return Play(players=(
        offense("o1", (1, 0)),
        defense("d1", (0, 0), ManAssignment(target_id="o1", speed=6)),
    ))


@pytest.fixture
def zone_play() -> Play:
    """Zone defender at midfield with a receiver crossing the zone."""
    return Play(players=(
        offense("o1", (0.3, 0.3), route=[leg((0.9, 0.7), 8), leg((0.6, 0.9), 6)]),
        defense("d1", (0.5, 0.5), ZoneAssignment(radius_x=10, radius_y=5, speed=6)),
    ))
