"""Tests for the pass intercept solver."""

import pytest

from chalkboard.core.field import FIELD_WIDTH_YARDS, distance_yards
from chalkboard.core.vec2 import Vec2
from chalkboard.physics.intercept import find_intercept
from chalkboard.systems.route_timeline import position_at
from tests.helpers import leg, offense


class TestFindIntercept:
    """Tests for find_intercept."""

    def test_stationary_receiver(self):
        """Flight time is distance over ball speed."""
        receiver = offense("r", (1, 0))
        intercept = find_intercept(Vec2(0, 0), 0.0, receiver, 15.0)

        assert intercept is not None
        assert intercept.time == pytest.approx(FIELD_WIDTH_YARDS / 15.0)
        assert intercept.point == Vec2(1, 0)

    def test_release_time_offsets_catch(self):
        receiver = offense("r", (1, 0))
        intercept = find_intercept(Vec2(0, 0), 1.0, receiver, 25.0)
        assert intercept.time == pytest.approx(3.0)

    def test_receiver_running_toward_passer(self):
        """15t = 50 - 10t meets at t=2, 30 yards out."""
        receiver = offense("r", (1, 0), route=[leg((0, 0), 10)])
        intercept = find_intercept(Vec2(0, 0), 0.0, receiver, 15.0)

        assert intercept.time == pytest.approx(2.0)
        assert intercept.point.x == pytest.approx(0.6)
        assert intercept.point.y == pytest.approx(0.0)

    def test_receiver_speed_equal_to_ball_speed(self):
        """Equal speeds reduce the quadratic to a linear equation."""
        receiver = offense("r", (1, 0), route=[leg((0, 0), 25)])
        intercept = find_intercept(Vec2(0, 0), 0.0, receiver, 25.0)

        assert intercept.time == pytest.approx(1.0)
        assert intercept.point.x == pytest.approx(0.5)

    def test_fast_receding_receiver_caught_after_stopping(self):
        """A ball slower than the receiver only arrives once the route ends."""
        receiver = offense("r", (0.5, 0), route=[leg((1, 0), 25)])
        intercept = find_intercept(Vec2(0, 0), 0.0, receiver, 10.0)

        assert intercept.time == pytest.approx(5.0)
        assert intercept.point == Vec2(1, 0)

    def test_catch_point_matches_receiver_position(self):
        receiver = offense("r", (0.2, 0.8), route=[
            leg((0.4, 0.4), 8, delay=0.5),
            leg((0.8, 0.3), 8),
        ])
        origin = Vec2(0.5, 0.9)
        intercept = find_intercept(origin, 0.4, receiver, 18.0)

        assert intercept is not None
        expected = position_at(receiver, intercept.time)
        assert intercept.point == expected
        # Ball travel matches the distance to the catch point
        travel = 18.0 * (intercept.time - 0.4)
        assert distance_yards(origin, intercept.point) == pytest.approx(travel, abs=1e-6)

    def test_handoff_is_instant(self):
        """Receiver standing on the release point catches at release time."""
        receiver = offense("r", (0.5, 0.5))
        intercept = find_intercept(Vec2(0.5, 0.5), 2.0, receiver, 18.0)
        assert intercept.time == pytest.approx(2.0)

    def test_receiver_waiting_on_start_delay(self):
        """A receiver who has not started yet is caught at the alignment."""
        receiver = offense("r", (1, 0), start_delay=10.0, route=[leg((1, 1), 5)])
        intercept = find_intercept(Vec2(0, 0), 0.0, receiver, 25.0)

        assert intercept.time == pytest.approx(2.0)
        assert intercept.point == Vec2(1, 0)

    def test_non_positive_ball_speed(self):
        receiver = offense("r", (1, 0))
        assert find_intercept(Vec2(0, 0), 0.0, receiver, 0.0) is None
        assert find_intercept(Vec2(0, 0), 0.0, receiver, -5.0) is None
