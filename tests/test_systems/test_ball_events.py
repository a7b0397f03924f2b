"""Tests for ball event collection."""

import pytest

from chalkboard.core.entities import Play, RouteActionType
from chalkboard.core.field import FIELD_WIDTH_YARDS
from chalkboard.systems.ball_events import collect_ball_events
from tests.helpers import defense, handoff_to, leg, offense, pass_to


class TestCollectBallEvents:
    """Tests for collect_ball_events."""

    def test_no_actions_no_events(self):
        play = Play(players=(offense("o1", (0, 0), route=[leg((1, 0), 10)]),))
        assert collect_ball_events(play) == []

    def test_start_action_fires_at_start_delay(self):
        play = Play(players=(
            offense("o1", (0, 0), start_delay=0.7, start_action=pass_to("o2")),
            offense("o2", (1, 0)),
        ))
        events = collect_ball_events(play)
        assert len(events) == 1
        assert events[0].time == pytest.approx(0.7)
        assert events[0].passer_id == "o1"
        assert events[0].target_id == "o2"
        assert events[0].type == RouteActionType.PASS

    def test_pre_snap_start_action_fires_at_snap(self):
        """Negative start delays clamp the start action to t=0."""
        play = Play(players=(
            offense("o1", (0, 0), start_delay=-2.0, start_action=handoff_to("o2")),
            offense("o2", (0, 0)),
        ))
        assert collect_ball_events(play)[0].time == 0.0

    def test_leg_action_fires_after_arrival_and_wait(self):
        play = Play(players=(
            offense("o1", (0, 0), route=[
                leg((1, 0), FIELD_WIDTH_YARDS, delay=0.5, action=pass_to("o2")),
            ]),
            offense("o2", (0.5, 0.5)),
        ))
        events = collect_ball_events(play)
        assert events[0].time == pytest.approx(1.5)

    def test_earlier_waits_push_later_actions(self):
        play = Play(players=(
            offense("o1", (0, 0), start_delay=1.0, route=[
                leg((1, 0), FIELD_WIDTH_YARDS, delay=2.0),
                leg((1, 1), 30, action=pass_to("o2")),
            ]),
            offense("o2", (0.5, 0.5)),
        ))
        assert collect_ball_events(play)[0].time == pytest.approx(5.0)

    def test_sorted_by_time(self):
        play = Play(players=(
            offense("o1", (0, 0), route=[
                leg((1, 0), FIELD_WIDTH_YARDS, action=pass_to("o2")),
            ]),
            offense("o2", (0, 0), start_action=pass_to("o1")),
        ))
        events = collect_ball_events(play)
        assert [e.time for e in events] == [0.0, 1.0]
        assert [e.passer_id for e in events] == ["o2", "o1"]

    def test_ties_keep_collection_order(self):
        """Events at the same instant stay in player list order."""
        play = Play(players=(
            offense("o1", (0, 0), start_action=pass_to("o3")),
            offense("o2", (0, 0), start_action=pass_to("o3")),
            offense("o3", (1, 0)),
        ))
        events = collect_ball_events(play)
        assert [e.passer_id for e in events] == ["o1", "o2"]
        assert [e.order for e in events] == [0, 1]

    def test_defense_contributes_nothing(self):
        play = Play(players=(defense("d1", (0, 0)), offense("o1", (0, 0))))
        assert collect_ball_events(play) == []
