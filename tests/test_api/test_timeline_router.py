"""Tests for the timeline API endpoints."""

import pytest
from fastapi.testclient import TestClient

from chalkboard.api.main import create_app
from chalkboard.api.routers.timeline import MAX_QUERY_SECONDS
from chalkboard.core.config import reset_config
from tests.helpers import STATIONARY_PASS_PAYLOAD


@pytest.fixture
def client():
    return TestClient(create_app())


class TestServiceEndpoints:
    """Tests for root and health."""

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    def test_root(self, client):
        data = client.get("/").json()
        assert data["name"] == "Chalkboard API"
        assert data["version"] == "0.1.0"


class TestBallEndpoint:
    """Tests for POST /api/v1/timeline/ball."""

    def test_in_flight(self, client):
        response = client.post("/api/v1/timeline/ball", json={
            "play": STATIONARY_PASS_PAYLOAD,
            "time": 1.0,
            "ball_speed": 25,
        })
        assert response.status_code == 200

        data = response.json()
        assert data["in_air"] is True
        assert data["phase"] == "in_flight"
        assert data["carrier_id"] == "o1"
        assert data["position"]["x"] == pytest.approx(0.5, abs=1e-4)
        assert data["flight"]["progress"] == pytest.approx(0.5)

    def test_caught(self, client):
        data = client.post("/api/v1/timeline/ball", json={
            "play": STATIONARY_PASS_PAYLOAD,
            "time": 3.0,
            "ball_speed": 25,
        }).json()
        assert data["in_air"] is False
        assert data["carrier_id"] == "o2"
        assert data["flight"] is None

    def test_invalid_play_rejected(self, client):
        response = client.post("/api/v1/timeline/ball", json={
            "play": {"players": [{"id": "o1", "team": "offense", "start": {"x": 0, "y": 0},
                                  "route": [{"to": {"x": 1, "y": 0}, "speed": -3}]}]},
            "time": 1.0,
        })
        assert response.status_code == 422

    def test_non_positive_ball_speed_rejected(self, client):
        response = client.post("/api/v1/timeline/ball", json={
            "play": STATIONARY_PASS_PAYLOAD,
            "time": 1.0,
            "ball_speed": 0,
        })
        assert response.status_code == 422


class TestPositionsEndpoint:
    """Tests for POST /api/v1/timeline/positions."""

    def test_all_players_returned(self, client):
        data = client.post("/api/v1/timeline/positions", json={
            "play": STATIONARY_PASS_PAYLOAD,
            "time": 0.0,
        }).json()
        assert set(data["positions"]) == {"o1", "o2", "d1"}
        assert data["positions"]["d1"] == {"x": 0.8, "y": 0.2}

    def test_defender_pursues(self, client):
        data = client.post("/api/v1/timeline/positions", json={
            "play": STATIONARY_PASS_PAYLOAD,
            "time": 1.0,
            "options": {"step_seconds": 0.1},
        }).json()
        d1 = data["positions"]["d1"]
        assert d1["x"] > 0.8
        assert d1["y"] < 0.2


class TestRangeEndpoint:
    """Tests for POST /api/v1/timeline/range."""

    def test_range_includes_catch(self, client):
        data = client.post("/api/v1/timeline/range", json={
            "play": STATIONARY_PASS_PAYLOAD,
            "ball_speed": 25,
        }).json()
        assert data["start_time"] == 0.0
        assert data["end_time"] == pytest.approx(2.0)


class TestFramesEndpoint:
    """Tests for POST /api/v1/timeline/frames."""

    def test_frames_sampled(self, client, monkeypatch):
        monkeypatch.setenv("CHALKBOARD_BALL_SPEED", "25")
        reset_config()
        data = client.post("/api/v1/timeline/frames", json={
            "play": STATIONARY_PASS_PAYLOAD,
            "fps": 4,
        }).json()
        assert data["metadata"]["ball_speed_yps"] == 25.0
        assert len(data["frames"]) == 9
        assert data["frames"][-1]["ball"]["carrier_id"] == "o2"

    def test_fps_bounds(self, client):
        response = client.post("/api/v1/timeline/frames", json={
            "play": STATIONARY_PASS_PAYLOAD,
            "fps": 0,
        })
        assert response.status_code == 422


class TestQueryBounds:
    """Requests that would make pursuit unbounded are rejected."""

    @pytest.mark.parametrize("endpoint", ["/api/v1/timeline/ball", "/api/v1/timeline/positions"])
    def test_time_beyond_limit_rejected(self, client, endpoint):
        response = client.post(endpoint, json={"play": STATIONARY_PASS_PAYLOAD, "time": 1e12})
        assert response.status_code == 422

    def test_negative_time_limit(self, client):
        response = client.post("/api/v1/timeline/positions", json={
            "play": STATIONARY_PASS_PAYLOAD,
            "time": -MAX_QUERY_SECONDS - 1,
        })
        assert response.status_code == 422

    def test_time_at_limit_accepted(self, client):
        response = client.post("/api/v1/timeline/positions", json={
            "play": STATIONARY_PASS_PAYLOAD,
            "time": MAX_QUERY_SECONDS,
            "options": {"step_seconds": 1.0},
        })
        assert response.status_code == 200

    def test_tiny_step_rejected(self, client):
        response = client.post("/api/v1/timeline/positions", json={
            "play": STATIONARY_PASS_PAYLOAD,
            "time": 1.0,
            "options": {"step_seconds": 1e-9},
        })
        assert response.status_code == 422
