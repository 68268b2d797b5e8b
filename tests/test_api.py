"""
Tests for the HTTP surface: streaming endpoint, method handling and health checks.
"""
import json

import pytest


def parse_frames(body: str):
    """Split an event-stream body into decoded JSON payloads."""
    frames = [chunk for chunk in body.split("\n\n") if chunk]
    assert all(frame.startswith("data: ") for frame in frames)
    return [json.loads(frame[len("data: "):]) for frame in frames]


@pytest.fixture
def payload():
    return {"topic": "French Revolution", "country": "France", "audience": "Primary school children"}


class TestGetInfoStream:
    """Tests for POST /api/getInfo."""

    def test_streams_event_frames(self, test_client, payload):
        response = test_client.post("/api/getInfo", json=payload)

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/event-stream")
        assert response.headers["cache-control"] == "no-cache, no-transform"

        frames = parse_frames(response.text)
        types = [frame["type"] for frame in frames]
        assert types[0] == "eventStatus"
        assert types[-1] == "complete"
        assert types.count("response") == 5
        assert frames[-1] == {"type": "complete"}

    def test_frames_carry_provenance(self, test_client, payload):
        frames = parse_frames(test_client.post("/api/getInfo", json=payload).text)
        by_type = {frame["type"]: frame for frame in frames}

        assert by_type["eventStatus"]["model"] == "test-llm-model"
        assert by_type["prompts"]["model"] == "test-llm-model"
        assert "prompt" in by_type["prompts"]
        assert "model" not in by_type["podcastScript"]
        assert set(by_type["response"]["data"]) == {"prompt", "response", "model", "systemPrompt"}

    def test_stage_failure_is_reported_in_stream(self, test_client, payload, mock_research):
        mock_research.ask.side_effect = RuntimeError("search quota exceeded")

        response = test_client.post("/api/getInfo", json=payload)

        assert response.status_code == 200
        assert parse_frames(response.text) == [{"type": "error", "data": "search quota exceeded"}]

    def test_any_audience_string_is_accepted(self, test_client, payload):
        payload["audience"] = "Martians"
        frames = parse_frames(test_client.post("/api/getInfo", json=payload).text)
        assert frames[-1]["type"] == "complete"

    def test_missing_field_rejected(self, test_client):
        response = test_client.post("/api/getInfo", json={"topic": "x"})
        assert response.status_code == 422


class TestMethodNotAllowed:

    @pytest.mark.parametrize("method", ["GET", "PUT", "PATCH", "DELETE", "OPTIONS"])
    def test_non_post_methods_rejected(self, test_client, method):
        response = test_client.request(method, "/api/getInfo")

        assert response.status_code == 405
        assert response.headers["allow"] == "POST"
        body = response.json()
        assert body["error"] == f"Method {method} Not Allowed"
        assert body["code"] == "METHOD_NOT_ALLOWED"

    def test_head_rejected(self, test_client):
        response = test_client.head("/api/getInfo")

        assert response.status_code == 405
        assert response.headers["allow"] == "POST"

    def test_error_body_shape_matches_error_response(self, test_client):
        body = test_client.options("/api/getInfo").json()

        assert set(body) == {"error", "detail", "code", "status_code"}
        assert body["status_code"] == 405


class TestHealth:
    """Tests for health endpoints."""

    def test_health(self, test_client):
        response = test_client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["service"] == "albert-podcast-api"
        assert data["services_configured"] is True

    def test_liveness(self, test_client):
        response = test_client.get("/health/live")
        assert response.json() == {"status": "alive"}

    def test_config_status_hides_keys(self, test_client):
        response = test_client.get("/health/config")

        data = response.json()
        assert data["status"] == "configured"
        assert data["apis"] == {"llm": "configured", "research": "configured", "images": "configured"}
        assert "test-groq-key" not in response.text


class TestLifespan:

    def test_shutdown_closes_service_clients(self, monkeypatch, orchestrator, mock_llm, mock_research, mock_images):
        from fastapi.testclient import TestClient
        from albert.api.main import app
        from albert.services.podcast import orchestrator as orchestrator_module

        monkeypatch.setattr(orchestrator_module, "_orchestrator", orchestrator)

        with TestClient(app) as client:
            assert client.get("/health/live").status_code == 200

        mock_llm.close.assert_awaited_once()
        mock_research.close.assert_awaited_once()
        mock_images.close.assert_awaited_once()
        assert orchestrator_module._orchestrator is None
