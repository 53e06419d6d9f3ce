"""
Tests for the HTTP API through FastAPI's test client.

Tests:
- Round flow over HTTP
- Error status codes
- WebSocket snapshot stream
"""

import pytest
from fastapi.testclient import TestClient

from ..api import APIService, ErrorCode, ErrorResponse, create_app
from ..session import SessionManager


@pytest.fixture
def service(two_word_corpus, two_word_config):
    manager = SessionManager(corpus=two_word_corpus, config=two_word_config)
    return APIService(session_manager=manager)


@pytest.fixture
def client(service):
    with TestClient(create_app(service)) as client:
        yield client


def _create(client, **body):
    response = client.post("/api/v1/sessions", json=body or {"seed": 1})
    assert response.status_code == 200
    return response.json()["session_id"]


class TestHTTPRoundFlow:
    """Tests for playing a round over HTTP."""

    def test_health(self, client):
        response = client.get("/api/v1/health")
        assert response.status_code == 200
        assert response.json()["corpus_name"] == "pets"

    def test_play_round(self, client, service):
        """Guess, skip and reach game over over HTTP."""
        session_id = _create(client)
        word = service.session_manager.get_session(session_id).game.current_word

        response = client.put(f"/api/v1/sessions/{session_id}/guess", json={"guess": word})
        assert response.json()["user_guess"] == word

        response = client.post(f"/api/v1/sessions/{session_id}/submit")
        body = response.json()
        assert body["guess_correct"] is True
        assert body["snapshot"]["score"] == 20

        response = client.post(f"/api/v1/sessions/{session_id}/skip")
        assert response.json()["snapshot"]["is_game_over"] is True
        assert response.json()["status"] == "game_over"

        response = client.get(f"/api/v1/sessions/{session_id}/final-score")
        assert response.json()["score"] == 20

    def test_game_over_conflict(self, client):
        """Commands after game over return 409."""
        session_id = _create(client)
        client.post(f"/api/v1/sessions/{session_id}/skip")
        client.post(f"/api/v1/sessions/{session_id}/skip")

        response = client.post(f"/api/v1/sessions/{session_id}/submit", json={"guess": "cat"})

        assert response.status_code == 409
        assert response.json()["error_code"] == "GAME_OVER"

        response = client.post(f"/api/v1/sessions/{session_id}/reset")
        assert response.status_code == 200
        assert response.json()["snapshot"]["word_count"] == 1

    def test_unknown_session(self, client):
        """Unknown sessions return 404."""
        response = client.post("/api/v1/sessions/nope/skip")
        assert response.status_code == 404
        assert response.json()["error_code"] == "SESSION_NOT_FOUND"

    def test_invalid_corpus(self, client):
        """Rounds longer than the corpus return INVALID_CORPUS."""
        response = client.post("/api/v1/sessions", json={"max_words_per_round": 5})
        assert response.status_code == 400
        body = response.json()
        assert body["error_code"] == "INVALID_CORPUS"
        assert body["details"]["errors"]

    def test_request_validation(self, client):
        """Out-of-range request fields return a VALIDATION_ERROR body."""
        response = client.post("/api/v1/sessions", json={"max_words_per_round": 0})
        assert response.status_code == 400
        body = response.json()
        assert body["error_code"] == "VALIDATION_ERROR"
        assert body["details"]["errors"][0]["loc"][-1] == "max_words_per_round"

    def test_negative_seed_rejected(self, client):
        response = client.post("/api/v1/sessions", json={"seed": -5})
        assert response.status_code == 400
        assert response.json()["error_code"] == "VALIDATION_ERROR"

    def test_internal_error_is_server_error(self, client, service, monkeypatch):
        """Unmapped engine failures are reported as 500."""
        session_id = _create(client)
        monkeypatch.setattr(
            service,
            "skip_word",
            lambda _id: ErrorResponse(error="boom", error_code=ErrorCode.INTERNAL_ERROR),
        )
        response = client.post(f"/api/v1/sessions/{session_id}/skip")
        assert response.status_code == 500
        assert response.json()["error_code"] == "INTERNAL_ERROR"

    def test_end_session(self, client):
        session_id = _create(client)
        response = client.delete(f"/api/v1/sessions/{session_id}")
        assert response.json()["success"] is True
        assert client.get(f"/api/v1/sessions/{session_id}").status_code == 404


class TestSnapshotStream:
    """Tests for the WebSocket snapshot stream."""

    def test_stream_sends_current_then_changes(self, client):
        """The current snapshot arrives on connect, then each change."""
        session_id = _create(client)

        with client.websocket_connect(f"/api/v1/sessions/{session_id}/ws") as ws:
            first = ws.receive_json()
            assert first["type"] == "snapshot"
            assert first["payload"]["word_count"] == 1

            client.post(f"/api/v1/sessions/{session_id}/skip")

            second = ws.receive_json()
            assert second["payload"]["word_count"] == 2
