"""End-to-end tests for the comment and vote endpoints.

The test container uses request-scoped in-memory repositories, so each
HTTP call starts from an empty store.
"""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from tracker.config import Settings
from tracker.interface.api.app import create_app
from tracker.util.di.container import setup_di
from tracker.util.jwt import create_token
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client with test container."""
    app_instance = create_app()
    test_container = build_test_container()
    setup_di(app_instance, test_container)
    return TestClient(app_instance)


@pytest.fixture
def auth_cookies():
    """Cookie carrying a token signed with the configured secret."""
    token = create_token(str(uuid4()), "leech", Settings().auth)
    return {"auth_token": token}


class TestHealthEndpoint:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestGetCommentsEndpoint:
    """Tests for GET /torrents/{torrent_id}/comments."""

    def test_unknown_torrent_returns_404(self, client):
        response = client.get(f"/torrents/{uuid4()}/comments")

        assert response.status_code == 404
        assert "Torrent not found" in response.json()["detail"]

    def test_malformed_torrent_id_returns_400(self, client):
        response = client.get("/torrents/not-a-uuid/comments")

        assert response.status_code == 400

    def test_page_zero_is_rejected(self, client):
        response = client.get(f"/torrents/{uuid4()}/comments?page=0")

        assert response.status_code == 422

    def test_oversized_limit_is_rejected(self, client):
        response = client.get(f"/torrents/{uuid4()}/comments?limit=1000")

        assert response.status_code == 400

    def test_unknown_order_is_rejected(self, client):
        response = client.get(f"/torrents/{uuid4()}/comments?order=sideways")

        assert response.status_code == 422


class TestCreateCommentEndpoint:
    """Tests for POST /torrents/{torrent_id}/comments."""

    def test_requires_authentication(self, client):
        response = client.post(
            f"/torrents/{uuid4()}/comments", json={"content": "hello"}
        )

        assert response.status_code == 401

    def test_unknown_torrent_returns_404(self, client, auth_cookies):
        client.cookies.update(auth_cookies)
        response = client.post(
            f"/torrents/{uuid4()}/comments", json={"content": "hello"}
        )

        assert response.status_code == 404


class TestVoteEndpoint:
    """Tests for POST /torrents/{torrent_id}/comments/{comment_id}/vote."""

    def test_requires_authentication(self, client):
        response = client.post(
            f"/torrents/{uuid4()}/comments/{uuid4()}/vote", json={"direction": "up"}
        )

        assert response.status_code == 401
        assert response.json()["detail"] == "Authentication required to vote"

    def test_unknown_comment_returns_404(self, client, auth_cookies):
        client.cookies.update(auth_cookies)
        response = client.post(
            f"/torrents/{uuid4()}/comments/{uuid4()}/vote", json={"direction": "up"}
        )

        assert response.status_code == 404

    def test_invalid_direction_returns_400(self, client, auth_cookies):
        client.cookies.update(auth_cookies)
        response = client.post(
            f"/torrents/{uuid4()}/comments/{uuid4()}/vote",
            json={"direction": "sideways"},
        )

        assert response.status_code == 400
