"""Tests for the submission proxy."""

import json

import httpx
import pytest

from department_submissions.config import DEFAULT_API_BASE
from department_submissions.proxy import create_app

API_BASE = "https://upstream.test"


@pytest.fixture
def upstream():
    """Recorder standing in for the upstream content API.

    Set ``response`` to change what it answers, or ``error`` to make the
    transport fail.
    """

    class Upstream:
        def __init__(self):
            self.requests: list[httpx.Request] = []
            self.response = httpx.Response(201, json={"id": "sub-1", "status": "pending"})
            self.error: Exception | None = None

        def __call__(self, request):
            self.requests.append(request)
            if self.error is not None:
                raise self.error
            return self.response

    return Upstream()


@pytest.fixture
def client(upstream):
    app = create_app({"api_base": API_BASE}, transport=httpx.MockTransport(upstream))
    app.config["TESTING"] = True
    return app.test_client()


class TestProxyForwarding:
    """Tests for successful relaying."""

    @pytest.mark.parametrize("entity_type,path", [
        ("project", "/api/v1/public/project-mod/projects/submit/"),
        ("research", "/api/v1/public/research-mod/research/submit/"),
        ("journal", "/api/v1/public/journal-mod/articles/submit/"),
    ])
    def test_forwards_to_upstream_path(self, client, upstream, entity_type, path):
        """Each entity is relayed to its fixed upstream suffix."""
        payload = {"title": "Edge AI", "otp_session": "sess-1"}

        res = client.post(f"/api/submissions/{entity_type}", json=payload)

        assert res.status_code == 201
        assert res.get_json() == {"id": "sub-1", "status": "pending"}
        (request,) = upstream.requests
        assert str(request.url) == f"{API_BASE}{path}"
        assert request.method == "POST"
        assert json.loads(request.content) == payload
        assert request.headers["content-type"] == "application/json"
        assert request.headers["accept"] == "application/json"
        assert request.headers["cache-control"] == "no-store"

    def test_relays_upstream_error_status_and_body(self, client, upstream):
        """Upstream validation errors pass through untouched."""
        upstream.response = httpx.Response(400, json={"detail": "Duplicate title"})

        res = client.post("/api/submissions/journal", json={"title": "Edge AI"})

        assert res.status_code == 400
        assert res.get_json() == {"detail": "Duplicate title"}

    def test_non_json_upstream_body_becomes_empty_object(self, client, upstream):
        upstream.response = httpx.Response(502, text="<html>Bad Gateway</html>")

        res = client.post("/api/submissions/research", json={"title": "Floods"})

        assert res.status_code == 502
        assert res.get_json() == {}

    def test_responses_are_not_cached(self, client):
        res = client.post("/api/submissions/project", json={})

        assert res.headers["Cache-Control"] == "no-store"


class TestProxyFailures:
    """Tests for the error envelope."""

    @pytest.mark.parametrize("entity_type,message", [
        ("project", "Unable to submit project"),
        ("research", "Unable to submit research"),
        ("journal", "Unable to submit journal article"),
    ])
    def test_transport_failure_returns_envelope(self, client, upstream, entity_type, message):
        """An unreachable upstream becomes a JSON 500, never an exception."""
        upstream.error = httpx.ConnectError("Connection refused")

        res = client.post(f"/api/submissions/{entity_type}", json={"title": "T"})

        assert res.status_code == 500
        assert res.get_json() == {"error": message}

    def test_malformed_request_body_returns_envelope(self, client, upstream):
        res = client.post(
            "/api/submissions/journal",
            data="{not json",
            content_type="application/json",
        )

        assert res.status_code == 500
        assert res.get_json() == {"error": "Unable to submit journal article"}
        assert upstream.requests == []

    def test_unknown_entity_type(self, client, upstream):
        res = client.post("/api/submissions/thesis", json={})

        assert res.status_code == 404
        assert res.get_json() == {"error": "Unknown submission type"}
        assert upstream.requests == []

    def test_only_post_is_allowed(self, client):
        assert client.get("/api/submissions/journal").status_code == 405


class TestAppFactory:
    """Tests for create_app configuration."""

    def test_health(self, client):
        res = client.get("/api/health")

        assert res.status_code == 200
        assert res.get_json() == {"status": "ok"}

    def test_upstream_from_environment(self, monkeypatch):
        monkeypatch.setenv("API_BASE", "https://env.test")

        app = create_app()

        assert app.config["UPSTREAM"]["base_url"] == "https://env.test"

    def test_upstream_default(self, monkeypatch):
        monkeypatch.delenv("API_BASE", raising=False)

        app = create_app()

        assert app.config["UPSTREAM"]["base_url"] == DEFAULT_API_BASE
