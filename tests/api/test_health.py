# tests/api/test_health.py
"""Tests for the liveness and health endpoints."""


class TestHealthEndpoint:
    """Tests for GET /api/v1/health."""

    def test_health_returns_200(self, client):
        """Health endpoint should return 200 with status ok."""
        response = client.get("/api/v1/health")
        assert response.status_code == 200

    def test_health_returns_status_and_version(self, client):
        """Health endpoint should return a JSON body with status 'ok' and the version."""
        data = client.get("/api/v1/health").json()
        assert data["status"] == "ok"
        assert isinstance(data["version"], str)


class TestLiveness:
    """Tests for the plain-text liveness endpoints used by container platforms."""

    def test_healthz_returns_ok(self, client):
        response = client.get("/healthz")
        assert response.status_code == 200
        assert response.text == "ok"

    def test_root_returns_banner(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert "GreenRun" in response.text
