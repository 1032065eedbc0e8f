# tests/api/test_config_version.py
"""Tests for the config, regions and version endpoints."""


class TestVersionEndpoint:
    """Tests for GET /api/v1/version."""

    def test_version_returns_version_string(self, client):
        response = client.get("/api/v1/version")
        assert response.status_code == 200
        data = response.json()
        assert isinstance(data["version"], str)
        assert len(data["version"]) > 0


class TestConfigEndpoint:
    """Tests for GET /api/v1/config."""

    def test_config_contains_expected_fields(self, client):
        response = client.get("/api/v1/config")
        assert response.status_code == 200
        data = response.json()
        for field in [
            "default_intensity",
            "cost_per_vcpu_second",
            "cost_per_gb_second",
            "watts_per_vcpu_at_full",
            "watts_per_gb_memory",
            "days_per_month",
            "log_level",
        ]:
            assert field in data, f"Missing config field: {field}"
        assert data["default_intensity"] == 450


class TestRegionsEndpoint:
    """Tests for GET /api/v1/regions."""

    def test_regions_lists_table(self, client):
        data = client.get("/api/v1/regions").json()
        assert data["default_intensity"] == 450
        assert data["regions"]["europe-west4"] == 180
        assert data["regions"]["asia-south1"] == 700
        assert len(data["regions"]) == 7
