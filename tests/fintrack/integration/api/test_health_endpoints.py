"""Tests for the unversioned health and root endpoints."""

import pytest


@pytest.mark.integration
class TestHealth:
    def test_health(self, test_client):
        response = test_client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ok"
        assert "timestamp" in body
        assert "environment" in body

    def test_root(self, test_client, api_v1_prefix):
        body = test_client.get("/").json()

        assert body["version"] == "1.0.0"
        assert body["api_base"] == api_v1_prefix

    def test_openapi_lists_versioned_routes(self, test_client, api_v1_prefix):
        paths = test_client.get("/openapi.json").json()["paths"]

        assert f"{api_v1_prefix}/recurring/process" in paths
        assert f"{api_v1_prefix}/stats/trend" in paths
