# =============================================================================
# tests/test_app.py - Application Wiring Tests
# =============================================================================

from unittest.mock import MagicMock, patch

from fastapi.testclient import TestClient

import lib.okx_client as okx_client
from app.main import app
from core.services.portfolio_service import portfolio_service
from core.services.trending_service import trending_service


class TestHealth:

    def test_health(self, client, override_settings):
        override_settings(OPENAI_API_KEY="sk-test", OKX_API_KEY="", ENVIRONMENT="staging")

        response = client.get("/api/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["environment"] == "staging"
        assert data["version"] == "1.0.0"
        assert data["delegates"] == {"ai": "configured", "okx": "not_configured"}

    def test_liveness(self, client):
        response = client.get("/api/health/live")

        assert response.status_code == 200
        assert response.json()["status"] == "alive"


class TestRoot:

    def test_root(self, client):
        data = client.get("/").json()

        assert data["name"] == "TradePilot API"
        assert data["docs"] == "/docs"

    def test_unknown_route(self, client):
        assert client.get("/api/nope").status_code == 404


class TestLifespan:

    def test_shutdown_closes_shared_okx_client(self):
        with patch.object(okx_client, "_client", MagicMock()) as shared:
            with TestClient(app):
                pass

            shared.close.assert_called_once()
            assert okx_client._client is None

    def test_services_follow_shared_client_across_restarts(self):
        first, second = MagicMock(), MagicMock()

        with patch.object(okx_client, "_client", first):
            assert portfolio_service.client is first
            assert trending_service.client is first

            with TestClient(app):
                pass
            okx_client._client = second

            assert portfolio_service.client is second
            assert trending_service.client is second
            first.close.assert_called_once()
