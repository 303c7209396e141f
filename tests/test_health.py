"""Health endpoint tests."""

from unittest.mock import MagicMock

import pytest
from falcon.asgi import App
from falcon.testing import TestClient
from psycopg import OperationalError

from taskperm.interfaces.api.resources.health import HealthResource


def _client(health: HealthResource) -> TestClient:
    app = App()
    app.add_route("/v1/health", health)
    app.add_route("/v1/health/ready", health, suffix="ready")
    return TestClient(app)


@pytest.fixture
def client() -> TestClient:
    """Create test client with health endpoints."""
    return _client(HealthResource())


def test_health_liveness(client: TestClient) -> None:
    """GET /v1/health returns 200."""
    result = client.simulate_get("/v1/health")
    assert result.status_code == 200
    assert result.json["status"] == "ok"


def test_health_ready(client: TestClient) -> None:
    """GET /v1/health/ready returns 200."""
    result = client.simulate_get("/v1/health/ready")
    assert result.status_code == 200
    assert result.json["status"] == "ready"


def test_health_ready_store_unreachable() -> None:
    """GET /v1/health/ready returns 503 when the pool cannot connect."""
    pool = MagicMock()
    pool.connection.return_value.__aenter__.side_effect = OperationalError("down")

    result = _client(HealthResource(pool)).simulate_get("/v1/health/ready")

    assert result.status_code == 503
    assert result.json["status"] == "unavailable"
