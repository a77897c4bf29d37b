"""Health endpoint tests."""

from unittest.mock import MagicMock

import pytest
from falcon.asgi import App
from falcon.testing import TestClient
from psycopg_pool import PoolTimeout

from evently.interfaces.api.resources.health import HealthResource


def _client(pool=None) -> TestClient:
    app = App()
    health = HealthResource(pool)
    app.add_route("/v1/health", health)
    app.add_route("/v1/health/ready", health, suffix="ready")
    return TestClient(app)


@pytest.fixture
def client() -> TestClient:
    """Create test client with health endpoints and no database."""
    return _client()


def test_health_liveness(client: TestClient) -> None:
    """GET /v1/health returns 200."""
    result = client.simulate_get("/v1/health")
    assert result.status_code == 200
    assert result.json["status"] == "ok"


def test_health_ready(client: TestClient) -> None:
    """GET /v1/health/ready returns 200 without a pool."""
    result = client.simulate_get("/v1/health/ready")
    assert result.status_code == 200
    assert result.json["status"] == "ready"


def test_health_ready_unavailable_when_pool_times_out() -> None:
    pool = MagicMock()
    pool.connection.side_effect = PoolTimeout("no connection")
    result = _client(pool).simulate_get("/v1/health/ready")
    assert result.status_code == 503
    assert result.json["status"] == "unavailable"
