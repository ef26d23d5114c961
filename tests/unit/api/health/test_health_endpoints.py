"""Health check endpoints tests."""

import pytest
from httpx import AsyncClient
from fastapi import status
from unittest.mock import patch

from yardtrack.modules.health.service import HealthCheckResult


@pytest.mark.asyncio
async def test_root_endpoint_returns_html(app, public_client: AsyncClient):
    response = await public_client.get("/")

    assert response.status_code == status.HTTP_200_OK
    assert "text/html" in response.headers.get("content-type", "")
    assert "YardTrack API" in response.text


@pytest.mark.asyncio
async def test_health_check_is_public_and_healthy(app, public_client: AsyncClient):
    response = await public_client.get("/health/")

    assert response.status_code == status.HTTP_200_OK

    data = response.json()
    assert data["status"] == "healthy"
    assert data["services"]["database"]["status"] == "healthy"
    assert data["services"]["training_pool"]["connected"] is True
    assert "timestamp" in data


@pytest.mark.asyncio
async def test_health_check_database_unhealthy(app, public_client: AsyncClient):
    unhealthy = HealthCheckResult(
        service="database",
        status="unhealthy",
        connected=False,
        details={},
        error="connection refused",
    )
    with patch(
        "yardtrack.modules.health.service.HealthService.check_database_health",
        return_value=unhealthy,
    ):
        response = await public_client.get("/health/")

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["status"] == "unhealthy"
    assert data["services"]["database"]["error"] == "connection refused"


@pytest.mark.asyncio
async def test_liveness_check(app, public_client: AsyncClient):
    response = await public_client.get("/health/liveness")

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"status": "alive", "service": "yardtrack-api"}
