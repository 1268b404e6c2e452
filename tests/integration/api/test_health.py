"""Integration tests for health endpoints."""

import pytest
from httpx import AsyncClient


class TestHealthAPI:
    @pytest.mark.asyncio
    async def test_health_check(self, client: AsyncClient):
        """Test GET /health."""
        response = await client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["version"] == "1.0.0"
        assert data["database"] is None

    @pytest.mark.asyncio
    async def test_detailed_health_check(self, client: AsyncClient):
        """Test GET /health/detailed reports database and storage."""
        response = await client.get("/health/detailed")

        assert response.status_code == 200
        data = response.json()
        assert data["database"] == "healthy"
        assert data["storage"] == "configured"
        assert data["status"] == "healthy"

    @pytest.mark.asyncio
    async def test_responses_carry_security_and_request_headers(self, client: AsyncClient):
        response = await client.get("/health")

        assert response.headers["x-content-type-options"] == "nosniff"
        assert "x-request-id" in response.headers
