"""Integration tests for Skills API."""

from uuid import uuid4

import pytest
from httpx import AsyncClient


def _skill(**overrides) -> dict:
    payload = {
        "name": "DaVinci Resolve",
        "category": "Software",
        "level": 80,
        "icon": "🎞️",
        "description": "Color grading",
    }
    payload.update(overrides)
    return payload


class TestSkillsAPI:
    @pytest.mark.asyncio
    async def test_list_defaults_when_empty(self, client: AsyncClient):
        """Test GET /api/v1/skills on an empty store."""
        response = await client.get("/api/v1/skills")

        assert response.status_code == 200
        body = response.json()
        assert body["is_default"] is True
        assert len(body["data"]) == 6
        assert body["data"][0]["name"] == "Video Editing"
        assert body["data"][0]["id"] is None

    @pytest.mark.asyncio
    async def test_create_skill_replaces_defaults(self, admin_client: AsyncClient):
        """Test POST /api/v1/skills."""
        response = await admin_client.post("/api/v1/skills", json=_skill())

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["name"] == "DaVinci Resolve"
        assert data["id"] is not None

        listing = (await admin_client.get("/api/v1/skills")).json()
        assert listing["is_default"] is False
        assert [s["name"] for s in listing["data"]] == ["DaVinci Resolve"]

    @pytest.mark.asyncio
    async def test_skills_listed_in_insertion_order(self, admin_client: AsyncClient):
        for name in ["Zeta", "Alpha", "Mid"]:
            await admin_client.post("/api/v1/skills", json=_skill(name=name))

        listing = (await admin_client.get("/api/v1/skills")).json()

        assert [s["name"] for s in listing["data"]] == ["Zeta", "Alpha", "Mid"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("level", [-1, 101])
    async def test_out_of_range_level_rejected(self, admin_client: AsyncClient, level: int):
        response = await admin_client.post("/api/v1/skills", json=_skill(level=level))

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_create_requires_auth(self, client: AsyncClient):
        response = await client.post("/api/v1/skills", json=_skill())

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_delete_skill(self, admin_client: AsyncClient):
        """Test DELETE /api/v1/skills/{id}."""
        create = await admin_client.post("/api/v1/skills", json=_skill())
        skill_id = create.json()["data"]["id"]

        response = await admin_client.delete(f"/api/v1/skills/{skill_id}")

        assert response.status_code == 204
        assert (await admin_client.get("/api/v1/skills")).json()["is_default"] is True

    @pytest.mark.asyncio
    async def test_delete_missing_skill(self, admin_client: AsyncClient):
        response = await admin_client.delete(f"/api/v1/skills/{uuid4()}")

        assert response.status_code == 404
        assert response.json()["error_code"] == "SKILL_NOT_FOUND"
