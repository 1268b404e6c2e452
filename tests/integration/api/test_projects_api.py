"""Integration tests for Projects API."""

from datetime import datetime
from uuid import uuid4

import pytest
from httpx import AsyncClient

from tests.conftest import FILE_URL_PREFIX, InMemoryFileStorage


def _project(**overrides) -> dict:
    payload = {
        "title": "Wedding reel",
        "description": "Four-minute cinematic cut",
        "category": "video",
        "tags": ["wedding", " cinematic "],
    }
    payload.update(overrides)
    return payload


class TestProjectsAPI:
    @pytest.mark.asyncio
    async def test_create_project(self, admin_client: AsyncClient):
        """Test POST /api/v1/projects."""
        response = await admin_client.post("/api/v1/projects", json=_project())

        assert response.status_code == 201
        project_id = response.json()["id"]

        listing = (await admin_client.get("/api/v1/projects")).json()["data"]
        assert [p["id"] for p in listing] == [project_id]
        assert listing[0]["tags"] == ["wedding", "cinematic"]
        assert listing[0]["featured"] is False
        assert listing[0]["thumbnail_url"] is None

    @pytest.mark.asyncio
    async def test_list_empty(self, client: AsyncClient):
        response = await client.get("/api/v1/projects")

        assert response.status_code == 200
        assert response.json()["data"] == []

    @pytest.mark.asyncio
    async def test_list_newest_first(self, admin_client: AsyncClient):
        for title in ["First", "Second", "Third"]:
            await admin_client.post("/api/v1/projects", json=_project(title=title))

        listing = (await admin_client.get("/api/v1/projects")).json()["data"]

        assert [p["title"] for p in listing] == ["Third", "Second", "First"]

    @pytest.mark.asyncio
    async def test_filter_by_category(self, admin_client: AsyncClient):
        await admin_client.post("/api/v1/projects", json=_project(title="Reel"))
        await admin_client.post(
            "/api/v1/projects", json=_project(title="Beat", category="music")
        )

        music = (await admin_client.get("/api/v1/projects?category=music")).json()["data"]
        everything = (await admin_client.get("/api/v1/projects?category=all")).json()["data"]

        assert [p["title"] for p in music] == ["Beat"]
        assert len(everything) == 2

    @pytest.mark.asyncio
    async def test_categories_partition_the_full_list(self, admin_client: AsyncClient):
        specs = [
            ("Reel", "video"),
            ("Beat", "music"),
            ("Poster", "graphics"),
            ("Short film", "video"),
            ("Logo", "graphics"),
        ]
        for title, category in specs:
            await admin_client.post(
                "/api/v1/projects", json=_project(title=title, category=category)
            )

        everything = (await admin_client.get("/api/v1/projects?category=all")).json()["data"]
        union: list[str] = []
        for category in ["video", "music", "graphics"]:
            listed = (
                await admin_client.get(f"/api/v1/projects?category={category}")
            ).json()["data"]
            assert all(p["category"] == category for p in listed)
            created = [datetime.fromisoformat(p["created_at"]) for p in listed]
            assert created == sorted(created, reverse=True)
            union.extend(p["id"] for p in listed)

        assert len(union) == len(set(union)) == len(specs)
        assert sorted(union) == sorted(p["id"] for p in everything)

    @pytest.mark.asyncio
    async def test_unknown_category_filter_rejected(self, client: AsyncClient):
        response = await client.get("/api/v1/projects?category=painting")

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_create_with_unknown_category_rejected(self, admin_client: AsyncClient):
        response = await admin_client.post(
            "/api/v1/projects", json=_project(category="sculpture")
        )

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_featured_capped_at_six(self, admin_client: AsyncClient):
        for i in range(8):
            await admin_client.post(
                "/api/v1/projects", json=_project(title=f"Featured {i}", featured=True)
            )
        await admin_client.post("/api/v1/projects", json=_project(title="Plain"))

        featured = (await admin_client.get("/api/v1/projects/featured")).json()["data"]

        assert len(featured) == 6
        assert all(p["featured"] for p in featured)
        assert featured[0]["title"] == "Featured 7"

    @pytest.mark.asyncio
    async def test_file_urls_resolved(
        self, admin_client: AsyncClient, file_storage: InMemoryFileStorage
    ):
        thumb = file_storage.put("thumb-1")
        await admin_client.post(
            "/api/v1/projects",
            json=_project(thumbnail_id=thumb, media_id="not-uploaded"),
        )

        project = (await admin_client.get("/api/v1/projects")).json()["data"][0]

        assert project["thumbnail_url"] == f"{FILE_URL_PREFIX}thumb-1"
        assert project["media_id"] == "not-uploaded"
        assert project["media_url"] is None

    @pytest.mark.asyncio
    async def test_create_requires_auth(self, client: AsyncClient):
        response = await client.post("/api/v1/projects", json=_project())

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_delete_removes_record_and_files(
        self, admin_client: AsyncClient, file_storage: InMemoryFileStorage
    ):
        """Test DELETE /api/v1/projects/{id}."""
        thumb = file_storage.put("thumb-1")
        media = file_storage.put("media-1")
        create = await admin_client.post(
            "/api/v1/projects", json=_project(thumbnail_id=thumb, media_id=media)
        )
        project_id = create.json()["id"]

        response = await admin_client.delete(f"/api/v1/projects/{project_id}")

        assert response.status_code == 204
        assert file_storage.deleted == ["thumb-1", "media-1"]
        assert (await admin_client.get("/api/v1/projects")).json()["data"] == []

    @pytest.mark.asyncio
    async def test_delete_succeeds_when_storage_fails(
        self, admin_client: AsyncClient, file_storage: InMemoryFileStorage
    ):
        thumb = file_storage.put("thumb-1")
        file_storage.broken.add(thumb)
        create = await admin_client.post("/api/v1/projects", json=_project(thumbnail_id=thumb))
        project_id = create.json()["id"]

        response = await admin_client.delete(f"/api/v1/projects/{project_id}")

        assert response.status_code == 204
        assert (await admin_client.get("/api/v1/projects")).json()["data"] == []

    @pytest.mark.asyncio
    async def test_delete_missing_project(
        self, admin_client: AsyncClient, file_storage: InMemoryFileStorage
    ):
        response = await admin_client.delete(f"/api/v1/projects/{uuid4()}")

        assert response.status_code == 404
        assert response.json()["error_code"] == "PROJECT_NOT_FOUND"
        assert file_storage.deleted == []
