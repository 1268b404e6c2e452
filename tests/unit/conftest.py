"""Shared fixtures for unit tests."""

from typing import Any
from unittest.mock import AsyncMock

import pytest

from domain.services.storage_service import StorageService


class FakeUnitOfWork:
    """Fake Unit of Work with all 4 repository mocks for unit testing."""

    def __init__(self) -> None:
        self.profiles = AsyncMock()
        self.skills = AsyncMock()
        self.projects = AsyncMock()
        self.messages = AsyncMock()
        self.committed = False
        self.rolled_back = False

    async def commit(self) -> None:
        self.committed = True

    async def rollback(self) -> None:
        self.rolled_back = True

    async def __aenter__(self) -> "FakeUnitOfWork":
        return self

    async def __aexit__(self, *args: Any) -> None:
        pass


@pytest.fixture
def uow() -> FakeUnitOfWork:
    """Create a fresh FakeUnitOfWork."""
    return FakeUnitOfWork()


@pytest.fixture
def storage_backend() -> AsyncMock:
    """A mocked IFileStorage that signs every id as https://cdn.test/<id>."""
    backend = AsyncMock()
    backend.get_url.side_effect = lambda file_id: f"https://cdn.test/{file_id}"
    return backend


@pytest.fixture
def storage(storage_backend: AsyncMock) -> StorageService:
    """Storage resolver over the mocked backend."""
    return StorageService(storage_backend)
