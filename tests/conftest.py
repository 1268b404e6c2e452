"""Pytest configuration and fixtures."""

import os
import sys
from collections.abc import AsyncGenerator
from datetime import datetime, timedelta
from pathlib import Path
from typing import Any
from uuid import uuid4

# Configure settings before any application module is imported
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["SUPABASE_URL"] = "https://test-project.supabase.co"
os.environ["SUPABASE_SERVICE_ROLE_KEY"] = "test-service-role-key"
os.environ["JWT_SECRET_KEY"] = "test-secret-key"
os.environ["ADMIN_EMAILS"] = ""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.pool import StaticPool

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from core.exceptions import StorageError, StoredFileNotFoundError
from domain.entities.stored_file import UploadTarget
from domain.services.portfolio_service import PortfolioService
from infrastructure.auth.jwt_provider import JWTAuthProvider
from infrastructure.auth.provider import TokenUser
from infrastructure.database.models import Base
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork


# Compile JSONB as JSON for SQLite (used in tests)
@compiles(JSONB, "sqlite")
def _compile_jsonb_sqlite(type_: Any, compiler: Any, **kw: Any) -> str:
    return "JSON"


# Test database URL (SQLite in memory)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

# Fixed test user ID for consistency
TEST_USER_ID = uuid4()

FILE_URL_PREFIX = "https://files.test/"


class InMemoryFileStorage:
    """File storage double keeping object names in a set.

    ``broken`` holds file ids whose every operation fails with a backend
    error, to exercise degradation paths.
    """

    def __init__(self) -> None:
        self.files: set[str] = set()
        self.broken: set[str] = set()
        self.deleted: list[str] = []

    def put(self, file_id: str) -> str:
        self.files.add(file_id)
        return file_id

    async def get_url(self, file_id: str) -> str:
        self._check(file_id)
        return f"{FILE_URL_PREFIX}{file_id}"

    async def delete(self, file_id: str) -> None:
        self._check(file_id)
        self.files.discard(file_id)
        self.deleted.append(file_id)

    async def create_upload_target(self) -> UploadTarget:
        file_id = uuid4().hex
        self.files.add(file_id)
        return UploadTarget(
            file_id=file_id,
            upload_url=f"https://upload.test/{file_id}?token=abc",
            expires_at=datetime.utcnow() + timedelta(hours=2),
        )

    def _check(self, file_id: str) -> None:
        if file_id in self.broken:
            raise StorageError("Storage backend unavailable", details={"file_id": file_id})
        if file_id not in self.files:
            raise StoredFileNotFoundError(file_id)


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create a fresh in-memory database with all tables for each test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create session factory."""
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest.fixture
async def db_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """Create a database session for repository tests."""
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def uow_factory(session_factory: async_sessionmaker[AsyncSession]):
    """Unit of Work factory bound to the test database."""

    def factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(session_factory)

    return factory


@pytest.fixture
def file_storage() -> InMemoryFileStorage:
    """Create an empty in-memory file store."""
    return InMemoryFileStorage()


@pytest.fixture
def portfolio_service(uow_factory, file_storage: InMemoryFileStorage) -> PortfolioService:
    """Content facade wired to the test database and file store."""
    return PortfolioService(uow_factory, file_storage)


@pytest.fixture
def test_user() -> TokenUser:
    """Create a test user with fixed ID."""
    return TokenUser(
        id=TEST_USER_ID,
        email="owner@example.com",
        display_name="Portfolio Owner",
    )


@pytest.fixture
def auth_provider() -> JWTAuthProvider:
    """Create auth provider for testing."""
    return JWTAuthProvider(
        secret_key="test-secret-key",
        algorithm="HS256",
        expire_minutes=30,
    )


@pytest.fixture
def auth_token(auth_provider: JWTAuthProvider, test_user: TokenUser) -> str:
    """Create auth token for test user."""
    return str(auth_provider.create_token(test_user))


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create authorization headers."""
    return {"Authorization": f"Bearer {auth_token}"}


@pytest.fixture
async def client(
    portfolio_service: PortfolioService,
    auth_provider: JWTAuthProvider,
) -> AsyncGenerator[AsyncClient, None]:
    """Create async test client backed by the test database (no auth override).

    Admin routes need real ``auth_headers`` with this client.
    """
    from api.dependencies.auth import get_admin_emails, get_auth_provider
    from api.v1.dependencies import get_portfolio_service
    from main import create_app

    app = create_app()
    app.dependency_overrides[get_portfolio_service] = lambda: portfolio_service
    app.dependency_overrides[get_auth_provider] = lambda: auth_provider
    app.dependency_overrides[get_admin_emails] = lambda: []

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
async def admin_client(
    portfolio_service: PortfolioService,
    test_user: TokenUser,
) -> AsyncGenerator[AsyncClient, None]:
    """
    Create test client signed in as the portfolio owner.

    This client:
    - Uses an in-memory SQLite database and file store
    - Overrides auth dependency to return the test user
    - Leaves the admin allow-list empty
    """
    from api.dependencies.auth import get_admin_emails, get_current_user
    from api.v1.dependencies import get_portfolio_service
    from main import create_app

    app = create_app()

    async def override_get_user() -> TokenUser:
        return test_user

    app.dependency_overrides[get_current_user] = override_get_user
    app.dependency_overrides[get_admin_emails] = lambda: []
    app.dependency_overrides[get_portfolio_service] = lambda: portfolio_service

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()
