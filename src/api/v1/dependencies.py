"""Dependency injection factories for API v1."""

from functools import lru_cache
from typing import Callable

from domain.services.portfolio_service import PortfolioService
from infrastructure.database.session import async_session_factory
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork
from infrastructure.storage.supabase_storage import SupabaseFileStorage


def get_uow_factory() -> Callable[[], SQLAlchemyUnitOfWork]:
    """Factory for creating Unit of Work instances."""

    def factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(async_session_factory)

    return factory


@lru_cache
def get_file_storage() -> SupabaseFileStorage:
    """Get the Supabase Storage client."""
    return SupabaseFileStorage()


@lru_cache
def get_portfolio_service() -> PortfolioService:
    """Get the content facade."""
    return PortfolioService(get_uow_factory(), get_file_storage())
