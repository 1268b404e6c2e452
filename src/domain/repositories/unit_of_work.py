"""Unit of Work protocol."""

from typing import Protocol

from domain.repositories.contact_message_repository import IContactMessageRepository
from domain.repositories.profile_repository import IProfileRepository
from domain.repositories.project_repository import IProjectRepository
from domain.repositories.skill_repository import ISkillRepository


class IUnitOfWork(Protocol):
    """Unit of Work interface for managing transactions."""

    profiles: IProfileRepository
    skills: ISkillRepository
    projects: IProjectRepository
    messages: IContactMessageRepository

    async def commit(self) -> None:
        """Commit the current transaction."""
        ...

    async def rollback(self) -> None:
        """Rollback the current transaction."""
        ...

    async def __aenter__(self) -> "IUnitOfWork":
        """Enter the context manager."""
        ...

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:  # type: ignore
        """Exit the context manager."""
        ...
