"""Project repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.project import Project, ProjectCategory


class IProjectRepository(Protocol):
    """Repository interface for Project entities."""

    async def get(self, id: UUID) -> Project | None:
        """Get a project by ID."""
        ...

    async def get_all(self, category: ProjectCategory | None = None) -> list[Project]:
        """Get projects, newest first, optionally limited to one category."""
        ...

    async def get_featured(self, limit: int) -> list[Project]:
        """Get up to ``limit`` featured projects, newest first."""
        ...

    async def create(self, project: Project) -> Project:
        """Create a new project."""
        ...

    async def delete(self, id: UUID) -> bool:
        """Delete a project and return success status."""
        ...
