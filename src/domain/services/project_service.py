"""Project service layer with business logic."""

import asyncio
from collections.abc import Callable, Sequence
from datetime import datetime
from uuid import UUID

import structlog

from core.exceptions import InvalidArgumentError, ProjectNotFoundError, StorageError
from domain.entities.project import ALL_CATEGORIES, Project, ProjectCategory, ProjectWithUrls
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.storage_service import StorageService

logger = structlog.get_logger()

FEATURED_LIMIT = 6


def parse_category(value: str | ProjectCategory) -> ProjectCategory:
    """Convert a raw category to the enum, rejecting unknown values."""
    try:
        return ProjectCategory(value)
    except ValueError:
        allowed = ", ".join(c.value for c in ProjectCategory)
        raise InvalidArgumentError(
            "category", f"Invalid category '{value}'. Expected one of: {allowed}"
        ) from None


class ProjectService:
    """Service layer for Project business logic."""

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        storage: StorageService,
    ) -> None:
        self._uow_factory = uow_factory
        self._storage = storage

    async def get_all(self, category: str | None = None) -> list[ProjectWithUrls]:
        """Get projects newest first, filtered unless category is None or "all"."""
        selected: ProjectCategory | None = None
        if category is not None and category != ALL_CATEGORIES:
            selected = parse_category(category)

        async with self._uow_factory() as uow:
            projects = await uow.projects.get_all(selected)

        return await self._enrich(projects)

    async def get_featured(self) -> list[ProjectWithUrls]:
        """Get the most recent featured projects (at most six)."""
        async with self._uow_factory() as uow:
            projects = await uow.projects.get_featured(FEATURED_LIMIT)

        return await self._enrich(projects)

    async def add(
        self,
        title: str,
        description: str,
        category: str | ProjectCategory,
        tags: Sequence[str] = (),
        featured: bool = False,
        thumbnail_id: str | None = None,
        media_id: str | None = None,
    ) -> UUID:
        """Create a project. The creation time is always assigned here."""
        project_category = parse_category(category)

        async with self._uow_factory() as uow:
            project = Project(
                title=title,
                description=description,
                category=project_category,
                thumbnail_id=thumbnail_id,
                media_id=media_id,
                tags=list(tags),
                featured=featured,
                created_at=datetime.utcnow(),
            )
            created = await uow.projects.create(project)
            await uow.commit()

        logger.info(
            "project_created",
            project_id=str(created.id),
            category=created.category.value,
            featured=created.featured,
        )
        return created.id

    async def delete(self, project_id: UUID) -> None:
        """Delete a project together with its stored files.

        File cleanup is best-effort: each file is attempted independently
        and a storage failure never prevents the record from being deleted.
        """
        async with self._uow_factory() as uow:
            project = await uow.projects.get(project_id)
            if not project:
                raise ProjectNotFoundError(str(project_id))

            for file_id in project.file_ids:
                try:
                    await self._storage.delete(file_id)
                except StorageError as exc:
                    logger.warning(
                        "project_file_cleanup_failed",
                        project_id=str(project_id),
                        file_id=file_id,
                        error=exc.message,
                    )

            await uow.projects.delete(project_id)
            await uow.commit()

        logger.info("project_deleted", project_id=str(project_id))

    async def _enrich(self, projects: list[Project]) -> list[ProjectWithUrls]:
        return list(await asyncio.gather(*(self._with_urls(p) for p in projects)))

    async def _with_urls(self, project: Project) -> ProjectWithUrls:
        thumbnail_url, media_url = await asyncio.gather(
            self._storage.resolve_url(project.thumbnail_id),
            self._storage.resolve_url(project.media_id),
        )
        return ProjectWithUrls(
            project=project,
            thumbnail_url=thumbnail_url,
            media_url=media_url,
        )
