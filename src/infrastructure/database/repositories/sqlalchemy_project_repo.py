"""SQLAlchemy implementation of Project repository."""

from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.project import Project, ProjectCategory
from infrastructure.database.models import ProjectModel


class SQLAlchemyProjectRepository:
    """SQLAlchemy implementation of IProjectRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: UUID) -> Project | None:
        """Get a project by ID."""
        stmt = select(ProjectModel).where(ProjectModel.id == id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_all(self, category: ProjectCategory | None = None) -> list[Project]:
        """Get projects newest first, optionally for a single category."""
        stmt = select(ProjectModel)
        if category is not None:
            stmt = stmt.where(ProjectModel.category == category.value)
        stmt = stmt.order_by(ProjectModel.created_at.desc())
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def get_featured(self, limit: int) -> list[Project]:
        """Get the newest featured projects."""
        stmt = (
            select(ProjectModel)
            .where(ProjectModel.featured.is_(True))
            .order_by(ProjectModel.created_at.desc())
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def create(self, project: Project) -> Project:
        """Create a new project."""
        model = self._to_model(project)
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def delete(self, id: UUID) -> bool:
        """Delete a project by ID."""
        stmt = delete(ProjectModel).where(ProjectModel.id == id)
        result = await self._session.execute(stmt)
        await self._session.flush()
        return bool(result.rowcount)

    def _to_entity(self, model: ProjectModel) -> Project:
        """Convert ORM model to domain entity."""
        return Project(
            id=model.id,
            title=model.title,
            description=model.description,
            category=ProjectCategory(model.category),
            thumbnail_id=model.thumbnail_id,
            media_id=model.media_id,
            tags=list(model.tags or []),
            featured=model.featured,
            created_at=model.created_at,
        )

    def _to_model(self, entity: Project) -> ProjectModel:
        """Convert domain entity to ORM model."""
        return ProjectModel(
            id=entity.id,
            title=entity.title,
            description=entity.description,
            category=entity.category.value,
            thumbnail_id=entity.thumbnail_id,
            media_id=entity.media_id,
            tags=list(entity.tags),
            featured=entity.featured,
            created_at=entity.created_at,
        )
