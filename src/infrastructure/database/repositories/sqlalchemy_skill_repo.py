"""SQLAlchemy implementation of Skill repository."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.skill import Skill
from infrastructure.database.models import SkillModel


class SQLAlchemySkillRepository:
    """SQLAlchemy implementation of ISkillRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: UUID) -> Skill | None:
        """Get a skill by ID."""
        model = await self._session.get(SkillModel, id)
        return self._to_entity(model) if model else None

    async def get_all(self) -> list[Skill]:
        """Get all skills in insertion order."""
        stmt = select(SkillModel).order_by(SkillModel.created_at, SkillModel.name)
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def create(self, skill: Skill) -> Skill:
        """Create a new skill."""
        model = SkillModel(
            id=skill.id,
            name=skill.name,
            category=skill.category,
            level=skill.level,
            icon=skill.icon,
            description=skill.description,
            created_at=skill.created_at,
        )
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def delete(self, id: UUID) -> bool:
        """Delete a skill."""
        model = await self._session.get(SkillModel, id)
        if not model:
            return False

        await self._session.delete(model)
        await self._session.flush()
        return True

    def _to_entity(self, model: SkillModel) -> Skill:
        """Convert ORM model to domain entity."""
        return Skill(
            id=model.id,
            name=model.name,
            category=model.category,
            level=model.level,
            icon=model.icon,
            description=model.description,
            created_at=model.created_at,
        )
