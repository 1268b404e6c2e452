"""Skill service layer with business logic."""

from collections.abc import Callable
from uuid import UUID

import structlog

from core.exceptions import InvalidArgumentError, SkillNotFoundError
from domain.defaults import default_skills
from domain.entities.skill import MAX_SKILL_LEVEL, MIN_SKILL_LEVEL, Skill, SkillList
from domain.repositories.unit_of_work import IUnitOfWork

logger = structlog.get_logger()


class SkillService:
    """Service layer for Skill business logic."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def get_all(self) -> SkillList:
        """Get stored skills, or the built-in defaults when there are none."""
        async with self._uow_factory() as uow:
            skills = await uow.skills.get_all()

        if not skills:
            return SkillList(skills=default_skills(), is_default=True)
        return SkillList(skills=skills)

    async def add(
        self,
        name: str,
        category: str,
        level: int,
        icon: str,
        description: str,
    ) -> Skill:
        """Store a new skill."""
        if not MIN_SKILL_LEVEL <= level <= MAX_SKILL_LEVEL:
            raise InvalidArgumentError(
                "level",
                f"level must be between {MIN_SKILL_LEVEL} and {MAX_SKILL_LEVEL}",
            )

        async with self._uow_factory() as uow:
            skill = Skill(
                name=name,
                category=category,
                level=level,
                icon=icon,
                description=description,
            )
            created = await uow.skills.create(skill)
            await uow.commit()

        logger.info("skill_created", skill_id=str(created.id), name=created.name)
        return created

    async def delete(self, skill_id: UUID) -> None:
        """Delete a stored skill."""
        async with self._uow_factory() as uow:
            deleted = await uow.skills.delete(skill_id)
            if not deleted:
                raise SkillNotFoundError(str(skill_id))
            await uow.commit()

        logger.info("skill_deleted", skill_id=str(skill_id))
