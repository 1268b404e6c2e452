"""Skill domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4

MIN_SKILL_LEVEL = 0
MAX_SKILL_LEVEL = 100


@dataclass
class Skill:
    """Domain entity for a Skill.

    ``level`` is a percentage; callers validate the range, the entity does
    not clamp it. Built-in default skills are never stored and have no id.
    """

    name: str
    category: str
    level: int
    icon: str
    description: str
    id: UUID | None = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.utcnow)


@dataclass(frozen=True, slots=True)
class SkillList:
    """Read-only value object: the skills to display and their origin."""

    skills: list[Skill]
    is_default: bool = False
