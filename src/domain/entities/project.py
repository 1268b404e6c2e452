"""Project domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from uuid import UUID, uuid4

ALL_CATEGORIES = "all"


class ProjectCategory(StrEnum):
    """Portfolio sections a project can belong to."""

    VIDEO = "video"
    MUSIC = "music"
    GRAPHICS = "graphics"


@dataclass
class Project:
    """Domain entity for a portfolio Project."""

    title: str
    description: str
    category: ProjectCategory
    id: UUID = field(default_factory=uuid4)
    thumbnail_id: str | None = None
    media_id: str | None = None
    tags: list[str] = field(default_factory=list)
    featured: bool = False
    created_at: datetime = field(default_factory=datetime.utcnow)

    @property
    def file_ids(self) -> list[str]:
        """Storage references owned by this project, thumbnail first."""
        return [ref for ref in (self.thumbnail_id, self.media_id) if ref]


@dataclass(frozen=True, slots=True)
class ProjectWithUrls:
    """Read-only value object: a Project enriched with fetchable file URLs."""

    project: Project
    thumbnail_url: str | None = None
    media_url: str | None = None
