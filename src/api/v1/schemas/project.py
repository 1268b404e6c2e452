"""Pydantic schemas for Project API."""

from datetime import datetime
from enum import StrEnum
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from domain.entities.project import ProjectCategory, ProjectWithUrls


class CategoryFilter(StrEnum):
    """Accepted values of the ``category`` query parameter."""

    ALL = "all"
    VIDEO = "video"
    MUSIC = "music"
    GRAPHICS = "graphics"


class ProjectCreate(BaseModel):
    """Schema for creating a Project."""

    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., max_length=5000)
    category: ProjectCategory
    tags: list[str] = Field(default_factory=list, max_length=50)
    featured: bool = False
    thumbnail_id: str | None = Field(None, max_length=500)
    media_id: str | None = Field(None, max_length=500)

    @field_validator("tags")
    @classmethod
    def strip_tags(cls, v: list[str]) -> list[str]:
        return [tag.strip() for tag in v if tag.strip()]


class ProjectResponse(BaseModel):
    """Schema for Project response."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "456e4567-e89b-12d3-a456-426614174000",
                "title": "Wedding highlights reel",
                "description": "Four-minute cinematic cut.",
                "category": "video",
                "tags": ["wedding", "cinematic"],
                "featured": True,
                "thumbnail_id": "3f1c0d7e9a6b4c1e8f2a5b7d9c0e1f2a",
                "thumbnail_url": "https://example.supabase.co/storage/v1/object/sign/...",
                "media_id": None,
                "media_url": None,
                "created_at": "2026-01-28T10:00:00",
            }
        },
    )

    id: UUID
    title: str
    description: str
    category: ProjectCategory
    tags: list[str]
    featured: bool
    thumbnail_id: str | None = None
    thumbnail_url: str | None = None
    media_id: str | None = None
    media_url: str | None = None
    created_at: datetime

    @classmethod
    def from_view(cls, view: ProjectWithUrls) -> "ProjectResponse":
        project = view.project
        return cls(
            id=project.id,
            title=project.title,
            description=project.description,
            category=project.category,
            tags=project.tags,
            featured=project.featured,
            thumbnail_id=project.thumbnail_id,
            thumbnail_url=view.thumbnail_url,
            media_id=project.media_id,
            media_url=view.media_url,
            created_at=project.created_at,
        )


class ProjectListResponse(BaseModel):
    """Schema for list of Projects."""

    data: list[ProjectResponse]
