"""Pydantic schemas for Skill API."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class SkillCreate(BaseModel):
    """Schema for creating a Skill."""

    name: str = Field(..., min_length=1, max_length=100)
    category: str = Field(..., min_length=1, max_length=100)
    level: int = Field(..., ge=0, le=100)
    icon: str = Field(..., max_length=50)
    description: str = Field("", max_length=1000)


class SkillResponse(BaseModel):
    """Schema for Skill response. Built-in default skills have no id."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID | None = None
    name: str
    category: str
    level: int
    icon: str
    description: str
    created_at: datetime


class SkillListResponse(BaseModel):
    """Schema for list of Skills."""

    data: list[SkillResponse]
    is_default: bool = False


class SkillDetailResponse(BaseModel):
    """Schema for single Skill."""

    data: SkillResponse
