"""Pydantic schemas for Contact message API."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class ContactMessageCreate(BaseModel):
    """Schema for submitting the contact form."""

    name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., min_length=1, max_length=320)
    message: str = Field(..., min_length=1, max_length=5000)


class ContactMessageResponse(BaseModel):
    """Schema for ContactMessage response."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    email: str
    message: str
    read: bool
    created_at: datetime


class ContactMessageListResponse(BaseModel):
    """Schema for the inbox."""

    data: list[ContactMessageResponse]
    unread_count: int


class ContactMessageDetailResponse(BaseModel):
    """Schema for single ContactMessage."""

    data: ContactMessageResponse
