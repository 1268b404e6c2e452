"""Pydantic schemas for file uploads."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class UploadTargetResponse(BaseModel):
    """Where and how to push the bytes of a new file.

    Send the raw file with ``method`` to ``upload_url`` and a matching
    ``Content-Type`` header, then use ``file_id`` as ``profile_image_id``,
    ``thumbnail_id`` or ``media_id``.
    """

    model_config = ConfigDict(from_attributes=True)

    file_id: str
    upload_url: str
    method: str
    expires_at: datetime
