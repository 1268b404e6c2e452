"""Stored file value objects."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, slots=True)
class UploadTarget:
    """A short-lived location the client pushes raw file bytes to.

    After a successful transfer ``file_id`` is the reference to hand back
    when saving a profile or project.
    """

    file_id: str
    upload_url: str
    expires_at: datetime
    method: str = "PUT"
