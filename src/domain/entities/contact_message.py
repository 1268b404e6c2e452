"""Contact message domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4


@dataclass
class ContactMessage:
    """Domain entity for a message left through the contact form."""

    name: str
    email: str
    message: str
    id: UUID = field(default_factory=uuid4)
    read: bool = False
    created_at: datetime = field(default_factory=datetime.utcnow)

    def mark_read(self) -> None:
        """Mark the message as read."""
        self.read = True
