"""Contact message repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.contact_message import ContactMessage


class IContactMessageRepository(Protocol):
    """Repository interface for ContactMessage entities."""

    async def get(self, id: UUID) -> ContactMessage | None:
        """Get a message by ID."""
        ...

    async def get_all(self) -> list[ContactMessage]:
        """Get all messages, newest first."""
        ...

    async def create(self, message: ContactMessage) -> ContactMessage:
        """Store a new message."""
        ...

    async def update(self, message: ContactMessage) -> ContactMessage | None:
        """Persist the read flag of a message; None if it does not exist."""
        ...

    async def count_unread(self) -> int:
        """Count messages not yet read."""
        ...
