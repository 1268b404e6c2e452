"""Contact message service layer."""

from collections.abc import Callable
from datetime import datetime
from uuid import UUID

import structlog

from core.exceptions import ContactMessageNotFoundError
from domain.entities.contact_message import ContactMessage
from domain.repositories.unit_of_work import IUnitOfWork

logger = structlog.get_logger()


class ContactService:
    """Service layer for the contact inbox."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def submit(self, name: str, email: str, message: str) -> UUID:
        """Store a new message as unread."""
        async with self._uow_factory() as uow:
            created = await uow.messages.create(
                ContactMessage(
                    name=name,
                    email=email,
                    message=message,
                    read=False,
                    created_at=datetime.utcnow(),
                )
            )
            await uow.commit()

        logger.info("contact_message_received", message_id=str(created.id))
        return created.id

    async def get_all(self) -> list[ContactMessage]:
        """Get every message, newest first."""
        async with self._uow_factory() as uow:
            return await uow.messages.get_all()  # type: ignore[no-any-return]

    async def mark_read(self, message_id: UUID) -> ContactMessage:
        """Mark a message as read. Marking an already-read message is a no-op."""
        async with self._uow_factory() as uow:
            message = await uow.messages.get(message_id)
            if not message:
                raise ContactMessageNotFoundError(str(message_id))
            if message.read:
                return message

            message.mark_read()
            await uow.messages.update(message)
            await uow.commit()

        logger.info("contact_message_read", message_id=str(message_id))
        return message

    async def unread_count(self) -> int:
        """Number of messages not yet read."""
        async with self._uow_factory() as uow:
            return await uow.messages.count_unread()  # type: ignore[no-any-return]
