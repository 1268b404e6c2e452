"""SQLAlchemy implementation of ContactMessage repository."""

from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.contact_message import ContactMessage
from infrastructure.database.models import ContactMessageModel


class SQLAlchemyContactMessageRepository:
    """SQLAlchemy implementation of IContactMessageRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: UUID) -> ContactMessage | None:
        """Get a message by ID."""
        model = await self._session.get(ContactMessageModel, id)
        return self._to_entity(model) if model else None

    async def get_all(self) -> list[ContactMessage]:
        """Get all messages, newest first."""
        stmt = select(ContactMessageModel).order_by(ContactMessageModel.created_at.desc())
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def create(self, message: ContactMessage) -> ContactMessage:
        """Store a new message."""
        model = ContactMessageModel(
            id=message.id,
            name=message.name,
            email=message.email,
            message=message.message,
            read=message.read,
            created_at=message.created_at,
        )
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def update(self, message: ContactMessage) -> ContactMessage | None:
        """Persist the read flag of an existing message."""
        model = await self._session.get(ContactMessageModel, message.id)
        if not model:
            return None

        model.read = message.read
        await self._session.flush()
        return self._to_entity(model)

    async def count_unread(self) -> int:
        """Count unread messages."""
        stmt = (
            select(func.count())
            .select_from(ContactMessageModel)
            .where(ContactMessageModel.read.is_(False))
        )
        result = await self._session.execute(stmt)
        return result.scalar() or 0

    def _to_entity(self, model: ContactMessageModel) -> ContactMessage:
        """Convert ORM model to domain entity."""
        return ContactMessage(
            id=model.id,
            name=model.name,
            email=model.email,
            message=model.message,
            read=model.read,
            created_at=model.created_at,
        )
