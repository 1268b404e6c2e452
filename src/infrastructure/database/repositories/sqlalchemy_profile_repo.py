"""SQLAlchemy implementation of Profile repository."""

from datetime import datetime
from typing import Any

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.profile import Profile, SocialLinks
from infrastructure.database.models import PROFILE_SINGLETON_ID, ProfileModel


class SQLAlchemyProfileRepository:
    """SQLAlchemy implementation of IProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self) -> Profile | None:
        """Get the stored profile, if any."""
        stmt = select(ProfileModel).where(ProfileModel.id == PROFILE_SINGLETON_ID)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def upsert(self, fields: dict[str, Any]) -> Profile:
        """Insert the singleton row or update the given columns.

        Issued as a single INSERT ... ON CONFLICT statement so concurrent
        writers can never create a second row or lose the existence check.
        """
        now = datetime.utcnow()
        insert = pg_insert if self._dialect_name() == "postgresql" else sqlite_insert
        stmt = insert(ProfileModel).values(
            id=PROFILE_SINGLETON_ID,
            created_at=now,
            updated_at=now,
            **fields,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=[ProfileModel.id],
            set_={**fields, "updated_at": now},
        )
        await self._session.execute(stmt)

        select_stmt = (
            select(ProfileModel)
            .where(ProfileModel.id == PROFILE_SINGLETON_ID)
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(select_stmt)
        return self._to_entity(result.scalar_one())

    def _dialect_name(self) -> str:
        return self._session.get_bind().dialect.name

    def _to_entity(self, model: ProfileModel) -> Profile:
        """Convert ORM model to domain entity."""
        links = model.social_links or {}
        return Profile(
            name=model.name,
            location=model.location,
            profession=model.profession,
            bio=model.bio,
            contact_number=model.contact_number,
            father_name=model.father_name,
            profile_image_id=model.profile_image_id,
            social_links=SocialLinks(
                whatsapp=links.get("whatsapp"),
                instagram=links.get("instagram"),
                youtube=links.get("youtube"),
            ),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
