"""Content facade: the single entry point used by the API layer."""

from collections.abc import Callable, Mapping, Sequence
from typing import Any
from uuid import UUID

from domain.entities.contact_message import ContactMessage
from domain.entities.profile import ProfileWithImage
from domain.entities.project import ProjectWithUrls
from domain.entities.skill import Skill, SkillList
from domain.entities.stored_file import UploadTarget
from domain.repositories.file_storage import IFileStorage
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.contact_service import ContactService
from domain.services.profile_service import ProfileService
from domain.services.project_service import ProjectService
from domain.services.skill_service import SkillService
from domain.services.storage_service import StorageService


class PortfolioService:
    """Aggregates the profile, skill, project and contact services.

    All four share one storage resolver and one Unit of Work factory.
    """

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        file_storage: IFileStorage,
    ) -> None:
        self.storage = StorageService(file_storage)
        self.profiles = ProfileService(uow_factory, self.storage)
        self.skills = SkillService(uow_factory)
        self.projects = ProjectService(uow_factory, self.storage)
        self.messages = ContactService(uow_factory)

    # --- Profile ---

    async def get_profile(self) -> ProfileWithImage:
        return await self.profiles.get()

    async def update_profile(self, profile_fields: Mapping[str, Any]) -> ProfileWithImage:
        return await self.profiles.upsert(profile_fields)

    # --- Skills ---

    async def get_skills(self) -> SkillList:
        return await self.skills.get_all()

    async def add_skill(
        self,
        name: str,
        category: str,
        level: int,
        icon: str,
        description: str,
    ) -> Skill:
        return await self.skills.add(
            name=name,
            category=category,
            level=level,
            icon=icon,
            description=description,
        )

    async def delete_skill(self, skill_id: UUID) -> None:
        await self.skills.delete(skill_id)

    # --- Projects ---

    async def get_projects(self, category: str | None = None) -> list[ProjectWithUrls]:
        return await self.projects.get_all(category)

    async def get_featured_projects(self) -> list[ProjectWithUrls]:
        return await self.projects.get_featured()

    async def add_project(
        self,
        title: str,
        description: str,
        category: str,
        tags: Sequence[str] = (),
        featured: bool = False,
        thumbnail_id: str | None = None,
        media_id: str | None = None,
    ) -> UUID:
        return await self.projects.add(
            title=title,
            description=description,
            category=category,
            tags=tags,
            featured=featured,
            thumbnail_id=thumbnail_id,
            media_id=media_id,
        )

    async def delete_project(self, project_id: UUID) -> None:
        await self.projects.delete(project_id)

    # --- Contact messages ---

    async def submit_contact_message(self, name: str, email: str, message: str) -> UUID:
        return await self.messages.submit(name=name, email=email, message=message)

    async def get_contact_messages(self) -> list[ContactMessage]:
        return await self.messages.get_all()

    async def mark_contact_message_read(self, message_id: UUID) -> ContactMessage:
        return await self.messages.mark_read(message_id)

    async def count_unread_messages(self) -> int:
        return await self.messages.unread_count()

    # --- Files ---

    async def generate_upload_url(self) -> UploadTarget:
        return await self.storage.begin_upload()
