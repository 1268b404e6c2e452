"""Profile service layer with business logic."""

from collections.abc import Callable, Mapping
from dataclasses import asdict, fields
from typing import Any

import structlog

from core.exceptions import InvalidArgumentError
from domain.defaults import default_profile
from domain.entities.profile import Profile, ProfileWithImage, SocialLinks
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.storage_service import StorageService

logger = structlog.get_logger()

UPDATABLE_FIELDS = frozenset(
    {
        "name",
        "location",
        "profession",
        "bio",
        "contact_number",
        "father_name",
        "profile_image_id",
        "social_links",
    }
)
REQUIRED_FIELDS = ("name", "location", "profession", "bio")
SOCIAL_LINK_KEYS = frozenset(f.name for f in fields(SocialLinks))


class ProfileService:
    """Service layer for the singleton Profile."""

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        storage: StorageService,
    ) -> None:
        self._uow_factory = uow_factory
        self._storage = storage

    async def get(self) -> ProfileWithImage:
        """Get the profile, falling back to the built-in one when none is stored."""
        async with self._uow_factory() as uow:
            profile = await uow.profiles.get()

        if profile is None:
            return ProfileWithImage(profile=default_profile(), is_default=True)

        return await self._with_image(profile)

    async def upsert(self, profile_fields: Mapping[str, Any]) -> ProfileWithImage:
        """Create the profile or overwrite the given fields.

        ``name``, ``location``, ``profession``, ``bio`` and ``social_links`` are
        required on every call; each link inside ``social_links`` is optional.
        Validation happens before anything is written.
        """
        values = self._validate(profile_fields)

        async with self._uow_factory() as uow:
            profile = await uow.profiles.upsert(values)
            await uow.commit()

        logger.info("profile_updated", fields=sorted(values))
        return await self._with_image(profile)

    async def _with_image(self, profile: Profile) -> ProfileWithImage:
        image_url = await self._storage.resolve_url(profile.profile_image_id)
        return ProfileWithImage(profile=profile, profile_image_url=image_url)

    def _validate(self, profile_fields: Mapping[str, Any]) -> dict[str, Any]:
        unknown = set(profile_fields) - UPDATABLE_FIELDS
        if unknown:
            field_name = sorted(unknown)[0]
            raise InvalidArgumentError(field_name, f"Unknown profile field: {field_name}")

        for field_name in REQUIRED_FIELDS:
            value = profile_fields.get(field_name)
            if not isinstance(value, str):
                raise InvalidArgumentError(field_name, f"{field_name} is required")

        links = profile_fields.get("social_links")
        if isinstance(links, SocialLinks):
            links = asdict(links)
        if not isinstance(links, Mapping):
            raise InvalidArgumentError("social_links", "social_links is required")

        bad_keys = set(links) - SOCIAL_LINK_KEYS
        if bad_keys:
            raise InvalidArgumentError(
                "social_links",
                f"Unsupported social link: {sorted(bad_keys)[0]}",
            )
        for key, value in links.items():
            if value is not None and not isinstance(value, str):
                raise InvalidArgumentError(
                    f"social_links.{key}", f"social_links.{key} must be a string"
                )

        values = dict(profile_fields)
        values["social_links"] = {key: links.get(key) for key in sorted(SOCIAL_LINK_KEYS)}
        return values
