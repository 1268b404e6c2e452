"""Profile repository protocol."""

from typing import Any, Protocol

from domain.entities.profile import Profile


class IProfileRepository(Protocol):
    """Repository interface for the singleton Profile."""

    async def get(self) -> Profile | None:
        """Get the stored profile, if any."""
        ...

    async def upsert(self, fields: dict[str, Any]) -> Profile:
        """Create the profile or overwrite the given fields in one statement."""
        ...
