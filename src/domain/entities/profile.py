"""Profile domain entity."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class SocialLinks:
    """Social network handles or URLs shown on the portfolio."""

    whatsapp: str | None = None
    instagram: str | None = None
    youtube: str | None = None


@dataclass
class Profile:
    """Domain entity for the portfolio owner's profile (singleton)."""

    name: str
    location: str
    profession: str
    bio: str
    social_links: SocialLinks = field(default_factory=SocialLinks)
    contact_number: str | None = None
    father_name: str | None = None
    profile_image_id: str | None = None
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self) -> None:
        """Ensure updated_at is always at least as recent as created_at."""
        if self.updated_at < self.created_at:
            self.updated_at = self.created_at


@dataclass(frozen=True, slots=True)
class ProfileWithImage:
    """Read-only value object: a Profile with its resolved image URL.

    ``is_default`` is True when no profile is stored and the built-in
    first-run profile was returned instead.
    """

    profile: Profile
    profile_image_url: str | None = None
    is_default: bool = False
