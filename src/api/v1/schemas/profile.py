"""Pydantic schemas for Profile API."""

from pydantic import BaseModel, ConfigDict, Field

from domain.entities.profile import ProfileWithImage


class SocialLinksSchema(BaseModel):
    """Social links; every link is optional."""

    model_config = ConfigDict(extra="forbid")

    whatsapp: str | None = Field(None, max_length=500)
    instagram: str | None = Field(None, max_length=500)
    youtube: str | None = Field(None, max_length=500)


class ProfileUpdate(BaseModel):
    """Schema for creating or updating the profile.

    Optional fields left out of the request body keep their stored value.
    """

    name: str = Field(..., min_length=1, max_length=255)
    location: str = Field(..., max_length=255)
    profession: str = Field(..., max_length=255)
    bio: str = Field(..., max_length=5000)
    contact_number: str | None = Field(None, max_length=50)
    father_name: str | None = Field(None, max_length=255)
    profile_image_id: str | None = Field(None, max_length=500)
    social_links: SocialLinksSchema


class ProfileResponse(BaseModel):
    """Schema for Profile response."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Pankaj Kumar",
                "location": "Panchkula, Haryana",
                "profession": "Video Editor, Music Producer & Graphic Designer",
                "bio": "Creative professional passionate about visual storytelling.",
                "contact_number": "",
                "father_name": "",
                "profile_image_id": None,
                "profile_image_url": None,
                "social_links": {"whatsapp": "", "instagram": "", "youtube": ""},
            }
        },
    )

    name: str
    location: str
    profession: str
    bio: str
    contact_number: str | None = None
    father_name: str | None = None
    profile_image_id: str | None = None
    profile_image_url: str | None = None
    social_links: SocialLinksSchema

    @classmethod
    def from_view(cls, view: ProfileWithImage) -> "ProfileResponse":
        profile = view.profile
        return cls(
            name=profile.name,
            location=profile.location,
            profession=profile.profession,
            bio=profile.bio,
            contact_number=profile.contact_number,
            father_name=profile.father_name,
            profile_image_id=profile.profile_image_id,
            profile_image_url=view.profile_image_url,
            social_links=SocialLinksSchema(
                whatsapp=profile.social_links.whatsapp,
                instagram=profile.social_links.instagram,
                youtube=profile.social_links.youtube,
            ),
        )


class ProfileDetailResponse(BaseModel):
    """Schema for the profile; ``is_default`` marks the built-in fallback."""

    data: ProfileResponse
    is_default: bool = False
