"""Built-in first-run content.

Returned by the read paths while the store holds no profile or no skills,
so a fresh deployment renders a complete page. Factories build new objects
on every call; callers may mutate what they get back.
"""

from datetime import datetime

from domain.entities.profile import Profile, SocialLinks
from domain.entities.skill import Skill

_EPOCH = datetime(1970, 1, 1)


def default_profile() -> Profile:
    """Return the built-in profile."""
    return Profile(
        name="Pankaj Kumar",
        location="Panchkula, Haryana",
        profession="Video Editor, Music Producer & Graphic Designer",
        bio=(
            "Creative professional passionate about visual storytelling, music "
            "production, and graphic design. I bring ideas to life through "
            "innovative digital content."
        ),
        social_links=SocialLinks(whatsapp="", instagram="", youtube=""),
        contact_number="",
        father_name="",
        profile_image_id=None,
        created_at=_EPOCH,
        updated_at=_EPOCH,
    )


_DEFAULT_SKILLS: tuple[tuple[str, str, int, str, str], ...] = (
    ("Video Editing", "Creative", 95, "🎬", "Professional video editing with advanced techniques"),
    ("Music Production", "Audio", 90, "🎵", "Music composition and audio production"),
    ("Graphic Design", "Design", 85, "🎨", "Visual design and brand identity creation"),
    ("Adobe Premiere Pro", "Software", 95, "🔧", "Advanced video editing and post-production"),
    ("After Effects", "Software", 80, "✨", "Motion graphics and visual effects"),
    ("Photoshop", "Software", 85, "🖼️", "Photo editing and digital art creation"),
)


def default_skills() -> list[Skill]:
    """Return the six built-in skills in display order."""
    return [
        Skill(
            id=None,
            name=name,
            category=category,
            level=level,
            icon=icon,
            description=description,
            created_at=_EPOCH,
        )
        for name, category, level, icon, description in _DEFAULT_SKILLS
    ]
