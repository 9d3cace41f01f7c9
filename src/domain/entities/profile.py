"""Profile aggregate and its embedded entries."""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from domain.entities.user import OwnerSummary

if TYPE_CHECKING:
    from domain.entities.profile_patch import ProfilePatch


@dataclass
class SocialLinks:
    """Social network links shown on a profile."""

    youtube: str | None = None
    facebook: str | None = None
    twitter: str | None = None
    instagram: str | None = None
    linkedin: str | None = None


@dataclass
class Experience:
    """A work experience entry, embedded in a Profile."""

    title: str
    company: str
    from_date: date
    id: UUID = field(default_factory=uuid4)
    location: str | None = None
    to_date: date | None = None
    current: bool = False
    description: str | None = None


@dataclass
class Education:
    """An education entry, embedded in a Profile."""

    school: str
    degree: str
    fieldofstudy: str
    from_date: date
    id: UUID = field(default_factory=uuid4)
    to_date: date | None = None
    current: bool = False
    description: str | None = None


@dataclass
class Profile:
    """Aggregate root: one developer profile per user.

    ``experience`` and ``education`` are kept newest-first by insertion,
    never sorted by their dates.
    """

    user_id: UUID
    id: UUID = field(default_factory=uuid4)
    company: str | None = None
    website: str | None = None
    location: str | None = None
    bio: str | None = None
    status: str | None = None
    github_username: str | None = None
    skills: list[str] = field(default_factory=list)
    social: SocialLinks = field(default_factory=SocialLinks)
    experience: list[Experience] = field(default_factory=list)
    education: list[Education] = field(default_factory=list)
    version: int = 1
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self) -> None:
        """Ensure updated_at is always at least as recent as created_at."""
        if self.updated_at < self.created_at:
            self.updated_at = self.created_at

    def apply(self, patch: "ProfilePatch") -> None:
        """Apply only the fields present in the patch."""
        for name, value in patch.present().items():
            setattr(self, name, value)
        for name, value in patch.social.present().items():
            setattr(self.social, name, value)
        self.touch()

    def add_experience(self, entry: Experience) -> None:
        self.experience.insert(0, entry)
        self.touch()

    def remove_experience(self, entry_id: UUID) -> bool:
        """Remove the entry with ``entry_id``. Returns False if absent."""
        for index, entry in enumerate(self.experience):
            if entry.id == entry_id:
                del self.experience[index]
                self.touch()
                return True
        return False

    def add_education(self, entry: Education) -> None:
        self.education.insert(0, entry)
        self.touch()

    def remove_education(self, entry_id: UUID) -> bool:
        """Remove the entry with ``entry_id``. Returns False if absent."""
        for index, entry in enumerate(self.education):
            if entry.id == entry_id:
                del self.education[index]
                self.touch()
                return True
        return False

    def touch(self) -> None:
        self.updated_at = datetime.utcnow()


@dataclass(frozen=True, slots=True)
class ProfileWithOwner:
    """Read-only value object: a Profile with its owner's public details."""

    profile: Profile
    owner: OwnerSummary | None
