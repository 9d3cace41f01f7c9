"""Sparse update type for the Profile aggregate.

Every field of a patch is either a value or ``UNSET``. Only values are
written; ``UNSET`` fields leave the stored value untouched.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, fields
from typing import Any, Final


class _Unset:
    """Marker for a field that was not supplied."""

    _instance: "_Unset | None" = None

    def __new__(cls) -> "_Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Final = _Unset()

SCALAR_FIELDS = ("company", "website", "location", "bio", "status", "github_username")
SOCIAL_FIELDS = ("youtube", "facebook", "twitter", "instagram", "linkedin")


def is_present(value: Any) -> bool:
    """A field counts as supplied when it is neither missing nor blank."""
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return value != []


def parse_skills(raw: str | Iterable[str]) -> list[str]:
    """Split a comma-separated skills field, trimming each item.

    Empty items are dropped. Order, duplicates and casing are kept as given.
    """
    items = raw.split(",") if isinstance(raw, str) else raw
    return [item.strip() for item in items if isinstance(item, str) and item.strip()]


def _present_fields(patch: Any) -> dict[str, Any]:
    return {
        f.name: getattr(patch, f.name)
        for f in fields(patch)
        if f.name != "social" and getattr(patch, f.name) is not UNSET
    }


@dataclass(frozen=True)
class SocialPatch:
    """Sparse update for the social links record."""

    youtube: str | _Unset = UNSET
    facebook: str | _Unset = UNSET
    twitter: str | _Unset = UNSET
    instagram: str | _Unset = UNSET
    linkedin: str | _Unset = UNSET

    def present(self) -> dict[str, str]:
        return _present_fields(self)


@dataclass(frozen=True)
class ProfilePatch:
    """Sparse update for a Profile's scalar fields, skills and social links."""

    company: str | _Unset = UNSET
    website: str | _Unset = UNSET
    location: str | _Unset = UNSET
    bio: str | _Unset = UNSET
    status: str | _Unset = UNSET
    github_username: str | _Unset = UNSET
    skills: list[str] | _Unset = UNSET
    social: SocialPatch = field(default_factory=SocialPatch)

    @classmethod
    def from_fields(cls, values: Mapping[str, Any]) -> "ProfilePatch":
        """Build a patch from request fields, keeping only supplied ones."""
        scalars: dict[str, Any] = {
            name: values[name] for name in SCALAR_FIELDS if is_present(values.get(name))
        }
        if is_present(values.get("skills")):
            skills = parse_skills(values["skills"])
            if skills:
                scalars["skills"] = skills
        social = SocialPatch(
            **{name: values[name] for name in SOCIAL_FIELDS if is_present(values.get(name))}
        )
        return cls(social=social, **scalars)

    def present(self) -> dict[str, Any]:
        """Scalar fields and skills that carry a value (social excluded)."""
        return _present_fields(self)

    @property
    def is_empty(self) -> bool:
        return not self.present() and not self.social.present()
