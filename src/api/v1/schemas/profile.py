"""Pydantic schemas for Profile API."""

from datetime import date, datetime
from uuid import UUID

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class ProfileUpsert(BaseModel):
    """Schema for creating or updating the caller's profile.

    Every field is optional here; required fields are enforced when the
    profile is first created. Social links arrive flat, as in the form.
    """

    model_config = ConfigDict(populate_by_name=True)

    company: str | None = Field(None, max_length=255)
    website: str | None = Field(None, max_length=500)
    location: str | None = Field(None, max_length=255)
    bio: str | None = Field(None, max_length=2000)
    status: str | None = Field(None, max_length=255)
    github_username: str | None = Field(
        None,
        max_length=100,
        validation_alias=AliasChoices("githubusername", "github_username"),
    )
    skills: str | list[str] | None = Field(
        None,
        description="Comma-separated list, e.g. 'python, sql, docker'",
    )
    youtube: str | None = Field(None, max_length=500)
    facebook: str | None = Field(None, max_length=500)
    twitter: str | None = Field(None, max_length=500)
    instagram: str | None = Field(None, max_length=500)
    linkedin: str | None = Field(None, max_length=500)


class ExperienceCreate(BaseModel):
    """Schema for adding an experience entry."""

    model_config = ConfigDict(populate_by_name=True)

    title: str | None = Field(None, max_length=255)
    company: str | None = Field(None, max_length=255)
    location: str | None = Field(None, max_length=255)
    from_date: date | None = Field(None, alias="from")
    to_date: date | None = Field(None, alias="to")
    current: bool = False
    description: str | None = Field(None, max_length=2000)


class EducationCreate(BaseModel):
    """Schema for adding an education entry."""

    model_config = ConfigDict(populate_by_name=True)

    school: str | None = Field(None, max_length=255)
    degree: str | None = Field(None, max_length=255)
    fieldofstudy: str | None = Field(None, max_length=255)
    from_date: date | None = Field(None, alias="from")
    to_date: date | None = Field(None, alias="to")
    current: bool = False
    description: str | None = Field(None, max_length=2000)


class SocialLinksResponse(BaseModel):
    """Social links embedded in a profile."""

    youtube: str | None = None
    facebook: str | None = None
    twitter: str | None = None
    instagram: str | None = None
    linkedin: str | None = None


class ExperienceResponse(BaseModel):
    """Schema for an experience entry."""

    model_config = ConfigDict(populate_by_name=True)

    id: UUID
    title: str
    company: str
    location: str | None = None
    from_date: date = Field(alias="from")
    to_date: date | None = Field(None, alias="to")
    current: bool = False
    description: str | None = None


class EducationResponse(BaseModel):
    """Schema for an education entry."""

    model_config = ConfigDict(populate_by_name=True)

    id: UUID
    school: str
    degree: str
    fieldofstudy: str
    from_date: date = Field(alias="from")
    to_date: date | None = Field(None, alias="to")
    current: bool = False
    description: str | None = None


class OwnerResponse(BaseModel):
    """Public details of the profile owner."""

    id: UUID
    name: str
    avatar: str | None = None


class ProfileResponse(BaseModel):
    """Schema for Profile response."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "123e4567-e89b-12d3-a456-426614174000",
                "user_id": "456e4567-e89b-12d3-a456-426614174000",
                "user": {
                    "id": "456e4567-e89b-12d3-a456-426614174000",
                    "name": "Ada Lovelace",
                    "avatar": None,
                },
                "status": "Developer",
                "company": "Analytical Engines",
                "skills": ["python", "sql"],
                "social": {"twitter": "https://twitter.com/ada"},
                "experience": [],
                "education": [],
                "created_at": "2026-01-28T10:00:00",
                "updated_at": "2026-01-28T10:00:00",
            }
        },
    )

    id: UUID
    user_id: UUID
    user: OwnerResponse | None = None
    company: str | None = None
    website: str | None = None
    location: str | None = None
    bio: str | None = None
    status: str | None = None
    github_username: str | None = None
    skills: list[str] = Field(default_factory=list)
    social: SocialLinksResponse = Field(default_factory=SocialLinksResponse)
    experience: list[ExperienceResponse] = Field(default_factory=list)
    education: list[EducationResponse] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime


class ProfileDetailResponse(BaseModel):
    """Schema for single Profile."""

    data: ProfileResponse


class ProfileListResponse(BaseModel):
    """Schema for list of Profiles."""

    data: list[ProfileResponse]
