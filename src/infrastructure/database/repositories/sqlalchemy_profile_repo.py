"""SQLAlchemy implementation of Profile repository."""

from dataclasses import asdict
from datetime import date
from typing import Any
from uuid import UUID

import structlog
from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import ConcurrentUpdateError
from domain.entities.profile import (
    Education,
    Experience,
    Profile,
    ProfileWithOwner,
    SocialLinks,
)
from domain.entities.user import OwnerSummary
from infrastructure.database.models import ProfileModel, UserModel

logger = structlog.get_logger()


def _date_to_doc(value: date | None) -> str | None:
    return value.isoformat() if value else None


def _date_from_doc(value: str | None) -> date | None:
    return date.fromisoformat(value) if value else None


class SQLAlchemyProfileRepository:
    """SQLAlchemy implementation of IProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_owner(self, user_id: UUID) -> Profile | None:
        """Get the profile owned by a user."""
        stmt = select(ProfileModel).where(ProfileModel.user_id == user_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_with_owner(self, user_id: UUID) -> ProfileWithOwner | None:
        """Get a user's profile joined with the owner's name and avatar."""
        stmt = (
            select(ProfileModel, UserModel)
            .outerjoin(UserModel, ProfileModel.user_id == UserModel.id)
            .where(ProfileModel.user_id == user_id)
        )
        result = await self._session.execute(stmt)
        row = result.one_or_none()
        if row is None:
            return None
        profile_model, user_model = row
        return self._to_view(profile_model, user_model)

    async def list_with_owners(self) -> list[ProfileWithOwner]:
        """Get every profile joined with its owner, oldest first."""
        stmt = (
            select(ProfileModel, UserModel)
            .outerjoin(UserModel, ProfileModel.user_id == UserModel.id)
            .order_by(ProfileModel.created_at)
        )
        result = await self._session.execute(stmt)
        return [self._to_view(profile_model, user_model) for profile_model, user_model in result]

    async def create(self, profile: Profile) -> Profile:
        """Create a new profile.

        Raises ConcurrentUpdateError when another request created the
        owner's profile first (unique ``user_id``).
        """
        model = self._to_model(profile)
        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError as exc:
            logger.info(
                "profile_create_conflict",
                user_id=str(profile.user_id),
                error=str(exc.orig),
            )
            raise ConcurrentUpdateError(str(profile.id)) from exc
        await self._session.refresh(model)
        return self._to_entity(model)

    async def update(self, profile: Profile) -> Profile:
        """Write the whole document if its stored version is unchanged."""
        stmt = (
            update(ProfileModel)
            .where(
                ProfileModel.id == profile.id,
                ProfileModel.version == profile.version,
            )
            .values(
                version=profile.version + 1,
                updated_at=profile.updated_at,
                **self._document_values(profile),
            )
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)

        if result.rowcount == 0:  # type: ignore[attr-defined]
            raise ConcurrentUpdateError(str(profile.id))

        await self._session.flush()
        profile.version += 1
        return profile

    async def delete_by_owner(self, user_id: UUID) -> bool:
        """Delete a user's profile."""
        stmt = delete(ProfileModel).where(ProfileModel.user_id == user_id)
        result = await self._session.execute(stmt)
        await self._session.flush()
        return bool(result.rowcount)  # type: ignore[attr-defined]

    def _document_values(self, profile: Profile) -> dict[str, Any]:
        """Column values shared by inserts and updates."""
        return {
            "company": profile.company,
            "website": profile.website,
            "location": profile.location,
            "bio": profile.bio,
            "status": profile.status,
            "github_username": profile.github_username,
            "skills": list(profile.skills),
            "social": asdict(profile.social),
            "experience": [self._experience_to_doc(entry) for entry in profile.experience],
            "education": [self._education_to_doc(entry) for entry in profile.education],
        }

    def _to_view(self, profile_model: ProfileModel, user_model: UserModel | None) -> ProfileWithOwner:
        owner = (
            OwnerSummary(id=user_model.id, name=user_model.name, avatar=user_model.avatar)
            if user_model
            else None
        )
        return ProfileWithOwner(profile=self._to_entity(profile_model), owner=owner)

    def _to_entity(self, model: ProfileModel) -> Profile:
        """Convert ORM model to domain entity."""
        return Profile(
            id=model.id,
            user_id=model.user_id,
            company=model.company,
            website=model.website,
            location=model.location,
            bio=model.bio,
            status=model.status,
            github_username=model.github_username,
            skills=list(model.skills or []),
            social=SocialLinks(**(model.social or {})),
            experience=[self._experience_from_doc(doc) for doc in model.experience or []],
            education=[self._education_from_doc(doc) for doc in model.education or []],
            version=model.version,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Profile) -> ProfileModel:
        """Convert domain entity to ORM model."""
        return ProfileModel(
            id=entity.id,
            user_id=entity.user_id,
            version=entity.version,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
            **self._document_values(entity),
        )

    @staticmethod
    def _experience_to_doc(entry: Experience) -> dict[str, Any]:
        return {
            "id": str(entry.id),
            "title": entry.title,
            "company": entry.company,
            "location": entry.location,
            "from": _date_to_doc(entry.from_date),
            "to": _date_to_doc(entry.to_date),
            "current": entry.current,
            "description": entry.description,
        }

    @staticmethod
    def _experience_from_doc(doc: dict[str, Any]) -> Experience:
        return Experience(
            id=UUID(doc["id"]),
            title=doc["title"],
            company=doc["company"],
            location=doc.get("location"),
            from_date=date.fromisoformat(doc["from"]),
            to_date=_date_from_doc(doc.get("to")),
            current=bool(doc.get("current", False)),
            description=doc.get("description"),
        )

    @staticmethod
    def _education_to_doc(entry: Education) -> dict[str, Any]:
        return {
            "id": str(entry.id),
            "school": entry.school,
            "degree": entry.degree,
            "fieldofstudy": entry.fieldofstudy,
            "from": _date_to_doc(entry.from_date),
            "to": _date_to_doc(entry.to_date),
            "current": entry.current,
            "description": entry.description,
        }

    @staticmethod
    def _education_from_doc(doc: dict[str, Any]) -> Education:
        return Education(
            id=UUID(doc["id"]),
            school=doc["school"],
            degree=doc["degree"],
            fieldofstudy=doc["fieldofstudy"],
            from_date=date.fromisoformat(doc["from"]),
            to_date=_date_from_doc(doc.get("to")),
            current=bool(doc.get("current", False)),
            description=doc.get("description"),
        )
