"""Profile service layer with business logic."""

from collections.abc import Callable, Mapping
from typing import Any
from uuid import UUID

import structlog

from core.exceptions import (
    EducationNotFoundError,
    ExperienceNotFoundError,
    ProfileNotFoundError,
    UserNotFoundError,
)
from domain.entities.profile import Education, Experience, Profile, ProfileWithOwner
from domain.entities.profile_patch import ProfilePatch
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.validation import (
    EDUCATION_RULES,
    EXPERIENCE_RULES,
    PROFILE_CREATE_RULES,
    ensure_valid,
)

logger = structlog.get_logger()

NO_PROFILE_FOR_USER = "There is no profile for this user"


class ProfileService:
    """Service layer for the Profile aggregate.

    Every mutation is scoped to the caller's own profile and runs as a single
    read-modify-write inside one unit of work.
    """

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def get_own(self, user_id: UUID) -> ProfileWithOwner:
        """Get the caller's profile with their name and avatar."""
        async with self._uow_factory() as uow:
            found = await uow.profiles.get_with_owner(user_id)
            if not found:
                raise ProfileNotFoundError(NO_PROFILE_FOR_USER)
            return found

    async def upsert_own(self, user_id: UUID, fields: Mapping[str, Any]) -> Profile:
        """Create the caller's profile, or apply the supplied fields to it.

        Creation requires ``status`` and ``skills``. On update only the
        supplied fields are written; everything else keeps its stored value.
        """
        patch = ProfilePatch.from_fields(fields)

        async with self._uow_factory() as uow:
            profile = await uow.profiles.get_by_owner(user_id)

            if profile is None:
                ensure_valid(PROFILE_CREATE_RULES, fields)
                if not await uow.users.get(user_id):
                    raise UserNotFoundError(str(user_id))

                profile = Profile(user_id=user_id)
                profile.apply(patch)
                created = await uow.profiles.create(profile)
                await uow.commit()
                logger.info("profile_created", user_id=str(user_id), profile_id=str(created.id))
                return created

            if patch.is_empty:
                return profile

            profile.apply(patch)
            updated = await uow.profiles.update(profile)
            await uow.commit()
            logger.info(
                "profile_updated",
                user_id=str(user_id),
                fields=sorted(patch.present()) + sorted(patch.social.present()),
            )
            return updated

    async def list_all(self) -> list[ProfileWithOwner]:
        """Get every profile with owner details (public listing)."""
        async with self._uow_factory() as uow:
            return await uow.profiles.list_with_owners()  # type: ignore[no-any-return]

    async def get_by_user_id(self, raw_user_id: str) -> ProfileWithOwner:
        """Public lookup of any user's profile.

        A malformed identifier and a missing profile raise the same error.
        """
        try:
            user_id = UUID(raw_user_id)
        except ValueError:
            logger.info("profile_lookup_malformed_id", user_id=raw_user_id)
            raise ProfileNotFoundError() from None

        async with self._uow_factory() as uow:
            found = await uow.profiles.get_with_owner(user_id)
            if not found:
                logger.info("profile_lookup_missing", user_id=raw_user_id)
                raise ProfileNotFoundError()
            return found

    async def delete_own(self, user_id: UUID) -> None:
        """Delete the caller's profile and account in one transaction."""
        async with self._uow_factory() as uow:
            profile_deleted = await uow.profiles.delete_by_owner(user_id)
            user_deleted = await uow.users.delete(user_id)
            await uow.commit()
            logger.info(
                "account_deleted",
                user_id=str(user_id),
                profile_deleted=profile_deleted,
                user_deleted=user_deleted,
            )

    async def add_experience(self, user_id: UUID, fields: Mapping[str, Any]) -> Profile:
        """Prepend a new experience entry to the caller's profile."""
        ensure_valid(EXPERIENCE_RULES, fields)
        entry = Experience(
            title=fields["title"],
            company=fields["company"],
            from_date=fields["from"],
            location=fields.get("location") or None,
            to_date=fields.get("to"),
            current=bool(fields.get("current") or False),
            description=fields.get("description") or None,
        )

        async with self._uow_factory() as uow:
            profile = await self._require_profile(uow, user_id)
            profile.add_experience(entry)
            updated = await uow.profiles.update(profile)
            await uow.commit()
            logger.info("experience_added", user_id=str(user_id), experience_id=str(entry.id))
            return updated

    async def remove_experience(self, user_id: UUID, experience_id: UUID) -> Profile:
        """Remove one experience entry. Unknown ids leave the profile untouched."""
        async with self._uow_factory() as uow:
            profile = await self._require_profile(uow, user_id)
            if not profile.remove_experience(experience_id):
                raise ExperienceNotFoundError(str(experience_id))
            updated = await uow.profiles.update(profile)
            await uow.commit()
            return updated

    async def add_education(self, user_id: UUID, fields: Mapping[str, Any]) -> Profile:
        """Prepend a new education entry to the caller's profile."""
        ensure_valid(EDUCATION_RULES, fields)
        entry = Education(
            school=fields["school"],
            degree=fields["degree"],
            fieldofstudy=fields["fieldofstudy"],
            from_date=fields["from"],
            to_date=fields.get("to"),
            current=bool(fields.get("current") or False),
            description=fields.get("description") or None,
        )

        async with self._uow_factory() as uow:
            profile = await self._require_profile(uow, user_id)
            profile.add_education(entry)
            updated = await uow.profiles.update(profile)
            await uow.commit()
            logger.info("education_added", user_id=str(user_id), education_id=str(entry.id))
            return updated

    async def remove_education(self, user_id: UUID, education_id: UUID) -> Profile:
        """Remove one education entry. Unknown ids leave the profile untouched."""
        async with self._uow_factory() as uow:
            profile = await self._require_profile(uow, user_id)
            if not profile.remove_education(education_id):
                raise EducationNotFoundError(str(education_id))
            updated = await uow.profiles.update(profile)
            await uow.commit()
            return updated

    async def _require_profile(self, uow: IUnitOfWork, user_id: UUID) -> Profile:
        profile = await uow.profiles.get_by_owner(user_id)
        if not profile:
            raise ProfileNotFoundError(NO_PROFILE_FOR_USER)
        return profile
