"""Profile API routes."""

from uuid import UUID

from fastapi import APIRouter, Depends

from api.dependencies.auth import CurrentUser
from api.v1.dependencies import get_github_client, get_profile_service
from api.v1.schemas.common import ErrorResponse, MessageResponse
from api.v1.schemas.github import RepositoryListResponse, RepositoryResponse
from api.v1.schemas.profile import (
    EducationCreate,
    EducationResponse,
    ExperienceCreate,
    ExperienceResponse,
    OwnerResponse,
    ProfileDetailResponse,
    ProfileListResponse,
    ProfileResponse,
    ProfileUpsert,
    SocialLinksResponse,
)
from domain.entities.profile import Profile
from domain.entities.user import OwnerSummary
from domain.services.profile_service import ProfileService
from infrastructure.github.client import GitHubClient

router = APIRouter(prefix="/profile", tags=["profile"])


def _to_response(profile: Profile, owner: OwnerSummary | None = None) -> ProfileResponse:
    return ProfileResponse(
        id=profile.id,
        user_id=profile.user_id,
        user=(
            OwnerResponse(id=owner.id, name=owner.name, avatar=owner.avatar)
            if owner
            else None
        ),
        company=profile.company,
        website=profile.website,
        location=profile.location,
        bio=profile.bio,
        status=profile.status,
        github_username=profile.github_username,
        skills=profile.skills,
        social=SocialLinksResponse(
            youtube=profile.social.youtube,
            facebook=profile.social.facebook,
            twitter=profile.social.twitter,
            instagram=profile.social.instagram,
            linkedin=profile.social.linkedin,
        ),
        experience=[
            ExperienceResponse(
                id=entry.id,
                title=entry.title,
                company=entry.company,
                location=entry.location,
                from_date=entry.from_date,
                to_date=entry.to_date,
                current=entry.current,
                description=entry.description,
            )
            for entry in profile.experience
        ],
        education=[
            EducationResponse(
                id=entry.id,
                school=entry.school,
                degree=entry.degree,
                fieldofstudy=entry.fieldofstudy,
                from_date=entry.from_date,
                to_date=entry.to_date,
                current=entry.current,
                description=entry.description,
            )
            for entry in profile.education
        ],
        created_at=profile.created_at,
        updated_at=profile.updated_at,
    )


@router.get(
    "/me",
    response_model=ProfileDetailResponse,
    summary="Get my profile",
    responses={400: {"model": ErrorResponse, "description": "No profile for this user"}},
)
async def get_my_profile(
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Get the authenticated user's profile with their name and avatar."""
    found = await service.get_own(user.id)
    return ProfileDetailResponse(data=_to_response(found.profile, found.owner))


@router.post(
    "",
    response_model=ProfileDetailResponse,
    summary="Create or update my profile",
    responses={
        400: {"model": ErrorResponse, "description": "Validation failed"},
        404: {"model": ErrorResponse, "description": "User not found"},
        409: {"model": ErrorResponse, "description": "Concurrent update"},
    },
)
async def upsert_profile(
    body: ProfileUpsert,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """
    Create the profile on first call; afterwards update only the fields sent.

    `status` and `skills` are required when creating. `skills` is a
    comma-separated string.
    """
    profile = await service.upsert_own(user.id, body.model_dump())
    return ProfileDetailResponse(data=_to_response(profile))


@router.get(
    "",
    response_model=ProfileListResponse,
    summary="List all profiles",
)
async def list_profiles(
    service: ProfileService = Depends(get_profile_service),
) -> ProfileListResponse:
    """Get every profile with its owner's name and avatar. Public."""
    found = await service.list_all()
    return ProfileListResponse(data=[_to_response(item.profile, item.owner) for item in found])


@router.get(
    "/user/{user_id}",
    response_model=ProfileDetailResponse,
    summary="Get a profile by user ID",
    responses={400: {"model": ErrorResponse, "description": "Profile not found"}},
)
async def get_profile_by_user(
    user_id: str,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Get any user's profile. Public."""
    found = await service.get_by_user_id(user_id)
    return ProfileDetailResponse(data=_to_response(found.profile, found.owner))


@router.delete(
    "",
    response_model=MessageResponse,
    summary="Delete my profile and account",
)
async def delete_account(
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> MessageResponse:
    """Delete the authenticated user's profile and user record. Irreversible."""
    await service.delete_own(user.id)
    return MessageResponse(message="User removed")


@router.put(
    "/experience",
    response_model=ProfileDetailResponse,
    summary="Add an experience entry",
    responses={
        400: {"model": ErrorResponse, "description": "Validation failed or no profile"},
        409: {"model": ErrorResponse, "description": "Concurrent update"},
    },
)
async def add_experience(
    body: ExperienceCreate,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Add an experience entry at the top of the list."""
    profile = await service.add_experience(user.id, body.model_dump(by_alias=True))
    return ProfileDetailResponse(data=_to_response(profile))


@router.delete(
    "/experience/{experience_id}",
    response_model=ProfileDetailResponse,
    summary="Remove an experience entry",
    responses={404: {"model": ErrorResponse, "description": "Experience not found"}},
)
async def remove_experience(
    experience_id: UUID,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Remove an experience entry by ID."""
    profile = await service.remove_experience(user.id, experience_id)
    return ProfileDetailResponse(data=_to_response(profile))


@router.put(
    "/education",
    response_model=ProfileDetailResponse,
    summary="Add an education entry",
    responses={
        400: {"model": ErrorResponse, "description": "Validation failed or no profile"},
        409: {"model": ErrorResponse, "description": "Concurrent update"},
    },
)
async def add_education(
    body: EducationCreate,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Add an education entry at the top of the list."""
    profile = await service.add_education(user.id, body.model_dump(by_alias=True))
    return ProfileDetailResponse(data=_to_response(profile))


@router.delete(
    "/education/{edu_id}",
    response_model=ProfileDetailResponse,
    summary="Remove an education entry",
    responses={404: {"model": ErrorResponse, "description": "Education not found"}},
)
async def remove_education(
    edu_id: UUID,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Remove an education entry by ID."""
    profile = await service.remove_education(user.id, edu_id)
    return ProfileDetailResponse(data=_to_response(profile))


@router.get(
    "/github/{username}",
    response_model=RepositoryListResponse,
    summary="List a GitHub user's repositories",
    responses={404: {"model": ErrorResponse, "description": "No Github profile found"}},
)
async def get_github_repositories(
    username: str,
    client: GitHubClient = Depends(get_github_client),
) -> RepositoryListResponse:
    """Get up to five public repositories for a GitHub handle, oldest first. Public."""
    repositories = await client.fetch_repositories(username)
    return RepositoryListResponse(
        data=[RepositoryResponse.model_validate(repo) for repo in repositories]
    )
