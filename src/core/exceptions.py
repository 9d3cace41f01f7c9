"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the API."""

    # Authentication errors (401)
    UNAUTHORIZED = "UNAUTHORIZED"
    INVALID_TOKEN = "INVALID_TOKEN"

    # Validation errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Not found errors
    PROFILE_NOT_FOUND = "PROFILE_NOT_FOUND"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    EXPERIENCE_NOT_FOUND = "EXPERIENCE_NOT_FOUND"
    EDUCATION_NOT_FOUND = "EDUCATION_NOT_FOUND"
    GITHUB_PROFILE_NOT_FOUND = "GITHUB_PROFILE_NOT_FOUND"

    # Conflict errors (409)
    CONCURRENT_UPDATE = "CONCURRENT_UPDATE"

    # Server errors (500)
    INTERNAL_ERROR = "INTERNAL_ERROR"
    DATABASE_ERROR = "DATABASE_ERROR"


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class AuthenticationError(AppException):
    """Authentication failed."""

    def __init__(
        self,
        message: str = "Authentication required",
        error_code: ErrorCode = ErrorCode.UNAUTHORIZED,
    ) -> None:
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=401,
        )


class ValidationFailedError(AppException):
    """One or more request fields failed validation.

    ``details`` carries the ordered ``{"field", "message"}`` list.
    """

    def __init__(self, errors: list[dict[str, str]]) -> None:
        self.errors = errors
        super().__init__(
            error_code=ErrorCode.VALIDATION_ERROR,
            message="Request validation failed",
            status_code=400,
            details=errors,
        )


class ProfileNotFoundError(AppException):
    """No profile exists for the requested owner."""

    def __init__(self, message: str = "Profile not found") -> None:
        super().__init__(
            error_code=ErrorCode.PROFILE_NOT_FOUND,
            message=message,
            status_code=400,
        )


class UserNotFoundError(AppException):
    """User not found."""

    def __init__(self, user_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.USER_NOT_FOUND,
            message=f"User not found: {user_id}",
            status_code=404,
            details={"user_id": user_id},
        )


class ExperienceNotFoundError(AppException):
    """Experience entry not found on the caller's profile."""

    def __init__(self, experience_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.EXPERIENCE_NOT_FOUND,
            message=f"Experience not found: {experience_id}",
            status_code=404,
            details={"experience_id": experience_id},
        )


class EducationNotFoundError(AppException):
    """Education entry not found on the caller's profile."""

    def __init__(self, education_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.EDUCATION_NOT_FOUND,
            message=f"Education not found: {education_id}",
            status_code=404,
            details={"education_id": education_id},
        )


class GitHubProfileNotFoundError(AppException):
    """Repository lookup failed or the handle has no public repositories."""

    def __init__(self, username: str) -> None:
        super().__init__(
            error_code=ErrorCode.GITHUB_PROFILE_NOT_FOUND,
            message="No Github profile found",
            status_code=404,
            details={"username": username},
        )


class ConcurrentUpdateError(AppException):
    """The profile changed between read and write."""

    def __init__(self, profile_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.CONCURRENT_UPDATE,
            message="Profile was modified by another request, please retry",
            status_code=409,
            details={"profile_id": profile_id},
        )


class StoreFailureError(AppException):
    """Persistence failed. Internal detail is logged, never returned."""

    def __init__(self) -> None:
        super().__init__(
            error_code=ErrorCode.DATABASE_ERROR,
            message="Server error",
            status_code=500,
        )
