"""Dependency injection factories for API v1."""

from functools import lru_cache
from typing import Callable

from fastapi import Request

from domain.services.profile_service import ProfileService
from infrastructure.database.session import async_session_factory
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork
from infrastructure.github.client import GitHubClient


def get_uow_factory() -> Callable[[], SQLAlchemyUnitOfWork]:
    """Factory for creating Unit of Work instances."""

    def factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(async_session_factory)

    return factory


@lru_cache
def get_profile_service() -> ProfileService:
    """Get Profile service instance."""
    return ProfileService(get_uow_factory())


def get_github_client(request: Request) -> GitHubClient:
    """Get the GitHub client created by the application lifespan."""
    return request.app.state.github_client  # type: ignore[no-any-return]
