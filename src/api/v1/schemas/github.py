"""Pydantic schemas for the GitHub repository lookup."""

from pydantic import BaseModel, ConfigDict


class RepositoryResponse(BaseModel):
    """Schema for one public repository."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    full_name: str
    html_url: str
    description: str | None = None
    language: str | None = None
    stargazers_count: int = 0
    watchers_count: int = 0
    forks_count: int = 0
    created_at: str | None = None


class RepositoryListResponse(BaseModel):
    """Schema for a user's repositories."""

    data: list[RepositoryResponse]
