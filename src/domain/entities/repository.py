"""Public source repository returned by the GitHub lookup."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Repository:
    """Read-only value object for one public repository."""

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
