"""GitHub REST client for public repository lookups."""

from typing import Any
from urllib.parse import quote

import httpx
import structlog

from core.config import settings
from core.exceptions import GitHubProfileNotFoundError
from domain.entities.repository import Repository

logger = structlog.get_logger()

REPOSITORY_LIMIT = 5


def create_http_client() -> httpx.AsyncClient:
    """Build the shared HTTP session used for every GitHub call."""
    auth = None
    if settings.github_client_id and settings.github_client_secret:
        auth = httpx.BasicAuth(settings.github_client_id, settings.github_client_secret)

    return httpx.AsyncClient(
        base_url=settings.github_api_url,
        timeout=settings.github_timeout_seconds,
        auth=auth,
        headers={
            "Accept": "application/vnd.github+json",
            "User-Agent": settings.github_user_agent,
        },
    )


class GitHubClient:
    """Fetches a user's public repositories.

    Every failure (non-200 status, transport error, malformed body) is logged
    and surfaced as GitHubProfileNotFoundError.
    """

    def __init__(self, http_client: httpx.AsyncClient) -> None:
        self._http = http_client

    async def fetch_repositories(self, username: str) -> list[Repository]:
        """Get up to five repositories for ``username``, oldest first."""
        try:
            response = await self._http.get(
                f"/users/{quote(username, safe='')}/repos",
                params={"per_page": REPOSITORY_LIMIT, "sort": "created", "direction": "asc"},
            )
        except httpx.HTTPError as exc:
            logger.error(
                "github_lookup_failed",
                username=username,
                error=str(exc),
                error_type=type(exc).__name__,
            )
            raise GitHubProfileNotFoundError(username) from exc

        if response.status_code != 200:
            logger.info(
                "github_profile_not_found",
                username=username,
                status_code=response.status_code,
            )
            raise GitHubProfileNotFoundError(username)

        try:
            return [self._to_entity(item) for item in response.json()]
        except (ValueError, KeyError, TypeError) as exc:
            logger.error("github_response_invalid", username=username, error=str(exc))
            raise GitHubProfileNotFoundError(username) from exc

    async def aclose(self) -> None:
        await self._http.aclose()

    @staticmethod
    def _to_entity(item: dict[str, Any]) -> Repository:
        return Repository(
            id=item["id"],
            name=item["name"],
            full_name=item["full_name"],
            html_url=item["html_url"],
            description=item.get("description"),
            language=item.get("language"),
            stargazers_count=item.get("stargazers_count") or 0,
            watchers_count=item.get("watchers_count") or 0,
            forks_count=item.get("forks_count") or 0,
            created_at=item.get("created_at"),
        )
