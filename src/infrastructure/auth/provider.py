"""Authentication provider protocol."""

from dataclasses import dataclass
from typing import Optional, Protocol
from uuid import UUID


@dataclass
class TokenUser:
    """The caller identified by a bearer token.

    ``id`` is the owner key every profile mutation is scoped to.
    """

    id: UUID
    email: str
    name: Optional[str] = None


class IAuthProvider(Protocol):
    """Verifies bearer tokens issued by the auth service."""

    async def validate_token(self, token: str) -> Optional[TokenUser]:
        """Return the token's user, or None if it cannot be trusted."""
        ...

    def create_token(self, user: TokenUser) -> str:
        """Sign a token for ``user`` (used by tests and local tooling)."""
        ...
