"""Profile repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.profile import Profile, ProfileWithOwner


class IProfileRepository(Protocol):
    """Repository interface for Profile aggregates, keyed by owner."""

    async def get_by_owner(self, user_id: UUID) -> Profile | None:
        """Get the profile owned by a user."""
        ...

    async def get_with_owner(self, user_id: UUID) -> ProfileWithOwner | None:
        """Get a user's profile together with the owner's public details."""
        ...

    async def list_with_owners(self) -> list[ProfileWithOwner]:
        """Get every profile with its owner's public details."""
        ...

    async def create(self, profile: Profile) -> Profile:
        """Create a new profile."""
        ...

    async def update(self, profile: Profile) -> Profile:
        """Persist a profile read earlier in the same unit of work.

        Raises ConcurrentUpdateError if the stored version moved on.
        """
        ...

    async def delete_by_owner(self, user_id: UUID) -> bool:
        """Delete a user's profile and return whether one existed."""
        ...
