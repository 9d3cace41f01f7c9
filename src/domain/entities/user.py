"""User domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4


@dataclass
class User:
    """Domain entity for an account owner (registered by the auth service)."""

    email: str
    name: str
    id: UUID = field(default_factory=uuid4)
    avatar: str | None = None
    created_at: datetime = field(default_factory=datetime.utcnow)

    def summary(self) -> "OwnerSummary":
        return OwnerSummary(id=self.id, name=self.name, avatar=self.avatar)


@dataclass(frozen=True, slots=True)
class OwnerSummary:
    """Public projection of a User embedded in profile reads."""

    id: UUID
    name: str
    avatar: str | None = None
