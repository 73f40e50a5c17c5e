"""Domain models for users, sessions and questions."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from uuid import UUID


class Role(StrEnum):
    """User roles as stored in the users table."""

    ADMIN = "admin"
    NONADMIN = "nonadmin"

    @classmethod
    def parse(cls, value: str | None) -> "Role":
        """Map a stored role string to a role, defaulting to a regular user."""
        if value == cls.ADMIN.value:
            return cls.ADMIN
        return cls.NONADMIN


@dataclass(frozen=True)
class UserRecord:
    """Represents a user stored in the database."""

    uuid: UUID
    username: str
    role: Role = Role.NONADMIN

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN


@dataclass(frozen=True)
class SessionRecord:
    """Represents an auth token issued at sign-in."""

    token: str
    user_uuid: UUID
    login_at: datetime
    expires_at: datetime
    logout_at: datetime | None = None


@dataclass(frozen=True)
class QuestionDraft:
    """Question content submitted by a caller, before it has an owner."""

    content: str
    owner_uuid: UUID | None = None


@dataclass(frozen=True)
class Question:
    """Represents a persisted question."""

    uuid: UUID
    owner_uuid: UUID
    content: str
    created_at: datetime
