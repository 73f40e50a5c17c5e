"""Session validation and sign-out."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, replace
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID

from quora_questions.domain.errors import AuthenticationError, ErrorCode
from quora_questions.domain.models import SessionRecord, UserRecord
from quora_questions.domain.results import Failure, Ok, Result
from quora_questions.services.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)

_BEARER_SCHEME = "bearer"


class SessionRepository(Protocol):
    """Persistence interface for auth sessions."""

    def find_by_token(self, token: str) -> SessionRecord | None:
        """Return the session for an access token, if present."""

    def update_logout(self, token: str, logout_at: datetime) -> None:
        """Record the logout time for a session."""


class UserRepository(Protocol):
    """Persistence interface for user lookups."""

    def get_user(self, user_uuid: UUID) -> UserRecord | None:
        """Return a user by uuid, if present."""


def utc_now() -> datetime:
    """Return the current UTC wall-clock time."""
    return datetime.now(tz=UTC)


def normalize_token(raw: str | None) -> str:
    """Strip whitespace and an optional bearer prefix from a token."""
    if raw is None:
        return ""
    token = raw.strip()
    scheme, _, credentials = token.partition(" ")
    if scheme.lower() == _BEARER_SCHEME:
        return credentials.strip()
    return token


def is_signed_out(session: SessionRecord, now: datetime) -> bool:
    """Return whether a session was logged out or has expired at ``now``."""
    return session.logout_at is not None or now >= session.expires_at


@dataclass
class SessionValidator:
    """Resolves tokens to stored sessions."""

    repository: SessionRepository

    def validate(self, token: str | None) -> Result[SessionRecord]:
        """Return the session for a token, signed-out or not.

        Callers decide how to report a signed-out session, since each
        operation uses its own error code for it.
        """
        normalized = normalize_token(token)
        session = self.repository.find_by_token(normalized) if normalized else None
        if session is None:
            return Failure(AuthenticationError(ErrorCode.USER_NOT_SIGNED_IN))
        return Ok(session)


@dataclass
class SignOutService:
    """Ends active sessions."""

    unit_of_work: Callable[[], UnitOfWork]
    clock: Callable[[], datetime] = utc_now

    def sign_out(self, token: str | None) -> Result[SessionRecord]:
        """Mark the session for a token as logged out and return it."""
        with self.unit_of_work() as uow:
            validated = SessionValidator(uow.sessions).validate(token)
            if isinstance(validated, Failure):
                return validated
            session = validated.value
            now = self.clock()
            if is_signed_out(session, now):
                logger.info(
                    "Sign-out rejected for inactive session",
                    extra={"user_id": str(session.user_uuid)},
                )
                return Failure(AuthenticationError(ErrorCode.USER_NOT_SIGNED_IN))
            uow.sessions.update_logout(session.token, now)
            return Ok(replace(session, logout_at=now))
