"""Unit of work over Supabase repositories."""

import logging
from dataclasses import dataclass, field

from supabase import Client

from quora_questions.adapters.staging import Write
from quora_questions.adapters.supabase_question_repository import (
    SupabaseQuestionRepository,
)
from quora_questions.adapters.supabase_session_repository import (
    SupabaseSessionRepository,
)
from quora_questions.adapters.supabase_user_repository import SupabaseUserRepository

logger = logging.getLogger(__name__)


@dataclass
class SupabaseUnitOfWork:
    """Collects writes during an operation and flushes them on commit.

    Reads hit the database immediately. Writes issued through ``sessions`` or
    ``questions`` are queued and only sent when the scope commits, so a
    rejected or failed operation leaves the database untouched.
    """

    client: Client
    _pending: list[Write] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        self.sessions = SupabaseSessionRepository(self.client, pending=self._pending)
        self.users = SupabaseUserRepository(self.client)
        self.questions = SupabaseQuestionRepository(
            self.client, pending=self._pending
        )

    def __enter__(self) -> "SupabaseUnitOfWork":
        self._pending.clear()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # type: ignore[no-untyped-def]
        if exc is not None:
            logger.warning("Rolling back unit of work after %s", exc_type.__name__)
            self.rollback()
            return
        self.commit()

    def commit(self) -> None:
        """Send queued writes in the order they were issued."""
        writes = list(self._pending)
        self._pending.clear()
        for write in writes:
            write()

    def rollback(self) -> None:
        """Drop queued writes."""
        self._pending.clear()
