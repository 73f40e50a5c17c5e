"""Transaction scope shared by the service layer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from quora_questions.services.questions import QuestionRepository
    from quora_questions.services.sessions import SessionRepository, UserRepository


class UnitOfWork(Protocol):
    """One transaction around an operation's reads and writes.

    Exiting the context commits when the block finished normally and rolls
    back when it raised.
    """

    sessions: SessionRepository
    users: UserRepository
    questions: QuestionRepository

    def __enter__(self) -> UnitOfWork: ...

    def __exit__(self, exc_type, exc, tb) -> None: ...  # type: ignore[no-untyped-def]

    def commit(self) -> None: ...

    def rollback(self) -> None: ...
