"""In-memory collaborators shared by the test suite."""

from copy import deepcopy
from dataclasses import dataclass, field, replace
from datetime import UTC, datetime, timedelta
from uuid import UUID

from quora_questions.domain.models import Question, SessionRecord, UserRecord
from quora_questions.services.questions import QuestionRepository
from quora_questions.services.sessions import SessionRepository, UserRepository

NOW = datetime(2024, 5, 1, 12, 0, tzinfo=UTC)


@dataclass
class FixedClock:
    """Clock that returns a settable instant."""

    now: datetime = NOW

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now = self.now + delta


@dataclass
class InMemoryDatabase:
    """Tables backing the in-memory repositories."""

    sessions: dict[str, SessionRecord] = field(default_factory=dict)
    users: dict[UUID, UserRecord] = field(default_factory=dict)
    questions: dict[UUID, Question] = field(default_factory=dict)
    session_lookups: list[str] = field(default_factory=list)
    question_lookups: list[UUID] = field(default_factory=list)


@dataclass
class InMemorySessionRepository(SessionRepository):
    """In-memory session repository for tests."""

    db: InMemoryDatabase

    def find_by_token(self, token: str) -> SessionRecord | None:
        self.db.session_lookups.append(token)
        return self.db.sessions.get(token)

    def update_logout(self, token: str, logout_at: datetime) -> None:
        session = self.db.sessions[token]
        self.db.sessions[token] = replace(session, logout_at=logout_at)


@dataclass
class InMemoryUserRepository(UserRepository):
    """In-memory user repository for tests."""

    db: InMemoryDatabase

    def get_user(self, user_uuid: UUID) -> UserRecord | None:
        return self.db.users.get(user_uuid)


@dataclass
class InMemoryQuestionRepository(QuestionRepository):
    """In-memory question repository for tests."""

    db: InMemoryDatabase

    def create(self, question: Question) -> Question:
        self.db.questions[question.uuid] = question
        return question

    def find_all(self) -> list[Question]:
        return list(self.db.questions.values())

    def find_by_uuid(self, question_uuid: UUID) -> Question | None:
        self.db.question_lookups.append(question_uuid)
        return self.db.questions.get(question_uuid)

    def delete(self, question: Question) -> None:
        del self.db.questions[question.uuid]


@dataclass
class InMemoryUnitOfWork:
    """Snapshot-based unit of work over an in-memory database."""

    db: InMemoryDatabase
    commits: int = 0
    rollbacks: int = 0
    _snapshot: InMemoryDatabase | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        self.sessions = InMemorySessionRepository(self.db)
        self.users = InMemoryUserRepository(self.db)
        self.questions = InMemoryQuestionRepository(self.db)

    def __call__(self) -> "InMemoryUnitOfWork":
        return self

    def __enter__(self) -> "InMemoryUnitOfWork":
        self._snapshot = deepcopy(self.db)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # type: ignore[no-untyped-def]
        if exc is not None:
            self.rollback()
        else:
            self.commit()

    def commit(self) -> None:
        self.commits += 1
        self._snapshot = None

    def rollback(self) -> None:
        self.rollbacks += 1
        if self._snapshot is not None:
            self.db.sessions = self._snapshot.sessions
            self.db.users = self._snapshot.users
            self.db.questions = self._snapshot.questions
            self._snapshot = None


def make_session(
    token: str,
    user: UserRecord,
    *,
    expires_in: timedelta = timedelta(hours=8),
    logout_at: datetime | None = None,
) -> SessionRecord:
    """Build a session that was issued one hour before ``NOW``."""
    return SessionRecord(
        token=token,
        user_uuid=user.uuid,
        login_at=NOW - timedelta(hours=1),
        expires_at=NOW + expires_in,
        logout_at=logout_at,
    )
