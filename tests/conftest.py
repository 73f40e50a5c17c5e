"""Shared test fixtures."""

from datetime import timedelta
from uuid import uuid4

import pytest

from quora_questions.config import Settings
from quora_questions.containers import AppContainer
from quora_questions.domain.models import Question, Role, UserRecord
from quora_questions.services.questions import QuestionService
from quora_questions.services.sessions import SignOutService
from tests.fakes import (
    NOW,
    FixedClock,
    InMemoryDatabase,
    InMemoryUnitOfWork,
    make_session,
)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
    )


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def owner() -> UserRecord:
    return UserRecord(uuid=uuid4(), username="owner", role=Role.NONADMIN)


@pytest.fixture
def other_user() -> UserRecord:
    return UserRecord(uuid=uuid4(), username="other", role=Role.NONADMIN)


@pytest.fixture
def admin() -> UserRecord:
    return UserRecord(uuid=uuid4(), username="admin", role=Role.ADMIN)


@pytest.fixture
def db(
    owner: UserRecord, other_user: UserRecord, admin: UserRecord
) -> InMemoryDatabase:
    database = InMemoryDatabase()
    for user in (owner, other_user, admin):
        database.users[user.uuid] = user
    database.sessions["owner-token"] = make_session("owner-token", owner)
    database.sessions["other-token"] = make_session("other-token", other_user)
    database.sessions["admin-token"] = make_session("admin-token", admin)
    database.sessions["logged-out-token"] = make_session(
        "logged-out-token", owner, logout_at=NOW - timedelta(minutes=5)
    )
    database.sessions["expired-token"] = make_session(
        "expired-token", owner, expires_in=-timedelta(minutes=1)
    )
    return database


@pytest.fixture
def existing_question(db: InMemoryDatabase, owner: UserRecord) -> Question:
    question = Question(
        uuid=uuid4(),
        owner_uuid=owner.uuid,
        content="Is Python a good first language?",
        created_at=NOW - timedelta(days=1),
    )
    db.questions[question.uuid] = question
    return question


@pytest.fixture
def unit_of_work(db: InMemoryDatabase) -> InMemoryUnitOfWork:
    return InMemoryUnitOfWork(db)


@pytest.fixture
def question_service(
    unit_of_work: InMemoryUnitOfWork, clock: FixedClock
) -> QuestionService:
    return QuestionService(unit_of_work=unit_of_work, clock=clock)


@pytest.fixture
def sign_out_service(
    unit_of_work: InMemoryUnitOfWork, clock: FixedClock
) -> SignOutService:
    return SignOutService(unit_of_work=unit_of_work, clock=clock)


@pytest.fixture
def container(
    settings: Settings,
    question_service: QuestionService,
    sign_out_service: SignOutService,
) -> AppContainer:
    return AppContainer(
        settings=settings,
        question_service=question_service,
        sign_out_service=sign_out_service,
    )
