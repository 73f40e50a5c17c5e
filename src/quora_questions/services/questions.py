"""Question lifecycle operations gated by session and ownership."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from typing import Protocol
from uuid import UUID, uuid4

from quora_questions.domain.errors import (
    AuthenticationError,
    AuthorizationError,
    ErrorCode,
    NotFoundError,
)
from quora_questions.domain.models import Question, QuestionDraft, SessionRecord
from quora_questions.domain.results import Failure, Ok, Result
from quora_questions.services.policy import can_act, can_delete
from quora_questions.services.sessions import SessionValidator, utc_now
from quora_questions.services.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class QuestionRepository(Protocol):
    """Persistence interface for questions."""

    def create(self, question: Question) -> Question:
        """Persist a question and return it."""

    def find_all(self) -> list[Question]:
        """Return all questions in store order."""

    def find_by_uuid(self, question_uuid: UUID) -> Question | None:
        """Return a question by uuid, if present."""

    def delete(self, question: Question) -> None:
        """Delete a question."""


@dataclass
class QuestionService:
    """Creates, lists and deletes questions on behalf of signed-in users."""

    unit_of_work: Callable[[], UnitOfWork]
    clock: Callable[[], datetime] = utc_now
    id_factory: Callable[[], UUID] = uuid4

    def create(self, draft: QuestionDraft, token: str | None) -> Result[Question]:
        """Persist a question owned by the token's user."""
        with self.unit_of_work() as uow:
            gate = self._active_session(
                uow, token, ErrorCode.POST_A_QUESTION_SIGNED_OUT
            )
            if isinstance(gate, Failure):
                return gate
            question = Question(
                uuid=self.id_factory(),
                owner_uuid=gate.value.user_uuid,
                content=draft.content,
                created_at=self.clock(),
            )
            return Ok(uow.questions.create(question))

    def list_all(self, token: str | None) -> Result[list[Question]]:
        """Return every question as ordered by the store."""
        with self.unit_of_work() as uow:
            gate = self._active_session(
                uow, token, ErrorCode.GET_ALL_QUESTIONS_SIGNED_OUT
            )
            if isinstance(gate, Failure):
                return gate
            return Ok(uow.questions.find_all())

    def delete(self, question_id: UUID | str, token: str | None) -> Result[None]:
        """Delete a question if the caller owns it or is an admin.

        ``question_id`` may be a raw string from the caller; one that is not a
        valid uuid is reported like any other unknown question.
        """
        with self.unit_of_work() as uow:
            gate = self._active_session(
                uow, token, ErrorCode.DELETE_QUESTION_SIGNED_OUT
            )
            if isinstance(gate, Failure):
                return gate
            actor = uow.users.get_user(gate.value.user_uuid)
            if actor is None:
                return Failure(AuthenticationError(ErrorCode.USER_NOT_SIGNED_IN))

            question_uuid = _parse_uuid(question_id)
            question = (
                uow.questions.find_by_uuid(question_uuid)
                if question_uuid is not None
                else None
            )
            if question is None:
                return Failure(NotFoundError(ErrorCode.INVALID_QUESTION))
            if not can_delete(actor, question):
                logger.info(
                    "Delete denied for non-owner",
                    extra={
                        "user_id": str(actor.uuid),
                        "question_id": str(question.uuid),
                    },
                )
                return Failure(
                    AuthorizationError(ErrorCode.QUESTION_OWNER_ADMIN_ONLY_CAN_DELETE)
                )
            uow.questions.delete(question)
            return Ok(None)

    def _active_session(
        self, uow: UnitOfWork, token: str | None, signed_out: ErrorCode
    ) -> Result[SessionRecord]:
        validated = SessionValidator(uow.sessions).validate(token)
        if isinstance(validated, Failure):
            return validated
        if not can_act(validated.value, self.clock()):
            logger.info(
                "Request from signed-out session",
                extra={
                    "user_id": str(validated.value.user_uuid),
                    "error_code": signed_out.name,
                },
            )
            return Failure(AuthorizationError(signed_out))
        return validated


def _parse_uuid(value: UUID | str) -> UUID | None:
    if isinstance(value, UUID):
        return value
    try:
        return UUID(value.strip())
    except ValueError:
        return None
