"""Question endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Header, Request, status
from fastapi.responses import JSONResponse

from quora_questions.api.errors import failure_response
from quora_questions.api.models import (
    QuestionDetailsResponse,
    QuestionRequest,
    QuestionResponse,
)
from quora_questions.domain.models import QuestionDraft
from quora_questions.domain.results import Failure

if TYPE_CHECKING:
    from quora_questions.containers import AppContainer

router = APIRouter(prefix="/question", tags=["question"])


@router.post(
    "/create",
    status_code=status.HTTP_201_CREATED,
    response_model=QuestionResponse,
)
async def create_question(
    payload: QuestionRequest,
    request: Request,
    authorization: str | None = Header(default=None),
) -> QuestionResponse | JSONResponse:
    """Post a question as the signed-in user."""
    container: AppContainer = request.app.state.container
    result = container.question_service.create(
        QuestionDraft(content=payload.content), authorization
    )
    if isinstance(result, Failure):
        return failure_response(result)
    return QuestionResponse(id=result.value.uuid, status="QUESTION CREATED")


@router.get("/all", response_model=list[QuestionDetailsResponse])
async def list_questions(
    request: Request,
    authorization: str | None = Header(default=None),
) -> list[QuestionDetailsResponse] | JSONResponse:
    """Return all questions."""
    container: AppContainer = request.app.state.container
    result = container.question_service.list_all(authorization)
    if isinstance(result, Failure):
        return failure_response(result)
    return [
        QuestionDetailsResponse(id=question.uuid, content=question.content)
        for question in result.value
    ]


@router.delete("/delete/{question_id}", response_model=QuestionResponse)
async def delete_question(
    question_id: str,
    request: Request,
    authorization: str | None = Header(default=None),
) -> QuestionResponse | JSONResponse:
    """Delete a question owned by the caller, or any question for admins."""
    container: AppContainer = request.app.state.container
    result = container.question_service.delete(question_id, authorization)
    if isinstance(result, Failure):
        return failure_response(result)
    return QuestionResponse(id=question_id, status="QUESTION DELETED")
