"""Translation of service failures into HTTP responses."""

from fastapi import status
from fastapi.responses import JSONResponse

from quora_questions.api.models import ErrorResponse
from quora_questions.domain.errors import (
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    QuestionServiceError,
)
from quora_questions.domain.results import Failure


def status_for(error: QuestionServiceError) -> int:
    """Return the HTTP status code for a service error kind."""
    match error:
        case AuthenticationError():
            return status.HTTP_401_UNAUTHORIZED
        case AuthorizationError():
            return status.HTTP_403_FORBIDDEN
        case NotFoundError():
            return status.HTTP_404_NOT_FOUND
    return status.HTTP_400_BAD_REQUEST


def failure_response(failure: Failure) -> JSONResponse:
    """Render a failed result as a JSON error response."""
    body = ErrorResponse(code=failure.error.code, message=failure.error.reason)
    return JSONResponse(
        status_code=status_for(failure.error), content=body.model_dump()
    )
