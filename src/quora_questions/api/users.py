"""User session endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Header, Request
from fastapi.responses import JSONResponse

from quora_questions.api.errors import failure_response
from quora_questions.api.models import SignoutResponse
from quora_questions.domain.results import Failure

if TYPE_CHECKING:
    from quora_questions.containers import AppContainer

router = APIRouter(prefix="/user", tags=["user"])


@router.post("/signout", response_model=SignoutResponse)
async def sign_out(
    request: Request,
    authorization: str | None = Header(default=None),
) -> SignoutResponse | JSONResponse:
    """End the caller's session."""
    container: AppContainer = request.app.state.container
    result = container.sign_out_service.sign_out(authorization)
    if isinstance(result, Failure):
        return failure_response(result)
    return SignoutResponse(
        id=result.value.user_uuid, message="SIGNED OUT SUCCESSFULLY"
    )
