"""Pydantic models for the HTTP API."""

from uuid import UUID

from pydantic import BaseModel, Field


class QuestionRequest(BaseModel):
    """Payload for posting a question."""

    content: str = Field(min_length=1)


class QuestionResponse(BaseModel):
    """Acknowledges a question write."""

    id: UUID
    status: str


class QuestionDetailsResponse(BaseModel):
    """A question as listed to clients."""

    id: UUID
    content: str


class SignoutResponse(BaseModel):
    """Acknowledges a sign-out."""

    id: UUID
    message: str


class ErrorResponse(BaseModel):
    """Error body returned for rejected requests."""

    code: str
    message: str
