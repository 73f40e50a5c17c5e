"""Error codes and error kinds surfaced by question operations."""

from enum import Enum


class ErrorCode(Enum):
    """Stable (code, reason) pairs reported to callers."""

    USER_NOT_SIGNED_IN = ("ATHR-001", "User has not signed in")
    POST_A_QUESTION_SIGNED_OUT = (
        "ATHR-002",
        "User is signed out.Sign in first to post a question",
    )
    GET_ALL_QUESTIONS_SIGNED_OUT = (
        "ATHR-002",
        "User is signed out.Sign in first to get all questions",
    )
    DELETE_QUESTION_SIGNED_OUT = (
        "ATHR-002",
        "User is signed out.Sign in first to delete a question",
    )
    QUESTION_OWNER_ADMIN_ONLY_CAN_DELETE = (
        "ATHR-003",
        "Only the question owner or admin can delete the question",
    )
    INVALID_QUESTION = ("QUES-001", "Entered question uuid does not exist")

    @property
    def code(self) -> str:
        return self.value[0]

    @property
    def reason(self) -> str:
        return self.value[1]


class QuestionServiceError(Exception):
    """Base class for caller-correctable failures."""

    def __init__(self, error_code: ErrorCode) -> None:
        super().__init__(f"{error_code.code}: {error_code.reason}")
        self.error_code = error_code

    @property
    def code(self) -> str:
        return self.error_code.code

    @property
    def reason(self) -> str:
        return self.error_code.reason

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QuestionServiceError):
            return NotImplemented
        return type(self) is type(other) and self.error_code is other.error_code

    def __hash__(self) -> int:
        return hash((type(self), self.error_code))


class AuthenticationError(QuestionServiceError):
    """The token does not match any session."""


class AuthorizationError(QuestionServiceError):
    """The session is signed out or lacks permission for the action."""


class NotFoundError(QuestionServiceError):
    """The referenced question does not exist."""
