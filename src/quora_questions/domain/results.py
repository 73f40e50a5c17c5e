"""Explicit success/failure variants returned by service operations."""

from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar

from quora_questions.domain.errors import QuestionServiceError

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome carrying the operation's payload."""

    value: T

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Failure:
    """Failed outcome carrying one of the enumerated error kinds."""

    error: QuestionServiceError

    def unwrap(self) -> NoReturn:
        """Raise the carried error."""
        raise self.error


Result = Ok[T] | Failure
