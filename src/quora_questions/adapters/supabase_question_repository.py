"""Supabase-backed question repository."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from quora_questions.adapters.staging import Write, run_or_stage
from quora_questions.adapters.timestamps import parse_timestamp
from quora_questions.domain.models import Question
from quora_questions.services.questions import QuestionRepository

_COLUMNS = "uuid, owner_uuid, content, created_at"


@dataclass
class SupabaseQuestionRepository(QuestionRepository):
    """Supabase implementation for questions."""

    client: Client
    pending: list[Write] | None = None

    def create(self, question: Question) -> Question:
        """Insert a question row and return the question."""

        def write() -> None:
            response = (
                self.client.table("questions")
                .insert(
                    {
                        "uuid": str(question.uuid),
                        "owner_uuid": str(question.owner_uuid),
                        "content": question.content,
                        "created_at": question.created_at.isoformat(),
                    }
                )
                .execute()
            )
            if not response.data:
                raise RuntimeError("Failed to create question")

        run_or_stage(write, self.pending)
        return question

    def find_all(self) -> list[Question]:
        """Return all questions, oldest first."""
        response = (
            self.client.table("questions")
            .select(_COLUMNS)
            .order("created_at")
            .execute()
        )
        return [_to_question(row) for row in response.data or []]

    def find_by_uuid(self, question_uuid: UUID) -> Question | None:
        """Return a question by uuid, if present."""
        response = (
            self.client.table("questions")
            .select(_COLUMNS)
            .eq("uuid", str(question_uuid))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _to_question(response.data[0])

    def delete(self, question: Question) -> None:
        """Delete a question row."""

        def write() -> None:
            response = (
                self.client.table("questions")
                .delete()
                .eq("uuid", str(question.uuid))
                .execute()
            )
            if not response.data:
                raise RuntimeError("Failed to delete question")

        run_or_stage(write, self.pending)


def _to_question(row: dict[str, object]) -> Question:
    created_at = parse_timestamp(row.get("created_at"))
    if created_at is None:
        raise RuntimeError("Question row is missing created_at")
    return Question(
        uuid=UUID(str(row["uuid"])),
        owner_uuid=UUID(str(row["owner_uuid"])),
        content=str(row["content"]),
        created_at=created_at,
    )
