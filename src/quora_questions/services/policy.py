"""Authorization rules for question operations."""

from datetime import datetime

from quora_questions.domain.models import Question, SessionRecord, UserRecord
from quora_questions.services.sessions import is_signed_out


def can_act(session: SessionRecord, now: datetime) -> bool:
    """Any active session may create and list questions."""
    return not is_signed_out(session, now)


def can_delete(actor: UserRecord, question: Question) -> bool:
    """Admins may delete any question, everyone else only their own."""
    return actor.is_admin or actor.uuid == question.owner_uuid
