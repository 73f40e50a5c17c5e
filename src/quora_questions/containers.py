"""Dependency container wiring for the application."""

from dataclasses import dataclass
from functools import partial

from supabase import create_client

from quora_questions.adapters.supabase_unit_of_work import SupabaseUnitOfWork
from quora_questions.config import Settings
from quora_questions.services.questions import QuestionService
from quora_questions.services.sessions import SignOutService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    question_service: QuestionService
    sign_out_service: SignOutService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    unit_of_work = partial(SupabaseUnitOfWork, supabase_client)
    return AppContainer(
        settings=resolved_settings,
        question_service=QuestionService(unit_of_work),
        sign_out_service=SignOutService(unit_of_work),
    )
