"""FastAPI application factory."""

from fastapi import FastAPI

from quora_questions.api.questions import router as questions_router
from quora_questions.api.users import router as users_router
from quora_questions.app_logging import configure_logging
from quora_questions.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)

    app = FastAPI(title="Quora Questions")
    app.state.container = container

    app.include_router(questions_router)
    app.include_router(users_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
