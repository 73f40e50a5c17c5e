"""ASGI application, served with ``uvicorn quora_questions.api.asgi:app``."""

from quora_questions.api.app import create_app
from quora_questions.config import Settings
from quora_questions.containers import build_container

settings = Settings()
app = create_app(build_container(settings))
