"""Supabase-backed session repository."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from quora_questions.adapters.staging import Write, run_or_stage
from quora_questions.adapters.timestamps import parse_timestamp
from quora_questions.domain.models import SessionRecord
from quora_questions.services.sessions import SessionRepository


@dataclass
class SupabaseSessionRepository(SessionRepository):
    """Supabase implementation for auth sessions."""

    client: Client
    pending: list[Write] | None = None

    def find_by_token(self, token: str) -> SessionRecord | None:
        """Return the session for an access token, if present."""
        response = (
            self.client.table("user_auth")
            .select("access_token, user_uuid, login_at, expires_at, logout_at")
            .eq("access_token", token)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        login_at = parse_timestamp(row["login_at"])
        expires_at = parse_timestamp(row["expires_at"])
        if login_at is None or expires_at is None:
            raise RuntimeError("Session row is missing login or expiry time")
        return SessionRecord(
            token=row["access_token"],
            user_uuid=UUID(row["user_uuid"]),
            login_at=login_at,
            expires_at=expires_at,
            logout_at=parse_timestamp(row.get("logout_at")),
        )

    def update_logout(self, token: str, logout_at: datetime) -> None:
        """Record the logout time for a session that has not been logged out yet."""

        def write() -> None:
            self.client.table("user_auth").update(
                {"logout_at": logout_at.isoformat()}
            ).eq("access_token", token).is_("logout_at", "null").execute()

        run_or_stage(write, self.pending)
