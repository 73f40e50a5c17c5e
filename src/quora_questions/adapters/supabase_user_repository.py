"""Supabase-backed user repository."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from quora_questions.domain.models import Role, UserRecord
from quora_questions.services.sessions import UserRepository


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user lookups."""

    client: Client

    def get_user(self, user_uuid: UUID) -> UserRecord | None:
        """Return a user by uuid, if present."""
        response = (
            self.client.table("users")
            .select("uuid, username, role")
            .eq("uuid", str(user_uuid))
            .limit(1)
            .execute()
        )
        if response.data:
            row = response.data[0]
            return UserRecord(
                uuid=UUID(row["uuid"]),
                username=row["username"],
                role=Role.parse(row.get("role")),
            )
        return None
