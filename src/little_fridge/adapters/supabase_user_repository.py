"""Supabase-backed user profile repository."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from little_fridge.domain.models import UserProfile
from little_fridge.services.auth import UserProfileRepository


@dataclass
class SupabaseUserRepository(UserProfileRepository):
    """Supabase implementation for user rows."""

    client: Client

    def create_profile(
        self, user_id: UUID, email: str | None, name: str | None
    ) -> UserProfile:
        """Create a user row keyed by the identity provider id."""
        response = (
            self.client.table("users")
            .insert({"user_id": str(user_id), "user_email": email, "user_name": name})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create user in Supabase")
        return _parse_profile(response.data[0])

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        """Return the user row, if present."""
        response = (
            self.client.table("users")
            .select("user_id, user_email, user_name")
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if response.data:
            return _parse_profile(response.data[0])
        return None


def _parse_profile(row: dict[str, object]) -> UserProfile:
    return UserProfile(
        id=UUID(str(row["user_id"])),
        email=row.get("user_email"),
        name=row.get("user_name"),
    )
