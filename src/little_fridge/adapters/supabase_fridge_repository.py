"""Supabase-backed fridge and membership repository."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from postgrest.exceptions import APIError
from supabase import Client

from little_fridge.domain.fridges import Fridge, FridgeMembership
from little_fridge.errors import UniqueViolationError
from little_fridge.services.fridges import FridgeRepository

UNIQUE_VIOLATION = "23505"


@dataclass
class SupabaseFridgeRepository(FridgeRepository):
    """Supabase implementation for fridges and memberships."""

    client: Client

    def create_fridge_with_member(
        self, group_name: str, invite_code: str, user_id: UUID
    ) -> Fridge:
        """Call the transactional fridge creation function."""
        try:
            response = self.client.rpc(
                "create_fridge_with_member",
                {
                    "p_group_name": group_name,
                    "p_invite_code": invite_code,
                    "p_user_id": str(user_id),
                },
            ).execute()
        except APIError as exc:
            if exc.code == UNIQUE_VIOLATION:
                raise UniqueViolationError(exc.details or exc.message) from exc
            raise
        if not response.data:
            raise RuntimeError("Failed to create fridge in Supabase")
        return parse_fridge(response.data[0])

    def get_by_invite_code(self, invite_code: str) -> Fridge | None:
        """Return the fridge for an invite code, if present."""
        response = (
            self.client.table("fridges")
            .select("*")
            .eq("invite_code", invite_code)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return parse_fridge(response.data[0])

    def add_member(self, fridge_id: UUID, user_id: UUID) -> None:
        """Insert a membership row."""
        try:
            self.client.table("user_fridges").insert(
                {"fridge_id": str(fridge_id), "user_id": str(user_id)}
            ).execute()
        except APIError as exc:
            if exc.code == UNIQUE_VIOLATION:
                raise UniqueViolationError(exc.details or exc.message) from exc
            raise

    def list_memberships(self, user_id: UUID) -> list[FridgeMembership]:
        """Return memberships with their fridges embedded."""
        response = (
            self.client.table("user_fridges")
            .select("joined_at, fridges(*)")
            .eq("user_id", str(user_id))
            .execute()
        )
        return [
            FridgeMembership(
                fridge=parse_fridge(row["fridges"]),
                joined_at=datetime.fromisoformat(row["joined_at"]),
            )
            for row in response.data or []
            if row.get("fridges")
        ]

    def is_member(self, user_id: UUID, fridge_id: UUID) -> bool:
        """Return true when a membership row exists."""
        response = (
            self.client.table("user_fridges")
            .select("fridge_id")
            .eq("user_id", str(user_id))
            .eq("fridge_id", str(fridge_id))
            .limit(1)
            .execute()
        )
        return bool(response.data)


def parse_fridge(row: dict[str, object]) -> Fridge:
    """Parse a fridges row into a domain model."""
    created_raw = row.get("created_at")
    return Fridge(
        id=UUID(str(row["fridge_id"])),
        group_name=str(row.get("group_name", "")),
        invite_code=str(row.get("invite_code", "")),
        created_at=(
            datetime.fromisoformat(created_raw)
            if isinstance(created_raw, str) and created_raw
            else None
        ),
    )
