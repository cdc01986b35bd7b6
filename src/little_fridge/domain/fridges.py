"""Domain models for fridges and memberships."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class Fridge:
    """A shared fridge group with its invite code."""

    id: UUID
    group_name: str
    invite_code: str
    created_at: datetime | None


@dataclass(frozen=True)
class FridgeMembership:
    """A fridge the user belongs to, with the time they joined."""

    fridge: Fridge
    joined_at: datetime
