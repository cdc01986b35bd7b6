"""Domain models for fridge items."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from little_fridge.domain.foods import Food


@dataclass(frozen=True)
class FridgeItem:
    """A quantity of a food stored in a fridge."""

    id: UUID
    fridge_id: UUID
    food_name: str
    quantity: int
    expires_at: datetime | None
    added_by_user_id: UUID
    added_at: datetime
    food: Food | None


@dataclass(frozen=True)
class NewItem:
    """Client input for a single item insert."""

    food_name: str | None
    quantity: int | None = None
    expires_at: datetime | None = None
