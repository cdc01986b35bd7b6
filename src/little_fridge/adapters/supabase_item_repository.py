"""Supabase-backed fridge item repository."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from little_fridge.adapters.supabase_food_repository import parse_food
from little_fridge.domain.items import FridgeItem, NewItem
from little_fridge.services.items import ItemRepository

_ITEM_COLUMNS = "*, foods(*)"
_ITEM_COLUMNS_INNER = "*, foods!inner(*)"


@dataclass
class SupabaseItemRepository(ItemRepository):
    """Supabase implementation for fridge items."""

    client: Client

    def list_items(self, fridge_id: UUID, category: str | None) -> list[FridgeItem]:
        """Return items with their food embedded, newest first."""
        query = self.client.table("fridge_items").select(
            _ITEM_COLUMNS_INNER if category else _ITEM_COLUMNS
        )
        query = query.eq("fridge_id", str(fridge_id))
        if category:
            query = query.eq("foods.food_category", category)
        response = query.order("added_at", desc=True).execute()
        return [_parse_item(row) for row in response.data or []]

    def create_items(
        self, fridge_id: UUID, added_by_user_id: UUID, items: list[NewItem]
    ) -> list[FridgeItem]:
        """Insert all rows in one request and re-read them with foods."""
        rows = [
            {
                "fridge_id": str(fridge_id),
                "food_name": item.food_name,
                "quantity": item.quantity,
                "added_by_user_id": str(added_by_user_id),
                "expires_at": item.expires_at.isoformat() if item.expires_at else None,
            }
            for item in items
        ]
        response = self.client.table("fridge_items").insert(rows).execute()
        if not response.data:
            raise RuntimeError("Failed to add fridge items")
        ids = [str(row["id"]) for row in response.data]
        embedded = (
            self.client.table("fridge_items")
            .select(_ITEM_COLUMNS)
            .in_("id", ids)
            .execute()
        )
        by_id = {str(row["id"]): row for row in embedded.data or []}
        return [_parse_item(by_id.get(str(row["id"]), row)) for row in response.data]

    def get_item(self, item_id: UUID) -> FridgeItem | None:
        """Return an item by id, if present."""
        response = (
            self.client.table("fridge_items")
            .select(_ITEM_COLUMNS)
            .eq("id", str(item_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_item(response.data[0])

    def update_quantity(self, item_id: UUID, quantity: int) -> FridgeItem | None:
        """Set an item's quantity and return it."""
        response = (
            self.client.table("fridge_items")
            .update({"quantity": quantity})
            .eq("id", str(item_id))
            .execute()
        )
        if not response.data:
            return None
        return self.get_item(item_id)

    def delete_item(self, item_id: UUID) -> bool:
        """Delete an item and report whether a row was removed."""
        response = (
            self.client.table("fridge_items").delete().eq("id", str(item_id)).execute()
        )
        return bool(response.data)


def _parse_item(row: dict[str, object]) -> FridgeItem:
    """Parse a fridge_items row into a domain model."""
    expires_raw = row.get("expires_at")
    food_row = row.get("foods")
    return FridgeItem(
        id=UUID(str(row["id"])),
        fridge_id=UUID(str(row["fridge_id"])),
        food_name=str(row.get("food_name", "")),
        quantity=int(row.get("quantity", 1)),
        expires_at=(
            datetime.fromisoformat(expires_raw)
            if isinstance(expires_raw, str) and expires_raw
            else None
        ),
        added_by_user_id=UUID(str(row["added_by_user_id"])),
        added_at=datetime.fromisoformat(str(row["added_at"])),
        food=parse_food(food_row) if isinstance(food_row, dict) else None,
    )
