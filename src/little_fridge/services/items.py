"""Membership-gated item operations."""

import logging
from dataclasses import dataclass, replace
from typing import Protocol
from uuid import UUID

from little_fridge.domain.items import FridgeItem, NewItem
from little_fridge.errors import NotFoundError, ValidationError
from little_fridge.services.foods import FoodService
from little_fridge.services.fridges import FridgeService

logger = logging.getLogger(__name__)

DEFAULT_QUANTITY = 1
# Postgres integer column.
MAX_QUANTITY = 2_147_483_647


class ItemRepository(Protocol):
    """Persistence interface for fridge items."""

    def list_items(self, fridge_id: UUID, category: str | None) -> list[FridgeItem]:
        """Return items in a fridge, optionally filtered by food category."""

    def create_items(
        self, fridge_id: UUID, added_by_user_id: UUID, items: list[NewItem]
    ) -> list[FridgeItem]:
        """Insert all items in a single write and return them."""

    def get_item(self, item_id: UUID) -> FridgeItem | None:
        """Return an item by id, if present."""

    def update_quantity(self, item_id: UUID, quantity: int) -> FridgeItem | None:
        """Set an item's quantity and return the updated item."""

    def delete_item(self, item_id: UUID) -> bool:
        """Delete an item; return false when nothing was deleted."""


@dataclass
class ItemService:
    """CRUD over fridge items, always behind a membership check."""

    repository: ItemRepository
    fridge_service: FridgeService
    food_service: FoodService

    def list_items(
        self, fridge_id: UUID, user_id: UUID, category: str | None = None
    ) -> list[FridgeItem]:
        """Return the fridge's items, newest first."""
        self.fridge_service.require_access(user_id, fridge_id)
        items = self.repository.list_items(fridge_id, category)
        return sorted(
            items, key=lambda item: (item.added_at, str(item.id)), reverse=True
        )

    def add_item(self, fridge_id: UUID, user_id: UUID, item: NewItem) -> FridgeItem:
        """Add one item attributed to the calling user."""
        return self.add_items(fridge_id, user_id, [item])[0]

    def add_items(
        self, fridge_id: UUID, user_id: UUID, items: list[NewItem]
    ) -> list[FridgeItem]:
        """Validate every item, then insert them all in one write."""
        self.fridge_service.require_access(user_id, fridge_id)
        if not items:
            raise ValidationError("At least one item is required")
        prepared = [self._prepare(item) for item in items]
        created = self.repository.create_items(fridge_id, user_id, prepared)
        logger.info(
            "Added fridge items",
            extra={
                "fridge_id": str(fridge_id),
                "user_id": str(user_id),
                "count": len(created),
            },
        )
        return created

    def update_quantity(
        self, item_id: UUID, user_id: UUID, quantity: int | None
    ) -> FridgeItem:
        """Set an item's quantity; access is checked on the item's own fridge."""
        if quantity is None:
            raise ValidationError("Quantity is required")
        if quantity < 1:
            raise ValidationError("Quantity must be a positive integer")
        if quantity > MAX_QUANTITY:
            raise ValidationError("Quantity is too large")
        item = self._get_accessible_item(item_id, user_id)
        if item.quantity == quantity:
            return item
        updated = self.repository.update_quantity(item_id, quantity)
        if updated is None:
            raise NotFoundError("Item not found")
        return updated

    def delete_item(self, item_id: UUID, user_id: UUID) -> None:
        """Remove an item. Deleting an already removed item raises NotFound."""
        item = self._get_accessible_item(item_id, user_id)
        if not self.repository.delete_item(item_id):
            raise NotFoundError("Item not found")
        logger.info(
            "Deleted fridge item",
            extra={"fridge_id": str(item.fridge_id), "user_id": str(user_id)},
        )

    def _get_accessible_item(self, item_id: UUID, user_id: UUID) -> FridgeItem:
        item = self.repository.get_item(item_id)
        if item is None:
            raise NotFoundError("Item not found")
        self.fridge_service.require_access(user_id, item.fridge_id)
        return item

    def _prepare(self, item: NewItem) -> NewItem:
        food_name = (item.food_name or "").strip()
        if not food_name:
            raise ValidationError("Food name is required")
        if item.quantity is not None and item.quantity < 0:
            raise ValidationError("Quantity must be a positive integer")
        if item.quantity is not None and item.quantity > MAX_QUANTITY:
            raise ValidationError("Quantity is too large")
        if not self.food_service.exists(food_name):
            raise NotFoundError(f"Unknown food: {food_name}")
        return replace(
            item,
            food_name=food_name,
            quantity=item.quantity or DEFAULT_QUANTITY,
        )
