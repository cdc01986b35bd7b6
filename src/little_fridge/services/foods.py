"""Food catalog lookups."""

from dataclasses import dataclass
from typing import Protocol

from little_fridge.domain.foods import Food
from little_fridge.errors import NotFoundError


class FoodRepository(Protocol):
    """Read-only persistence interface for the food catalog."""

    def list_foods(self) -> list[Food]:
        """Return all foods."""

    def list_by_category(self, category: str) -> list[Food]:
        """Return foods in a category."""

    def get_food(self, name: str) -> Food | None:
        """Return a food by canonical name, if present."""


@dataclass
class FoodService:
    """Application service for the food catalog."""

    repository: FoodRepository

    def list_foods(self) -> list[Food]:
        """Return all foods sorted by name."""
        return _by_name(self.repository.list_foods())

    def list_by_category(self, category: str) -> list[Food]:
        """Return foods in a category sorted by name."""
        return _by_name(self.repository.list_by_category(category))

    def get_food(self, name: str) -> Food:
        """Return a food or raise ``NotFoundError``."""
        food = self.repository.get_food(name)
        if food is None:
            raise NotFoundError("Food not found")
        return food

    def exists(self, name: str) -> bool:
        """Return true when the food is in the catalog."""
        return self.repository.get_food(name) is not None


def _by_name(foods: list[Food]) -> list[Food]:
    return sorted(foods, key=lambda food: food.name)
