"""Supabase implementation for the food catalog."""

from dataclasses import dataclass

from supabase import Client

from little_fridge.domain.foods import Food
from little_fridge.services.foods import FoodRepository


@dataclass
class SupabaseFoodRepository(FoodRepository):
    """Supabase-backed read-only food catalog."""

    client: Client

    def list_foods(self) -> list[Food]:
        """Return all foods ordered by name."""
        response = (
            self.client.table("foods").select("*").order("food_name").execute()
        )
        return [parse_food(row) for row in response.data or []]

    def list_by_category(self, category: str) -> list[Food]:
        """Return foods in a category ordered by name."""
        response = (
            self.client.table("foods")
            .select("*")
            .eq("food_category", category)
            .order("food_name")
            .execute()
        )
        return [parse_food(row) for row in response.data or []]

    def get_food(self, name: str) -> Food | None:
        """Return a food by name, if present."""
        response = (
            self.client.table("foods")
            .select("*")
            .eq("food_name", name)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return parse_food(response.data[0])


def parse_food(row: dict[str, object]) -> Food:
    """Parse a foods row into a domain model."""
    shelf_life = row.get("shelf_life_days")
    return Food(
        name=str(row.get("food_name", "")),
        category=str(row.get("food_category", "")),
        shelf_life_days=int(shelf_life) if shelf_life is not None else None,
    )
