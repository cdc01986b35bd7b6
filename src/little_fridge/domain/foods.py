"""Domain models for the food catalog."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Food:
    """Canonical food reference data."""

    name: str
    category: str
    shelf_life_days: int | None
