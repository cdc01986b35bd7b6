"""Food catalog endpoints."""

from fastapi import APIRouter, Depends

from little_fridge.api.dependencies import get_container
from little_fridge.api.serializers import serialize_food
from little_fridge.containers import AppContainer

router = APIRouter(prefix="/foods", tags=["foods"])


@router.get("")
def list_foods(
    container: AppContainer = Depends(get_container),
) -> list[dict[str, object]]:
    """Return the whole catalog."""
    return [serialize_food(food) for food in container.food_service.list_foods()]


@router.get("/category/{category}")
def list_foods_by_category(
    category: str, container: AppContainer = Depends(get_container)
) -> list[dict[str, object]]:
    """Return foods in a category."""
    foods = container.food_service.list_by_category(category)
    return [serialize_food(food) for food in foods]


@router.get("/{name}")
def get_food(
    name: str, container: AppContainer = Depends(get_container)
) -> dict[str, object]:
    """Return a single food by name."""
    return serialize_food(container.food_service.get_food(name))
