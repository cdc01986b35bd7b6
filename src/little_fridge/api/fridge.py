"""Fridge group and item endpoints.

Handlers are plain functions: the Supabase client is synchronous, so FastAPI
runs them in its thread pool instead of on the event loop.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from little_fridge.api.dependencies import get_container, require_user
from little_fridge.api.models import (
    AddItemRequest,
    AddItemsRequest,
    CreateFridgeRequest,
    JoinFridgeRequest,
    UpdateQuantityRequest,
)
from little_fridge.api.serializers import (
    serialize_fridge,
    serialize_item,
    serialize_membership,
)
from little_fridge.containers import AppContainer
from little_fridge.domain.items import NewItem
from little_fridge.domain.models import AuthUser

router = APIRouter(prefix="/fridge", tags=["fridge"])


@router.post("/create", status_code=status.HTTP_201_CREATED)
def create_fridge(
    body: CreateFridgeRequest,
    user: AuthUser = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Create a fridge group with the caller as its first member."""
    fridge = container.fridge_service.create_fridge(body.group_name, user.id)
    return serialize_fridge(fridge)


@router.post("/join")
def join_fridge(
    body: JoinFridgeRequest,
    user: AuthUser = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Join a fridge group with an invite code."""
    fridge = container.fridge_service.join_fridge(body.invite_code, user.id)
    return serialize_fridge(fridge)


@router.get("/my-fridges")
def my_fridges(
    user: AuthUser = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> list[dict[str, object]]:
    """Return the caller's fridges, most recently joined first."""
    memberships = container.fridge_service.list_fridges_for_user(user.id)
    return [serialize_membership(membership) for membership in memberships]


@router.get("/{fridge_id}/items")
def list_items(
    fridge_id: UUID,
    user: AuthUser = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> list[dict[str, object]]:
    """Return every item in a fridge."""
    items = container.item_service.list_items(fridge_id, user.id)
    return [serialize_item(item) for item in items]


@router.get("/{fridge_id}/category/{category}")
def list_items_by_category(
    fridge_id: UUID,
    category: str,
    user: AuthUser = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> list[dict[str, object]]:
    """Return a fridge's items whose food is in the category."""
    items = container.item_service.list_items(fridge_id, user.id, category=category)
    return [serialize_item(item) for item in items]


@router.post("/{fridge_id}/items", status_code=status.HTTP_201_CREATED)
def add_item(
    fridge_id: UUID,
    body: AddItemRequest,
    user: AuthUser = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Add an item attributed to the caller."""
    item = container.item_service.add_item(fridge_id, user.id, _to_new_item(body))
    return serialize_item(item)


@router.post("/{fridge_id}/items/batch", status_code=status.HTTP_201_CREATED)
def add_items(
    fridge_id: UUID,
    body: AddItemsRequest,
    user: AuthUser = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> list[dict[str, object]]:
    """Add several items at once; nothing is stored if any entry is invalid."""
    items = container.item_service.add_items(
        fridge_id, user.id, [_to_new_item(entry) for entry in body.items]
    )
    return [serialize_item(item) for item in items]


@router.patch("/items/{item_id}")
def update_quantity(
    item_id: UUID,
    body: UpdateQuantityRequest,
    user: AuthUser = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Set an item's quantity."""
    item = container.item_service.update_quantity(item_id, user.id, body.quantity)
    return serialize_item(item)


@router.delete("/items/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_item(
    item_id: UUID,
    user: AuthUser = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> Response:
    """Remove an item from its fridge."""
    container.item_service.delete_item(item_id, user.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


def _to_new_item(body: AddItemRequest) -> NewItem:
    return NewItem(
        food_name=body.food_name,
        quantity=body.quantity,
        expires_at=body.expires_at,
    )
