"""JSON shapes returned by the API."""

from little_fridge.domain.foods import Food
from little_fridge.domain.fridges import Fridge, FridgeMembership
from little_fridge.domain.items import FridgeItem
from little_fridge.domain.models import AuthSession, AuthUser


def serialize_fridge(fridge: Fridge) -> dict[str, object]:
    """Return the public fields of a fridge group."""
    return {
        "fridge_id": str(fridge.id),
        "group_name": fridge.group_name,
        "invite_code": fridge.invite_code,
    }


def serialize_membership(membership: FridgeMembership) -> dict[str, object]:
    """Return a fridge with the time the caller joined it."""
    return {
        **serialize_fridge(membership.fridge),
        "joined_at": membership.joined_at.isoformat(),
    }


def serialize_food(food: Food) -> dict[str, object]:
    """Return a catalogue entry."""
    return {
        "food_name": food.name,
        "food_category": food.category,
        "shelf_life_days": food.shelf_life_days,
    }


def serialize_item(item: FridgeItem) -> dict[str, object]:
    """Return an item with its catalogue entry embedded under ``foods``."""
    return {
        "id": str(item.id),
        "fridge_id": str(item.fridge_id),
        "food_name": item.food_name,
        "quantity": item.quantity,
        "expires_at": item.expires_at.isoformat() if item.expires_at else None,
        "added_by_user_id": str(item.added_by_user_id),
        "added_at": item.added_at.isoformat(),
        "foods": serialize_food(item.food) if item.food else None,
    }


def serialize_user(user: AuthUser) -> dict[str, object]:
    """Return the caller's account details."""
    return {
        "id": str(user.id),
        "email": user.email,
        "name": user.name,
        "created_at": user.created_at.isoformat() if user.created_at else None,
    }


def serialize_session(session: AuthSession | None) -> dict[str, object] | None:
    """Return session tokens, or None when sign-up needs confirmation."""
    if session is None:
        return None
    return {
        "access_token": session.access_token,
        "refresh_token": session.refresh_token,
        "expires_at": session.expires_at,
    }
