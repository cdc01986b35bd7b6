"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import ClientOptions, create_client

from little_fridge.adapters.supabase_food_repository import SupabaseFoodRepository
from little_fridge.adapters.supabase_fridge_repository import (
    SupabaseFridgeRepository,
)
from little_fridge.adapters.supabase_identity_provider import (
    SupabaseIdentityProvider,
)
from little_fridge.adapters.supabase_item_repository import SupabaseItemRepository
from little_fridge.adapters.supabase_user_repository import SupabaseUserRepository
from little_fridge.config import Settings
from little_fridge.services.auth import AuthService
from little_fridge.services.foods import FoodService
from little_fridge.services.fridges import FridgeService
from little_fridge.services.invite_codes import InviteCodeGenerator
from little_fridge.services.items import ItemService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    auth_service: AuthService
    food_service: FoodService
    fridge_service: FridgeService
    item_service: ItemService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    database_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    # Sessions from sign-in are returned to callers, never kept or refreshed here.
    auth_client = create_client(
        resolved_settings.supabase_url,
        resolved_settings.supabase_service_key,
        options=ClientOptions(auto_refresh_token=False, persist_session=False),
    )
    auth_service = AuthService(
        identity_provider=SupabaseIdentityProvider(auth_client),
        profile_repository=SupabaseUserRepository(database_client),
    )
    food_service = FoodService(SupabaseFoodRepository(database_client))
    fridge_service = FridgeService(
        repository=SupabaseFridgeRepository(database_client),
        code_generator=InviteCodeGenerator(length=resolved_settings.invite_code_length),
        max_code_attempts=resolved_settings.invite_code_max_attempts,
    )
    item_service = ItemService(
        repository=SupabaseItemRepository(database_client),
        fridge_service=fridge_service,
        food_service=food_service,
    )

    return AppContainer(
        settings=resolved_settings,
        auth_service=auth_service,
        food_service=food_service,
        fridge_service=fridge_service,
        item_service=item_service,
    )
