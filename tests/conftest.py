"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from uuid import UUID, uuid4

import pytest
from fastapi.testclient import TestClient

from little_fridge.api.app import create_app
from little_fridge.config import Settings
from little_fridge.containers import AppContainer
from little_fridge.domain.foods import Food
from little_fridge.domain.fridges import Fridge, FridgeMembership
from little_fridge.domain.items import FridgeItem, NewItem
from little_fridge.domain.models import AuthSession, AuthUser, UserProfile
from little_fridge.errors import IdentityProviderError, UniqueViolationError
from little_fridge.services.auth import (
    AuthService,
    IdentityProvider,
    UserProfileRepository,
)
from little_fridge.services.foods import FoodRepository, FoodService
from little_fridge.services.fridges import FridgeRepository, FridgeService
from little_fridge.services.invite_codes import CodeGenerator, InviteCodeGenerator
from little_fridge.services.items import ItemRepository, ItemService

_EPOCH = datetime(2024, 1, 1, tzinfo=UTC)


@dataclass
class Clock:
    """Monotonic fake clock so ordering assertions are deterministic."""

    ticks: int = 0

    def now(self) -> datetime:
        self.ticks += 1
        return _EPOCH + timedelta(seconds=self.ticks)


@dataclass
class MembershipRow:
    user_id: UUID
    fridge_id: UUID
    joined_at: datetime


@dataclass
class InMemoryFridgeRepository(FridgeRepository):
    """In-memory fridge repository enforcing the storage constraints."""

    clock: Clock = field(default_factory=Clock)
    fridges: dict[UUID, Fridge] = field(default_factory=dict)
    memberships: list[MembershipRow] = field(default_factory=list)

    def create_fridge_with_member(
        self, group_name: str, invite_code: str, user_id: UUID
    ) -> Fridge:
        if any(f.invite_code == invite_code for f in self.fridges.values()):
            raise UniqueViolationError("fridges_invite_code_key")
        fridge = Fridge(
            id=uuid4(),
            group_name=group_name,
            invite_code=invite_code,
            created_at=self.clock.now(),
        )
        self.fridges[fridge.id] = fridge
        self.memberships.append(
            MembershipRow(
                user_id=user_id, fridge_id=fridge.id, joined_at=fridge.created_at
            )
        )
        return fridge

    def get_by_invite_code(self, invite_code: str) -> Fridge | None:
        for fridge in self.fridges.values():
            if fridge.invite_code == invite_code:
                return fridge
        return None

    def add_member(self, fridge_id: UUID, user_id: UUID) -> None:
        if self.is_member(user_id, fridge_id):
            raise UniqueViolationError("user_fridges_user_fridge_key")
        self.memberships.append(
            MembershipRow(
                user_id=user_id, fridge_id=fridge_id, joined_at=self.clock.now()
            )
        )

    def list_memberships(self, user_id: UUID) -> list[FridgeMembership]:
        return [
            FridgeMembership(
                fridge=self.fridges[row.fridge_id], joined_at=row.joined_at
            )
            for row in self.memberships
            if row.user_id == user_id
        ]

    def is_member(self, user_id: UUID, fridge_id: UUID) -> bool:
        return any(
            row.user_id == user_id and row.fridge_id == fridge_id
            for row in self.memberships
        )

    def membership_count(self, user_id: UUID, fridge_id: UUID) -> int:
        return sum(
            1
            for row in self.memberships
            if row.user_id == user_id and row.fridge_id == fridge_id
        )


@dataclass
class InMemoryFoodRepository(FoodRepository):
    """In-memory food catalog."""

    foods: dict[str, Food] = field(
        default_factory=lambda: {
            food.name: food
            for food in [
                Food(name="Milk", category="dairy", shelf_life_days=7),
                Food(name="Eggs", category="protein", shelf_life_days=21),
                Food(name="Spinach", category="veggies", shelf_life_days=5),
                Food(name="Apple", category="fruits", shelf_life_days=30),
                Food(name="Cheddar", category="dairy", shelf_life_days=60),
            ]
        }
    )

    def list_foods(self) -> list[Food]:
        return list(self.foods.values())

    def list_by_category(self, category: str) -> list[Food]:
        return [food for food in self.foods.values() if food.category == category]

    def get_food(self, name: str) -> Food | None:
        return self.foods.get(name)


@dataclass
class InMemoryItemRepository(ItemRepository):
    """In-memory item repository embedding foods like the Supabase join."""

    food_repository: InMemoryFoodRepository
    clock: Clock = field(default_factory=Clock)
    items: dict[UUID, FridgeItem] = field(default_factory=dict)

    def list_items(self, fridge_id: UUID, category: str | None) -> list[FridgeItem]:
        return [
            item
            for item in self.items.values()
            if item.fridge_id == fridge_id
            and (category is None or (item.food and item.food.category == category))
        ]

    def create_items(
        self, fridge_id: UUID, added_by_user_id: UUID, items: list[NewItem]
    ) -> list[FridgeItem]:
        created = []
        for new_item in items:
            item = FridgeItem(
                id=uuid4(),
                fridge_id=fridge_id,
                food_name=str(new_item.food_name),
                quantity=int(new_item.quantity or 1),
                expires_at=new_item.expires_at,
                added_by_user_id=added_by_user_id,
                added_at=self.clock.now(),
                food=self.food_repository.get_food(str(new_item.food_name)),
            )
            self.items[item.id] = item
            created.append(item)
        return created

    def get_item(self, item_id: UUID) -> FridgeItem | None:
        return self.items.get(item_id)

    def update_quantity(self, item_id: UUID, quantity: int) -> FridgeItem | None:
        current = self.items.get(item_id)
        if current is None:
            return None
        updated = FridgeItem(
            id=current.id,
            fridge_id=current.fridge_id,
            food_name=current.food_name,
            quantity=quantity,
            expires_at=current.expires_at,
            added_by_user_id=current.added_by_user_id,
            added_at=current.added_at,
            food=current.food,
        )
        self.items[item_id] = updated
        return updated

    def delete_item(self, item_id: UUID) -> bool:
        return self.items.pop(item_id, None) is not None


@dataclass
class InMemoryUserRepository(UserProfileRepository):
    """In-memory user profile repository."""

    profiles: dict[UUID, UserProfile] = field(default_factory=dict)
    fail_writes: bool = False

    def create_profile(
        self, user_id: UUID, email: str | None, name: str | None
    ) -> UserProfile:
        if self.fail_writes:
            raise RuntimeError("Failed to create user in Supabase")
        profile = UserProfile(id=user_id, email=email, name=name)
        self.profiles[user_id] = profile
        return profile

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        return self.profiles.get(user_id)


@dataclass
class FakeIdentityProvider(IdentityProvider):
    """Identity provider that maps opaque tokens to users."""

    tokens: dict[str, AuthUser] = field(default_factory=dict)
    passwords: dict[str, tuple[str, AuthUser]] = field(default_factory=dict)
    signed_out: list[str] = field(default_factory=list)

    def register(self, token: str, name: str | None = None) -> AuthUser:
        user = AuthUser(
            id=uuid4(),
            email=f"{token}@example.com",
            name=name,
            created_at=_EPOCH,
        )
        self.tokens[token] = user
        return user

    def get_user(self, token: str) -> AuthUser | None:
        return self.tokens.get(token)

    def sign_up(
        self, email: str, password: str, name: str | None
    ) -> tuple[AuthUser, AuthSession | None]:
        if email in self.passwords:
            raise IdentityProviderError("User already registered")
        user = AuthUser(id=uuid4(), email=email, name=name, created_at=_EPOCH)
        self.passwords[email] = (password, user)
        return user, None

    def sign_in(self, email: str, password: str) -> tuple[AuthUser, AuthSession]:
        stored = self.passwords.get(email)
        if stored is None or stored[0] != password:
            raise IdentityProviderError("Invalid login credentials")
        token = f"token-{email}"
        self.tokens[token] = stored[1]
        return stored[1], AuthSession(
            access_token=token, refresh_token="refresh", expires_at=None
        )

    def sign_out(self, token: str) -> None:
        self.signed_out.append(token)
        self.tokens.pop(token, None)


@dataclass
class FixedCodeGenerator(CodeGenerator):
    """Yields preset codes, repeating the last one when exhausted."""

    codes: list[str]
    calls: int = 0

    def generate(self) -> str:
        index = min(self.calls, len(self.codes) - 1)
        self.calls += 1
        return self.codes[index]


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key=(
            "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9."
            "eyJyb2xlIjoic2VydmljZV9yb2xlIn0."
            "c2lnbmF0dXJl"
        ),
    )


@pytest.fixture
def fridge_repository() -> InMemoryFridgeRepository:
    return InMemoryFridgeRepository()


@pytest.fixture
def food_repository() -> InMemoryFoodRepository:
    return InMemoryFoodRepository()


@pytest.fixture
def item_repository(food_repository: InMemoryFoodRepository) -> InMemoryItemRepository:
    return InMemoryItemRepository(food_repository=food_repository)


@pytest.fixture
def identity_provider() -> FakeIdentityProvider:
    return FakeIdentityProvider()


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def fridge_service(fridge_repository: InMemoryFridgeRepository) -> FridgeService:
    return FridgeService(
        repository=fridge_repository, code_generator=InviteCodeGenerator()
    )


@pytest.fixture
def food_service(food_repository: InMemoryFoodRepository) -> FoodService:
    return FoodService(food_repository)


@pytest.fixture
def item_service(
    item_repository: InMemoryItemRepository,
    fridge_service: FridgeService,
    food_service: FoodService,
) -> ItemService:
    return ItemService(
        repository=item_repository,
        fridge_service=fridge_service,
        food_service=food_service,
    )


@pytest.fixture
def container(  # noqa: PLR0913
    settings: Settings,
    identity_provider: FakeIdentityProvider,
    user_repository: InMemoryUserRepository,
    food_service: FoodService,
    fridge_service: FridgeService,
    item_service: ItemService,
) -> AppContainer:
    return AppContainer(
        settings=settings,
        auth_service=AuthService(
            identity_provider=identity_provider,
            profile_repository=user_repository,
        ),
        food_service=food_service,
        fridge_service=fridge_service,
        item_service=item_service,
    )


@pytest.fixture
def client(container: AppContainer) -> TestClient:
    return TestClient(create_app(container), raise_server_exceptions=False)


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
