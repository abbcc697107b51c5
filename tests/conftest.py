"""Shared test fixtures."""

import logging
from dataclasses import dataclass, field
from datetime import date
from uuid import UUID, uuid4

import pytest

from food_tracker.config import Settings
from food_tracker.containers import AppContainer
from food_tracker.domain.foods import (
    Food,
    FoodEaten,
    GlobalFood,
    NutritionFacts,
    OwnedBy,
    Ownership,
    ServingType,
)
from food_tracker.domain.models import UserRecord
from food_tracker.services.foods import (
    FoodEatenRepository,
    FoodRepository,
    FoodService,
)
from food_tracker.services.users import UserRepository


@dataclass
class InMemoryUserRepository(UserRepository):
    """In-memory user repository for tests."""

    users: dict[UUID, UserRecord] = field(default_factory=dict)

    def get_user(self, user_id: UUID) -> UserRecord | None:
        return self.users.get(user_id)

    def add(self, username: str) -> UserRecord:
        user = UserRecord(id=uuid4(), username=username)
        self.users[user.id] = user
        return user


@dataclass
class InMemoryFoodRepository(FoodRepository):
    """In-memory food repository for tests."""

    foods: dict[UUID, Food] = field(default_factory=dict)

    def get_food(self, food_id: UUID) -> Food | None:
        return self.foods.get(food_id)

    def find_by_owner_and_name(self, user_id: UUID, name: str) -> list[Food]:
        return [
            food
            for food in self.foods.values()
            if food.is_owned_by(user_id) and food.name == name
        ]

    def search_by_name(self, user_id: UUID | None, query: str) -> list[Food]:
        query_lower = query.lower()
        results = [
            food
            for food in self.foods.values()
            if (food.owner_id is None or food.owner_id == user_id)
            and query_lower in food.name.lower()
        ]
        return sorted(results, key=lambda food: food.name)

    def save_food(self, food: Food) -> None:
        self.foods[food.id] = food


@dataclass
class InMemoryFoodEatenRepository(FoodEatenRepository):
    """In-memory food eaten repository for tests."""

    entries: dict[UUID, FoodEaten] = field(default_factory=dict)

    def get_food_eaten(self, food_eaten_id: UUID) -> FoodEaten | None:
        return self.entries.get(food_eaten_id)

    def list_by_user_and_date(self, user_id: UUID, eaten_on: date) -> list[FoodEaten]:
        return [
            entry
            for entry in self.entries.values()
            if entry.user_id == user_id and entry.date == eaten_on
        ]

    def list_foods_eaten_in_range(
        self, user_id: UUID, start: date, end: date
    ) -> list[Food]:
        return [
            entry.food
            for entry in self.entries.values()
            if entry.user_id == user_id and start <= entry.date <= end
        ]

    def save_food_eaten(self, food_eaten: FoodEaten) -> None:
        self.entries[food_eaten.id] = food_eaten

    def delete_food_eaten(self, food_eaten_id: UUID) -> None:
        self.entries.pop(food_eaten_id, None)


def make_food(  # noqa: PLR0913
    name: str,
    ownership: Ownership | None = None,
    serving_type: ServingType = ServingType.CUP,
    serving_qty: float = 1.0,
    calories: float = 100.0,
    protein: float = 5.0,
) -> Food:
    return Food(
        id=uuid4(),
        ownership=ownership or GlobalFood(),
        name=name,
        default_serving_type=serving_type,
        serving_type_qty=serving_qty,
        facts=NutritionFacts(calories=calories, protein=protein),
    )


def owned_food(name: str, user_id: UUID, **kwargs: object) -> Food:
    return make_food(name, ownership=OwnedBy(user_id), **kwargs)


@pytest.fixture
def app_logs(
    caplog: pytest.LogCaptureFixture, monkeypatch: pytest.MonkeyPatch
) -> pytest.LogCaptureFixture:
    """Capture food_tracker records even when propagation is disabled."""
    monkeypatch.setattr(logging.getLogger("food_tracker"), "propagate", True)
    caplog.set_level(logging.INFO, logger="food_tracker")
    return caplog


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
        api_token="api-token",
    )


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def food_repository() -> InMemoryFoodRepository:
    return InMemoryFoodRepository()


@pytest.fixture
def food_eaten_repository() -> InMemoryFoodEatenRepository:
    return InMemoryFoodEatenRepository()


@pytest.fixture
def food_service(
    user_repository: InMemoryUserRepository,
    food_repository: InMemoryFoodRepository,
    food_eaten_repository: InMemoryFoodEatenRepository,
) -> FoodService:
    return FoodService(
        user_repository=user_repository,
        food_repository=food_repository,
        food_eaten_repository=food_eaten_repository,
    )


@pytest.fixture
def container(
    settings: Settings,
    user_repository: InMemoryUserRepository,
    food_service: FoodService,
) -> AppContainer:
    return AppContainer(
        settings=settings,
        user_repository=user_repository,
        food_service=food_service,
    )
