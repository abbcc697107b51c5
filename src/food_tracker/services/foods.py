"""Services for the food catalog and the food eaten log."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, timedelta
from enum import StrEnum
from typing import Protocol
from uuid import UUID, uuid4

from food_tracker.domain.dto import FoodDTO, FoodEatenDTO, UserDTO
from food_tracker.domain.foods import (
    Food,
    FoodEaten,
    GlobalFood,
    NutritionFacts,
    OwnedBy,
    ServingType,
    ownership_from_owner_id,
)
from food_tracker.services.converters import food_eaten_to_dto, food_to_dto
from food_tracker.services.users import UserRepository

_logger = logging.getLogger(__name__)

RECENT_WINDOW_DAYS = 14


class ResultMessage(StrEnum):
    """Outcome of a food create or update, as shown to the user."""

    SUCCESS = "Success!"
    DUPLICATE_NAME = "Error:  You already have another customized food with this name."
    UNAUTHORIZED = (
        "Error:  You are attempting to modify another user's customized food."
    )


class FoodRepository(Protocol):
    """Persistence interface for foods."""

    def get_food(self, food_id: UUID) -> Food | None:
        """Return a food by id, if present."""

    def find_by_owner_and_name(self, user_id: UUID, name: str) -> list[Food]:
        """Return foods owned by the user with exactly this name."""

    def search_by_name(self, user_id: UUID | None, query: str) -> list[Food]:
        """Return global and user-owned foods whose name matches the query."""

    def save_food(self, food: Food) -> None:
        """Insert or replace a food."""


class FoodEatenRepository(Protocol):
    """Persistence interface for food eaten entries."""

    def get_food_eaten(self, food_eaten_id: UUID) -> FoodEaten | None:
        """Return an entry by id, if present."""

    def list_by_user_and_date(self, user_id: UUID, eaten_on: date) -> list[FoodEaten]:
        """Return entries for a user on a date."""

    def list_foods_eaten_in_range(
        self, user_id: UUID, start: date, end: date
    ) -> list[Food]:
        """Return distinct foods eaten by a user between two dates, inclusive."""

    def save_food_eaten(self, food_eaten: FoodEaten) -> None:
        """Insert or replace an entry."""

    def delete_food_eaten(self, food_eaten_id: UUID) -> None:
        """Delete an entry."""


@dataclass
class FoodService:
    """Application service for food tracking."""

    user_repository: UserRepository
    food_repository: FoodRepository
    food_eaten_repository: FoodEatenRepository
    food_converter: Callable[[Food], FoodDTO] = food_to_dto
    food_eaten_converter: Callable[[FoodEaten], FoodEatenDTO] = food_eaten_to_dto
    recent_window_days: int = RECENT_WINDOW_DAYS

    def find_eaten_on_date(self, user_id: UUID, eaten_on: date) -> list[FoodEatenDTO]:
        """Return everything the user logged on a date."""
        user = self.user_repository.get_user(user_id)
        if user is None:
            return []
        entries = self.food_eaten_repository.list_by_user_and_date(user.id, eaten_on)
        return [self.food_eaten_converter(entry) for entry in entries]

    def find_eaten_recently(self, user_id: UUID, current_date: date) -> list[FoodDTO]:
        """Return distinct foods eaten within the recent window ending today."""
        user = self.user_repository.get_user(user_id)
        if user is None:
            return []
        start = current_date - timedelta(days=self.recent_window_days)
        foods = self.food_eaten_repository.list_foods_eaten_in_range(
            user.id, start, current_date
        )
        return [self.food_converter(food) for food in _distinct_sorted(foods)]

    def find_food_eaten_by_id(self, food_eaten_id: UUID) -> FoodEatenDTO | None:
        """Return a food eaten entry by id."""
        entry = self.food_eaten_repository.get_food_eaten(food_eaten_id)
        if entry is None:
            return None
        return self.food_eaten_converter(entry)

    def add_food_eaten(
        self, user_id: UUID, food_id: UUID, eaten_on: date
    ) -> FoodEatenDTO | None:
        """Log a food for a date unless it is already logged that day.

        The new entry takes the food's default serving. Returns None when
        nothing was written.
        """
        already_eaten = any(
            entry.food.id == food_id
            for entry in self.find_eaten_on_date(user_id, eaten_on)
        )
        if already_eaten:
            return None
        user = self.user_repository.get_user(user_id)
        food = self.food_repository.get_food(food_id)
        if user is None or food is None:
            _logger.warning(
                "Skipping food eaten: user_id=%s food_id=%s not found",
                user_id,
                food_id,
            )
            return None
        entry = FoodEaten(
            id=uuid4(),
            user_id=user.id,
            food=food,
            date=eaten_on,
            serving_type=food.default_serving_type,
            serving_qty=food.serving_type_qty,
        )
        self.food_eaten_repository.save_food_eaten(entry)
        _logger.info("Food eaten added: id=%s user_id=%s", entry.id, user.id)
        return self.food_eaten_converter(entry)

    def update_food_eaten(
        self, food_eaten_id: UUID, serving_qty: float, serving_type: ServingType
    ) -> bool:
        """Overwrite the serving of a food eaten entry."""
        entry = self.food_eaten_repository.get_food_eaten(food_eaten_id)
        if entry is None:
            _logger.warning("Food eaten not found: id=%s", food_eaten_id)
            return False
        self.food_eaten_repository.save_food_eaten(
            FoodEaten(
                id=entry.id,
                user_id=entry.user_id,
                food=entry.food,
                date=entry.date,
                serving_type=serving_type,
                serving_qty=serving_qty,
            )
        )
        _logger.info("Food eaten updated: id=%s", entry.id)
        return True

    def delete_food_eaten(self, food_eaten_id: UUID) -> bool:
        """Remove a food eaten entry."""
        entry = self.food_eaten_repository.get_food_eaten(food_eaten_id)
        if entry is None:
            _logger.warning("Food eaten not found: id=%s", food_eaten_id)
            return False
        self.food_eaten_repository.delete_food_eaten(entry.id)
        _logger.info("Food eaten deleted: id=%s", entry.id)
        return True

    def search_foods(self, user_id: UUID, query: str) -> list[FoodDTO]:
        """Search global foods and the user's own foods by name."""
        user = self.user_repository.get_user(user_id)
        foods = self.food_repository.search_by_name(
            user.id if user else None, query
        )
        return [self.food_converter(food) for food in foods]

    def get_food_by_id(self, food_id: UUID) -> FoodDTO | None:
        """Return a food by id."""
        food = self.food_repository.get_food(food_id)
        if food is None:
            return None
        return self.food_converter(food)

    def update_food(self, food_dto: FoodDTO, acting_user: UserDTO) -> ResultMessage:
        """Update a food, copying global foods into the acting user's catalog."""
        stored = (
            self.food_repository.get_food(food_dto.id)
            if food_dto.id is not None
            else None
        )
        ownership = (
            stored.ownership
            if stored is not None
            else ownership_from_owner_id(food_dto.owner_id)
        )
        if isinstance(ownership, OwnedBy) and ownership.user_id != acting_user.id:
            return ResultMessage.UNAUTHORIZED

        same_name = self.food_repository.find_by_owner_and_name(
            acting_user.id, food_dto.name
        )
        if any(food.id != food_dto.id for food in same_name):
            return ResultMessage.DUPLICATE_NAME

        if isinstance(ownership, GlobalFood):
            food_id = uuid4()
        else:
            food_id = food_dto.id or uuid4()
        food = _food_from_dto(food_id, acting_user.id, food_dto)
        self.food_repository.save_food(food)
        _logger.info(
            "Food saved: id=%s user_id=%s copied=%s",
            food.id,
            acting_user.id,
            isinstance(ownership, GlobalFood),
        )
        return ResultMessage.SUCCESS

    def create_food(self, food_dto: FoodDTO, acting_user: UserDTO) -> ResultMessage:
        """Create a food owned by the acting user."""
        if self.food_repository.find_by_owner_and_name(acting_user.id, food_dto.name):
            return ResultMessage.DUPLICATE_NAME
        food = _food_from_dto(food_dto.id or uuid4(), acting_user.id, food_dto)
        self.food_repository.save_food(food)
        _logger.info("Food created: id=%s user_id=%s", food.id, acting_user.id)
        return ResultMessage.SUCCESS


def _food_from_dto(food_id: UUID, owner_id: UUID, food_dto: FoodDTO) -> Food:
    return Food(
        id=food_id,
        ownership=OwnedBy(owner_id),
        name=food_dto.name,
        default_serving_type=food_dto.default_serving_type,
        serving_type_qty=food_dto.serving_type_qty,
        facts=NutritionFacts(
            calories=food_dto.calories,
            fat=food_dto.fat,
            saturated_fat=food_dto.saturated_fat,
            carbs=food_dto.carbs,
            fiber=food_dto.fiber,
            sugar=food_dto.sugar,
            protein=food_dto.protein,
            sodium=food_dto.sodium,
        ),
    )


def _distinct_sorted(foods: list[Food]) -> list[Food]:
    """Drop repeated foods and order the rest by name."""
    unique = {food.id: food for food in foods}
    return sorted(unique.values(), key=lambda food: food.name)
