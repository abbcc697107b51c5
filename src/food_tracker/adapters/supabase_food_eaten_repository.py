"""Supabase repository for food eaten entries."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from food_tracker.adapters.supabase_food_repository import FOOD_COLUMNS, parse_food
from food_tracker.domain.foods import Food, FoodEaten, ServingType
from food_tracker.services.foods import FoodEatenRepository

FOOD_EATEN_COLUMNS = (
    f"id, user_id, food_id, date, serving_type, serving_qty, foods({FOOD_COLUMNS})"
)


@dataclass
class SupabaseFoodEatenRepository(FoodEatenRepository):
    """Supabase implementation for the food eaten log."""

    client: Client

    def get_food_eaten(self, food_eaten_id: UUID) -> FoodEaten | None:
        """Return an entry by id, if present."""
        response = (
            self.client.table("foods_eaten")
            .select(FOOD_EATEN_COLUMNS)
            .eq("id", str(food_eaten_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_food_eaten(response.data[0])

    def list_by_user_and_date(self, user_id: UUID, eaten_on: date) -> list[FoodEaten]:
        """Return entries for a user on a date."""
        response = (
            self.client.table("foods_eaten")
            .select(FOOD_EATEN_COLUMNS)
            .eq("user_id", str(user_id))
            .eq("date", eaten_on.isoformat())
            .execute()
        )
        return [_parse_food_eaten(row) for row in response.data or []]

    def list_foods_eaten_in_range(
        self, user_id: UUID, start: date, end: date
    ) -> list[Food]:
        """Return distinct foods eaten by a user between two dates, inclusive."""
        response = (
            self.client.table("foods_eaten")
            .select(f"food_id, foods({FOOD_COLUMNS})")
            .eq("user_id", str(user_id))
            .gte("date", start.isoformat())
            .lte("date", end.isoformat())
            .execute()
        )
        foods: dict[UUID, Food] = {}
        for row in response.data or []:
            food = parse_food(row["foods"])
            foods.setdefault(food.id, food)
        return sorted(foods.values(), key=lambda food: food.name)

    def save_food_eaten(self, food_eaten: FoodEaten) -> None:
        """Insert or replace an entry."""
        response = (
            self.client.table("foods_eaten")
            .upsert(
                {
                    "id": str(food_eaten.id),
                    "user_id": str(food_eaten.user_id),
                    "food_id": str(food_eaten.food.id),
                    "date": food_eaten.date.isoformat(),
                    "serving_type": food_eaten.serving_type.value,
                    "serving_qty": food_eaten.serving_qty,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to save food eaten entry")

    def delete_food_eaten(self, food_eaten_id: UUID) -> None:
        """Delete an entry."""
        self.client.table("foods_eaten").delete().eq(
            "id", str(food_eaten_id)
        ).execute()


def _parse_food_eaten(row: dict[str, object]) -> FoodEaten:
    return FoodEaten(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        food=parse_food(row["foods"]),
        date=date.fromisoformat(str(row["date"])),
        serving_type=ServingType(row.get("serving_type") or ServingType.CUSTOM),
        serving_qty=float(row.get("serving_qty") or 0.0),
    )
