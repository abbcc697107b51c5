"""Supabase implementation for the food catalog."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from food_tracker.domain.foods import (
    Food,
    NutritionFacts,
    ServingType,
    ownership_from_owner_id,
)
from food_tracker.services.foods import FoodRepository

FOOD_COLUMNS = (
    "id, owner_id, name, default_serving_type, serving_type_qty, calories, fat, "
    "saturated_fat, carbs, fiber, sugar, protein, sodium"
)


@dataclass
class SupabaseFoodRepository(FoodRepository):
    """Supabase-backed repository for global and user-owned foods."""

    client: Client

    def get_food(self, food_id: UUID) -> Food | None:
        """Return a food by id, if present."""
        response = (
            self.client.table("foods")
            .select(FOOD_COLUMNS)
            .eq("id", str(food_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return parse_food(response.data[0])

    def find_by_owner_and_name(self, user_id: UUID, name: str) -> list[Food]:
        """Return foods owned by the user with exactly this name."""
        response = (
            self.client.table("foods")
            .select(FOOD_COLUMNS)
            .eq("owner_id", str(user_id))
            .eq("name", name)
            .execute()
        )
        return [parse_food(row) for row in response.data or []]

    def search_by_name(self, user_id: UUID | None, query: str) -> list[Food]:
        """Return global and user-owned foods whose name matches the query."""
        pattern = f"%{query}%"
        global_response = (
            self.client.table("foods")
            .select(FOOD_COLUMNS)
            .is_("owner_id", "null")
            .ilike("name", pattern)
            .execute()
        )
        foods = [parse_food(row) for row in global_response.data or []]
        if user_id is not None:
            owned_response = (
                self.client.table("foods")
                .select(FOOD_COLUMNS)
                .eq("owner_id", str(user_id))
                .ilike("name", pattern)
                .execute()
            )
            foods.extend(parse_food(row) for row in owned_response.data or [])
        return sorted(foods, key=lambda food: food.name)

    def save_food(self, food: Food) -> None:
        """Insert or replace a food."""
        response = self.client.table("foods").upsert(_food_payload(food)).execute()
        if not response.data:
            raise RuntimeError("Failed to save food")


def _food_payload(food: Food) -> dict[str, object]:
    facts = food.facts
    return {
        "id": str(food.id),
        "owner_id": str(food.owner_id) if food.owner_id else None,
        "name": food.name,
        "default_serving_type": food.default_serving_type.value,
        "serving_type_qty": food.serving_type_qty,
        "calories": facts.calories,
        "fat": facts.fat,
        "saturated_fat": facts.saturated_fat,
        "carbs": facts.carbs,
        "fiber": facts.fiber,
        "sugar": facts.sugar,
        "protein": facts.protein,
        "sodium": facts.sodium,
    }


def parse_food(row: dict[str, object]) -> Food:
    """Parse a food row into a domain model."""
    owner_raw = row.get("owner_id")
    return Food(
        id=UUID(str(row["id"])),
        ownership=ownership_from_owner_id(UUID(str(owner_raw)) if owner_raw else None),
        name=str(row.get("name", "")),
        default_serving_type=ServingType(
            row.get("default_serving_type") or ServingType.CUSTOM
        ),
        serving_type_qty=float(row.get("serving_type_qty") or 0.0),
        facts=NutritionFacts(
            calories=float(row.get("calories") or 0.0),
            fat=float(row.get("fat") or 0.0),
            saturated_fat=float(row.get("saturated_fat") or 0.0),
            carbs=float(row.get("carbs") or 0.0),
            fiber=float(row.get("fiber") or 0.0),
            sugar=float(row.get("sugar") or 0.0),
            protein=float(row.get("protein") or 0.0),
            sodium=float(row.get("sodium") or 0.0),
        ),
    )
