"""Domain models for foods and logged consumption."""

from dataclasses import dataclass
from datetime import date
from enum import StrEnum
from uuid import UUID


class ServingType(StrEnum):
    """Units a serving can be measured in."""

    OUNCE = "ounce"
    CUP = "cup"
    POUND = "pound"
    PINT = "pint"
    TABLESPOON = "tablespoon"
    TEASPOON = "teaspoon"
    GRAM = "gram"
    CUSTOM = "custom"

    @property
    def ounces(self) -> float | None:
        """Size of one unit in ounces, or None for custom servings."""
        return _OUNCES_PER_UNIT.get(self)


_OUNCES_PER_UNIT: dict[ServingType, float] = {
    ServingType.OUNCE: 1.0,
    ServingType.CUP: 8.0,
    ServingType.POUND: 16.0,
    ServingType.PINT: 16.0,
    ServingType.TABLESPOON: 0.5,
    ServingType.TEASPOON: 1.0 / 6.0,
    ServingType.GRAM: 0.0352739619,
}


@dataclass(frozen=True)
class GlobalFood:
    """Ownership of a food shared with every user."""


@dataclass(frozen=True)
class OwnedBy:
    """Ownership of a food customized by a single user."""

    user_id: UUID


Ownership = GlobalFood | OwnedBy


def ownership_from_owner_id(owner_id: UUID | None) -> Ownership:
    """Build an ownership value from a nullable owner column."""
    if owner_id is None:
        return GlobalFood()
    return OwnedBy(owner_id)


def owner_id_of(ownership: Ownership) -> UUID | None:
    """Return the owning user id, or None for global foods."""
    if isinstance(ownership, OwnedBy):
        return ownership.user_id
    return None


@dataclass(frozen=True)
class NutritionFacts:
    """Nutrients for one default serving of a food."""

    calories: float = 0.0
    fat: float = 0.0
    saturated_fat: float = 0.0
    carbs: float = 0.0
    fiber: float = 0.0
    sugar: float = 0.0
    protein: float = 0.0
    sodium: float = 0.0

    def scaled(self, ratio: float) -> "NutritionFacts":
        """Return the facts multiplied by a serving ratio."""
        return NutritionFacts(
            calories=self.calories * ratio,
            fat=self.fat * ratio,
            saturated_fat=self.saturated_fat * ratio,
            carbs=self.carbs * ratio,
            fiber=self.fiber * ratio,
            sugar=self.sugar * ratio,
            protein=self.protein * ratio,
            sodium=self.sodium * ratio,
        )


@dataclass(frozen=True)
class Food:
    """A food in the catalog, either global or owned by a user."""

    id: UUID
    ownership: Ownership
    name: str
    default_serving_type: ServingType
    serving_type_qty: float
    facts: NutritionFacts

    @property
    def owner_id(self) -> UUID | None:
        return owner_id_of(self.ownership)

    def is_owned_by(self, user_id: UUID) -> bool:
        return isinstance(self.ownership, OwnedBy) and self.ownership.user_id == user_id


@dataclass(frozen=True)
class FoodEaten:
    """One logged consumption of a food by a user on a date."""

    id: UUID
    user_id: UUID
    food: Food
    date: date
    serving_type: ServingType
    serving_qty: float

    @property
    def ratio(self) -> float:
        """Multiplier from the food's default serving to this serving."""
        food = self.food
        if food.serving_type_qty == 0:
            return 0.0
        eaten_ounces = self.serving_type.ounces
        default_ounces = food.default_serving_type.ounces
        if (
            self.serving_type == food.default_serving_type
            or eaten_ounces is None
            or default_ounces is None
        ):
            return self.serving_qty / food.serving_type_qty
        return (self.serving_qty * eaten_ounces) / (
            food.serving_type_qty * default_ounces
        )

    @property
    def facts(self) -> NutritionFacts:
        """Nutrients consumed in this entry."""
        return self.food.facts.scaled(self.ratio)
