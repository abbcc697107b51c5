"""Conversions from domain records to transfer objects."""

from food_tracker.domain.dto import FoodDTO, FoodEatenDTO
from food_tracker.domain.foods import Food, FoodEaten


def food_to_dto(food: Food) -> FoodDTO:
    """Convert a food record to its DTO."""
    facts = food.facts
    return FoodDTO(
        id=food.id,
        owner_id=food.owner_id,
        name=food.name,
        default_serving_type=food.default_serving_type,
        serving_type_qty=food.serving_type_qty,
        calories=facts.calories,
        fat=facts.fat,
        saturated_fat=facts.saturated_fat,
        carbs=facts.carbs,
        fiber=facts.fiber,
        sugar=facts.sugar,
        protein=facts.protein,
        sodium=facts.sodium,
    )


def food_eaten_to_dto(food_eaten: FoodEaten) -> FoodEatenDTO:
    """Convert a food eaten record to its DTO, scaling nutrients."""
    facts = food_eaten.facts
    return FoodEatenDTO(
        id=food_eaten.id,
        user_id=food_eaten.user_id,
        food=food_to_dto(food_eaten.food),
        date=food_eaten.date,
        serving_type=food_eaten.serving_type,
        serving_qty=food_eaten.serving_qty,
        calories=facts.calories,
        fat=facts.fat,
        saturated_fat=facts.saturated_fat,
        carbs=facts.carbs,
        fiber=facts.fiber,
        sugar=facts.sugar,
        protein=facts.protein,
        sodium=facts.sodium,
    )
