"""Pydantic transfer objects for foods and logged consumption."""

import datetime as dt
from uuid import UUID

from pydantic import BaseModel

from food_tracker.domain.foods import ServingType


class UserDTO(BaseModel):
    """User payload."""

    id: UUID
    username: str | None = None


class FoodDTO(BaseModel):
    """Food payload as stored and displayed."""

    id: UUID | None = None
    owner_id: UUID | None = None
    name: str
    default_serving_type: ServingType
    serving_type_qty: float
    calories: float = 0.0
    fat: float = 0.0
    saturated_fat: float = 0.0
    carbs: float = 0.0
    fiber: float = 0.0
    sugar: float = 0.0
    protein: float = 0.0
    sodium: float = 0.0


class FoodEatenDTO(BaseModel):
    """Logged consumption payload with nutrients scaled to the serving."""

    id: UUID
    user_id: UUID
    food: FoodDTO
    date: dt.date
    serving_type: ServingType
    serving_qty: float
    calories: float
    fat: float
    saturated_fat: float
    carbs: float
    fiber: float
    sugar: float
    protein: float
    sodium: float
