"""Pydantic models for API request bodies."""

import datetime as dt
from uuid import UUID

from pydantic import BaseModel, Field

from food_tracker.domain.dto import FoodDTO
from food_tracker.domain.foods import ServingType


class FoodRequest(FoodDTO):
    """Food submitted for create or update."""

    name: str = Field(min_length=1)
    serving_type_qty: float = Field(ge=0)


class AddFoodEatenRequest(BaseModel):
    """Request to log a food for a date."""

    food_id: UUID
    date: dt.date


class UpdateServingRequest(BaseModel):
    """Request to change the serving of a logged food."""

    serving_qty: float = Field(ge=0)
    serving_type: ServingType


class ResultMessageResponse(BaseModel):
    """Human-readable outcome of a food create or update."""

    message: str
