"""Food tracking API endpoints with simple token auth."""

from __future__ import annotations

from datetime import date  # noqa: TC003
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Header, HTTPException, Query, Request, status
from fastapi.responses import JSONResponse

from food_tracker.api.schemas import (
    AddFoodEatenRequest,
    FoodRequest,
    ResultMessageResponse,
    UpdateServingRequest,
)
from food_tracker.domain.dto import FoodDTO, FoodEatenDTO, UserDTO
from food_tracker.services.foods import ResultMessage

if TYPE_CHECKING:
    from food_tracker.containers import AppContainer

router = APIRouter(tags=["foods"])

_RESULT_STATUS = {
    ResultMessage.SUCCESS: status.HTTP_200_OK,
    ResultMessage.DUPLICATE_NAME: status.HTTP_409_CONFLICT,
    ResultMessage.UNAUTHORIZED: status.HTTP_403_FORBIDDEN,
}


def _get_api_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.api_token


async def require_token(
    x_api_token: str | None = Header(default=None),
    api_token: str = Depends(_get_api_token),
) -> None:
    """Ensure requests include a valid API token."""
    if not x_api_token or x_api_token != api_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


def _container(request: Request) -> AppContainer:
    return request.app.state.container


def _acting_user(container: AppContainer, user_id: UUID) -> UserDTO:
    user = container.user_repository.get_user(user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return UserDTO(id=user.id, username=user.username)


def _result_response(result: ResultMessage) -> JSONResponse:
    return JSONResponse(
        status_code=_RESULT_STATUS[result],
        content=ResultMessageResponse(message=result.value).model_dump(),
    )


@router.get(
    "/users/{user_id}/foods-eaten",
    dependencies=[Depends(require_token)],
)
async def foods_eaten_on_date(
    user_id: UUID, request: Request, day: date = Query(alias="date")
) -> list[FoodEatenDTO]:
    """Return the foods a user logged on a date."""
    return _container(request).food_service.find_eaten_on_date(user_id, day)


@router.get(
    "/users/{user_id}/foods-eaten/recent",
    dependencies=[Depends(require_token)],
)
async def foods_eaten_recently(
    user_id: UUID, request: Request, day: date = Query(alias="date")
) -> list[FoodDTO]:
    """Return distinct foods the user ate recently."""
    return _container(request).food_service.find_eaten_recently(user_id, day)


@router.post(
    "/users/{user_id}/foods-eaten",
    dependencies=[Depends(require_token)],
    response_model=None,
)
async def add_food_eaten(
    user_id: UUID, body: AddFoodEatenRequest, request: Request
) -> JSONResponse:
    """Log a food for a date."""
    created = _container(request).food_service.add_food_eaten(
        user_id, body.food_id, body.date
    )
    if created is None:
        return JSONResponse(
            status_code=status.HTTP_200_OK, content={"status": "unchanged"}
        )
    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content=created.model_dump(mode="json"),
    )


@router.get("/foods-eaten/{food_eaten_id}", dependencies=[Depends(require_token)])
async def get_food_eaten(food_eaten_id: UUID, request: Request) -> FoodEatenDTO:
    """Return a logged food by id."""
    entry = _container(request).food_service.find_food_eaten_by_id(food_eaten_id)
    if entry is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return entry


@router.patch("/foods-eaten/{food_eaten_id}", dependencies=[Depends(require_token)])
async def update_food_eaten(
    food_eaten_id: UUID, body: UpdateServingRequest, request: Request
) -> dict[str, str]:
    """Change the serving of a logged food."""
    updated = _container(request).food_service.update_food_eaten(
        food_eaten_id, body.serving_qty, body.serving_type
    )
    if not updated:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return {"status": "ok"}


@router.delete("/foods-eaten/{food_eaten_id}", dependencies=[Depends(require_token)])
async def delete_food_eaten(food_eaten_id: UUID, request: Request) -> dict[str, str]:
    """Remove a logged food."""
    if not _container(request).food_service.delete_food_eaten(food_eaten_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return {"status": "ok"}


@router.get("/users/{user_id}/foods", dependencies=[Depends(require_token)])
async def search_foods(
    user_id: UUID, request: Request, q: str = Query(default="")
) -> list[FoodDTO]:
    """Search global foods and the user's own foods by name."""
    return _container(request).food_service.search_foods(user_id, q)


@router.get("/foods/{food_id}", dependencies=[Depends(require_token)])
async def get_food(food_id: UUID, request: Request) -> FoodDTO:
    """Return a food by id."""
    food = _container(request).food_service.get_food_by_id(food_id)
    if food is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return food


@router.post(
    "/users/{user_id}/foods",
    dependencies=[Depends(require_token)],
    response_model=ResultMessageResponse,
)
async def create_food(
    user_id: UUID, body: FoodRequest, request: Request
) -> JSONResponse:
    """Create a food owned by the user."""
    container = _container(request)
    result = container.food_service.create_food(body, _acting_user(container, user_id))
    return _result_response(result)


@router.put(
    "/users/{user_id}/foods/{food_id}",
    dependencies=[Depends(require_token)],
    response_model=ResultMessageResponse,
)
async def update_food(
    user_id: UUID, food_id: UUID, body: FoodRequest, request: Request
) -> JSONResponse:
    """Update a food, copying global foods into the user's catalog."""
    container = _container(request)
    acting_user = _acting_user(container, user_id)
    result = container.food_service.update_food(
        body.model_copy(update={"id": food_id}), acting_user
    )
    return _result_response(result)
