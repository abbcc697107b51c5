"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from food_tracker.adapters.supabase_food_eaten_repository import (
    SupabaseFoodEatenRepository,
)
from food_tracker.adapters.supabase_food_repository import SupabaseFoodRepository
from food_tracker.adapters.supabase_user_repository import SupabaseUserRepository
from food_tracker.config import Settings
from food_tracker.services.foods import FoodService
from food_tracker.services.users import UserRepository


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_repository: UserRepository
    food_service: FoodService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    user_repository = SupabaseUserRepository(supabase_client)
    food_service = FoodService(
        user_repository=user_repository,
        food_repository=SupabaseFoodRepository(supabase_client),
        food_eaten_repository=SupabaseFoodEatenRepository(supabase_client),
        recent_window_days=resolved_settings.recent_window_days,
    )
    return AppContainer(
        settings=resolved_settings,
        user_repository=user_repository,
        food_service=food_service,
    )
