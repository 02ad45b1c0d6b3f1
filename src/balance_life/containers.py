"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from balance_life.adapters.supabase_meal_repository import SupabaseMealRepository
from balance_life.adapters.supabase_user_repository import SupabaseUserRepository
from balance_life.adapters.supabase_workout_repository import (
    SupabaseWorkoutRepository,
)
from balance_life.config import Settings
from balance_life.services.cache import TTLPackageCache
from balance_life.services.meals import MealService
from balance_life.services.users import UserService
from balance_life.services.workouts import WorkoutService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_service: UserService
    meal_service: MealService
    workout_service: WorkoutService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    user_repository = SupabaseUserRepository(supabase_client)
    meal_repository = SupabaseMealRepository(supabase_client)
    workout_repository = SupabaseWorkoutRepository(supabase_client)
    package_cache = TTLPackageCache(
        ttl_seconds=resolved_settings.package_cache_ttl_seconds
    )

    user_service = UserService(user_repository)
    meal_service = MealService(repository=meal_repository, cache=package_cache)
    workout_service = WorkoutService(
        repository=workout_repository,
        user_repository=user_repository,
        cache=package_cache,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=resolved_settings,
        user_service=user_service,
        meal_service=meal_service,
        workout_service=workout_service,
        close_resources=close_resources,
    )
