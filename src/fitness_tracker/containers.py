"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from fitness_tracker.adapters.fdc_client import HttpxFdcClient
from fitness_tracker.adapters.supabase_active_session_repository import (
    SupabaseActiveSessionRepository,
)
from fitness_tracker.adapters.supabase_admin_repository import SupabaseAdminRepository
from fitness_tracker.adapters.supabase_food_entry_repository import (
    SupabaseFoodEntryRepository,
)
from fitness_tracker.adapters.supabase_food_repository import SupabaseFoodRepository
from fitness_tracker.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
    SupabaseWeightRepository,
)
from fitness_tracker.adapters.supabase_workout_entry_repository import (
    SupabaseWorkoutEntryRepository,
)
from fitness_tracker.adapters.supabase_workout_repository import (
    SupabaseExerciseTemplateRepository,
    SupabaseWorkoutTemplateRepository,
)
from fitness_tracker.config import Settings, parse_timezone
from fitness_tracker.services.admin import AdminService
from fitness_tracker.services.cache import InMemoryCache
from fitness_tracker.services.diary import DiaryService
from fitness_tracker.services.foods import FoodService
from fitness_tracker.services.nutrition import NutritionService
from fitness_tracker.services.profile import ProfileService
from fitness_tracker.services.seed import SeedService
from fitness_tracker.services.sessions import WorkoutSessionService
from fitness_tracker.services.stats import StatsService
from fitness_tracker.services.weights import WeightService
from fitness_tracker.services.workouts import WorkoutService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    nutrition_service: NutritionService
    food_service: FoodService
    diary_service: DiaryService
    workout_service: WorkoutService
    session_service: WorkoutSessionService
    stats_service: StatsService
    profile_service: ProfileService
    weight_service: WeightService
    seed_service: SeedService
    admin_service: AdminService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    timezone_name = parse_timezone(resolved_settings.timezone)
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    food_repository = SupabaseFoodRepository(supabase_client)
    food_entry_repository = SupabaseFoodEntryRepository(supabase_client)
    exercise_repository = SupabaseExerciseTemplateRepository(supabase_client)
    template_repository = SupabaseWorkoutTemplateRepository(supabase_client)
    workout_entry_repository = SupabaseWorkoutEntryRepository(supabase_client)
    active_session_repository = SupabaseActiveSessionRepository(supabase_client)
    profile_repository = SupabaseProfileRepository(supabase_client)
    weight_repository = SupabaseWeightRepository(supabase_client)
    admin_repository = SupabaseAdminRepository(supabase_client)

    fdc_client = HttpxFdcClient.create(
        api_key=resolved_settings.fdc_api_key,
        base_url=resolved_settings.fdc_base_url,
    )
    cache = InMemoryCache()
    nutrition_service = NutritionService(
        fdc_client=fdc_client,
        cache=cache,
        debug=resolved_settings.fdc_debug,
    )
    food_service = FoodService(food_repository, nutrition_service)
    diary_service = DiaryService(
        food_repository=food_repository,
        entry_repository=food_entry_repository,
        workout_entry_repository=workout_entry_repository,
        profile_repository=profile_repository,
    )
    workout_service = WorkoutService(
        exercise_repository=exercise_repository,
        template_repository=template_repository,
        entry_repository=workout_entry_repository,
    )
    session_service = WorkoutSessionService(
        session_repository=active_session_repository,
        template_repository=template_repository,
        entry_repository=workout_entry_repository,
        timezone_name=timezone_name,
    )
    stats_service = StatsService(
        food_entry_repository=food_entry_repository,
        workout_entry_repository=workout_entry_repository,
        template_repository=template_repository,
        profile_repository=profile_repository,
        weight_repository=weight_repository,
        timezone_name=timezone_name,
    )
    profile_service = ProfileService(profile_repository, timezone_name=timezone_name)
    weight_service = WeightService(weight_repository, timezone_name=timezone_name)
    seed_service = SeedService(exercise_repository)
    admin_service = AdminService(
        admin_repository=admin_repository,
        seed_service=seed_service,
        session_service=session_service,
        cache=cache,
    )

    async def close_resources() -> None:
        await fdc_client.close()

    return AppContainer(
        settings=resolved_settings,
        nutrition_service=nutrition_service,
        food_service=food_service,
        diary_service=diary_service,
        workout_service=workout_service,
        session_service=session_service,
        stats_service=stats_service,
        profile_service=profile_service,
        weight_service=weight_service,
        seed_service=seed_service,
        admin_service=admin_service,
        close_resources=close_resources,
    )
