"""Dependency container wiring for the application."""

import random
from dataclasses import dataclass

from supabase import create_client

from nutrition_planner.adapters.supabase_food_log_repository import (
    SupabaseFoodLogRepository,
)
from nutrition_planner.adapters.supabase_goals_repository import (
    SupabaseGoalsRepository,
)
from nutrition_planner.config import Settings
from nutrition_planner.domain.food_table import default_food_table
from nutrition_planner.domain.foods import FoodTable
from nutrition_planner.services.adherence import AdherenceService
from nutrition_planner.services.food_logs import FoodLogService
from nutrition_planner.services.goals import GoalsService
from nutrition_planner.services.planner import NutritionPlanner


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    food_table: FoodTable
    planner: NutritionPlanner
    goals_service: GoalsService
    food_log_service: FoodLogService
    adherence_service: AdherenceService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    goals_repository = SupabaseGoalsRepository(supabase_client)
    food_log_repository = SupabaseFoodLogRepository(supabase_client)
    food_table = default_food_table()
    planner = NutritionPlanner(
        food_table=food_table,
        rng=random.Random(resolved_settings.plan_random_seed),
        tolerance_kcal=resolved_settings.substitution_tolerance_kcal,
    )
    food_log_service = FoodLogService(food_log_repository)
    return AppContainer(
        settings=resolved_settings,
        food_table=food_table,
        planner=planner,
        goals_service=GoalsService(goals_repository),
        food_log_service=food_log_service,
        adherence_service=AdherenceService(
            goals_repository=goals_repository,
            food_log_service=food_log_service,
        ),
    )
