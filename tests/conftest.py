"""Shared test fixtures."""

import random
from dataclasses import dataclass, field
from datetime import date
from uuid import UUID, uuid4

import pytest

from nutrition_planner.config import Settings
from nutrition_planner.containers import AppContainer
from nutrition_planner.domain.food_table import default_food_table
from nutrition_planner.domain.foods import FoodCategory, FoodRecord, FoodTable
from nutrition_planner.domain.profile import (
    WEEKDAYS,
    ActivityType,
    DayActivity,
    Goal,
    Sex,
    UserProfile,
    WeeklyActivity,
)
from nutrition_planner.domain.tracking import FoodLogEntry, NutritionGoals
from nutrition_planner.services.adherence import AdherenceService
from nutrition_planner.services.food_logs import FoodLogRepository, FoodLogService
from nutrition_planner.services.goals import GoalsService, NutritionGoalsRepository
from nutrition_planner.services.planner import NutritionPlanner


@dataclass
class InMemoryGoalsRepository(NutritionGoalsRepository):
    """In-memory nutrition goals repository for tests."""

    goals: dict[UUID, NutritionGoals] = field(default_factory=dict)

    def get_goals(self, user_id: UUID) -> NutritionGoals | None:
        return self.goals.get(user_id)

    def upsert_goals(self, goals: NutritionGoals) -> NutritionGoals:
        existing = self.goals.get(goals.user_id)
        stored = NutritionGoals(
            id=existing.id if existing else uuid4(),
            user_id=goals.user_id,
            daily_calories=goals.daily_calories,
            daily_protein=goals.daily_protein,
            daily_carbs=goals.daily_carbs,
            daily_fat=goals.daily_fat,
        )
        self.goals[goals.user_id] = stored
        return stored


@dataclass
class InMemoryFoodLogRepository(FoodLogRepository):
    """In-memory food log repository for tests."""

    logs: dict[UUID, FoodLogEntry] = field(default_factory=dict)

    def create_log(self, user_id: UUID, payload: dict[str, object]) -> FoodLogEntry:
        entry = FoodLogEntry(
            id=uuid4(),
            user_id=user_id,
            food_name=str(payload["food_name"]),
            meal_type=str(payload["meal_type"]),
            quantity=float(payload["quantity"]),
            unit=str(payload["unit"]),
            calories=float(payload["calories"]),
            protein=float(payload["protein"]),
            carbs=float(payload["carbs"]),
            fat=float(payload["fat"]),
            logged_date=date.fromisoformat(str(payload["logged_date"])),
        )
        self.logs[entry.id] = entry
        return entry

    def list_logs(self, user_id: UUID, logged_date: date) -> list[FoodLogEntry]:
        return [
            log
            for log in self.logs.values()
            if log.user_id == user_id and log.logged_date == logged_date
        ]

    def delete_log(self, log_id: UUID) -> None:
        self.logs.pop(log_id, None)


def make_week(
    *day_activities: tuple[ActivityType, ...], minutes: int = 60
) -> WeeklyActivity:
    """Build a week from per-day activity tuples, padding with rest days."""
    days = []
    for index, name in enumerate(WEEKDAYS):
        activities = (
            day_activities[index]
            if index < len(day_activities)
            else (ActivityType.REST,)
        )
        days.append(
            DayActivity(
                day=name,
                day_index=index,
                activities=activities,
                durations={a: minutes for a in activities if a != ActivityType.REST},
            )
        )
    return WeeklyActivity(days=tuple(days))


def macro_only_table() -> FoodTable:
    """Foods made of a single macro each, for predictable meal sizing."""
    return FoodTable(
        foods=(
            FoodRecord("Pure protein", 400, 100, 0, 0, "g", 100, FoodCategory.PROTEIN),
            FoodRecord("Pure carbs", 400, 0, 100, 0, "g", 100, FoodCategory.CARB),
            FoodRecord("Leaves", 0, 0, 0, 0, "g", 100, FoodCategory.VEGETABLE),
            FoodRecord("Pure fat", 900, 0, 0, 100, "g", 20, FoodCategory.FAT),
        )
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
        plan_random_seed=7,
    )


@pytest.fixture
def profile() -> UserProfile:
    return UserProfile(
        sex=Sex.MALE,
        weight_kg=80,
        height_cm=180,
        age=25,
        daily_steps=8000,
        goal=Goal.MAINTAIN,
    )


@pytest.fixture
def food_table() -> FoodTable:
    return default_food_table()


@pytest.fixture
def goals_repository() -> InMemoryGoalsRepository:
    return InMemoryGoalsRepository()


@pytest.fixture
def food_log_repository() -> InMemoryFoodLogRepository:
    return InMemoryFoodLogRepository()


@pytest.fixture
def container(
    settings: Settings,
    food_table: FoodTable,
    goals_repository: InMemoryGoalsRepository,
    food_log_repository: InMemoryFoodLogRepository,
) -> AppContainer:
    food_log_service = FoodLogService(food_log_repository)
    return AppContainer(
        settings=settings,
        food_table=food_table,
        planner=NutritionPlanner(
            food_table=food_table,
            rng=random.Random(settings.plan_random_seed),
            tolerance_kcal=settings.substitution_tolerance_kcal,
        ),
        goals_service=GoalsService(goals_repository),
        food_log_service=food_log_service,
        adherence_service=AdherenceService(
            goals_repository=goals_repository,
            food_log_service=food_log_service,
        ),
    )
