"""Nutrition goals derived from generated plans."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from nutrition_planner.domain.plans import WeeklyNutritionPlan, round_half_up
from nutrition_planner.domain.tracking import NutritionGoals


class NutritionGoalsRepository(Protocol):
    """Persistence interface for daily nutrition goals."""

    def get_goals(self, user_id: UUID) -> NutritionGoals | None:
        """Return the stored goals for a user, if any."""

    def upsert_goals(self, goals: NutritionGoals) -> NutritionGoals:
        """Create or replace the goals for a user and return the stored row."""


@dataclass
class GoalsService:
    """Service that turns weekly plans into stored daily goals."""

    repository: NutritionGoalsRepository

    def get_goals(self, user_id: UUID) -> NutritionGoals | None:
        """Return a user's goals."""
        return self.repository.get_goals(user_id)

    def save_plan_goals(
        self, user_id: UUID, plan: WeeklyNutritionPlan
    ) -> NutritionGoals:
        """Store the plan's average daily macros as the user's goals."""
        return self.repository.upsert_goals(goals_from_plan(user_id, plan))


def goals_from_plan(user_id: UUID, plan: WeeklyNutritionPlan) -> NutritionGoals:
    """Average the day macro targets of a plan."""
    count = max(len(plan.days), 1)
    return NutritionGoals(
        user_id=user_id,
        daily_calories=round_half_up(
            sum(d.macros.calories for d in plan.days) / count
        ),
        daily_protein=round_half_up(sum(d.macros.protein for d in plan.days) / count),
        daily_carbs=round_half_up(sum(d.macros.carbs for d in plan.days) / count),
        daily_fat=round_half_up(sum(d.macros.fat for d in plan.days) / count),
    )
