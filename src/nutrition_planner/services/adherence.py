"""Daily nutrition adherence scoring."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from nutrition_planner.domain.tracking import NutritionAdherence
from nutrition_planner.services.food_logs import FoodLogService
from nutrition_planner.services.goals import NutritionGoalsRepository

def calc_macro_accuracy(real: float, target: float) -> float:
    """Return how close an intake is to its target, in percent.

    An exact match scores 100, the maximum. The score falls linearly with
    the relative error and never drops below 0.
    """
    if target == 0:
        return 100.0 if real == 0 else 0.0
    score = 100 * (1 - abs(real - target) / target)
    return max(0.0, score)


def calc_food_accuracy(  # noqa: PLR0913
    real_protein: float,
    target_protein: float,
    real_carbs: float,
    target_carbs: float,
    real_fat: float,
    target_fat: float,
) -> float:
    """Return the mean accuracy of the three macros."""
    return (
        calc_macro_accuracy(real_protein, target_protein)
        + calc_macro_accuracy(real_carbs, target_carbs)
        + calc_macro_accuracy(real_fat, target_fat)
    ) / 3


@dataclass
class AdherenceService:
    """Compares logged intake with stored goals."""

    goals_repository: NutritionGoalsRepository
    food_log_service: FoodLogService

    def daily_report(self, user_id: UUID, day: date) -> NutritionAdherence | None:
        """Return the day's adherence, or None when the user has no goals."""
        goals = self.goals_repository.get_goals(user_id)
        if goals is None:
            return None
        totals = self.food_log_service.daily_totals(user_id, day)
        return NutritionAdherence(
            day=day,
            totals=totals,
            goals=goals,
            calories_accuracy=calc_macro_accuracy(
                totals.calories, goals.daily_calories
            ),
            protein_accuracy=calc_macro_accuracy(totals.protein, goals.daily_protein),
            carbs_accuracy=calc_macro_accuracy(totals.carbs, goals.daily_carbs),
            fat_accuracy=calc_macro_accuracy(totals.fat, goals.daily_fat),
            food_accuracy=calc_food_accuracy(
                totals.protein,
                goals.daily_protein,
                totals.carbs,
                goals.daily_carbs,
                totals.fat,
                goals.daily_fat,
            ),
        )
