"""Weekly nutrition plan generation."""

import logging
import random
from dataclasses import dataclass, field

from nutrition_planner.domain.foods import FoodCategory, FoodTable
from nutrition_planner.domain.plans import (
    DayNutritionPlan,
    MacroTargets,
    MealPlan,
    PlanSummary,
    WeeklyNutritionPlan,
    round_half_up,
)
from nutrition_planner.domain.profile import DayActivity, UserProfile, WeeklyActivity
from nutrition_planner.services.energy import (
    calculate_activity_calories,
    calculate_bmr,
    calculate_day_tdee,
    calculate_steps_calories,
)
from nutrition_planner.services.macros import calculate_macros, get_calorie_adjustment
from nutrition_planner.services.meals import generate_day_meals
from nutrition_planner.services.substitution import (
    DEFAULT_TOLERANCE_KCAL,
    substitute_food,
)

_logger = logging.getLogger(__name__)


@dataclass
class NutritionPlanner:
    """Runs the energy, macro and meal stages for a whole week."""

    food_table: FoodTable
    rng: random.Random = field(default_factory=random.Random)
    tolerance_kcal: int = DEFAULT_TOLERANCE_KCAL

    def generate_plan(
        self, profile: UserProfile, week: WeeklyActivity
    ) -> WeeklyNutritionPlan:
        """Build a fresh weekly plan for a profile and activity week."""
        bmr = calculate_bmr(profile)
        steps_calories = calculate_steps_calories(profile.daily_steps)
        days = [
            self._plan_day(profile, day_activity, bmr, steps_calories)
            for day_activity in week.days
        ]
        plan = WeeklyNutritionPlan(
            profile=profile,
            weekly_activity=week,
            bmr=bmr,
            average_tdee=round_half_up(sum(d.tdee for d in days) / len(days)),
            weekly_calories=sum(d.target_calories for d in days),
            days=days,
            summary=_summarize(days),
        )
        _logger.info(
            "Generated plan: goal=%s bmr=%s avg_tdee=%s weekly_kcal=%s",
            profile.goal,
            plan.bmr,
            plan.average_tdee,
            plan.weekly_calories,
        )
        return plan

    def substitute_in_plan(  # noqa: PLR0913
        self,
        plan: WeeklyNutritionPlan,
        day_index: int,
        meal_index: int,
        food_index: int,
        replacement_name: str,
        category: FoodCategory | None = None,
    ) -> MealPlan:
        """Replace one food of a plan's meal and patch the day in place."""
        replacement = self.food_table.get(replacement_name)
        day = plan.days[day_index]
        meal = substitute_food(
            day.meals[meal_index],
            food_index,
            replacement,
            food_table=self.food_table,
            category=category,
            tolerance_kcal=self.tolerance_kcal,
        )
        update_meal(plan, day_index, meal_index, meal)
        return meal

    def _plan_day(
        self,
        profile: UserProfile,
        day_activity: DayActivity,
        bmr: int,
        steps_calories: float,
    ) -> DayNutritionPlan:
        activity_calories = calculate_activity_calories(day_activity)
        tdee = calculate_day_tdee(bmr, activity_calories, steps_calories)
        is_rest_day = day_activity.is_rest_day
        adjustment = get_calorie_adjustment(
            profile.goal, day_activity.activities, is_rest_day
        )
        target_calories = tdee + adjustment
        macros = calculate_macros(profile, target_calories, is_rest_day)
        meals = generate_day_meals(
            macros,
            profile.meals_per_day,
            not is_rest_day,
            profile.allergies,
            food_table=self.food_table,
            rng=self.rng,
        )
        return DayNutritionPlan(
            day=day_activity.day,
            day_index=day_activity.day_index,
            activities=day_activity.activities,
            is_rest_day=is_rest_day,
            bmr=bmr,
            activity_calories=activity_calories,
            steps_calories=steps_calories,
            tdee=tdee,
            adjustment=adjustment,
            target_calories=target_calories,
            macros=macros,
            meals=meals,
        )


def update_meal(
    plan: WeeklyNutritionPlan, day_index: int, meal_index: int, meal: MealPlan
) -> None:
    """Store an edited meal and refresh the day and weekly totals."""
    day = plan.days[day_index]
    day.meals[meal_index] = meal
    day.macros = MacroTargets.from_grams(
        protein=sum(m.protein for m in day.meals),
        carbs=sum(m.carbs for m in day.meals),
        fat=sum(m.fat for m in day.meals),
    )
    day.target_calories = sum(m.calories for m in day.meals)
    plan.weekly_calories = sum(d.target_calories for d in plan.days)


def _summarize(days: list[DayNutritionPlan]) -> PlanSummary:
    training = [d for d in days if not d.is_rest_day]
    rest = [d for d in days if d.is_rest_day]
    return PlanSummary(
        training_days=len(training),
        rest_days=len(rest),
        combined_days=len([d for d in days if d.is_combined_day]),
        avg_calories_training=_average_target(training),
        avg_calories_rest=_average_target(rest),
    )


def _average_target(days: list[DayNutritionPlan]) -> int:
    if not days:
        return 0
    return round_half_up(sum(d.target_calories for d in days) / len(days))
