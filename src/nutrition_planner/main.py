"""Command-line demo that prints a weekly plan summary."""

from nutrition_planner.domain.food_table import default_food_table
from nutrition_planner.domain.profile import Goal, Sex, UserProfile, default_week
from nutrition_planner.services.planner import NutritionPlanner


def main() -> None:
    """Print a plan summary for a sample profile."""
    profile = UserProfile(
        sex=Sex.MALE,
        weight_kg=75,
        height_cm=175,
        age=30,
        daily_steps=8000,
        goal=Goal.MAINTAIN,
    )
    plan = NutritionPlanner(food_table=default_food_table()).generate_plan(
        profile, default_week()
    )
    print("Nutrition Planner")
    print(f"BMR: {plan.bmr} kcal | average TDEE: {plan.average_tdee} kcal")
    for day in plan.days:
        label = "rest" if day.is_rest_day else ", ".join(day.activities)
        print(
            f"{day.day:<9} {day.target_calories:>5} kcal  "
            f"P {day.macros.protein}g  C {day.macros.carbs}g  F {day.macros.fat}g  "
            f"({label})"
        )
    print(f"Weekly total: {plan.weekly_calories} kcal")


if __name__ == "__main__":
    main()
