"""Daily energy expenditure calculations."""

from nutrition_planner.domain.plans import round_half_up
from nutrition_planner.domain.profile import ActivityType, DayActivity, Sex, UserProfile

ACTIVITY_KCAL_PER_MINUTE: dict[ActivityType, float] = {
    ActivityType.STRENGTH_TRAINING: 6.5,
    ActivityType.SWIMMING: 9.0,
    ActivityType.RUNNING: 10.0,
    ActivityType.REST: 0.0,
}
STEPS_BASELINE = 5000
KCAL_PER_STEP = 0.04
SEDENTARY_FACTOR = 1.2


def calculate_bmr(profile: UserProfile) -> int:
    """Return basal metabolic rate in kcal/day (Mifflin-St Jeor)."""
    base = 10 * profile.weight_kg + 6.25 * profile.height_cm - 5 * profile.age
    offset = 5 if profile.sex == Sex.MALE else -161
    return round_half_up(base + offset)


def calculate_activity_calories(day: DayActivity) -> int:
    """Return kcal burned by the day's planned training."""
    total = 0.0
    for activity in day.training_activities:
        total += day.duration(activity) * ACTIVITY_KCAL_PER_MINUTE[activity]
    return round_half_up(total)


def calculate_steps_calories(steps: int) -> float:
    """Return kcal from steps above the daily baseline, unrounded."""
    return max(0, steps - STEPS_BASELINE) * KCAL_PER_STEP


def calculate_day_tdee(
    bmr: int, activity_calories: int, steps_calories: float
) -> int:
    """Return total daily energy expenditure.

    Exercise and steps are added on top of a sedentary multiplier instead of
    folding them into a single activity factor.
    """
    return round_half_up(
        round_half_up(bmr * SEDENTARY_FACTOR) + activity_calories + steps_calories
    )
