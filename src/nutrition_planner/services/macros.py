"""Goal-based calorie adjustment and macro split."""

from collections.abc import Iterable

from nutrition_planner.domain.plans import (
    KCAL_PER_G_CARBS,
    KCAL_PER_G_FAT,
    KCAL_PER_G_PROTEIN,
    MacroTargets,
    round_half_up,
)
from nutrition_planner.domain.profile import ActivityType, Goal, UserProfile

MIN_CARBS_G = 50

# rest day, single activity, two activities, three or more
_ADJUSTMENTS: dict[Goal, tuple[int, int, int, int]] = {
    Goal.GAIN: (250, 350, 400, 450),
    Goal.LOSE: (-400, -350, -250, -250),
    Goal.MAINTAIN: (0, 0, 0, 0),
}

# (protein g/kg, fat g/kg) for rest days and training days
_COEFFICIENTS: dict[Goal, dict[bool, tuple[float, float]]] = {
    Goal.GAIN: {True: (1.9, 1.1), False: (2.0, 1.0)},
    Goal.LOSE: {True: (2.0, 0.9), False: (2.2, 0.7)},
    Goal.MAINTAIN: {True: (2.0, 0.9), False: (2.0, 0.9)},
}


def get_calorie_adjustment(
    goal: Goal, activities: Iterable[ActivityType], is_rest_day: bool
) -> int:
    """Return the signed kcal surplus or deficit for a day."""
    rest, single, double, triple = _ADJUSTMENTS[goal]
    training_count = len([a for a in activities if a != ActivityType.REST])
    if is_rest_day:
        return rest
    if training_count >= 3:  # noqa: PLR2004
        return triple
    if training_count == 2:  # noqa: PLR2004
        return double
    return single


def calculate_macros(
    profile: UserProfile, target_calories: int, is_rest_day: bool
) -> MacroTargets:
    """Split target calories into protein, carb and fat grams.

    Protein and fat scale with body weight; carbohydrates take the remaining
    calories but never drop below ``MIN_CARBS_G``. The returned calories are
    recomputed from the grams, so they can differ from ``target_calories``.
    """
    protein_per_kg, fat_per_kg = _COEFFICIENTS[profile.goal][is_rest_day]
    protein = round_half_up(profile.weight_kg * protein_per_kg)
    fat = round_half_up(profile.weight_kg * fat_per_kg)
    remaining = (
        target_calories - protein * KCAL_PER_G_PROTEIN - fat * KCAL_PER_G_FAT
    )
    carbs = max(MIN_CARBS_G, round_half_up(remaining / KCAL_PER_G_CARBS))
    return MacroTargets.from_grams(protein=protein, carbs=carbs, fat=fat)
