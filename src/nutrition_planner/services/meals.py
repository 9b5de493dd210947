"""Meal allocation: per-meal macro templates and greedy food fill."""

import random
from collections.abc import Iterable
from dataclasses import dataclass

from nutrition_planner.domain.foods import FoodCategory, FoodRecord, FoodTable
from nutrition_planner.domain.plans import FoodItem, MacroTargets, MealPlan, round_half_up

PROTEIN_FILL_THRESHOLD_G = 10
CARB_FILL_THRESHOLD_G = 15
FAT_FILL_THRESHOLD_G = 5
MAX_PROTEIN_SERVINGS = 2.0
MAX_CARB_SERVINGS = 2.5
DEFAULT_MEAL_COUNT = 5


@dataclass(frozen=True)
class MealTemplate:
    """Share of the day's macros assigned to one meal."""

    protein: float
    carbs: float
    fat: float
    time: str


@dataclass(frozen=True)
class MealMacros:
    """Gram targets for a single meal."""

    protein: float
    carbs: float
    fat: float


def meal_distribution(
    meals_per_day: int, is_training_day: bool
) -> list[tuple[str, MealTemplate]]:
    """Return the named templates for a meal count.

    Each template hands out the whole day: the protein, carb and fat shares
    each sum to 1. Unsupported counts use the five meal template.
    """
    afternoon_name = "Post-Workout" if is_training_day else "Afternoon Snack"
    distributions: dict[int, list[tuple[str, MealTemplate]]] = {
        3: [
            ("Breakfast", MealTemplate(0.25, 0.3, 0.3, "08:00")),
            ("Lunch", MealTemplate(0.4, 0.4, 0.35, "14:00")),
            ("Dinner", MealTemplate(0.35, 0.3, 0.35, "21:00")),
        ],
        4: [
            ("Breakfast", MealTemplate(0.25, 0.3, 0.3, "08:00")),
            ("Lunch", MealTemplate(0.35, 0.35, 0.3, "14:00")),
            (afternoon_name, MealTemplate(0.1, 0.1, 0.15, "17:00")),
            ("Dinner", MealTemplate(0.3, 0.25, 0.25, "21:00")),
        ],
        5: [
            ("Breakfast", MealTemplate(0.2, 0.25, 0.25, "08:00")),
            ("Lunch", MealTemplate(0.3, 0.3, 0.3, "14:00")),
            (afternoon_name, MealTemplate(0.15, 0.15, 0.1, "17:00")),
            ("Dinner", MealTemplate(0.2, 0.2, 0.2, "21:00")),
            ("Before Bed", MealTemplate(0.15, 0.1, 0.15, "23:00")),
        ],
        6: [
            ("Breakfast", MealTemplate(0.2, 0.2, 0.2, "08:00")),
            ("Mid-Morning", MealTemplate(0.1, 0.1, 0.1, "11:00")),
            ("Lunch", MealTemplate(0.25, 0.3, 0.25, "14:00")),
            (afternoon_name, MealTemplate(0.1, 0.1, 0.15, "17:00")),
            ("Dinner", MealTemplate(0.25, 0.22, 0.2, "21:00")),
            ("Before Bed", MealTemplate(0.1, 0.08, 0.1, "23:00")),
        ],
    }
    return distributions.get(meals_per_day, distributions[DEFAULT_MEAL_COUNT])


def generate_day_meals(  # noqa: PLR0913
    macros: MacroTargets,
    meals_per_day: int,
    is_training_day: bool,
    allergies: Iterable[str],
    *,
    food_table: FoodTable,
    rng: random.Random,
) -> list[MealPlan]:
    """Distribute a day's macros across meals and fill each one with foods."""
    allergy_list = list(allergies)
    meals: list[MealPlan] = []
    for name, template in meal_distribution(meals_per_day, is_training_day):
        targets = MealMacros(
            protein=round_half_up(macros.protein * template.protein),
            carbs=round_half_up(macros.carbs * template.carbs),
            fat=round_half_up(macros.fat * template.fat),
        )
        foods = generate_meal_foods(
            targets, allergy_list, food_table=food_table, rng=rng
        )
        meals.append(MealPlan.from_foods(name, template.time, foods))
    return meals


def generate_meal_foods(
    targets: MealMacros,
    allergies: Iterable[str],
    *,
    food_table: FoodTable,
    rng: random.Random,
) -> list[FoodItem]:
    """Greedily pick foods that approximate a meal's macro targets.

    One protein and one carb source are sized against what is left of their
    macro, a vegetable is always added at its serving size, and a fat source
    is added at its serving size when enough fat remains.
    """
    available = food_table.without_allergens(allergies)
    foods: list[FoodItem] = []
    remaining_protein = targets.protein
    remaining_carbs = targets.carbs
    remaining_fat = targets.fat

    proteins = available.by_category(FoodCategory.PROTEIN)
    if proteins and remaining_protein > PROTEIN_FILL_THRESHOLD_G:
        record = rng.choice(proteins)
        quantity = _sized_quantity(
            record, record.protein_per_100g, remaining_protein, MAX_PROTEIN_SERVINGS
        )
        foods.append(FoodItem.from_record(record, quantity))
        remaining_protein -= record.protein_per_100g * quantity / 100
        remaining_carbs -= record.carbs_per_100g * quantity / 100
        remaining_fat -= record.fat_per_100g * quantity / 100

    carbs = available.by_category(FoodCategory.CARB)
    if carbs and remaining_carbs > CARB_FILL_THRESHOLD_G:
        record = rng.choice(carbs)
        quantity = _sized_quantity(
            record, record.carbs_per_100g, remaining_carbs, MAX_CARB_SERVINGS
        )
        foods.append(FoodItem.from_record(record, quantity))
        remaining_carbs -= record.carbs_per_100g * quantity / 100
        remaining_fat -= record.fat_per_100g * quantity / 100

    vegetables = available.by_category(FoodCategory.VEGETABLE)
    if vegetables:
        record = rng.choice(vegetables)
        foods.append(FoodItem.from_record(record, round_half_up(record.serving_size)))

    fats = available.by_category(FoodCategory.FAT)
    if fats and remaining_fat > FAT_FILL_THRESHOLD_G:
        record = rng.choice(fats)
        foods.append(FoodItem.from_record(record, round_half_up(record.serving_size)))

    return foods


def get_alternatives(  # noqa: PLR0913
    category: FoodCategory,
    allergies: Iterable[str],
    *,
    food_table: FoodTable,
    exclude: str | None = None,
    search: str | None = None,
    limit: int | None = None,
) -> list[FoodRecord]:
    """Return allergy-safe foods of a category, possibly empty."""
    candidates = food_table.without_allergens(allergies).by_category(category)
    if search:
        search_lower = search.lower()
        candidates = [f for f in candidates if search_lower in f.name.lower()]
    if exclude:
        exclude_lower = exclude.lower()
        candidates = [f for f in candidates if f.name.lower() != exclude_lower]
    if limit is not None:
        candidates = candidates[:limit]
    return candidates


def _sized_quantity(
    record: FoodRecord, macro_per_100g: float, remaining: float, max_servings: float
) -> int:
    per_serving = macro_per_100g * record.serving_size / 100
    if per_serving <= 0:
        return round_half_up(record.serving_size)
    multiplier = min(max_servings, remaining / per_serving)
    return round_half_up(record.serving_size * multiplier)
