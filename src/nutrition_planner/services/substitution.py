"""Single-meal food substitution."""

import logging

from nutrition_planner.domain.foods import FoodCategory, FoodRecord, FoodTable
from nutrition_planner.domain.plans import FoodItem, MealPlan, round_half_up

DEFAULT_TOLERANCE_KCAL = 30
MIN_COMPENSATED_QUANTITY = 30

_logger = logging.getLogger(__name__)

_CATEGORY_KEYWORDS: tuple[tuple[FoodCategory, tuple[str, ...]], ...] = (
    (
        FoodCategory.PROTEIN,
        (
            "chicken",
            "beef",
            "salmon",
            "tuna",
            "egg",
            "turkey",
            "hake",
            "shrimp",
            "tofu",
            "tempeh",
            "ham",
            "pork",
        ),
    ),
    (
        FoodCategory.CARB,
        (
            "rice",
            "potato",
            "pasta",
            "bread",
            "oat",
            "quinoa",
            "legume",
            "couscous",
            "flakes",
        ),
    ),
    (
        FoodCategory.FAT,
        ("oil", "avocado", "almond", "walnut", "peanut", "chocolate", "chia"),
    ),
    (FoodCategory.DAIRY, ("yogurt", "cheese", "milk")),
    (
        FoodCategory.VEGETABLE,
        (
            "broccoli",
            "spinach",
            "pepper",
            "tomato",
            "zucchini",
            "mushroom",
            "carrot",
        ),
    ),
)


def detect_category(name: str) -> FoodCategory:
    """Guess a category from a free-text food name.

    Only used for names that carry no category of their own. Defaults to
    fruit when no keyword matches.
    """
    name_lower = name.lower()
    for category, keywords in _CATEGORY_KEYWORDS:
        if any(keyword in name_lower for keyword in keywords):
            return category
    return FoodCategory.FRUIT


def resolve_category(
    item: FoodItem, food_table: FoodTable, category: FoodCategory | None = None
) -> FoodCategory:
    """Return the category of a meal item, preferring explicit information."""
    if category is not None:
        return category
    if item.category is not None:
        return item.category
    record = food_table.find(item.name)
    if record is not None:
        return record.category
    return detect_category(item.name)


def substitute_food(  # noqa: PLR0913
    meal: MealPlan,
    food_index: int,
    replacement: FoodRecord,
    *,
    food_table: FoodTable,
    category: FoodCategory | None = None,
    tolerance_kcal: int = DEFAULT_TOLERANCE_KCAL,
) -> MealPlan:
    """Swap one food of a meal for another and rebalance calories locally.

    The replacement is sized to match the primary macro of the replaced
    food's category. When the meal's calories move by more than
    ``tolerance_kcal``, the first other carbohydrate food of the meal
    absorbs the difference. The replacement itself is never resized.
    """
    current = meal.foods[food_index]
    resolved = resolve_category(current, food_table, category)
    primary = _primary_macro(resolved)

    target_grams = _macro_grams(current, primary, food_table)
    per_100g = _per_100g(replacement, primary)
    if per_100g > 0:
        quantity = round_half_up(target_grams * 100 / per_100g)
    else:
        quantity = current.quantity
    new_food = FoodItem.from_record(replacement, quantity)

    foods = list(meal.foods)
    foods[food_index] = new_food
    calorie_diff = sum(f.calories for f in foods) - meal.calories
    if abs(calorie_diff) > tolerance_kcal:
        _compensate_with_carbs(foods, calorie_diff, food_table, skip_index=food_index)

    _logger.info(
        "Substituted %s with %s in %s (%s %sg)",
        current.name,
        replacement.name,
        meal.name,
        primary,
        target_grams,
    )
    return MealPlan.from_foods(meal.name, meal.time, foods)


def _primary_macro(category: FoodCategory) -> str:
    if category == FoodCategory.PROTEIN:
        return "protein"
    if category == FoodCategory.CARB:
        return "carbs"
    return "fat"


def _macro_grams(item: FoodItem, macro: str, food_table: FoodTable) -> float:
    """Return the replaced item's macro grams, unrounded when the food is known."""
    record = food_table.find(item.name)
    if record is None:
        return float(getattr(item, macro))
    return _per_100g(record, macro) * item.quantity / 100


def _per_100g(record: FoodRecord, macro: str) -> float:
    if macro == "protein":
        return record.protein_per_100g
    if macro == "carbs":
        return record.carbs_per_100g
    return record.fat_per_100g


def _compensate_with_carbs(
    foods: list[FoodItem],
    calorie_diff: int,
    food_table: FoodTable,
    *,
    skip_index: int,
) -> None:
    for index, food in enumerate(foods):
        if index == skip_index:
            continue
        record = food_table.find(food.name)
        if record is None or record.category != FoodCategory.CARB:
            continue
        kcal_per_gram = record.calories_per_100g / 100
        if kcal_per_gram <= 0:
            return
        adjustment = round_half_up(-calorie_diff / kcal_per_gram)
        quantity = max(MIN_COMPENSATED_QUANTITY, food.quantity + adjustment)
        foods[index] = FoodItem.from_record(record, quantity)
        return
