"""Domain models for generated nutrition plans."""

import math
from dataclasses import dataclass, field

from nutrition_planner.domain.foods import FoodCategory, FoodRecord
from nutrition_planner.domain.profile import ActivityType, UserProfile, WeeklyActivity

KCAL_PER_G_PROTEIN = 4
KCAL_PER_G_CARBS = 4
KCAL_PER_G_FAT = 9


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up."""
    return math.floor(value + 0.5)


@dataclass(frozen=True)
class MacroTargets:
    """Daily macro grams with calories derived from them."""

    calories: int
    protein: int
    carbs: int
    fat: int

    @classmethod
    def from_grams(cls, protein: int, carbs: int, fat: int) -> "MacroTargets":
        """Build targets whose calories follow the 4/4/9 identity."""
        return cls(
            calories=protein * KCAL_PER_G_PROTEIN
            + carbs * KCAL_PER_G_CARBS
            + fat * KCAL_PER_G_FAT,
            protein=protein,
            carbs=carbs,
            fat=fat,
        )


@dataclass(frozen=True)
class FoodItem:
    """A portion of food placed in a meal."""

    name: str
    quantity: int
    unit: str
    calories: int
    protein: int
    carbs: int
    fat: int
    category: FoodCategory | None = None

    @classmethod
    def from_record(cls, record: FoodRecord, quantity: int) -> "FoodItem":
        """Portion a reference food, deriving every macro from the quantity."""
        return cls(
            name=record.name,
            quantity=quantity,
            unit=record.unit,
            calories=round_half_up(record.calories_per_100g * quantity / 100),
            protein=round_half_up(record.protein_per_100g * quantity / 100),
            carbs=round_half_up(record.carbs_per_100g * quantity / 100),
            fat=round_half_up(record.fat_per_100g * quantity / 100),
            category=record.category,
        )


@dataclass(frozen=True)
class MealPlan:
    """A named meal whose totals are the sum of its foods."""

    name: str
    time: str
    calories: int
    protein: int
    carbs: int
    fat: int
    foods: tuple[FoodItem, ...]

    @classmethod
    def from_foods(
        cls, name: str, time: str, foods: list[FoodItem] | tuple[FoodItem, ...]
    ) -> "MealPlan":
        """Build a meal and total its foods."""
        return cls(
            name=name,
            time=time,
            calories=sum(food.calories for food in foods),
            protein=sum(food.protein for food in foods),
            carbs=sum(food.carbs for food in foods),
            fat=sum(food.fat for food in foods),
            foods=tuple(foods),
        )


@dataclass
class DayNutritionPlan:
    """Energy figures, macro targets and meals for one day."""

    day: str
    day_index: int
    activities: tuple[ActivityType, ...]
    is_rest_day: bool
    bmr: int
    activity_calories: int
    steps_calories: float
    tdee: int
    adjustment: int
    target_calories: int
    macros: MacroTargets
    meals: list[MealPlan] = field(default_factory=list)

    @property
    def is_combined_day(self) -> bool:
        """Return True when two or more training activities share the day."""
        return len([a for a in self.activities if a != ActivityType.REST]) > 1


@dataclass(frozen=True)
class PlanSummary:
    """Weekly day-type counts and calorie averages."""

    training_days: int
    rest_days: int
    combined_days: int
    avg_calories_training: int
    avg_calories_rest: int


@dataclass
class WeeklyNutritionPlan:
    """Seven day plans with weekly rollups."""

    profile: UserProfile
    weekly_activity: WeeklyActivity
    bmr: int
    average_tdee: int
    weekly_calories: int
    days: list[DayNutritionPlan]
    summary: PlanSummary
