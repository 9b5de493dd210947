"""Domain models for stored goals, food logs and adherence."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID


@dataclass(frozen=True)
class NutritionGoals:
    """Daily macro goals stored for a user."""

    user_id: UUID
    daily_calories: int
    daily_protein: int
    daily_carbs: int
    daily_fat: int
    id: UUID | None = None


@dataclass(frozen=True)
class FoodLogEntry:
    """A food eaten by a user on a given day."""

    id: UUID
    user_id: UUID
    food_name: str
    meal_type: str
    quantity: float
    unit: str
    calories: float
    protein: float
    carbs: float
    fat: float
    logged_date: date


@dataclass(frozen=True)
class DailyTotals:
    """Macro totals for a logged day."""

    day: date
    calories: float
    protein: float
    carbs: float
    fat: float


@dataclass(frozen=True)
class NutritionAdherence:
    """Accuracy of a day's intake against the user's goals, in percent."""

    day: date
    totals: DailyTotals
    goals: NutritionGoals
    calories_accuracy: float
    protein_accuracy: float
    carbs_accuracy: float
    fat_accuracy: float
    food_accuracy: float
