"""Food logging against the reference food table."""

from dataclasses import dataclass
from datetime import date
from typing import Protocol
from uuid import UUID

from nutrition_planner.domain.foods import FoodRecord
from nutrition_planner.domain.plans import round_half_up
from nutrition_planner.domain.tracking import DailyTotals, FoodLogEntry


class FoodLogRepository(Protocol):
    """Persistence interface for food logs."""

    def create_log(self, user_id: UUID, payload: dict[str, object]) -> FoodLogEntry:
        """Create a food log row and return it."""

    def list_logs(self, user_id: UUID, logged_date: date) -> list[FoodLogEntry]:
        """Return the logs of a user for one day."""

    def delete_log(self, log_id: UUID) -> None:
        """Delete a food log row."""


@dataclass
class FoodLogService:
    """Service for logging eaten foods and totalling a day."""

    repository: FoodLogRepository

    def add_food(  # noqa: PLR0913
        self,
        user_id: UUID,
        food: FoodRecord,
        meal_type: str,
        quantity: float,
        logged_date: date,
    ) -> FoodLogEntry:
        """Log a quantity of a reference food."""
        multiplier = quantity / 100
        payload: dict[str, object] = {
            "food_name": food.name,
            "meal_type": meal_type,
            "quantity": quantity,
            "unit": food.unit,
            "calories": round_half_up(food.calories_per_100g * multiplier),
            "protein": _one_decimal(food.protein_per_100g * multiplier),
            "carbs": _one_decimal(food.carbs_per_100g * multiplier),
            "fat": _one_decimal(food.fat_per_100g * multiplier),
            "logged_date": logged_date.isoformat(),
        }
        return self.repository.create_log(user_id, payload)

    def list_day(self, user_id: UUID, logged_date: date) -> list[FoodLogEntry]:
        """Return a day's logs."""
        return self.repository.list_logs(user_id, logged_date)

    def delete(self, log_id: UUID) -> None:
        """Remove a log entry."""
        self.repository.delete_log(log_id)

    def daily_totals(self, user_id: UUID, logged_date: date) -> DailyTotals:
        """Sum a day's logged macros."""
        return sum_logs(logged_date, self.repository.list_logs(user_id, logged_date))


def sum_logs(day: date, logs: list[FoodLogEntry]) -> DailyTotals:
    total = DailyTotals(day=day, calories=0, protein=0, carbs=0, fat=0)
    for log in logs:
        total = DailyTotals(
            day=day,
            calories=total.calories + log.calories,
            protein=total.protein + log.protein,
            carbs=total.carbs + log.carbs,
            fat=total.fat + log.fat,
        )
    return total


def _one_decimal(value: float) -> float:
    return round_half_up(value * 10) / 10
