"""Supabase repository for food logs."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from nutrition_planner.domain.tracking import FoodLogEntry
from nutrition_planner.services.food_logs import FoodLogRepository

_COLUMNS = (
    "id, user_id, food_name, meal_type, quantity, unit, calories, protein, "
    "carbs, fat, logged_date"
)


@dataclass
class SupabaseFoodLogRepository(FoodLogRepository):
    """Supabase implementation for food logs."""

    client: Client

    def create_log(self, user_id: UUID, payload: dict[str, object]) -> FoodLogEntry:
        """Insert a food log row and return it."""
        response = (
            self.client.table("food_logs")
            .insert({**payload, "user_id": str(user_id)})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create food log")
        return _parse_log(response.data[0])

    def list_logs(self, user_id: UUID, logged_date: date) -> list[FoodLogEntry]:
        """Return a user's logs for one day."""
        response = (
            self.client.table("food_logs")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .eq("logged_date", logged_date.isoformat())
            .order("created_at", desc=False)
            .execute()
        )
        return [_parse_log(row) for row in response.data or []]

    def delete_log(self, log_id: UUID) -> None:
        """Delete a food log row."""
        self.client.table("food_logs").delete().eq("id", str(log_id)).execute()


def _parse_log(row: dict[str, object]) -> FoodLogEntry:
    return FoodLogEntry(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        food_name=str(row.get("food_name", "")),
        meal_type=str(row.get("meal_type", "")),
        quantity=float(row.get("quantity", 0.0)),
        unit=str(row.get("unit") or "g"),
        calories=float(row.get("calories", 0.0)),
        protein=float(row.get("protein", 0.0)),
        carbs=float(row.get("carbs", 0.0)),
        fat=float(row.get("fat", 0.0)),
        logged_date=date.fromisoformat(str(row["logged_date"])),
    )
