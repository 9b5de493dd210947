"""Supabase repository for nutrition goals."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from nutrition_planner.domain.tracking import NutritionGoals
from nutrition_planner.services.goals import NutritionGoalsRepository


@dataclass
class SupabaseGoalsRepository(NutritionGoalsRepository):
    """Supabase implementation for nutrition goals."""

    client: Client

    def get_goals(self, user_id: UUID) -> NutritionGoals | None:
        """Return the stored goals for a user."""
        response = (
            self.client.table("nutrition_goals")
            .select("id, user_id, daily_calories, daily_protein, daily_carbs, daily_fat")
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_goals(response.data[0])

    def upsert_goals(self, goals: NutritionGoals) -> NutritionGoals:
        """Update the user's goals row, or insert one when none exists."""
        payload = {
            "daily_calories": goals.daily_calories,
            "daily_protein": goals.daily_protein,
            "daily_carbs": goals.daily_carbs,
            "daily_fat": goals.daily_fat,
        }
        existing = self.get_goals(goals.user_id)
        if existing is not None and existing.id is not None:
            response = (
                self.client.table("nutrition_goals")
                .update({**payload, "updated_at": datetime.now(tz=UTC).isoformat()})
                .eq("id", str(existing.id))
                .execute()
            )
        else:
            response = (
                self.client.table("nutrition_goals")
                .insert({**payload, "user_id": str(goals.user_id)})
                .execute()
            )
        if not response.data:
            raise RuntimeError("Failed to save nutrition goals")
        return _parse_goals(response.data[0])


def _parse_goals(row: dict[str, object]) -> NutritionGoals:
    return NutritionGoals(
        id=UUID(str(row["id"])) if row.get("id") else None,
        user_id=UUID(str(row["user_id"])),
        daily_calories=int(row.get("daily_calories", 0)),
        daily_protein=int(row.get("daily_protein", 0)),
        daily_carbs=int(row.get("daily_carbs", 0)),
        daily_fat=int(row.get("daily_fat", 0)),
    )
