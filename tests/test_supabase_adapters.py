"""Tests for Supabase adapter implementations."""

from dataclasses import dataclass, field
from datetime import date
from uuid import uuid4

import pytest

from nutrition_planner.adapters.supabase_food_log_repository import (
    SupabaseFoodLogRepository,
)
from nutrition_planner.adapters.supabase_goals_repository import (
    SupabaseGoalsRepository,
)
from nutrition_planner.domain.tracking import NutritionGoals


@dataclass
class FakeResponse:
    data: list[dict[str, object]] | None


@dataclass
class FakeTable:
    name: str
    response_queue: dict[str, list[list[dict[str, object]]]] = field(
        default_factory=lambda: {"select": [], "insert": [], "update": [], "delete": []}
    )
    last_action: str | None = None
    last_payload: object | None = None
    last_filters: list[tuple[str, object]] = field(default_factory=list)

    def queue(self, action: str, data: list[dict[str, object]]) -> None:
        self.response_queue[action].append(data)

    def select(self, *_args) -> "FakeTable":
        self._action = "select"
        return self

    def insert(self, payload) -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "insert"
        self.last_payload = payload
        return self

    def update(self, payload) -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "update"
        self.last_payload = payload
        return self

    def delete(self) -> "FakeTable":
        self._action = "delete"
        return self

    def eq(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append((column, value))
        return self

    def limit(self, _count: int) -> "FakeTable":
        return self

    def order(self, _column: str, desc: bool = False) -> "FakeTable":
        return self

    def execute(self) -> FakeResponse:
        action = getattr(self, "_action", "select")
        self.last_action = action
        queue = self.response_queue.get(action, [])
        data = queue.pop(0) if queue else []
        return FakeResponse(data=data)


@dataclass
class FakeSupabaseClient:
    tables: dict[str, FakeTable] = field(default_factory=dict)

    def table(self, name: str) -> FakeTable:
        if name not in self.tables:
            self.tables[name] = FakeTable(name=name)
        return self.tables[name]


def _goals_row(goal_id: str, user_id: str, calories: int) -> dict[str, object]:
    return {
        "id": goal_id,
        "user_id": user_id,
        "daily_calories": calories,
        "daily_protein": 160,
        "daily_carbs": 300,
        "daily_fat": 70,
    }


def _goals(user_id, calories: int) -> NutritionGoals:  # type: ignore[no-untyped-def]
    return NutritionGoals(
        user_id=user_id,
        daily_calories=calories,
        daily_protein=160,
        daily_carbs=300,
        daily_fat=70,
    )


def test_supabase_goals_repository_inserts_when_missing() -> None:
    client = FakeSupabaseClient()
    table = client.table("nutrition_goals")
    user_id = uuid4()
    goal_id = str(uuid4())
    table.queue("insert", [_goals_row(goal_id, str(user_id), 2500)])

    repository = SupabaseGoalsRepository(client)
    stored = repository.upsert_goals(_goals(user_id, 2500))

    assert table.last_action == "insert"
    assert isinstance(table.last_payload, dict)
    assert table.last_payload["user_id"] == str(user_id)
    assert str(stored.id) == goal_id
    assert stored.daily_calories == 2500


def test_supabase_goals_repository_updates_existing_row() -> None:
    client = FakeSupabaseClient()
    table = client.table("nutrition_goals")
    user_id = uuid4()
    goal_id = str(uuid4())
    table.queue("select", [_goals_row(goal_id, str(user_id), 2500)])
    table.queue("update", [_goals_row(goal_id, str(user_id), 2300)])

    repository = SupabaseGoalsRepository(client)
    stored = repository.upsert_goals(_goals(user_id, 2300))

    assert table.last_action == "update"
    assert isinstance(table.last_payload, dict)
    assert "updated_at" in table.last_payload
    assert ("id", goal_id) in table.last_filters
    assert stored.daily_calories == 2300


def test_supabase_goals_repository_raises_on_empty_write() -> None:
    repository = SupabaseGoalsRepository(FakeSupabaseClient())

    with pytest.raises(RuntimeError):
        repository.upsert_goals(_goals(uuid4(), 2000))


def test_supabase_goals_repository_missing_user() -> None:
    repository = SupabaseGoalsRepository(FakeSupabaseClient())
    assert repository.get_goals(uuid4()) is None


def test_supabase_food_log_repository_roundtrip() -> None:
    client = FakeSupabaseClient()
    table = client.table("food_logs")
    user_id = str(uuid4())
    row = {
        "id": str(uuid4()),
        "user_id": user_id,
        "food_name": "Oats",
        "meal_type": "breakfast",
        "quantity": 80,
        "unit": "g",
        "calories": 311,
        "protein": 13.6,
        "carbs": 52.8,
        "fat": 5.6,
        "logged_date": "2024-03-01",
    }
    table.queue("insert", [row])
    table.queue("select", [row])

    repository = SupabaseFoodLogRepository(client)
    created = repository.create_log(uuid4(), {"food_name": "Oats"})
    logs = repository.list_logs(created.user_id, date(2024, 3, 1))

    assert created.food_name == "Oats"
    assert created.logged_date == date(2024, 3, 1)
    assert ("logged_date", "2024-03-01") in table.last_filters
    assert logs[0].protein == 13.6

    repository.delete_log(created.id)
    assert table.last_action == "delete"
    assert ("id", str(created.id)) in table.last_filters


def test_supabase_food_log_repository_raises_on_failed_insert() -> None:
    repository = SupabaseFoodLogRepository(FakeSupabaseClient())

    with pytest.raises(RuntimeError):
        repository.create_log(uuid4(), {"food_name": "Oats"})
