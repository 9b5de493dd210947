"""Tests for container wiring."""

from nutrition_planner.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert container.goals_service is not None
    assert container.adherence_service is not None
    assert container.planner.tolerance_kcal == settings.substitution_tolerance_kcal
    assert container.food_table.find("Chicken breast") is not None
