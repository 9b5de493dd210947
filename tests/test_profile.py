"""Tests for profile and activity models."""

import pytest

from nutrition_planner.domain.errors import InvalidActivityError, InvalidProfileError
from nutrition_planner.domain.profile import (
    ActivityType,
    DayActivity,
    Goal,
    Sex,
    UserProfile,
    WeeklyActivity,
    default_week,
    set_duration,
    toggle_activity,
)

STRENGTH = ActivityType.STRENGTH_TRAINING
SWIM = ActivityType.SWIMMING


def _day(*activities: ActivityType) -> DayActivity:
    return DayActivity(day="Monday", day_index=0, activities=activities)


@pytest.mark.parametrize(
    ("field_name", "value"),
    [("weight_kg", 0), ("height_cm", -170), ("age", 0), ("daily_steps", -1)],
)
def test_profile_rejects_unusable_values(field_name, value) -> None:
    values = {
        "sex": Sex.MALE,
        "weight_kg": 80,
        "height_cm": 180,
        "age": 25,
        "daily_steps": 8000,
        "goal": Goal.MAINTAIN,
    }
    values[field_name] = value

    with pytest.raises(InvalidProfileError):
        UserProfile(**values)


def test_rest_cannot_be_combined() -> None:
    with pytest.raises(InvalidActivityError):
        _day(ActivityType.REST, STRENGTH)


def test_empty_day_counts_as_rest() -> None:
    assert _day().is_rest_day


def test_week_needs_seven_days() -> None:
    with pytest.raises(InvalidActivityError):
        WeeklyActivity(days=(_day(STRENGTH),))


def test_toggle_rest_clears_training() -> None:
    day = toggle_activity(_day(STRENGTH, SWIM), ActivityType.REST)
    assert day.activities == (ActivityType.REST,)


def test_toggle_training_replaces_rest() -> None:
    day = toggle_activity(_day(ActivityType.REST), SWIM)
    assert day.activities == (SWIM,)

    day = toggle_activity(day, STRENGTH)
    assert day.activities == (SWIM, STRENGTH)
    assert not day.is_rest_day


def test_toggle_last_training_off_leaves_rest() -> None:
    day = toggle_activity(_day(SWIM), SWIM)
    assert day.activities == (ActivityType.REST,)


def test_set_duration_keeps_other_durations() -> None:
    day = set_duration(_day(STRENGTH, SWIM), STRENGTH, 45)
    day = set_duration(day, SWIM, 30)

    assert day.duration(STRENGTH) == 45
    assert day.duration(SWIM) == 30
    assert day.duration(ActivityType.RUNNING) == 0


def test_default_week_trains_six_days() -> None:
    week = default_week()

    assert [day.is_rest_day for day in week.days] == [False] * 6 + [True]
    assert week.days[0].duration(STRENGTH) == 60
