"""Domain models for user profiles and weekly activity."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum

from nutrition_planner.domain.errors import InvalidActivityError, InvalidProfileError

DAYS_PER_WEEK = 7
WEEKDAYS = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)


class Sex(StrEnum):
    """Biological sex used by the BMR formula."""

    MALE = "male"
    FEMALE = "female"


class Goal(StrEnum):
    """Body composition goal."""

    GAIN = "gain"
    MAINTAIN = "maintain"
    LOSE = "lose"


class ActivityType(StrEnum):
    """Kinds of activity a day can hold."""

    STRENGTH_TRAINING = "strength-training"
    SWIMMING = "swimming"
    RUNNING = "running"
    REST = "rest"


@dataclass(frozen=True)
class UserProfile:
    """Input profile for a plan calculation."""

    sex: Sex
    weight_kg: float
    height_cm: float
    age: int
    daily_steps: int
    goal: Goal
    meals_per_day: int = 4
    allergies: frozenset[str] = frozenset()
    restrictions: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        if self.weight_kg <= 0:
            raise InvalidProfileError("weight_kg must be positive")
        if self.height_cm <= 0:
            raise InvalidProfileError("height_cm must be positive")
        if self.age <= 0:
            raise InvalidProfileError("age must be positive")
        if self.daily_steps < 0:
            raise InvalidProfileError("daily_steps must not be negative")


@dataclass(frozen=True)
class DayActivity:
    """Activities planned for a single weekday."""

    day: str
    day_index: int
    activities: tuple[ActivityType, ...]
    durations: Mapping[ActivityType, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if ActivityType.REST in self.activities and len(self.activities) > 1:
            raise InvalidActivityError(
                f"{self.day}: rest cannot be combined with other activities"
            )

    @property
    def training_activities(self) -> tuple[ActivityType, ...]:
        """Return the non-rest activities of the day."""
        return tuple(a for a in self.activities if a != ActivityType.REST)

    @property
    def is_rest_day(self) -> bool:
        """Return True when the day holds no training."""
        return not self.training_activities

    def duration(self, activity: ActivityType) -> int:
        """Return the planned minutes for an activity, zero when unset."""
        return self.durations.get(activity, 0)


@dataclass(frozen=True)
class WeeklyActivity:
    """Seven consecutive days of planned activity."""

    days: tuple[DayActivity, ...]

    def __post_init__(self) -> None:
        if len(self.days) != DAYS_PER_WEEK:
            raise InvalidActivityError(
                f"a week needs {DAYS_PER_WEEK} days, got {len(self.days)}"
            )


def toggle_activity(day: DayActivity, activity: ActivityType) -> DayActivity:
    """Return a copy of the day with the activity switched on or off.

    Choosing rest clears the day. Choosing a training activity drops rest,
    and removing the last training activity leaves the day as rest.
    """
    if activity == ActivityType.REST:
        activities: list[ActivityType] = [ActivityType.REST]
    else:
        activities = [a for a in day.activities if a != ActivityType.REST]
        if activity in activities:
            activities.remove(activity)
            if not activities:
                activities = [ActivityType.REST]
        else:
            activities.append(activity)
    return DayActivity(
        day=day.day,
        day_index=day.day_index,
        activities=tuple(activities),
        durations=dict(day.durations),
    )


def set_duration(day: DayActivity, activity: ActivityType, minutes: int) -> DayActivity:
    """Return a copy of the day with a new duration for one activity."""
    durations = dict(day.durations)
    durations[activity] = minutes
    return DayActivity(
        day=day.day,
        day_index=day.day_index,
        activities=day.activities,
        durations=durations,
    )


def default_week() -> WeeklyActivity:
    """Return strength training Monday to Saturday and rest on Sunday."""
    days = []
    for index, name in enumerate(WEEKDAYS):
        activities = (
            (ActivityType.REST,)
            if index == DAYS_PER_WEEK - 1
            else (ActivityType.STRENGTH_TRAINING,)
        )
        days.append(
            DayActivity(
                day=name,
                day_index=index,
                activities=activities,
                durations={ActivityType.STRENGTH_TRAINING: 60},
            )
        )
    return WeeklyActivity(days=tuple(days))
