"""Pydantic request models for the HTTP API."""

from datetime import date

from pydantic import BaseModel, Field

from nutrition_planner.domain.foods import FoodCategory
from nutrition_planner.domain.plans import FoodItem, MealPlan
from nutrition_planner.domain.profile import (
    DAYS_PER_WEEK,
    ActivityType,
    DayActivity,
    Goal,
    Sex,
    UserProfile,
    WeeklyActivity,
)


class ProfileIn(BaseModel):
    """User profile payload."""

    sex: Sex
    weight_kg: float = Field(gt=0)
    height_cm: float = Field(gt=0)
    age: int = Field(gt=0)
    daily_steps: int = Field(default=8000, ge=0)
    goal: Goal = Goal.MAINTAIN
    meals_per_day: int = Field(default=4, ge=3, le=6)
    allergies: list[str] = Field(default_factory=list)
    restrictions: list[str] = Field(default_factory=list)

    def to_domain(self) -> UserProfile:
        """Convert to the domain profile."""
        return UserProfile(
            sex=self.sex,
            weight_kg=self.weight_kg,
            height_cm=self.height_cm,
            age=self.age,
            daily_steps=self.daily_steps,
            goal=self.goal,
            meals_per_day=self.meals_per_day,
            allergies=frozenset(self.allergies),
            restrictions=frozenset(self.restrictions),
        )


class DayIn(BaseModel):
    """One weekday of planned activities."""

    day: str
    activities: list[ActivityType] = Field(default_factory=lambda: [ActivityType.REST])
    durations: dict[ActivityType, int] = Field(default_factory=dict)

    def to_domain(self, day_index: int) -> DayActivity:
        """Convert to the domain day."""
        return DayActivity(
            day=self.day,
            day_index=day_index,
            activities=tuple(self.activities),
            durations=dict(self.durations),
        )


class PlanRequest(BaseModel):
    """Profile and week used to generate a plan."""

    profile: ProfileIn
    days: list[DayIn] = Field(min_length=DAYS_PER_WEEK, max_length=DAYS_PER_WEEK)
    seed: int | None = None

    def week(self) -> WeeklyActivity:
        """Convert the days to a domain week."""
        return WeeklyActivity(
            days=tuple(day.to_domain(index) for index, day in enumerate(self.days))
        )


class FoodItemIn(BaseModel):
    """A food already placed in a meal."""

    name: str
    quantity: int = Field(ge=0)
    unit: str = "g"
    calories: int = 0
    protein: int = 0
    carbs: int = 0
    fat: int = 0
    category: FoodCategory | None = None

    def to_domain(self) -> FoodItem:
        """Convert to the domain food item."""
        return FoodItem(
            name=self.name,
            quantity=self.quantity,
            unit=self.unit,
            calories=self.calories,
            protein=self.protein,
            carbs=self.carbs,
            fat=self.fat,
            category=self.category,
        )


class SubstitutionRequest(BaseModel):
    """A meal and the food to swap inside it."""

    meal_name: str
    meal_time: str = ""
    foods: list[FoodItemIn] = Field(min_length=1)
    food_index: int = Field(ge=0)
    replacement: str
    category: FoodCategory | None = None

    def meal(self) -> MealPlan:
        """Build the domain meal from the submitted foods."""
        return MealPlan.from_foods(
            self.meal_name,
            self.meal_time,
            [food.to_domain() for food in self.foods],
        )


class FoodLogIn(BaseModel):
    """A reference food eaten by a user."""

    food_name: str
    meal_type: str
    quantity: float = Field(gt=0)
    logged_date: date
