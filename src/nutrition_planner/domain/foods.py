"""Domain models for the reference food table."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import StrEnum

from nutrition_planner.domain.errors import UnknownFoodError


class FoodCategory(StrEnum):
    """Category of a reference food."""

    PROTEIN = "protein"
    CARB = "carb"
    FAT = "fat"
    VEGETABLE = "vegetable"
    FRUIT = "fruit"
    DAIRY = "dairy"


@dataclass(frozen=True)
class FoodRecord:
    """Reference food with macros per 100 g (or 100 ml)."""

    name: str
    calories_per_100g: float
    protein_per_100g: float
    carbs_per_100g: float
    fat_per_100g: float
    unit: str
    serving_size: float
    category: FoodCategory
    allergens: tuple[str, ...] = ()

    def matches_allergies(self, allergies: Iterable[str]) -> bool:
        """Return True when any allergen tag overlaps one of the allergies."""
        for allergen in self.allergens:
            allergen_lower = allergen.lower()
            for allergy in allergies:
                allergy_lower = allergy.lower()
                if allergy_lower in allergen_lower or allergen_lower in allergy_lower:
                    return True
        return False


@dataclass(frozen=True)
class FoodTable:
    """Immutable, injectable collection of reference foods."""

    foods: tuple[FoodRecord, ...]

    def __iter__(self) -> Iterator[FoodRecord]:
        return iter(self.foods)

    def __len__(self) -> int:
        return len(self.foods)

    def find(self, name: str) -> FoodRecord | None:
        """Return the record with this name, ignoring case."""
        name_lower = name.lower()
        for food in self.foods:
            if food.name.lower() == name_lower:
                return food
        return None

    def get(self, name: str) -> FoodRecord:
        """Return the record with this name or raise UnknownFoodError."""
        food = self.find(name)
        if food is None:
            raise UnknownFoodError(name)
        return food

    def by_category(self, category: FoodCategory) -> list[FoodRecord]:
        """Return foods of one category in table order."""
        return [food for food in self.foods if food.category == category]

    def without_allergens(self, allergies: Iterable[str]) -> "FoodTable":
        """Return a table with every food matching an allergy removed."""
        allergy_list = [a for a in allergies if a]
        if not allergy_list:
            return self
        return FoodTable(
            foods=tuple(
                food for food in self.foods if not food.matches_allergies(allergy_list)
            )
        )
