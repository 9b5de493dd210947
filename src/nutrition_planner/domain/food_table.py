"""Reference food data used by the meal allocator."""

from nutrition_planner.domain.foods import FoodCategory, FoodRecord, FoodTable

P = FoodCategory.PROTEIN
C = FoodCategory.CARB
F = FoodCategory.FAT
V = FoodCategory.VEGETABLE
FR = FoodCategory.FRUIT
D = FoodCategory.DAIRY

# name, kcal, protein, carbs, fat (per 100 g), unit, serving, category, allergens
_ROWS: tuple[tuple[object, ...], ...] = (
    ("Chicken breast", 165, 31, 0, 3.6, "g", 180, P, ()),
    ("Lean beef", 250, 26, 0, 15, "g", 150, P, ()),
    ("Salmon", 208, 20, 0, 13, "g", 150, P, ()),
    ("Canned tuna", 130, 29, 0, 0.8, "g", 100, P, ()),
    ("Whole eggs", 155, 13, 1.1, 11, "units", 120, P, ("egg",)),
    ("Egg whites", 52, 11, 0.7, 0.2, "g", 150, P, ("egg",)),
    ("Turkey", 135, 30, 0, 1, "g", 150, P, ()),
    ("Hake", 82, 17, 0, 1, "g", 200, P, ()),
    ("Shrimp", 99, 24, 0.2, 0.3, "g", 150, P, ("shellfish",)),
    ("Serrano ham", 241, 31, 0, 13, "g", 100, P, ()),
    ("Cured pork loin", 186, 33, 0, 6, "g", 100, P, ()),
    ("Tofu", 76, 8, 1.9, 4.8, "g", 150, P, ("soy",)),
    ("Tempeh", 193, 19, 9.4, 11, "g", 100, P, ("soy",)),
    ("White rice", 130, 2.7, 28, 0.3, "g", 100, C, ()),
    ("Brown rice", 111, 2.6, 23, 0.9, "g", 100, C, ()),
    ("Potato", 77, 2, 17, 0.1, "g", 200, C, ()),
    ("Sweet potato", 86, 1.6, 20, 0.1, "g", 200, C, ()),
    ("Pasta", 131, 5, 25, 1.1, "g", 180, C, ("gluten",)),
    ("White bread", 265, 9, 49, 3.2, "g", 100, C, ("gluten",)),
    ("Whole wheat bread", 247, 13, 41, 3.4, "g", 60, C, ("gluten",)),
    ("Oats", 389, 17, 66, 7, "g", 100, C, ("gluten",)),
    ("Corn flakes", 378, 7, 84, 0.9, "g", 100, C, ("gluten",)),
    ("Cream of rice", 370, 7, 80, 1, "g", 100, C, ()),
    ("Oat flour", 389, 17, 66, 7, "g", 60, C, ("gluten",)),
    ("Quinoa", 120, 4.4, 21, 1.9, "g", 80, C, ()),
    ("Cooked legumes", 110, 7, 18, 0.5, "g", 150, C, ()),
    ("Couscous", 112, 3.8, 23, 0.2, "g", 80, C, ("gluten",)),
    ("Olive oil", 884, 0, 0, 100, "ml", 5, F, ()),
    ("Avocado", 160, 2, 9, 15, "g", 100, F, ()),
    ("Almonds", 579, 21, 22, 50, "g", 30, F, ("tree nuts",)),
    ("Walnuts", 654, 15, 14, 65, "g", 15, F, ("tree nuts",)),
    ("Peanut butter", 588, 25, 20, 50, "g", 20, F, ("peanuts",)),
    ("Dark chocolate 85%", 580, 10, 22, 46, "g", 10, F, ()),
    ("Chia seeds", 486, 17, 42, 31, "g", 15, F, ()),
    ("Greek yogurt", 97, 9, 4, 5, "g", 150, D, ("lactose",)),
    ("Whipped fresh cheese", 70, 12, 4, 0.2, "g", 200, D, ("lactose",)),
    ("Skim milk", 34, 3.4, 5, 0.1, "ml", 300, D, ("lactose",)),
    ("Cottage cheese", 98, 11, 3.4, 4.3, "g", 150, D, ("lactose",)),
    ("Broccoli", 34, 2.8, 7, 0.4, "g", 150, V, ()),
    ("Spinach", 23, 2.9, 3.6, 0.4, "g", 100, V, ()),
    ("Bell peppers", 31, 1, 6, 0.3, "g", 100, V, ()),
    ("Tomato", 18, 0.9, 3.9, 0.2, "g", 150, V, ()),
    ("Zucchini", 17, 1.2, 3.1, 0.3, "g", 150, V, ()),
    ("Mushrooms", 22, 3.1, 3.3, 0.3, "g", 100, V, ()),
    ("Carrot", 41, 0.9, 10, 0.2, "g", 100, V, ()),
    ("Banana", 89, 1.1, 23, 0.3, "g", 120, FR, ()),
    ("Apple", 52, 0.3, 14, 0.2, "g", 200, FR, ()),
    ("Strawberries", 33, 0.7, 8, 0.3, "g", 200, FR, ()),
    ("Blueberries", 57, 0.7, 14, 0.3, "g", 200, FR, ()),
    ("Mixed berries", 40, 0.8, 10, 0.3, "g", 200, FR, ()),
    ("Orange", 47, 0.9, 12, 0.1, "g", 180, FR, ()),
)


def default_food_table() -> FoodTable:
    """Build the bundled reference food table."""
    return FoodTable(
        foods=tuple(
            FoodRecord(
                name=name,
                calories_per_100g=float(kcal),
                protein_per_100g=float(protein),
                carbs_per_100g=float(carbs),
                fat_per_100g=float(fat),
                unit=unit,
                serving_size=float(serving),
                category=category,
                allergens=allergens,
            )
            for name, kcal, protein, carbs, fat, unit, serving, category, allergens in (
                _ROWS
            )
        )
    )
