"""Static pantry of reference foods (macros per 100g) and lookup helpers."""

from __future__ import annotations

from typing import Optional

from kinetic.meals.models import FoodCategory, FoodItem

# FoodItem(name, calories, protein, carb, fat, note)
FOOD_DATABASE: tuple[FoodCategory, ...] = (
    FoodCategory(
        "Staples",
        (
            FoodItem("Yam, raw", 118, 1.53, 27.88, 0.17, "High-carb tuber; Dioscorea"),
            FoodItem("Yam, boiled", 116, 1.49, 27.58, 0.14, "Water added during cooking"),
            FoodItem("Cassava, raw", 160, 1.36, 38.06, 0.28, "Must cook/ferment (Garri source)"),
            FoodItem("Cassava, boiled", 173, 1.34, 37.46, 2.04, "Boiling increases absorbable cal"),
            FoodItem("Plantain, raw", 122, 1.30, 31.89, 0.37, "Ripe or green"),
            FoodItem("Plantain, boiled", 116, 0.79, 31.15, 0.18, "Lower protein ratio due to water"),
            FoodItem("Potato (white), raw", 77, 2.02, 17.47, 0.09, "Peel for fiber"),
            FoodItem("Potato, boiled", 87, 1.87, 20.13, 0.10, "Absorbs water"),
            FoodItem("Rice (white, uncooked)", 358, 6.50, 79.15, 0.52, "Milled grain staple"),
            FoodItem("Rice, cooked", 130, 2.36, 28.73, 0.19, "Swollen with water"),
            FoodItem("Corn (Maize), raw", 86, 3.22, 19.02, 1.18, "Fresh kernels or pap"),
            FoodItem("Sorghum, raw", 339, 11.3, 74.63, 3.30, "Drought-tolerant grain"),
            FoodItem("Millet, raw", 378, 11.0, 72.8, 4.2, "Ancient grain"),
            FoodItem("Cocoyam (Taro), raw", 129, 2.40, 27.40, 0.20, "Fibrous peel, must cook"),
        ),
    ),
    FoodCategory(
        "Proteins",
        (
            FoodItem("Chicken breast, raw", 195, 29.55, 0, 7.72, "Skinless, lean"),
            FoodItem("Beef (mixed), cooked", 288, 26.33, 0, 19.54, "Stewed or roasted"),
            FoodItem("Eggs, raw", 147, 12.58, 0.77, 9.94, "Whole egg"),
            FoodItem("Tilapia, raw", 96, 20.08, 0, 1.70, "Freshwater fish"),
            FoodItem("Catfish, raw", 145, 18.0, 0, 8.0, "Common local fish"),
        ),
    ),
    FoodCategory(
        "Legumes / Nuts / Seeds",
        (
            FoodItem("Kidney beans, raw", 333, 23.58, 60.01, 0.83, "Soak and boil"),
            FoodItem("Chickpeas, raw", 180, 9.54, 29.98, 2.99, "Garbanzo"),
            FoodItem("Lentils, raw", 354, 25.00, 63.00, 1.10, "Cooked ~116kcal"),
            FoodItem("Peanuts (groundnut)", 567, 25.80, 16.13, 49.24, "Roasted or paste"),
            FoodItem("Cashew nuts, raw", 553, 18.22, 30.19, 43.85, "Snack or stew"),
            FoodItem("Sesame seeds", 573, 17.73, 23.45, 49.67, "Beni seed"),
            FoodItem("Egusi (Pumpkin seeds)", 541, 24.54, 17.81, 45.85, "Soup ingredient"),
            FoodItem("Soybeans, raw", 446, 36.5, 30.2, 19.9, "Rich protein source"),
            FoodItem("Bambara groundnut", 390, 20.0, 60.0, 6.5, "Okpa ingredient"),
        ),
    ),
    FoodCategory(
        "Vegetables",
        (
            FoodItem("Okra, raw", 31, 2.0, 7.03, 0.10, "Mucilaginous pod"),
            FoodItem("Spinach, raw", 23, 2.9, 3.6, 0.4, "Leafy green"),
            FoodItem("Cabbage, raw", 24, 1.44, 5.58, 0.12, "Salads or sauces"),
            FoodItem("Tomato, raw", 18, 0.88, 3.92, 0.20, "Base for stew"),
            FoodItem("Carrot, raw", 41, 0.93, 9.58, 0.24, "Root veg"),
            FoodItem("Cucumber, raw", 15, 0.65, 3.63, 0.11, "Low calorie"),
            FoodItem("Green beans, raw", 31, 1.82, 7.13, 0.12, "Boiled/stir-fried"),
            FoodItem("Bell pepper, raw", 26, 0.99, 6.03, 0.30, "High Vit C"),
            FoodItem("Onion, raw", 42, 0.92, 10.11, 0.08, "Flavor base"),
            FoodItem("Eggplant (Garden Egg)", 24, 1.01, 5.70, 0.19, "Fried or stewed"),
            FoodItem("Bitter leaf", 35, 3.0, 6.0, 0.5, "Low carb green"),
        ),
    ),
    FoodCategory(
        "Fruits",
        (
            FoodItem("Mango, raw", 65, 0.51, 17.0, 0.27, "High sugar"),
            FoodItem("Banana, raw", 89, 1.09, 22.84, 0.33, "Dessert fruit"),
            FoodItem("Orange, raw", 47, 0.94, 11.75, 0.12, "Vitamin C"),
            FoodItem("Watermelon, raw", 30, 0.61, 7.55, 0.15, "High water"),
            FoodItem("Pineapple, raw", 48, 0.54, 12.63, 0.12, "Contains bromelain"),
            FoodItem("Papaya (Pawpaw)", 39, 0.6, 9.81, 0.14, "Fresh or stewed"),
            FoodItem("Guava, raw", 68, 2.55, 14.32, 0.95, "Very high Vit C"),
            FoodItem("African Pear (Ube)", 300, 10, 15, 25, "High fat fruit (roasted/boiled)"),
        ),
    ),
    FoodCategory(
        "Condiments / Oils",
        (
            FoodItem("Palm Oil", 884, 0, 0, 100, "High sat fat"),
            FoodItem("Palm Kernel Oil", 862, 0, 0, 100, "Very high sat fat"),
            FoodItem("Peanut Oil", 884, 0, 0, 100, "Common cooking oil"),
            FoodItem("Olive Oil", 884, 0, 0, 100, "Imported"),
            FoodItem("Shea Butter", 884, 0, 0, 100, "Cooking fat"),
        ),
    ),
)


def iter_foods(database: tuple[FoodCategory, ...] = FOOD_DATABASE):
    """Yield every food in the database."""
    for category in database:
        yield from category.items


def find_food(
    name: str,
    database: tuple[FoodCategory, ...] = FOOD_DATABASE,
) -> Optional[FoodItem]:
    """Look up a food by exact name.

    Args:
        name: Food name (an Ingredient's ``raw_name``)
        database: Categories to search

    Returns:
        Matching FoodItem or None
    """
    for food in iter_foods(database):
        if food.name == name:
            return food
    return None


def search_foods(
    query: str,
    database: tuple[FoodCategory, ...] = FOOD_DATABASE,
) -> list[FoodCategory]:
    """Case-insensitive substring search, grouped by category.

    An empty query returns the whole database. Categories without a
    match are left out.

    Args:
        query: Text to look for in food names
        database: Categories to search

    Returns:
        List of FoodCategory holding only matching items
    """
    needle = query.strip().lower()
    if not needle:
        return list(database)

    results = []
    for category in database:
        matches = tuple(item for item in category.items if needle in item.name.lower())
        if matches:
            results.append(FoodCategory(category=category.category, items=matches))
    return results
