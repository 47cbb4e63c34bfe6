"""Turn a reference food, a portion weight and a cooking method into an Ingredient."""

from __future__ import annotations

from typing import Optional, Union

from kinetic.errors import INVALID_INPUT, ComputationError
from kinetic.meals.models import (
    COOKING_FAT_PER_100G,
    COOKING_LABELS,
    FAT_KCAL_PER_GRAM,
    CookingMethod,
    FoodCategory,
    FoodItem,
    Ingredient,
)


def display_name(food_name: str, method: CookingMethod) -> str:
    """Food name with the cooking annotation, e.g. "Yam, raw (Boiled)"."""
    label = COOKING_LABELS[method]
    if not label:
        return food_name
    return f"{food_name} ({label})"


def compose_ingredient(
    food: FoodItem,
    weight_g: float,
    method: Union[CookingMethod, str] = CookingMethod.NONE,
    fat_table: Optional[dict[CookingMethod, float]] = None,
) -> Ingredient:
    """Scale a food to a portion and add the fat absorbed while cooking.

    Added fat is proportional to the portion weight and does not depend on
    the food's own fat content.

    Args:
        food: Reference food (values per 100g)
        weight_g: Portion in grams; 0 gives an all-zero ingredient
        method: Cooking method or its string tag
        fat_table: Added fat per 100g by method (defaults to COOKING_FAT_PER_100G)

    Returns:
        Ingredient for the portion

    Raises:
        ComputationError: invalid-input for a negative weight
    """
    if weight_g < 0:
        raise ComputationError(INVALID_INPUT, f"weight must be >= 0, got {weight_g}")

    method = CookingMethod(method)
    if fat_table is None:
        fat_table = COOKING_FAT_PER_100G

    ratio = weight_g / 100
    added_fat = fat_table[method] * ratio

    return Ingredient(
        name=display_name(food.name, method),
        raw_name=food.name,
        weight=weight_g,
        cooking_method=method,
        calories=food.calories * ratio + added_fat * FAT_KCAL_PER_GRAM,
        protein=food.protein * ratio,
        carb=food.carb * ratio,
        fat=food.fat * ratio + added_fat,
        note=food.note,
    )


def source_food(
    ingredient: Ingredient,
    database: Optional[tuple[FoodCategory, ...]] = None,
) -> Optional[FoodItem]:
    """Reference food an ingredient was made from, looked up by raw name.

    Searches the built-in pantry when ``database`` is None.
    """
    from kinetic.data.foods import FOOD_DATABASE, find_food

    return find_food(ingredient.raw_name, database or FOOD_DATABASE)


def recompose_ingredient(
    ingredient: Ingredient,
    weight_g: Optional[float] = None,
    method: Union[CookingMethod, str, None] = None,
    database: Optional[tuple[FoodCategory, ...]] = None,
) -> Ingredient:
    """Rebuild an ingredient from its source food with a new weight or method.

    Args:
        ingredient: Existing ingredient
        weight_g: New weight (keeps the current weight when None)
        method: New cooking method (keeps the current method when None)
        database: Food categories to resolve the source food from

    Returns:
        New Ingredient

    Raises:
        KeyError: if the source food is no longer in the database
    """
    food = source_food(ingredient, database)
    if food is None:
        raise KeyError(f"Unknown food: {ingredient.raw_name}")

    return compose_ingredient(
        food,
        ingredient.weight if weight_g is None else weight_g,
        ingredient.cooking_method if method is None else method,
    )
