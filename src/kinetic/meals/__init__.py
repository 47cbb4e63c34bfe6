"""Ingredient composition and weekly meal plan aggregation."""

from __future__ import annotations

from kinetic.meals.composer import compose_ingredient, recompose_ingredient
from kinetic.meals.models import (
    CookingMethod,
    FoodCategory,
    FoodItem,
    Ingredient,
    NutritionTotals,
)
from kinetic.meals.plan import (
    DAYS,
    MEALS,
    WeeklyPlan,
    add_ingredient,
    day_totals,
    empty_plan,
    remove_ingredient,
    slot_totals,
    week_totals,
)

__all__ = [
    "DAYS",
    "MEALS",
    "CookingMethod",
    "FoodCategory",
    "FoodItem",
    "Ingredient",
    "NutritionTotals",
    "WeeklyPlan",
    "add_ingredient",
    "compose_ingredient",
    "day_totals",
    "empty_plan",
    "recompose_ingredient",
    "remove_ingredient",
    "slot_totals",
    "week_totals",
]
