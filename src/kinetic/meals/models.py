"""Data models for foods, ingredients and nutrition totals.

All food values are per 100g. An Ingredient is a snapshot of a food scaled
to an actual portion and adjusted for how it was cooked.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class CookingMethod(Enum):
    """How an ingredient was prepared."""

    NONE = "none"
    BOILED = "boiled"
    AIR_FRIED = "air-fried"
    STEWED = "stewed"
    SHALLOW_FRIED = "shallow-fried"
    DEEP_FRIED = "deep-fried"


# Fat absorbed during cooking, grams per 100g of food
COOKING_FAT_PER_100G: dict[CookingMethod, float] = {
    CookingMethod.NONE: 0.0,
    CookingMethod.BOILED: 0.0,
    CookingMethod.AIR_FRIED: 1.0,
    CookingMethod.STEWED: 5.0,
    CookingMethod.SHALLOW_FRIED: 6.0,
    CookingMethod.DEEP_FRIED: 14.0,
}

# Suffix appended to the ingredient's display name
COOKING_LABELS: dict[CookingMethod, str] = {
    CookingMethod.NONE: "",
    CookingMethod.BOILED: "Boiled",
    CookingMethod.AIR_FRIED: "Air Fried",
    CookingMethod.STEWED: "Stewed",
    CookingMethod.SHALLOW_FRIED: "Shallow Fried",
    CookingMethod.DEEP_FRIED: "Deep Fried",
}

FAT_KCAL_PER_GRAM = 9


@dataclass(frozen=True)
class FoodItem:
    """Reference food with macros per 100g."""

    name: str
    calories: float
    protein: float
    carb: float
    fat: float
    note: str = ""


@dataclass(frozen=True)
class FoodCategory:
    """A named group of foods in the pantry."""

    category: str
    items: tuple[FoodItem, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class NutritionTotals:
    """Summed calories and macros (unrounded)."""

    calories: float = 0.0
    protein: float = 0.0
    carb: float = 0.0
    fat: float = 0.0

    def __add__(self, other: NutritionTotals) -> NutritionTotals:
        return NutritionTotals(
            calories=self.calories + other.calories,
            protein=self.protein + other.protein,
            carb=self.carb + other.carb,
            fat=self.fat + other.fat,
        )


@dataclass(frozen=True)
class Ingredient:
    """A food portion placed in a meal slot.

    Attributes:
        name: Display name, including the cooking annotation
        raw_name: Name of the source FoodItem, for lookup when editing
        weight: Portion in grams
        cooking_method: How the portion was cooked
        calories, protein, carb, fat: Values for this portion
        note: Note copied from the source food
    """

    name: str
    raw_name: str
    weight: float
    cooking_method: CookingMethod
    calories: float
    protein: float
    carb: float
    fat: float
    note: str = ""

    @property
    def totals(self) -> NutritionTotals:
        return NutritionTotals(
            calories=self.calories,
            protein=self.protein,
            carb=self.carb,
            fat=self.fat,
        )
