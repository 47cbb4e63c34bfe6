"""Static reference data: the food pantry."""

from __future__ import annotations

from kinetic.data.foods import FOOD_DATABASE, find_food, search_foods

__all__ = ["FOOD_DATABASE", "find_food", "search_foods"]
