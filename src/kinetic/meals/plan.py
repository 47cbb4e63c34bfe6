"""Weekly meal plan: 7 days x 4 meals of ingredient lists, plus totals.

A WeeklyPlan is immutable. ``add_ingredient`` and ``remove_ingredient``
return a new plan and leave the original untouched, so callers always hold
a complete, consistent plan.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Sequence

from kinetic.meals.models import Ingredient, NutritionTotals
from kinetic.profiles.body_calc import MacroTargets

logger = logging.getLogger(__name__)

DAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
MEALS = ("Breakfast", "Lunch", "Dinner", "Snacks")


@dataclass(frozen=True)
class WeeklyPlan:
    """Ingredients for every (day, meal) slot.

    ``slots`` maps day -> meal -> tuple of Ingredients in insertion order.
    Build one with ``empty_plan()``. All 28 slots must be present; the
    mapping is stored read-only.

    Raises:
        ValueError: if a day or meal slot is missing or unknown
    """

    slots: Mapping[str, Mapping[str, tuple[Ingredient, ...]]]

    def __post_init__(self) -> None:
        unknown = set(self.slots) - set(DAYS)
        if unknown:
            raise ValueError(f"Unknown days in plan: {sorted(unknown)}")

        slots = {}
        for day in DAYS:
            if day not in self.slots:
                raise ValueError(f"Plan is missing day '{day}'")
            meals = self.slots[day]
            unknown = set(meals) - set(MEALS)
            if unknown:
                raise ValueError(f"Unknown meals on {day}: {sorted(unknown)}")
            missing = [meal for meal in MEALS if meal not in meals]
            if missing:
                raise ValueError(f"Plan is missing {day} meals: {missing}")
            slots[day] = MappingProxyType({meal: tuple(meals[meal]) for meal in MEALS})

        object.__setattr__(self, "slots", MappingProxyType(slots))

    def ingredients(self, day: str, meal: str) -> tuple[Ingredient, ...]:
        """Ingredients in one slot."""
        _check_slot(day, meal)
        return self.slots[day][meal]


def _check_slot(day: str, meal: str) -> None:
    if day not in DAYS:
        raise ValueError(f"day must be one of {DAYS}, got '{day}'")
    if meal not in MEALS:
        raise ValueError(f"meal must be one of {MEALS}, got '{meal}'")


def empty_plan() -> WeeklyPlan:
    """Plan with all 28 slots present and empty."""
    return WeeklyPlan(slots={day: {meal: () for meal in MEALS} for day in DAYS})


def _with_slot(
    plan: WeeklyPlan,
    day: str,
    meal: str,
    ingredients: tuple[Ingredient, ...],
) -> WeeklyPlan:
    slots = {d: dict(meals) for d, meals in plan.slots.items()}
    slots[day][meal] = ingredients
    return WeeklyPlan(slots=slots)


def add_ingredient(
    plan: WeeklyPlan,
    day: str,
    meal: str,
    ingredient: Ingredient,
) -> WeeklyPlan:
    """Append an ingredient to a slot. Duplicates are allowed.

    Returns:
        New WeeklyPlan
    """
    _check_slot(day, meal)
    return _with_slot(plan, day, meal, plan.slots[day][meal] + (ingredient,))


def remove_ingredient(plan: WeeklyPlan, day: str, meal: str, index: int) -> WeeklyPlan:
    """Remove the ingredient at ``index``; later ingredients shift down.

    An index outside the slot (a stale index) leaves the plan unchanged.

    Returns:
        New WeeklyPlan, or ``plan`` itself when nothing was removed
    """
    _check_slot(day, meal)
    current = plan.slots[day][meal]
    if not 0 <= index < len(current):
        logger.debug(
            "Ignoring removal of index %d from %s %s (%d ingredients)",
            index, day, meal, len(current),
        )
        return plan
    return _with_slot(plan, day, meal, current[:index] + current[index + 1:])


def slot_totals(ingredients: Sequence[Ingredient]) -> NutritionTotals:
    """Sum calories and macros over a slot's ingredients."""
    totals = NutritionTotals()
    for ingredient in ingredients:
        totals = totals + ingredient.totals
    return totals


def day_totals(plan: WeeklyPlan, day: str) -> NutritionTotals:
    """Sum of the four meal slots for one day."""
    totals = NutritionTotals()
    for meal in MEALS:
        totals = totals + slot_totals(plan.ingredients(day, meal))
    return totals


def week_totals(plan: WeeklyPlan) -> NutritionTotals:
    """Sum over all seven days."""
    totals = NutritionTotals()
    for day in DAYS:
        totals = totals + day_totals(plan, day)
    return totals


@dataclass(frozen=True)
class MacroProgress:
    """Consumed amount against a target for one macro."""

    consumed: float
    target: Optional[int]

    @property
    def remaining(self) -> Optional[float]:
        if self.target is None:
            return None
        return self.target - self.consumed

    @property
    def over_target(self) -> bool:
        return self.target is not None and self.consumed > self.target


def compare_to_targets(
    totals: NutritionTotals,
    targets: Optional[MacroTargets],
) -> dict[str, MacroProgress]:
    """Progress of a day's totals against the daily targets.

    Args:
        totals: Day totals
        targets: Calculated targets, or None when not calculated yet

    Returns:
        Dict keyed by "calories", "protein", "carb", "fat"
    """
    return {
        "calories": MacroProgress(totals.calories, targets.calories if targets else None),
        "protein": MacroProgress(totals.protein, targets.protein if targets else None),
        "carb": MacroProgress(totals.carb, targets.carb if targets else None),
        "fat": MacroProgress(totals.fat, targets.fat if targets else None),
    }
