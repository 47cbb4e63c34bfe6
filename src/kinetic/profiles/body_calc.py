"""Body composition calculator for calorie and macro targets.

Estimates body fat with the U.S. Navy circumference method, derives lean
body mass (LBM) from it, and computes TDEE and macro targets from LBM.

Uses the Katch-McArdle style BMR (370 + 21.6 × LBM) because it depends on
lean mass only, which the Navy estimate gives us directly.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Union

from kinetic.errors import INVALID_ANTHROPOMETRY, INVALID_INPUT, ComputationError
from kinetic.profiles.models import AnthropometricProfile
from kinetic.rounding import round_half_up


class Sex(Enum):
    """Biological sex for the circumference formula."""
    MALE = "male"
    FEMALE = "female"


class ActivityLevel(Enum):
    """Activity level multipliers for TDEE calculation."""
    SEDENTARY = "sedentary"          # Little or no exercise
    LIGHT = "light"                  # Light exercise 1-3 days/week
    MODERATE = "moderate"            # Moderate exercise 3-5 days/week
    ACTIVE = "active"                # Hard exercise 6-7 days/week
    VERY_ACTIVE = "very_active"      # Very hard exercise, physical job


# Activity level multipliers (Harris-Benedict activity factors)
ACTIVITY_MULTIPLIERS = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHT: 1.375,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.ACTIVE: 1.725,
    ActivityLevel.VERY_ACTIVE: 1.9,
}

BODY_FAT_MIN = 2.0
BODY_FAT_MAX = 70.0

# Share of calories per macro and energy density (kcal/g)
MACRO_SPLIT = {
    "protein": (0.30, 4),
    "fat": (0.35, 9),
    "carb": (0.35, 4),
}


@dataclass(frozen=True)
class BodyComposition:
    """Navy-method estimate at full precision."""

    body_fat_pct: float
    lbm_kg: float


@dataclass(frozen=True)
class MacroTargets:
    """Daily energy and macro targets."""

    calories: int
    protein: int
    fat: int
    carb: int
    lbm: float       # kg, 1 decimal
    body_fat: float  # %, 1 decimal

    def summary(self) -> str:
        """Human-readable summary of targets."""
        lines = [
            f"Body fat: {self.body_fat:.1f}%",
            f"Lean mass: {self.lbm:.1f} kg",
            f"Target: {self.calories} kcal/day",
            f"Protein: {self.protein}g  Fat: {self.fat}g  Carbs: {self.carb}g",
        ]
        return "\n".join(lines)


def activity_multiplier(activity: Union[float, str]) -> float:
    """Resolve an activity level name or raw multiplier to a multiplier.

    Args:
        activity: Level name ("sedentary" ... "very_active") or a positive number

    Returns:
        Activity multiplier

    Raises:
        ComputationError: invalid-input for an unknown level name or a
            multiplier that is not a positive finite number
    """
    if isinstance(activity, str):
        try:
            level = ActivityLevel(activity.lower())
        except ValueError:
            valid = [level.value for level in ActivityLevel]
            raise ComputationError(
                INVALID_INPUT,
                f"unknown activity level '{activity}', must be one of {valid}",
            ) from None
        return ACTIVITY_MULTIPLIERS[level]
    if not math.isfinite(activity) or activity <= 0:
        raise ComputationError(INVALID_INPUT, f"activity must be positive, got {activity}")
    return float(activity)


def is_ready(profile: AnthropometricProfile) -> bool:
    """Return True when every measurement the estimator needs is entered."""
    return all(
        value and value > 0
        for value in (
            profile.height_cm,
            profile.weight_kg,
            profile.neck_cm,
            profile.waist_cm,
        )
    )


def calculate_body_fat(
    sex: Sex,
    height_cm: float,
    neck_cm: float,
    waist_cm: float,
    hip_cm: float = 0.0,
) -> float:
    """Estimate body fat percentage with the U.S. Navy method.

    Args:
        sex: Biological sex
        height_cm: Height in centimeters
        neck_cm: Neck circumference in centimeters
        waist_cm: Waist circumference in centimeters
        hip_cm: Hip circumference in centimeters (female only)

    Returns:
        Body fat percentage clamped to [2, 70]

    Raises:
        ComputationError: invalid-anthropometry when the circumference
            term is not positive
    """
    if sex == Sex.MALE:
        girth = waist_cm - neck_cm
        if girth <= 0:
            raise ComputationError(
                INVALID_ANTHROPOMETRY,
                f"waist ({waist_cm:g} cm) must be larger than neck ({neck_cm:g} cm)",
            )
        density = 1.0324 - 0.19077 * math.log10(girth) + 0.15456 * math.log10(height_cm)
    else:
        girth = waist_cm + hip_cm - neck_cm
        if girth <= 0:
            raise ComputationError(
                INVALID_ANTHROPOMETRY,
                f"waist + hip ({waist_cm + hip_cm:g} cm) must be larger than "
                f"neck ({neck_cm:g} cm)",
            )
        density = 1.29579 - 0.35004 * math.log10(girth) + 0.22100 * math.log10(height_cm)

    body_fat = 495 / density - 450

    return max(BODY_FAT_MIN, min(BODY_FAT_MAX, body_fat))


def calculate_lbm(weight_kg: float, body_fat_pct: float) -> float:
    """Lean body mass in kilograms."""
    return weight_kg * (1 - body_fat_pct / 100)


def estimate_composition(profile: AnthropometricProfile) -> BodyComposition:
    """Run the Navy estimate for a canonical profile.

    Raises:
        ComputationError: invalid-input when a required measurement is
            missing, invalid-anthropometry when the formula is undefined
    """
    if not is_ready(profile):
        raise ComputationError(
            INVALID_INPUT,
            "height, weight, neck and waist are required",
        )

    body_fat = calculate_body_fat(
        Sex(profile.gender),
        profile.height_cm,
        profile.neck_cm,
        profile.waist_cm,
        profile.hip_cm,
    )
    return BodyComposition(
        body_fat_pct=body_fat,
        lbm_kg=calculate_lbm(profile.weight_kg, body_fat),
    )


def calculate_bmr(lbm_kg: float) -> float:
    """Basal Metabolic Rate from lean body mass (Katch-McArdle).

    Args:
        lbm_kg: Lean body mass in kilograms

    Returns:
        BMR in calories per day
    """
    if not lbm_kg or lbm_kg <= 0:
        raise ComputationError(INVALID_INPUT, f"lbm must be positive, got {lbm_kg}")
    return 370 + 21.6 * lbm_kg


def calculate_tdee(bmr: float, activity: Union[float, str]) -> int:
    """Total Daily Energy Expenditure, rounded to whole kcal."""
    return round_half_up(bmr * activity_multiplier(activity))


def allocate_macros(
    calories: int,
    lbm_kg: float,
    body_fat_pct: float,
) -> MacroTargets:
    """Split calories into protein/fat/carb grams.

    Args:
        calories: Daily calorie target
        lbm_kg: Lean body mass at full precision
        body_fat_pct: Body fat at full precision

    Returns:
        MacroTargets with rounded presentation values
    """
    grams = {
        macro: round_half_up(calories * share / kcal_per_gram)
        for macro, (share, kcal_per_gram) in MACRO_SPLIT.items()
    }
    return MacroTargets(
        calories=calories,
        protein=grams["protein"],
        fat=grams["fat"],
        carb=grams["carb"],
        lbm=round_half_up(lbm_kg, 1),
        body_fat=round_half_up(body_fat_pct, 1),
    )


def calculate_targets(profile: AnthropometricProfile) -> MacroTargets:
    """Calculate calorie and macro targets for a profile.

    Args:
        profile: Canonical (cm/kg) measurements

    Returns:
        MacroTargets

    Raises:
        ComputationError: see ``estimate_composition`` and ``calculate_bmr``
    """
    composition = estimate_composition(profile)
    bmr = calculate_bmr(composition.lbm_kg)
    tdee = calculate_tdee(bmr, profile.activity)

    return allocate_macros(tdee, composition.lbm_kg, composition.body_fat_pct)


def targets_to_dict(targets: MacroTargets) -> dict:
    """Convert MacroTargets to dict for JSON output."""
    return {
        "calories": targets.calories,
        "protein": targets.protein,
        "fat": targets.fat,
        "carb": targets.carb,
        "lbm": targets.lbm,
        "bodyFat": targets.body_fat,
    }
