"""Body composition and energy targets.

Measurements are normalized to centimeters and kilograms, run through the
U.S. Navy body fat estimate, and turned into daily calorie and macro
targets from lean body mass.
"""

from __future__ import annotations

from kinetic.profiles.body_calc import (
    BodyComposition,
    MacroTargets,
    calculate_targets,
    estimate_composition,
    is_ready,
)
from kinetic.profiles.models import (
    AnthropometricProfile,
    UnitPreferences,
    normalize_profile,
)

__all__ = [
    "AnthropometricProfile",
    "BodyComposition",
    "MacroTargets",
    "UnitPreferences",
    "calculate_targets",
    "estimate_composition",
    "is_ready",
    "normalize_profile",
]
