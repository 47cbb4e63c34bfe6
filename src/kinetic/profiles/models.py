"""Data models for body measurements and unit preferences."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from kinetic.profiles.units import LengthUnit, MassUnit, to_cm, to_kg

VALID_GENDERS = ("male", "female")


@dataclass
class UnitPreferences:
    """Unit tag per measurement group, as entered by the user."""

    height: str = LengthUnit.CM.value  # 'cm' or 'in'
    weight: str = MassUnit.KG.value  # 'kg' or 'lbs'
    measure: str = LengthUnit.CM.value  # neck/waist/hip: 'cm' or 'in'

    def __post_init__(self) -> None:
        # Enum lookups raise ValueError for unknown tags
        LengthUnit(self.height)
        MassUnit(self.weight)
        LengthUnit(self.measure)


@dataclass
class AnthropometricProfile:
    """Body measurements in canonical units (cm, kg).

    A zero measurement means "not entered yet"; see
    ``kinetic.profiles.body_calc.is_ready``.
    """

    gender: str  # 'male' or 'female'
    age: int
    height_cm: float
    weight_kg: float
    neck_cm: float
    waist_cm: float
    hip_cm: float = 0.0  # only used for female
    activity: float = 1.55

    def __post_init__(self) -> None:
        if self.gender not in VALID_GENDERS:
            raise ValueError(f"gender must be 'male' or 'female', got '{self.gender}'")
        if self.age < 0:
            raise ValueError(f"age must be >= 0, got {self.age}")


def normalize_profile(
    gender: str,
    age: int,
    height: float,
    weight: float,
    neck: float,
    waist: float,
    hip: float = 0.0,
    activity: float = 1.55,
    units: Optional[UnitPreferences] = None,
) -> AnthropometricProfile:
    """Build a canonical profile from measurements entered in any unit.

    Args:
        gender: "male" or "female"
        age: Age in years
        height: Height in ``units.height``
        weight: Body weight in ``units.weight``
        neck: Neck circumference in ``units.measure``
        waist: Waist circumference in ``units.measure``
        hip: Hip circumference in ``units.measure``
        activity: Activity multiplier
        units: Unit tags; metric when None

    Returns:
        AnthropometricProfile in cm/kg
    """
    if units is None:
        units = UnitPreferences()

    return AnthropometricProfile(
        gender=gender.lower(),
        age=age,
        height_cm=to_cm(height, units.height),
        weight_kg=to_kg(weight, units.weight),
        neck_cm=to_cm(neck, units.measure),
        waist_cm=to_cm(waist, units.measure),
        hip_cm=to_cm(hip, units.measure),
        activity=activity,
    )
