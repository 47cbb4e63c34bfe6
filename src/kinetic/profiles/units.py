"""Metric/imperial unit conversion for body measurements.

Every calculation runs on centimeters and kilograms. User input can arrive
in either system, tagged per measurement group (height, weight, and the
tape measurements neck/waist/hip).
"""

from __future__ import annotations

from enum import Enum
from typing import Union

CM_PER_INCH = 2.54
KG_PER_LB = 0.453592


class LengthUnit(Enum):
    """Unit tag for length measurements."""
    CM = "cm"
    IN = "in"


class MassUnit(Enum):
    """Unit tag for body weight."""
    KG = "kg"
    LBS = "lbs"


_LENGTH_TO_CM: dict[LengthUnit, float] = {
    LengthUnit.CM: 1.0,
    LengthUnit.IN: CM_PER_INCH,
}

_MASS_TO_KG: dict[MassUnit, float] = {
    MassUnit.KG: 1.0,
    MassUnit.LBS: KG_PER_LB,
}


def to_cm(value: float, unit: Union[LengthUnit, str] = LengthUnit.CM) -> float:
    """Convert a length to centimeters.

    Args:
        value: Raw measurement
        unit: "cm" or "in"

    Returns:
        Length in centimeters
    """
    return value * _LENGTH_TO_CM[LengthUnit(unit)]


def to_kg(value: float, unit: Union[MassUnit, str] = MassUnit.KG) -> float:
    """Convert a mass to kilograms.

    Args:
        value: Raw measurement
        unit: "kg" or "lbs"

    Returns:
        Mass in kilograms
    """
    return value * _MASS_TO_KG[MassUnit(unit)]


def from_cm(value_cm: float, unit: Union[LengthUnit, str]) -> float:
    """Convert centimeters back into the given display unit."""
    return value_cm / _LENGTH_TO_CM[LengthUnit(unit)]


def from_kg(value_kg: float, unit: Union[MassUnit, str]) -> float:
    """Convert kilograms back into the given display unit."""
    return value_kg / _MASS_TO_KG[MassUnit(unit)]
