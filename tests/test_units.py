"""Tests for unit conversion and profile normalization."""

from __future__ import annotations

import pytest

from kinetic.profiles.models import AnthropometricProfile, UnitPreferences, normalize_profile
from kinetic.profiles.units import from_cm, from_kg, to_cm, to_kg


class TestConversions:
    """Tests for the length and mass converters."""

    def test_inches_to_cm(self):
        assert to_cm(10, "in") == pytest.approx(25.4)

    def test_cm_is_identity(self):
        assert to_cm(175, "cm") == 175

    def test_pounds_to_kg(self):
        assert to_kg(100, "lbs") == pytest.approx(45.3592)

    def test_kg_is_identity(self):
        assert to_kg(70, "kg") == 70

    def test_back_conversion(self):
        assert from_cm(to_cm(68, "in"), "in") == pytest.approx(68)
        assert from_kg(to_kg(154, "lbs"), "lbs") == pytest.approx(154)

    def test_unknown_unit_rejected(self):
        with pytest.raises(ValueError):
            to_cm(10, "ft")


class TestNormalizeProfile:
    """Tests for normalize_profile."""

    def test_metric_default(self):
        profile = normalize_profile("male", 25, 175, 70, 38, 85)
        assert profile.height_cm == 175
        assert profile.weight_kg == 70
        assert profile.hip_cm == 0

    def test_imperial_inputs(self):
        units = UnitPreferences(height="in", weight="lbs", measure="in")
        profile = normalize_profile("female", 30, 65, 132, 13, 28, hip=38, units=units)

        assert profile.height_cm == pytest.approx(165.1)
        assert profile.weight_kg == pytest.approx(132 * 0.453592)
        assert profile.neck_cm == pytest.approx(33.02)
        assert profile.waist_cm == pytest.approx(71.12)
        assert profile.hip_cm == pytest.approx(96.52)

    def test_mixed_units(self):
        """Each measurement group converts independently."""
        units = UnitPreferences(height="cm", weight="lbs", measure="in")
        profile = normalize_profile("male", 40, 180, 200, 15, 36, units=units)

        assert profile.height_cm == 180
        assert profile.weight_kg == pytest.approx(90.7184)
        assert profile.waist_cm == pytest.approx(91.44)

    def test_gender_is_case_insensitive(self):
        profile = normalize_profile("Male", 25, 175, 70, 38, 85)
        assert profile.gender == "male"

    def test_invalid_unit_preference(self):
        with pytest.raises(ValueError):
            UnitPreferences(weight="stone")


class TestProfileValidation:
    """Tests for AnthropometricProfile validation."""

    def test_invalid_gender(self):
        with pytest.raises(ValueError, match="gender"):
            AnthropometricProfile("other", 25, 175, 70, 38, 85)

    def test_negative_age(self):
        with pytest.raises(ValueError, match="age"):
            AnthropometricProfile("male", -1, 175, 70, 38, 85)
