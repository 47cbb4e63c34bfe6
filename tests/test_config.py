"""Tests for settings loading and saving."""

from __future__ import annotations

import pytest
import yaml

from kinetic.config.settings import Settings
from kinetic.profiles.models import UnitPreferences, normalize_profile


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self):
        settings = Settings()
        assert settings.units.height == "cm"
        assert settings.units.weight == "kg"
        assert settings.studio.block_duration == 10
        assert settings.studio.session_name == "Untitled Session"

    def test_missing_file_gives_defaults(self, tmp_path):
        settings = Settings.load(tmp_path / "missing.yaml")
        assert settings == Settings()

    def test_save_and_load(self, tmp_path):
        path = tmp_path / "nested" / "config.yaml"
        settings = Settings()
        settings.units.weight = "lbs"
        settings.studio.reps = 12
        settings.save(path)

        assert path.exists()
        loaded = Settings.load(path)
        assert loaded.units.weight == "lbs"
        assert loaded.studio.reps == 12
        assert loaded == settings

    def test_partial_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(yaml.dump({"studio": {"block_duration": 20}}))

        settings = Settings.load(path)
        assert settings.studio.block_duration == 20
        assert settings.studio.sets == 3
        assert settings.units.height == "cm"

    def test_empty_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert Settings.load(path) == Settings()

    def test_to_preferences(self):
        settings = Settings()
        settings.units.height = "in"
        settings.units.weight = "lbs"
        assert settings.units.to_preferences() == UnitPreferences(height="in", weight="lbs", measure="cm")

    def test_section_must_be_mapping(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("studio: 5\n")
        with pytest.raises(ValueError, match="studio"):
            Settings.load(path)

    def test_top_level_must_be_mapping(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("- cm\n- kg\n")
        with pytest.raises(ValueError, match="mapping"):
            Settings.load(path)

    def test_units_feed_normalize_profile(self):
        settings = Settings()
        settings.units.height = "in"
        settings.units.weight = "lbs"
        profile = normalize_profile(
            "male", 30, 70, 150, 15, 34, units=settings.units.to_preferences(),
        )
        assert profile.height_cm == pytest.approx(177.8)
        assert profile.weight_kg == pytest.approx(68.0388)
        assert profile.neck_cm == 15
