"""Application settings and configuration management."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

from kinetic.profiles.models import UnitPreferences


def _default_config_dir() -> Path:
    """Return the default configuration directory."""
    return Path.home() / ".kinetic"


@dataclass
class UnitsConfig:
    """Preferred unit tag per measurement group.

    The engine itself never reads settings. Callers pass
    ``settings.units.to_preferences()`` to ``normalize_profile(units=...)``.
    """

    height: str = "cm"  # "cm" or "in"
    weight: str = "kg"  # "kg" or "lbs"
    measure: str = "cm"  # "cm" or "in"

    def to_preferences(self) -> UnitPreferences:
        return UnitPreferences(height=self.height, weight=self.weight, measure=self.measure)


@dataclass
class StudioConfig:
    """Defaults for new session blocks and drafts.

    Passed by callers as ``config=`` to ``new_node``, ``add_node`` and
    ``new_draft``; those fall back to these built-in values when omitted.
    """

    block_duration: int = 10
    sets: int = 3
    reps: int = 10
    session_name: str = "Untitled Session"


@dataclass
class Settings:
    """Main application settings."""

    units: UnitsConfig = field(default_factory=UnitsConfig)
    studio: StudioConfig = field(default_factory=StudioConfig)

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "Settings":
        """Load settings from YAML file or return defaults.

        Args:
            config_path: Path to config.yaml. If None, uses ~/.kinetic/config.yaml

        Returns:
            Settings instance

        Raises:
            ValueError: if the file or one of its sections is not a mapping
        """
        if config_path is None:
            config_path = _default_config_dir() / "config.yaml"

        if not config_path.exists():
            return cls()

        with open(config_path) as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"{config_path}: expected a mapping at top level")
        for section in ("units", "studio"):
            if section in data and not isinstance(data[section], dict):
                raise ValueError(f"{config_path}: '{section}' must be a mapping")

        settings = cls()

        # Parse units config
        if "units" in data:
            units_data = data["units"]
            if "height" in units_data:
                settings.units.height = str(units_data["height"])
            if "weight" in units_data:
                settings.units.weight = str(units_data["weight"])
            if "measure" in units_data:
                settings.units.measure = str(units_data["measure"])

        # Parse studio config
        if "studio" in data:
            studio_data = data["studio"]
            if "block_duration" in studio_data:
                settings.studio.block_duration = int(studio_data["block_duration"])
            if "sets" in studio_data:
                settings.studio.sets = int(studio_data["sets"])
            if "reps" in studio_data:
                settings.studio.reps = int(studio_data["reps"])
            if "session_name" in studio_data:
                settings.studio.session_name = str(studio_data["session_name"])

        return settings

    def save(self, config_path: Optional[Path] = None) -> None:
        """Save current settings to YAML file.

        Args:
            config_path: Path to save config.yaml. If None, uses ~/.kinetic/config.yaml
        """
        if config_path is None:
            config_path = _default_config_dir() / "config.yaml"

        config_path.parent.mkdir(parents=True, exist_ok=True)

        data = {
            "units": {
                "height": self.units.height,
                "weight": self.units.weight,
                "measure": self.units.measure,
            },
            "studio": {
                "block_duration": self.studio.block_duration,
                "sets": self.studio.sets,
                "reps": self.studio.reps,
                "session_name": self.studio.session_name,
            },
        }

        with open(config_path, "w") as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)


# Global settings instance (lazy loaded)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, loading from disk if needed."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings


def reload_settings() -> Settings:
    """Force reload settings from disk."""
    global _settings
    _settings = Settings.load()
    return _settings
