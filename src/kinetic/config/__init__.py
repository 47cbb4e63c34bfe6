"""Configuration management."""

from __future__ import annotations

from kinetic.config.settings import Settings, get_settings, reload_settings

__all__ = ["Settings", "get_settings", "reload_settings"]
