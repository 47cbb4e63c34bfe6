"""Kinetic: body composition, meal planning and calisthenics computation engine."""

__version__ = "0.1.0"
