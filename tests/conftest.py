"""Pytest fixtures for kinetic tests."""

from __future__ import annotations

import pytest

from kinetic.config.settings import StudioConfig
from kinetic.meals.models import FoodItem
from kinetic.profiles.models import AnthropometricProfile
from kinetic.skills.models import SkillKind, SkillLine, SkillNode
from kinetic.studio.models import BlockType
from kinetic.studio.session import new_node


@pytest.fixture
def male_profile():
    """Reference male profile: 175cm, 70kg, neck 38cm, waist 85cm."""
    return AnthropometricProfile(
        gender="male",
        age=25,
        height_cm=175,
        weight_kg=70,
        neck_cm=38,
        waist_cm=85,
        hip_cm=95,
        activity=1.55,
    )


@pytest.fixture
def female_profile():
    """Reference female profile: 165cm, 60kg, neck 32cm, waist 70cm, hip 95cm."""
    return AnthropometricProfile(
        gender="female",
        age=30,
        height_cm=165,
        weight_kg=60,
        neck_cm=32,
        waist_cm=70,
        hip_cm=95,
        activity=1.375,
    )


@pytest.fixture
def chicken():
    return FoodItem("Chicken breast, raw", 195, 29.55, 0, 7.72, "Skinless, lean")


@pytest.fixture
def rice():
    return FoodItem("Rice, cooked", 130, 2.36, 28.73, 0.19, "Swollen with water")


@pytest.fixture
def push_line():
    """A four-step push-up progression."""
    return SkillLine(
        id="push",
        title="PUSH",
        color="#a35b4d",
        nodes=(
            SkillNode("p1", "Wall Push-Up", SkillKind.REPS, "3x20", 3.8),
            SkillNode("p2", "Incline Push-Up", SkillKind.REPS, "3x15", 3.8),
            SkillNode("p3", "Knee Push-Up", SkillKind.REPS, "3x15", 3.8),
            SkillNode("p4", "Standard Push-Up", SkillKind.REPS, "3x20", 3.8),
        ),
    )


@pytest.fixture
def studio_config():
    return StudioConfig(block_duration=10, sets=3, reps=10, session_name="Untitled Session")


@pytest.fixture
def full_session(studio_config):
    """One block of each type, 10 minutes each."""
    return tuple(
        new_node(kind, node_id=f"node-{kind.value}", config=studio_config)
        for kind in (BlockType.WARMUP, BlockType.STRENGTH, BlockType.SKILL, BlockType.COOLDOWN)
    )
