"""Data models for calisthenics skill progressions."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class SkillKind(Enum):
    """How a skill's target is measured."""

    REPS = "reps"  # Target is sets x reps
    STATIC = "static"  # Target is a hold time


class NodeState(Enum):
    """Progress state of a skill node, derived from the mastery set."""

    LOCKED = "locked"
    UNLOCKED = "unlocked"
    MASTERED = "mastered"


@dataclass(frozen=True)
class SkillNode:
    """A single skill in a progression.

    Attributes:
        id: Unique id across all lines (e.g., "pu4")
        name: Display name
        kind: Reps or static hold
        target: Goal description (e.g., "3x20" or "30s")
        met: Metabolic equivalent used for calorie estimates
        description: What the movement is
        notes: Coaching cue
    """

    id: str
    name: str
    kind: SkillKind
    target: str
    met: float
    description: str = ""
    notes: str = ""


@dataclass(frozen=True)
class SkillLine:
    """An ordered progression of skills, easiest first."""

    id: str
    title: str
    color: str
    nodes: tuple[SkillNode, ...] = field(default_factory=tuple)
