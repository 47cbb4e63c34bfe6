"""Calisthenics skill trees: progression data, unlock state and calorie burn."""

from __future__ import annotations

from kinetic.skills.definitions import CALISTHENICS_SKILLS
from kinetic.skills.models import NodeState, SkillKind, SkillLine, SkillNode
from kinetic.skills.resolver import (
    estimate_burn,
    find_skill,
    is_locked,
    line_states,
    node_state,
    toggle_mastery,
)

__all__ = [
    "CALISTHENICS_SKILLS",
    "NodeState",
    "SkillKind",
    "SkillLine",
    "SkillNode",
    "estimate_burn",
    "find_skill",
    "is_locked",
    "line_states",
    "node_state",
    "toggle_mastery",
]
