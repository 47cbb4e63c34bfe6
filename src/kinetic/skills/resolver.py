"""Skill unlock resolution and MET-based calorie burn.

Lock state is never stored. It is derived from the mastery set on every
query: a node is locked when the node directly before it in its line has
not been mastered. Only the immediate predecessor is checked, so mastering
node 2 unlocks node 3 even if node 1 was later un-mastered.
"""

from __future__ import annotations

from typing import AbstractSet, Iterable, Optional

from kinetic.rounding import round_half_up
from kinetic.skills.models import NodeState, SkillLine, SkillNode

# Oxygen uptake per MET (ml O2 / kg / min); 200 converts to kcal/min
ML_O2_PER_MET = 3.5
KCAL_DIVISOR = 200


def toggle_mastery(mastered: AbstractSet[str], node_id: str) -> frozenset[str]:
    """Flip a node's mastery.

    Args:
        mastered: Current mastery set
        node_id: Node to toggle

    Returns:
        New mastery set
    """
    if node_id in mastered:
        return frozenset(mastered) - {node_id}
    return frozenset(mastered) | {node_id}


def is_mastered(mastered: AbstractSet[str], node_id: str) -> bool:
    return node_id in mastered


def is_locked(line: SkillLine, index: int, mastered: AbstractSet[str]) -> bool:
    """Whether the node at ``index`` in ``line`` is locked.

    The first node of a line is never locked.
    """
    if index <= 0:
        return False
    return line.nodes[index - 1].id not in mastered


def node_state(line: SkillLine, index: int, mastered: AbstractSet[str]) -> NodeState:
    """Derived state of one node.

    A mastered node reports MASTERED even if its predecessor was
    un-mastered afterwards.
    """
    if line.nodes[index].id in mastered:
        return NodeState.MASTERED
    if is_locked(line, index, mastered):
        return NodeState.LOCKED
    return NodeState.UNLOCKED


def line_states(line: SkillLine, mastered: AbstractSet[str]) -> list[NodeState]:
    """State of every node in a line, in order."""
    return [node_state(line, index, mastered) for index in range(len(line.nodes))]


def find_line(lines: Iterable[SkillLine], line_id: str) -> Optional[SkillLine]:
    for line in lines:
        if line.id == line_id:
            return line
    return None


def find_skill(
    lines: Iterable[SkillLine],
    node_id: str,
) -> Optional[tuple[SkillLine, int]]:
    """Locate a node by id.

    Returns:
        (line, index) or None if no line contains the node
    """
    for line in lines:
        for index, node in enumerate(line.nodes):
            if node.id == node_id:
                return line, index
    return None


def estimate_burn(met: float, body_weight_kg: float, minutes: float) -> int:
    """Calories burned for an activity.

    kcal/min = MET × 3.5 × weight(kg) / 200

    Args:
        met: Metabolic equivalent of the activity
        body_weight_kg: Body weight in kilograms
        minutes: Duration in minutes

    Returns:
        Rounded kcal; 0 when MET, weight or duration is not positive
    """
    if met <= 0 or body_weight_kg <= 0 or minutes <= 0:
        return 0
    per_minute = met * ML_O2_PER_MET * body_weight_kg / KCAL_DIVISOR
    return round_half_up(per_minute * minutes)


def skill_burn(node: SkillNode, body_weight_kg: float, minutes: float) -> int:
    """Calories for practising a specific skill, using the skill's own MET."""
    return estimate_burn(node.met, body_weight_kg, minutes)
