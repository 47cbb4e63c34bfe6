"""Session builder: block editing, reordering and time/calorie totals.

Every function takes the current block sequence and returns a new tuple.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, replace
from typing import Optional, Sequence, Union

from kinetic.config.settings import StudioConfig
from kinetic.skills.resolver import estimate_burn
from kinetic.studio.models import (
    DEFAULT_BLOCK_LABELS,
    DEFAULT_BLOCK_MET,
    FALLBACK_MET,
    BlockMode,
    BlockType,
    StudioNode,
)

logger = logging.getLogger(__name__)

# Fields callers may change through update_node
EDITABLE_FIELDS = ("label", "duration", "notes", "mode", "sets", "reps")


@dataclass(frozen=True)
class SessionTotals:
    """Aggregate cost of a session."""

    total_time: int  # minutes
    total_calories: int  # kcal


def _new_node_id() -> str:
    return f"node-{uuid.uuid4().hex[:12]}"


def new_node(
    kind: Union[BlockType, str],
    node_id: Optional[str] = None,
    config: Optional[StudioConfig] = None,
) -> StudioNode:
    """Create a block with default label, duration and tracking mode.

    Strength and skill blocks track reps; warmup and cooldown run on a timer.

    Args:
        kind: Block type
        node_id: Explicit id (generated when None)
        config: Block defaults (built-in defaults when None; pass
            ``get_settings().studio`` to use the user's config)

    Returns:
        New StudioNode
    """
    kind = BlockType(kind)
    if config is None:
        config = StudioConfig()

    mode = BlockMode.REPS if kind in (BlockType.STRENGTH, BlockType.SKILL) else BlockMode.TIMER

    return StudioNode(
        id=node_id or _new_node_id(),
        kind=kind,
        label=DEFAULT_BLOCK_LABELS[kind],
        duration=max(1, config.block_duration),
        mode=mode,
        sets=max(1, config.sets),
        reps=max(1, config.reps),
    )


def add_node(
    nodes: Sequence[StudioNode],
    kind: Union[BlockType, str],
    config: Optional[StudioConfig] = None,
) -> tuple[StudioNode, ...]:
    """Append a new default block of ``kind``."""
    return tuple(nodes) + (new_node(kind, config=config),)


def _clamp_change(field_name: str, value):
    if field_name in ("duration", "sets", "reps"):
        return max(1, int(value or 0))
    if field_name == "mode":
        return BlockMode(value)
    return value


def update_node(
    nodes: Sequence[StudioNode],
    node_id: str,
    **changes,
) -> tuple[StudioNode, ...]:
    """Change fields of the block with ``node_id``.

    Duration, sets and reps are clamped to at least 1. Unknown ids leave
    the sequence unchanged.

    Raises:
        ValueError: for a field that cannot be edited
    """
    for field_name in changes:
        if field_name not in EDITABLE_FIELDS:
            raise ValueError(f"Cannot edit field '{field_name}', must be one of {EDITABLE_FIELDS}")

    cleaned = {name: _clamp_change(name, value) for name, value in changes.items()}
    return tuple(
        replace(node, **cleaned) if node.id == node_id else node
        for node in nodes
    )


def delete_node(nodes: Sequence[StudioNode], node_id: str) -> tuple[StudioNode, ...]:
    """Remove the block with ``node_id``."""
    return tuple(node for node in nodes if node.id != node_id)


def move_node(
    nodes: Sequence[StudioNode],
    index: int,
    direction: int,
) -> tuple[StudioNode, ...]:
    """Swap the block at ``index`` with its neighbour.

    Args:
        nodes: Current blocks
        index: Position of the block to move
        direction: -1 (up) or +1 (down)

    Returns:
        Reordered blocks; unchanged when either position is out of range
    """
    target = index + direction
    if not 0 <= index < len(nodes) or not 0 <= target < len(nodes):
        logger.debug("Ignoring move of block %d by %d (%d blocks)", index, direction, len(nodes))
        return tuple(nodes)

    reordered = list(nodes)
    reordered[index], reordered[target] = reordered[target], reordered[index]
    return tuple(reordered)


def block_met(kind: BlockType, met_table: Optional[dict[BlockType, float]] = None) -> float:
    """MET used for a block type in session estimates."""
    if met_table is None:
        met_table = DEFAULT_BLOCK_MET
    return met_table.get(kind, FALLBACK_MET)


def session_totals(
    nodes: Sequence[StudioNode],
    body_weight_kg: float,
    met_table: Optional[dict[BlockType, float]] = None,
) -> SessionTotals:
    """Total minutes and estimated calories for a block sequence.

    Each block's burn is estimated from its type's MET and rounded before
    summing.

    Args:
        nodes: Blocks in the session
        body_weight_kg: Body weight; 0 gives a calorie total of 0
        met_table: MET per block type (defaults to DEFAULT_BLOCK_MET)

    Returns:
        SessionTotals
    """
    total_time = sum(node.duration for node in nodes)
    total_calories = sum(
        estimate_burn(block_met(node.kind, met_table), body_weight_kg, node.duration)
        for node in nodes
    )
    return SessionTotals(total_time=total_time, total_calories=total_calories)
