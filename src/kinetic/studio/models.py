"""Data models for workout session blocks and saved sessions."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class BlockType(Enum):
    """Kind of work a session block contains."""

    WARMUP = "warmup"
    STRENGTH = "strength"
    SKILL = "skill"
    COOLDOWN = "cooldown"


class BlockMode(Enum):
    """How a block is tracked."""

    TIMER = "timer"
    REPS = "reps"


# MET per block type for session estimates. Deliberately independent of
# the MET of whichever skill is practised inside the block.
DEFAULT_BLOCK_MET: dict[BlockType, float] = {
    BlockType.WARMUP: 3.5,
    BlockType.STRENGTH: 6.0,
    BlockType.SKILL: 4.0,
    BlockType.COOLDOWN: 2.5,
}

# Used for block types missing from the MET table
FALLBACK_MET = 3.0

DEFAULT_BLOCK_LABELS: dict[BlockType, str] = {
    BlockType.WARMUP: "Dynamic Warmup",
    BlockType.STRENGTH: "Strength Set",
    BlockType.SKILL: "Skill Practice",
    BlockType.COOLDOWN: "Cool Down",
}


@dataclass(frozen=True)
class StudioNode:
    """One block in a workout session.

    Attributes:
        id: Unique block id
        kind: Block type
        label: Display label
        duration: Minutes (>= 1)
        notes: Free text
        mode: Timer or reps tracking
        sets: Number of sets (reps mode)
        reps: Reps per set (reps mode)
    """

    id: str
    kind: BlockType
    label: str
    duration: int = 10
    notes: str = ""
    mode: BlockMode = BlockMode.TIMER
    sets: int = 3
    reps: int = 10

    def __post_init__(self) -> None:
        if self.duration < 1:
            raise ValueError(f"duration must be >= 1, got {self.duration}")
        if self.sets < 1 or self.reps < 1:
            raise ValueError(f"sets and reps must be >= 1, got {self.sets}x{self.reps}")


@dataclass(frozen=True)
class Session:
    """A named, timestamped snapshot of a block sequence.

    Attributes:
        id: Session id
        name: Library key; saving under an existing name overwrites it
        updated_at: Epoch milliseconds of the last save
        nodes: Blocks in order
    """

    id: str
    name: str
    updated_at: int
    nodes: tuple[StudioNode, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class SessionDraft:
    """The session currently being edited: a name and its blocks."""

    name: str = ""
    nodes: tuple[StudioNode, ...] = field(default_factory=tuple)
