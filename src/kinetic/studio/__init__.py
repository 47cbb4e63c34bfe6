"""Workout session builder.

Sessions are ordered sequences of warmup, strength, skill and cooldown
blocks. Totals use a fixed MET per block type; saved sessions live in a
name-keyed library.
"""

from __future__ import annotations

from kinetic.studio.library import (
    clear_draft,
    delete_session,
    load_session,
    new_draft,
    save_session,
)
from kinetic.studio.models import (
    BlockMode,
    BlockType,
    Session,
    SessionDraft,
    StudioNode,
)
from kinetic.studio.session import (
    SessionTotals,
    add_node,
    delete_node,
    move_node,
    new_node,
    session_totals,
    update_node,
)

__all__ = [
    "BlockMode",
    "BlockType",
    "Session",
    "SessionDraft",
    "SessionTotals",
    "StudioNode",
    "add_node",
    "clear_draft",
    "delete_node",
    "delete_session",
    "load_session",
    "move_node",
    "new_draft",
    "new_node",
    "save_session",
    "session_totals",
    "update_node",
]
