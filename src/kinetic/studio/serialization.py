"""Serialization utilities for saved sessions.

Sessions are exchanged with storage as plain records:

    {"id": ..., "name": ..., "updatedAt": <epoch ms>, "nodes": [...]}

These functions ensure a library can be written out and read back to an
equal library, including block order and per-block settings.
"""

from __future__ import annotations

import json
from typing import Any, Sequence

from kinetic.studio.models import BlockMode, BlockType, Session, StudioNode


def node_to_record(node: StudioNode) -> dict[str, Any]:
    """Convert a StudioNode to a record."""
    return {
        "id": node.id,
        "type": node.kind.value,
        "label": node.label,
        "duration": node.duration,
        "notes": node.notes,
        "mode": node.mode.value,
        "sets": node.sets,
        "reps": node.reps,
    }


def node_from_record(data: dict[str, Any]) -> StudioNode:
    """Convert a record to a StudioNode.

    Missing optional fields get block defaults; numeric fields below 1 are
    raised to 1.
    """
    kind = BlockType(data["type"])

    mode = data.get("mode")
    if mode is None:
        mode = BlockMode.REPS if kind in (BlockType.STRENGTH, BlockType.SKILL) else BlockMode.TIMER

    return StudioNode(
        id=str(data["id"]),
        kind=kind,
        label=str(data.get("label", "")),
        duration=max(1, int(data.get("duration") or 0)),
        notes=str(data.get("notes") or ""),
        mode=BlockMode(mode),
        sets=max(1, int(data.get("sets") or 3)),
        reps=max(1, int(data.get("reps") or 10)),
    )


def session_to_record(session: Session) -> dict[str, Any]:
    """Convert a Session to a record."""
    return {
        "id": session.id,
        "name": session.name,
        "updatedAt": session.updated_at,
        "nodes": [node_to_record(node) for node in session.nodes],
    }


def session_from_record(data: dict[str, Any]) -> Session:
    """Convert a record to a Session."""
    return Session(
        id=str(data["id"]),
        name=str(data["name"]),
        updated_at=int(data.get("updatedAt", 0)),
        nodes=tuple(node_from_record(node) for node in data.get("nodes", [])),
    )


def library_to_json(library: Sequence[Session]) -> str:
    """Serialize a session library to a JSON array."""
    return json.dumps([session_to_record(session) for session in library], indent=2)


def library_from_json(text: str) -> tuple[Session, ...]:
    """Parse a JSON array of session records. Empty text gives an empty library."""
    if not text.strip():
        return ()
    return tuple(session_from_record(record) for record in json.loads(text))
