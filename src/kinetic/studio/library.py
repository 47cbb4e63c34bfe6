"""Saved session library.

The library is an ordered tuple of Sessions keyed by name for saving and
by id for deleting. Storage is the caller's concern; see
``kinetic.studio.serialization`` for the record shape.
"""

from __future__ import annotations

import logging
import time
import uuid
from typing import Optional, Sequence

from kinetic.config.settings import StudioConfig
from kinetic.studio.models import Session, SessionDraft

logger = logging.getLogger(__name__)


def _now_ms() -> int:
    return int(time.time() * 1000)


def save_session(
    library: Sequence[Session],
    draft: SessionDraft,
    now_ms: Optional[int] = None,
) -> tuple[Session, ...]:
    """Save a draft into the library.

    A session with the same name is replaced in place; otherwise the new
    session is appended.

    Args:
        library: Saved sessions
        draft: Name and blocks to save
        now_ms: Timestamp in epoch milliseconds (current time when None)

    Returns:
        New library

    Raises:
        ValueError: if the draft name is blank
    """
    if not draft.name.strip():
        raise ValueError("Session name must not be blank")

    if now_ms is None:
        now_ms = _now_ms()

    session = Session(
        id=f"session-{now_ms}-{uuid.uuid4().hex[:6]}",
        name=draft.name,
        updated_at=now_ms,
        nodes=tuple(draft.nodes),
    )

    sessions = list(library)
    for index, existing in enumerate(sessions):
        if existing.name == draft.name:
            logger.debug("Overwriting saved session '%s' (%s)", existing.name, existing.id)
            sessions[index] = session
            return tuple(sessions)

    sessions.append(session)
    return tuple(sessions)


def find_session(library: Sequence[Session], key: str) -> Optional[Session]:
    """Find a saved session by id, falling back to name."""
    for session in library:
        if session.id == key:
            return session
    for session in library:
        if session.name == key:
            return session
    return None


def load_session(library: Sequence[Session], key: str) -> Optional[SessionDraft]:
    """Open a saved session (by id or name) as an editable draft."""
    session = find_session(library, key)
    if session is None:
        return None
    return SessionDraft(name=session.name, nodes=session.nodes)


def delete_session(library: Sequence[Session], session_id: str) -> tuple[Session, ...]:
    """Remove the session with ``session_id``. Unknown ids are ignored."""
    remaining = tuple(session for session in library if session.id != session_id)
    if len(remaining) == len(library):
        logger.debug("No saved session with id %s", session_id)
    return remaining


def new_draft(config: Optional[StudioConfig] = None) -> SessionDraft:
    """Empty draft named after ``config.session_name`` (built-in default when None)."""
    if config is None:
        config = StudioConfig()
    return SessionDraft(name=config.session_name)


def clear_draft() -> SessionDraft:
    """Draft with no name and no blocks."""
    return SessionDraft()
