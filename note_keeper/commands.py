"""
Host-facing note commands.

``save_note`` and ``load_notes`` are the two calls a desktop front end makes.
They never raise for storage failures: the result is either the payload or
``{"error": "<message>"}``.
"""

from __future__ import annotations

import logging
from typing import Any

from note_keeper.config import settings
from note_keeper.storage import NoteStore, NoteStoreError

logger = logging.getLogger("note_keeper.commands")

# ---------------------------------------------------------------------------
# Shared store
# ---------------------------------------------------------------------------
_store: NoteStore | None = None


def get_store() -> NoteStore:
    """Return the process-wide store, building it from settings on first use."""
    global _store
    if _store is None:
        _store = NoteStore.from_settings(settings)
    return _store


def reset_store(store: NoteStore | None = None) -> None:
    """Replace the process-wide store; ``None`` rebuilds it lazily."""
    global _store
    _store = store


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def save_note(title: str, content: str) -> dict[str, Any]:
    """Save a new note from raw user input.

    Args:
        title: Note title, stored as given.
        content: Note body, stored as given.

    Returns:
        ``{"note_id": <id>}`` on success, ``{"error": <message>}`` otherwise.
    """
    try:
        note_id = get_store().save(title, content)
    except NoteStoreError as exc:
        logger.error("Command save_note failed: %s", exc)
        return {"error": str(exc)}

    logger.info("Command save_note invoked, id=%s", note_id)
    return {"note_id": note_id}


def load_notes() -> dict[str, Any]:
    """Load every stored note, oldest first.

    Returns:
        ``{"count": n, "notes": [...]}`` on success, ``{"error": <message>}``
        otherwise.
    """
    try:
        notes = get_store().load()
    except NoteStoreError as exc:
        logger.error("Command load_notes failed: %s", exc)
        return {"error": str(exc)}

    logger.info("Command load_notes invoked, found=%d", len(notes))
    return {
        "count": len(notes),
        "notes": [n.model_dump() for n in notes],
    }
