"""JSON file-based storage layer for the note collection.

Nothing is cached between calls: every ``save`` re-reads ``notes.json``,
appends one note and replaces the whole file; every ``load`` re-reads it.
"""

from __future__ import annotations

import contextlib
import logging
import os
import tempfile
import threading
from datetime import UTC, datetime
from pathlib import Path
from typing import Callable
from uuid import uuid4

from pydantic import ValidationError

from note_keeper.config import (
    DEFAULT_APP_IDENTIFIER,
    NOTES_FILENAME,
    Settings,
    resolve_app_data_dir,
)
from note_keeper.models import Note, NoteCollection

logger = logging.getLogger("note_keeper.storage")


class NoteStoreError(Exception):
    """A save or load failed.

    The message is a fixed context phrase followed by the underlying cause,
    e.g. ``"Failed to read notes file: [Errno 21] Is a directory"``.
    """


def new_note_id() -> str:
    """Random UUID4 string."""
    return str(uuid4())


def epoch_seconds() -> int:
    """Current UTC time as whole seconds since the Unix epoch."""
    return int(datetime.now(UTC).timestamp())


class NoteStore:
    """Persists the note collection as a single JSON file.

    Args:
        data_dir: Backing directory. ``None`` resolves the platform's
            per-application data directory on every call.
        filename: Name of the notes file inside ``data_dir``.
        app_identifier: Directory name used when resolving ``data_dir``.
        id_factory: Returns a fresh note id.
        clock: Returns the current time in epoch seconds.
        reset_corrupt_on_save: When the existing file cannot be parsed,
            move it aside and start a fresh collection instead of failing.
    """

    def __init__(
        self,
        data_dir: Path | None = None,
        *,
        filename: str = NOTES_FILENAME,
        app_identifier: str = DEFAULT_APP_IDENTIFIER,
        id_factory: Callable[[], str] = new_note_id,
        clock: Callable[[], int] = epoch_seconds,
        reset_corrupt_on_save: bool = False,
    ) -> None:
        self._data_dir = Path(data_dir) if data_dir is not None else None
        self._filename = filename
        self._app_identifier = app_identifier
        self._id_factory = id_factory
        self._clock = clock
        self._reset_corrupt_on_save = reset_corrupt_on_save
        self._lock = threading.Lock()

    @classmethod
    def from_settings(cls, settings: Settings) -> NoteStore:
        """Build a store from application settings."""
        return cls(
            settings.data_dir,
            filename=settings.notes_filename,
            app_identifier=settings.app_identifier,
            reset_corrupt_on_save=settings.reset_corrupt_on_save,
        )

    @property
    def path(self) -> Path:
        """Full path of the notes file."""
        return self._resolve_dir() / self._filename

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def save(self, title: str, content: str) -> str:
        """Append a new note and return its id.

        Title and content are stored as given; empty strings are valid.

        Raises:
            NoteStoreError: if the directory cannot be resolved or created,
                or the notes file cannot be read, parsed or written.
        """
        with self._lock:
            directory = self._resolve_dir()
            self._ensure_dir(directory)
            path = directory / self._filename

            collection = self._read(path, quarantine=self._reset_corrupt_on_save)
            note = Note(
                id=self._id_factory(),
                title=title,
                content=content,
                timestamp=self._clock(),
            )
            collection.append(note)
            self._write(path, collection)

        logger.info("Saved note %s (%d total) to %s", note.id, len(collection), path)
        return note.id

    def load(self) -> list[Note]:
        """Return every stored note, oldest first.

        A missing notes file is an empty collection, not an error.

        Raises:
            NoteStoreError: if the directory cannot be resolved or the notes
                file cannot be read or parsed.
        """
        with self._lock:
            path = self._resolve_dir() / self._filename
            collection = self._read(path, quarantine=False)

        logger.debug("Loaded %d notes from %s", len(collection), path)
        return collection.notes

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _resolve_dir(self) -> Path:
        if self._data_dir is not None:
            return self._data_dir
        try:
            return resolve_app_data_dir(self._app_identifier)
        except (RuntimeError, OSError) as exc:
            raise NoteStoreError(f"Failed to get app data directory: {exc}") from exc

    @staticmethod
    def _ensure_dir(directory: Path) -> None:
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise NoteStoreError(
                f"Failed to create app data directory: {exc}"
            ) from exc

    def _read(self, path: Path, *, quarantine: bool) -> NoteCollection:
        """Parse the notes file, or return an empty collection if absent."""
        try:
            raw = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return NoteCollection()
        except (OSError, UnicodeDecodeError) as exc:
            raise NoteStoreError(f"Failed to read notes file: {exc}") from exc

        try:
            return NoteCollection.model_validate_json(raw)
        except ValidationError as exc:
            if not quarantine:
                raise NoteStoreError(f"Failed to parse notes file: {exc}") from exc
            self._quarantine(path, exc)
            return NoteCollection()

    def _quarantine(self, path: Path, reason: ValidationError) -> None:
        """Move an unparseable notes file aside so a fresh one can be written."""
        stem = f"{path.name}.corrupt-{self._clock()}"
        backup = path.with_name(stem)
        try:
            # Never overwrite an earlier backup taken in the same second
            suffix = 0
            while backup.exists():
                suffix += 1
                backup = path.with_name(f"{stem}-{suffix}")
            os.replace(path, backup)
        except OSError as exc:
            raise NoteStoreError(
                f"Failed to back up unreadable notes file: {exc}"
            ) from exc
        logger.warning(
            "Notes file %s could not be parsed (%d errors); moved to %s",
            path,
            reason.error_count(),
            backup,
        )

    @staticmethod
    def _write(path: Path, collection: NoteCollection) -> None:
        """Replace ``path`` with the serialized collection via a temp file."""
        try:
            payload = collection.model_dump_json(indent=2)
        except ValueError as exc:
            raise NoteStoreError(f"Failed to serialize notes: {exc}") from exc

        tmp: str | None = None
        try:
            fd, tmp = tempfile.mkstemp(
                prefix=f".{path.name}.", suffix=".tmp", dir=path.parent
            )
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(payload)
            os.replace(tmp, path)
        except OSError as exc:
            if tmp is not None:
                with contextlib.suppress(OSError):
                    os.unlink(tmp)
            raise NoteStoreError(f"Failed to write notes file: {exc}") from exc
