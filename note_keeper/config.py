"""Note store configuration loaded from environment variables."""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic_settings import BaseSettings

DEFAULT_APP_IDENTIFIER = "com.notekeeper.app"
NOTES_FILENAME = "notes.json"


def resolve_app_data_dir(identifier: str) -> Path:
    """Return the per-application private data directory for this platform.

    Windows uses ``%APPDATA%``, macOS ``~/Library/Application Support`` and
    everything else ``$XDG_DATA_HOME`` (default ``~/.local/share``).

    Raises:
        RuntimeError: if no base directory can be determined.
    """
    if sys.platform == "win32":
        appdata = os.environ.get("APPDATA")
        if not appdata:
            raise RuntimeError("APPDATA is not set")
        base = Path(appdata)
    elif sys.platform == "darwin":
        base = Path.home() / "Library" / "Application Support"
    else:
        xdg = os.environ.get("XDG_DATA_HOME")
        # Relative XDG paths are invalid and must be ignored
        if xdg and os.path.isabs(xdg):
            base = Path(xdg)
        else:
            base = Path.home() / ".local" / "share"
    return base / identifier


class Settings(BaseSettings):
    """Application settings loaded from the environment or a .env file."""

    model_config = {
        "env_prefix": "NOTE_KEEPER_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    app_identifier: str = DEFAULT_APP_IDENTIFIER
    data_dir: Path | None = None
    notes_filename: str = NOTES_FILENAME

    # Quarantine an unparseable notes file on save instead of failing
    reset_corrupt_on_save: bool = False

    log_level: str = "INFO"


settings = Settings()
