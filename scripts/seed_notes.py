"""Seed a note store with sample notes for demos and screenshots.

Saves each sample through the host commands, then loads the collection
back and prints it. Uses the configured app data directory unless
--data-dir is given.

Usage:
    python scripts/seed_notes.py [--data-dir ./demo-data] [--count 3]
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import UTC, datetime
from pathlib import Path

from note_keeper import commands
from note_keeper.config import settings
from note_keeper.storage import NoteStore

# (title, content)
SAMPLE_NOTES: list[tuple[str, str]] = [
    (
        "Project Ideas",
        "Offline-first journaling app with a plain JSON export.",
    ),
    (
        "Meeting Notes",
        "Agreed to ship the desktop build before the web version. "
        "Follow up on installer signing.",
    ),
    (
        "Reading List",
        "Designing Data-Intensive Applications; The Pragmatic Programmer.",
    ),
    ("Grocery list", "Eggs, milk, bread, coffee"),
    ("", ""),
]


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed the note store")
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=None,
        help="Backing directory (default: platform app data directory)",
    )
    parser.add_argument(
        "--count",
        type=int,
        default=len(SAMPLE_NOTES),
        help=f"Number of sample notes to save (max {len(SAMPLE_NOTES)})",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
    )

    if args.data_dir is not None:
        overrides = {"data_dir": args.data_dir}
        store = NoteStore.from_settings(settings.model_copy(update=overrides))
        commands.reset_store(store)

    print("=" * 60)
    print("  Note Keeper: seed sample notes")
    print("=" * 60)

    failures = 0
    for title, content in SAMPLE_NOTES[: max(args.count, 0)]:
        result = commands.save_note(title, content)
        if "error" in result:
            failures += 1
            print(f"  FAIL  {title!r}: {result['error']}")
        else:
            print(f"  OK    {title!r} -> {result['note_id']}")

    loaded = commands.load_notes()
    if "error" in loaded:
        print(f"\n  Could not load notes: {loaded['error']}")
        return 1

    print(f"\n  {loaded['count']} notes stored:")
    for note in loaded["notes"]:
        created = datetime.fromtimestamp(note["timestamp"], UTC).isoformat()
        print(f"    {created}  {note['id']}  {note['title'] or '(untitled)'}")

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
