"""Tests for note_keeper.models."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from note_keeper.models import Note, NoteCollection


class TestNoteModel:
    def test_create_note(self) -> None:
        note = Note(id="abc", title="Hello", content="World", timestamp=42)
        assert note.id == "abc"
        assert note.title == "Hello"
        assert note.content == "World"
        assert note.timestamp == 42

    def test_empty_strings_allowed(self) -> None:
        note = Note(id="x", title="", content="", timestamp=0)
        assert note.title == ""
        assert note.content == ""

    def test_all_fields_required(self) -> None:
        with pytest.raises(ValidationError):
            Note(id="x", title="T", content="C")  # type: ignore[call-arg]

    def test_timestamp_must_be_int(self) -> None:
        with pytest.raises(ValidationError):
            Note(id="x", title="T", content="C", timestamp="12")  # type: ignore[arg-type]

    def test_note_is_immutable(self) -> None:
        note = Note(id="x", title="T", content="C", timestamp=1)
        with pytest.raises(ValidationError):
            note.title = "changed"  # type: ignore[misc]


class TestNoteCollection:
    def test_empty_collection(self) -> None:
        collection = NoteCollection()
        assert len(collection) == 0
        assert collection.notes == []
        assert collection.model_dump_json() == "[]"

    def test_append_keeps_order(self) -> None:
        collection = NoteCollection()
        for i in range(3):
            collection.append(Note(id=str(i), title="T", content="C", timestamp=i))
        assert [n.id for n in collection.notes] == ["0", "1", "2"]

    def test_notes_returns_copy(self) -> None:
        collection = NoteCollection()
        collection.notes.append(Note(id="x", title="T", content="C", timestamp=1))
        assert len(collection) == 0

    def test_serializes_as_bare_array(self) -> None:
        collection = NoteCollection([Note(id="a", title="T", content="C", timestamp=7)])
        assert json.loads(collection.model_dump_json()) == [
            {"id": "a", "title": "T", "content": "C", "timestamp": 7}
        ]

    def test_serialization_roundtrip(self) -> None:
        collection = NoteCollection(
            [
                Note(id="a", title="First", content="one", timestamp=1),
                Note(id="b", title="Second", content="two\nlines", timestamp=2),
            ]
        )
        restored = NoteCollection.model_validate_json(collection.model_dump_json(indent=2))
        assert restored == collection
        assert restored.notes == collection.notes

    def test_rejects_non_list_root(self) -> None:
        with pytest.raises(ValidationError):
            NoteCollection.model_validate_json('{"notes": []}')
