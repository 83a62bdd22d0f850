"""Pydantic models for the note collection file."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, RootModel


class Note(BaseModel):
    """A single note as stored in ``notes.json``."""

    model_config = ConfigDict(strict=True, frozen=True)

    id: str = Field(..., description="Unique identifier, generated on save")
    title: str = Field(..., description="Note title")
    content: str = Field(..., description="Note body")
    timestamp: int = Field(..., description="Creation time in epoch seconds")


class NoteCollection(RootModel[list[Note]]):
    """Ordered list of every note; serialized as a bare JSON array."""

    model_config = ConfigDict(strict=True)

    root: list[Note] = Field(default_factory=list)

    def __len__(self) -> int:
        return len(self.root)

    def append(self, note: Note) -> None:
        """Add a note to the end of the collection."""
        self.root.append(note)

    @property
    def notes(self) -> list[Note]:
        """Copy of the notes in insertion order."""
        return list(self.root)
