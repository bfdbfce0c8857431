"""Pydantic models for the notes database document."""

from pydantic import BaseModel, ConfigDict, Field


class Note(BaseModel):
    """A single note with its tags."""

    model_config = ConfigDict(extra="allow")

    id: int = Field(..., description="Creation time in milliseconds since the epoch")
    content: str = Field(..., description="Note content")
    tags: list[str] = Field(default_factory=list, description="List of tags")


class NoteStore(BaseModel):
    """Container for all notes, used for JSON serialization."""

    model_config = ConfigDict(extra="allow")

    notes: list[Note] = Field(default_factory=list)
