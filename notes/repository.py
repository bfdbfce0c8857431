"""Note operations layered on the JSON storage accessor."""

from __future__ import annotations

import logging
import time

from notes.models import Note, NoteStore
from notes.storage import JsonStorage

logger = logging.getLogger("notes.repository")


def _new_id() -> int:
    """Current time in milliseconds, used as the note id."""
    return time.time_ns() // 1_000_000


class NoteRepository:
    """Create, list, search and delete notes.

    Every call re-reads the database file; mutating calls write the whole
    collection back. There is no locking, so concurrent writers can lose
    updates.
    """

    def __init__(self, storage: JsonStorage) -> None:
        self._storage = storage

    def create(self, content: str, tags: list[str]) -> Note:
        """Create and persist a new note."""
        note = Note(id=_new_id(), content=content, tags=tags)
        self._storage.append(note)
        logger.info("Created note %d", note.id)
        return note

    def list_all(self) -> list[Note]:
        """Return every stored note in insertion order."""
        return self._storage.load().notes

    def find_by_content(self, filter_text: str) -> list[Note]:
        """Return notes whose content contains ``filter_text`` (case-insensitive)."""
        needle = filter_text.lower()
        return [n for n in self.list_all() if needle in n.content.lower()]

    def remove_by_id(self, note_id: int) -> int | None:
        """Delete the note with ``note_id``.

        Returns the id when a note was removed, ``None`` when no note
        matched. Nothing is written in the latter case.
        """
        store = self._storage.load()
        match = next((n for n in store.notes if n.id == note_id), None)
        if match is None:
            logger.info("Note %d not found", note_id)
            return None

        store.notes = [n for n in store.notes if n is not match]
        self._storage.save(store)
        logger.info("Removed note %d", note_id)
        return note_id

    def remove_all(self) -> None:
        """Replace the stored collection with an empty one."""
        self._storage.save(NoteStore())
        logger.info("Removed all notes")

    @property
    def count(self) -> int:
        """Number of stored notes."""
        return len(self.list_all())
