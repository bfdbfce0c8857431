"""JSON file-based storage layer for the notes database."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from pydantic import ValidationError

from notes.models import Note, NoteStore

logger = logging.getLogger("notes.storage")


class DatabaseError(Exception):
    """Raised when the database file cannot be read or parsed."""


class JsonStorage:
    """Reads and writes the whole notes collection as one JSON document."""

    def __init__(self, path: Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        """Location of the database file."""
        return self._path

    def load(self) -> NoteStore:
        """Load the database document from disk.

        Raises:
            DatabaseError: the file is missing or unreadable, is not valid
                JSON, or does not have the ``{"notes": [...]}`` shape.
        """
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
            store = NoteStore.model_validate(raw)
        except FileNotFoundError as exc:
            raise DatabaseError(f"Database file not found: {self._path}") from exc
        except OSError as exc:
            raise DatabaseError(
                f"Cannot read database file {self._path}: {exc.strerror}"
            ) from exc
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise DatabaseError(
                f"Database file is not valid JSON: {self._path}"
            ) from exc
        except ValidationError as exc:
            raise DatabaseError(
                f"Malformed database document in {self._path}"
            ) from exc

        logger.debug("Loaded %d notes from %s", len(store.notes), self._path)
        return store

    def save(self, store: NoteStore) -> NoteStore:
        """Overwrite the database file with ``store``."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._path.with_name(self._path.name + ".tmp")
        tmp_path.write_text(store.model_dump_json(indent=2), encoding="utf-8")
        os.replace(tmp_path, self._path)
        logger.debug("Saved %d notes to %s", len(store.notes), self._path)
        return store

    def append(self, note: Note) -> Note:
        """Add one note to the stored collection and return it."""
        store = self.load()
        store.notes.append(note)
        self.save(store)
        return note
