"""In-memory note store.

Owns the authoritative note collection: assigns ids, and creates, updates
and deletes notes. Readers get snapshots, so a search can run over a list
that does not change underneath it.
"""

from __future__ import annotations

import itertools
import logging
import threading

from notekeeper.models import Note, NoteDraft

logger = logging.getLogger(__name__)


class NoteNotFoundError(LookupError):
    """Raised when no note exists for the requested id.

    Attributes:
        note_id: The id that was looked up.
    """

    def __init__(self, note_id: int) -> None:
        self.note_id = note_id
        super().__init__(f"Note {note_id} not found")


class NotesService:
    """Thread-safe in-memory collection of notes keyed by id.

    Ids start at 1 and increase monotonically; the id of a deleted note is
    never handed out again.
    """

    def __init__(self, notes: list[NoteDraft] | None = None) -> None:
        self._lock = threading.RLock()
        self._notes: dict[int, Note] = {}
        self._ids = itertools.count(1)
        for draft in notes or []:
            self.add(draft)

    def __len__(self) -> int:
        with self._lock:
            return len(self._notes)

    def get_all(self) -> list[Note]:
        """Return a snapshot of every note in insertion order."""
        with self._lock:
            return list(self._notes.values())

    def get(self, note_id: int) -> Note:
        with self._lock:
            try:
                return self._notes[note_id]
            except KeyError:
                raise NoteNotFoundError(note_id) from None

    def get_id(self, note: Note) -> int:
        return note.id

    def add(self, draft: NoteDraft) -> Note:
        """Save a new note and return it with its assigned id."""
        with self._lock:
            note = Note(id=next(self._ids), title=draft.title, body=draft.body)
            self._notes[note.id] = note
        logger.info("Added note %d", note.id)
        return note

    def update(self, note_id: int, title: str, body: str | None) -> Note:
        """Replace the title and body of an existing note, keeping its id."""
        with self._lock:
            if note_id not in self._notes:
                raise NoteNotFoundError(note_id)
            note = Note(id=note_id, title=title, body=body)
            self._notes[note_id] = note
        logger.info("Updated note %d", note_id)
        return note

    def delete(self, note_id: int) -> None:
        with self._lock:
            if self._notes.pop(note_id, None) is None:
                raise NoteNotFoundError(note_id)
        logger.info("Deleted note %d", note_id)
