"""Editing session behind the note details page."""

from __future__ import annotations

import logging

from notekeeper.models import Note, NoteDraft
from notekeeper.services.notes_service import NotesService

logger = logging.getLogger(__name__)


class EditorStateError(RuntimeError):
    """Raised when submitting or cancelling without an open editing session."""


class NoteEditor:
    """Create a new note or edit an existing one.

    :meth:`open` starts a session, :meth:`submit` saves it and
    :meth:`cancel` discards it. Either way the session is closed afterwards.
    """

    def __init__(self, notes_service: NotesService) -> None:
        self._notes_service = notes_service
        self.draft: NoteDraft | None = None
        self.note_id: int | None = None

    @property
    def is_open(self) -> bool:
        return self.draft is not None

    @property
    def is_new(self) -> bool:
        return self.is_open and self.note_id is None

    def open(self, note_id: int | None = None) -> NoteDraft:
        """Start editing ``note_id``, or a blank new note when it is None.

        Raises:
            NoteNotFoundError: No note exists for ``note_id``.
        """
        if note_id is None:
            self.draft = NoteDraft()
        else:
            note = self._notes_service.get(note_id)
            self.draft = NoteDraft(title=note.title, body=note.body)
        self.note_id = note_id
        return self.draft

    def submit(self, title: str, body: str | None = None) -> Note:
        """Save the form values and close the session."""
        if not self.is_open:
            raise EditorStateError("No note is open for editing")

        if self.note_id is None:
            note = self._notes_service.add(NoteDraft(title=title, body=body))
        else:
            note = self._notes_service.update(self.note_id, title, body)
        logger.debug("Editor saved note %d", note.id)
        self._close()
        return note

    def cancel(self) -> None:
        if not self.is_open:
            raise EditorStateError("No note is open for editing")
        self._close()

    def _close(self) -> None:
        self.draft = None
        self.note_id = None
