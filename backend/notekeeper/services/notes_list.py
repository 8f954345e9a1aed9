"""State behind the notes list page: the loaded notes and the current filter."""

from __future__ import annotations

import logging

from notekeeper.config import Settings, get_settings
from notekeeper.models import Note
from notekeeper.search.engine import InvalidArgumentError, SearchEngine
from notekeeper.search.query import split_terms
from notekeeper.services.notes_service import NotesService

logger = logging.getLogger(__name__)


class NotesList:
    """Filterable list of notes backed by a :class:`NotesService`.

    ``notes`` is the snapshot taken by :meth:`load`; ``filtered_notes`` is
    what the list shows for the current ``query``.
    """

    def __init__(
        self,
        notes_service: NotesService,
        engine: SearchEngine | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._notes_service = notes_service
        self._engine = engine or SearchEngine()
        self._settings = settings or get_settings()
        self.notes: list[Note] = []
        self.filtered_notes: list[Note] = []
        self.query = ""

    def load(self) -> list[Note]:
        """Take a fresh snapshot from the store and show every note."""
        self.notes = self._notes_service.get_all()
        self.filtered_notes = list(self.notes)
        return self.filtered_notes

    def filter(self, query: str) -> list[Note]:
        """Show the notes matching ``query``, most relevant first.

        Raises:
            InvalidArgumentError: ``query`` is not a string. The current
                filter is left unchanged.
        """
        if not isinstance(query, str):
            logger.warning("Rejected filter query of type %s", type(query).__name__)
            raise InvalidArgumentError(f"query must be a str, not {type(query).__name__}")

        terms = split_terms(query)
        self.query = query
        if terms.is_blank and self._settings.BLANK_FILTER_SHOWS_ALL:
            self.filtered_notes = list(self.notes)
        else:
            self.filtered_notes = self._engine.search(self.notes, query)
        logger.debug("Filter %r shows %d of %d notes", terms.original, len(self.filtered_notes), len(self.notes))
        return self.filtered_notes

    def delete_note(self, note: Note) -> list[Note]:
        """Delete ``note`` from the store and re-apply the current filter."""
        note_id = self._notes_service.get_id(note)
        self._notes_service.delete(note_id)
        self.load()
        return self.filter(self.query)

    def note_url(self, note: Note) -> str:
        return self._settings.note_url(self._notes_service.get_id(note))
