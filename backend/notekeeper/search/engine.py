# @TEST tests/test_search_engine.py

"""Relevance search over an in-memory note collection.

A query is split into distinct terms; every note whose title or body
contains a term (case-insensitive substring) is collected once per term
it matches. Results are deduplicated by note id and ordered by how many
distinct terms each note matched, ties keeping first-match order.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from pydantic import BaseModel

from notekeeper.models import Note
from notekeeper.search.query import split_terms

logger = logging.getLogger(__name__)


class InvalidArgumentError(ValueError):
    """Raised when search input is structurally invalid (not a note collection or not a string)."""


class SearchHit(BaseModel):
    """A note in a search result together with its relevance.

    Attributes:
        note: The matching note.
        match_count: Number of distinct query terms the note matched.
        matched_terms: Those terms, in query order.
    """

    note: Note
    match_count: int
    matched_terms: list[str] = []


def find_relevant_notes(notes: Sequence[Note], term: str) -> list[Note]:
    """Return every note whose title or body contains ``term``.

    An empty term matches nothing.
    """
    term = term.lower()
    if not term:
        return []
    return [note for note in notes if any(term in text for text in note.searchable_texts())]


def tally_matches(notes: Iterable[Note]) -> dict[int, int]:
    """Count how many times each note id occurs in ``notes``."""
    tally: dict[int, int] = {}
    for note in notes:
        tally[note.id] = tally.get(note.id, 0) + 1
    return tally


def unique_by_id(notes: Iterable[Note]) -> list[Note]:
    """Drop notes whose id was already seen, keeping first occurrences."""
    seen: set[int] = set()
    unique: list[Note] = []
    for note in notes:
        if note.id not in seen:
            seen.add(note.id)
            unique.append(note)
    return unique


def sort_by_relevance(notes: list[Note], tally: dict[int, int]) -> list[Note]:
    """Order notes by match count, highest first. Equal counts keep their order."""
    return sorted(notes, key=lambda note: tally.get(note.id, 0), reverse=True)


def _validate(all_notes: object, raw_query: object) -> tuple[Note, ...]:
    if not isinstance(raw_query, str):
        logger.warning("Rejected search query of type %s", type(raw_query).__name__)
        raise InvalidArgumentError(f"query must be a str, not {type(raw_query).__name__}")
    if all_notes is None or isinstance(all_notes, (str, bytes)) or not isinstance(all_notes, Iterable):
        logger.warning("Rejected note collection of type %s", type(all_notes).__name__)
        raise InvalidArgumentError(f"notes must be a collection of Note, not {type(all_notes).__name__}")

    notes = tuple(all_notes)
    for position, note in enumerate(notes):
        if not isinstance(note, Note):
            logger.warning("Rejected note collection: item %d is %s", position, type(note).__name__)
            raise InvalidArgumentError(f"notes[{position}] is {type(note).__name__}, expected Note")
    return notes


class SearchEngine:
    """Filter a note collection by a free-text query and rank by term coverage.

    The engine holds no state between calls: the collection is passed on
    every call and is never modified.
    """

    def rank(self, all_notes: Sequence[Note], raw_query: str) -> list[SearchHit]:
        """Search ``all_notes`` and return hits with their match counts.

        Raises:
            InvalidArgumentError: ``all_notes`` is not a collection of notes
                or ``raw_query`` is not a string.
        """
        notes = _validate(all_notes, raw_query)
        query = split_terms(raw_query)

        # One entry per (term, note) match, so a note appears once per term it hits.
        all_results: list[Note] = []
        matched_terms: dict[int, list[str]] = {}
        for term in query.terms:
            for note in find_relevant_notes(notes, term):
                all_results.append(note)
                matched_terms.setdefault(note.id, []).append(term)

        tally = tally_matches(all_results)
        ranked = sort_by_relevance(unique_by_id(all_results), tally)

        logger.debug(
            "Search for %d term(s) over %d note(s) returned %d result(s)",
            len(query.terms),
            len(notes),
            len(ranked),
        )
        return [
            SearchHit(note=note, match_count=tally[note.id], matched_terms=matched_terms[note.id])
            for note in ranked
        ]

    def search(self, all_notes: Sequence[Note], raw_query: str) -> list[Note]:
        """Return the notes matching any term of ``raw_query``, most relevant first.

        A blank query yields no results.
        """
        return [hit.note for hit in self.rank(all_notes, raw_query)]
