"""Query normalization for the notes filter.

Turns the raw text typed into the filter box into the list of distinct,
lower-cased terms the search engine matches against.
"""

from __future__ import annotations

from typing import NamedTuple

TERM_SEPARATOR = " "


class QueryTerms(NamedTuple):
    """Result of normalizing a search query.

    Attributes:
        original: The raw query string.
        normalized: Lower-cased query with surrounding whitespace trimmed.
        terms: Distinct terms in first-occurrence order. Consecutive spaces
            yield an empty term, which matches no note.
    """

    original: str
    normalized: str
    terms: list[str]

    @property
    def is_blank(self) -> bool:
        return not self.normalized


def dedupe_terms(terms: list[str]) -> list[str]:
    """Remove repeated terms, keeping the first occurrence of each."""
    return list(dict.fromkeys(terms))


def split_terms(query: str) -> QueryTerms:
    """Normalize a raw query and split it into distinct terms.

    Splitting is on the single space character only, so ``"milk  bread"``
    produces ``["milk", "", "bread"]``.
    """
    normalized = query.lower().strip()
    terms = dedupe_terms(normalized.split(TERM_SEPARATOR))
    return QueryTerms(original=query, normalized=normalized, terms=terms)
