"""Multi-term relevance search over the notes list."""

from notekeeper.search.engine import (
    InvalidArgumentError,
    SearchEngine,
    SearchHit,
    find_relevant_notes,
    sort_by_relevance,
    tally_matches,
    unique_by_id,
)
from notekeeper.search.query import QueryTerms, split_terms

__all__ = [
    "InvalidArgumentError",
    "QueryTerms",
    "SearchEngine",
    "SearchHit",
    "find_relevant_notes",
    "sort_by_relevance",
    "split_terms",
    "tally_matches",
    "unique_by_id",
]
