import os

import pytest

# Set test environment variables before importing notekeeper modules
os.environ.setdefault("BLANK_FILTER_SHOWS_ALL", "true")
os.environ.setdefault("NOTE_URL_PREFIX", "/")

from notekeeper.config import get_settings  # noqa: E402
from notekeeper.models import Note, NoteDraft  # noqa: E402
from notekeeper.services.notes_service import NotesService  # noqa: E402


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Drop the cached Settings so each test sees its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sample_notes() -> list[Note]:
    return [
        Note(id=1, title="Shopping list", body="milk eggs bread"),
        Note(id=2, title="Milk notes", body="about cows"),
        Note(id=3, title="Trip plan", body="bread and cheese"),
    ]


@pytest.fixture
def notes_service() -> NotesService:
    """A store pre-filled with the sample notes (ids 1, 2, 3)."""
    return NotesService(
        [
            NoteDraft(title="Shopping list", body="milk eggs bread"),
            NoteDraft(title="Milk notes", body="about cows"),
            NoteDraft(title="Trip plan", body="bread and cheese"),
        ]
    )
