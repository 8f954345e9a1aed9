"""Note models shared by the store, the search engine and the list/editor services."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class NoteDraft(BaseModel):
    """Form value for a note that has not been saved yet."""

    title: str = ""
    body: str | None = None


class Note(BaseModel):
    """A saved note.

    Attributes:
        id: Identifier assigned by the store, never reassigned while the note exists.
        title: Title text, always present.
        body: Optional body text.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    title: str
    body: str | None = None

    def searchable_texts(self) -> list[str]:
        """Lower-cased title followed by the lower-cased body when present."""
        texts = [self.title.lower()]
        if self.body:
            texts.append(self.body.lower())
        return texts
