from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Notekeeper application settings.

    All values are loaded from environment variables.
    A .env file in the working directory is also supported.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # --- Notes list ---
    BLANK_FILTER_SHOWS_ALL: bool = True  # blank filter text lists every note instead of none
    NOTE_URL_PREFIX: str = "/"

    def note_url(self, note_id: int) -> str:
        """Build the relative link to a note's detail page."""
        prefix = self.NOTE_URL_PREFIX
        if not prefix.endswith("/"):
            prefix += "/"
        return f"{prefix}{note_id}"


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings singleton."""
    return Settings()
