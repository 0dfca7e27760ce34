# ABOUTME: Configuration module for application settings.
# ABOUTME: Uses pydantic-settings for environment variable overrides and provides cached access.

from functools import lru_cache
from pathlib import Path
from typing import Annotated

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support.

    All settings can be overridden via environment variables with the
    PROSPECT_CRM_ prefix (e.g., PROSPECT_CRM_DB_PATH).
    """

    model_config = SettingsConfigDict(
        env_prefix="PROSPECT_CRM_",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    db_path: Annotated[Path, Field(description="Path to SQLite database file")] = (
        Path.home() / ".prospect-crm" / "data.db"
    )

    collection_key: Annotated[
        str, Field(description="Store key under which the profile collection is saved")
    ] = "profiles"

    export_dir: Annotated[Path, Field(description="Directory for CSV exports")] = Path(".")

    gemini_api_key: Annotated[
        str | None, Field(description="Gemini API key; falls back to the OS keyring")
    ] = None

    gemini_model: Annotated[str, Field(description="Gemini model used for extraction")] = (
        "gemini-2.0-flash"
    )

    extraction_timeout_seconds: Annotated[
        float, Field(description="Caller-side timeout for one extraction call", gt=0)
    ] = 60.0

    log_level: Annotated[str, Field(description="Logging level name")] = "WARNING"

    log_file: Annotated[Path | None, Field(description="Optional log file path")] = None


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the application settings.

    Returns a cached Settings instance. Use get_settings.cache_clear()
    to clear the cache if needed.

    Returns:
        Cached Settings instance.
    """
    return Settings()


def ensure_data_dir() -> Path:
    """Ensure the data directory exists.

    Creates the directory containing the database file if it doesn't exist.

    Returns:
        Path to the data directory.
    """
    settings = get_settings()
    data_dir = settings.db_path.parent
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir
