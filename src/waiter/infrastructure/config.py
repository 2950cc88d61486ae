"""Application configuration.

Loads settings from ``WAITER_*`` environment variables and an optional
.env file. All configuration is centralized here.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode (exposes /docs). Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        data_dir: Directory holding the JSON data files.
        default_currency: Currency assumed for bare amounts like "125.00".
    """

    model_config = SettingsConfigDict(
        env_prefix="WAITER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    project_name: str = "Waiter"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    data_dir: Path = Field(default=_DEFAULT_DATA_DIR)
    default_currency: str = Field(default="TWD", min_length=1)


settings = Settings()
