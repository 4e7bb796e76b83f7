"""Shared settings loaded from environment / .env file."""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration for the Harlowe linter CLI and REST API.

    Values are read from environment variables and from a ``.env`` file
    in the working directory.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Shared
    log_level: str = "INFO"

    # Linting
    vocabulary_path: Path | None = None  # None = bundled Harlowe reference docs
    lint_workers: int = 4
    max_document_size: int = 5_000_000  # characters

    # REST API
    api_server_host: str = "localhost"
    api_server_port: int = 8000
