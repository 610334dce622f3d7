"""Configuration management for the application."""

from pathlib import Path
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Application settings loaded from CARSHARING_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CARSHARING_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Directory holding the SQLite database files
    db_dir: str = Field(default="./db")

    # Selected by the -databaseFileName flag; ".db" is appended
    database_file_name: str = Field(default="carsharing")

    # Database URL, auto-derived from db_dir and database_file_name if not set
    database_url: str | None = Field(default=None)

    # Diagnostics go to stderr, away from the interactive session
    log_level: LogLevel = Field(default="WARNING")
    json_logs: bool = Field(default=False)

    @model_validator(mode="after")
    def derive_paths(self) -> "Settings":
        """Expand db_dir and derive database_url if not explicitly set."""
        self.db_dir = str(Path(self.db_dir).expanduser().resolve())
        if self.database_url is None:
            self.database_url = f"sqlite:///{self.db_dir}/{self.database_file_name}.db"
        return self
