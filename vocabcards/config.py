"""Application configuration using Pydantic Settings."""

from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Application settings, configurable via environment variables or .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Paths
    data_dir: Path = Path("data")

    # Logging
    log_level: LogLevel = "INFO"
    log_file_enabled: bool = False
    log_file_path: Path | None = None
    log_file_max_bytes: int = 10 * 1024 * 1024  # 10 MB
    log_file_backup_count: int = 5

    @property
    def resolved_log_file_path(self) -> Path:
        """Return log file path, defaulting to data_dir/vocabcards.log if not set."""
        return self.log_file_path or self.data_dir / "vocabcards.log"

    @property
    def db_path(self) -> Path:
        return self.data_dir / "vocabcards.db"

    # Dictionary site
    dictionary_base_url: str = "https://www.verbformen.com"
    dictionary_timeout: float = 10.0
    dictionary_max_retries: int = 3
    dictionary_retry_delay: float = 1.0  # doubled on every further attempt
    dictionary_user_agent: str = "Mozilla/5.0 (compatible; GermanFlashcardBot/1.0)"

    # Processing
    default_deck: str = "German Vocabulary"
    batch_size: int = 1  # 1 keeps processing strictly sequential


settings = Settings()
