"""Tests for application configuration."""

import logging
from pathlib import Path


class TestSettingsProperties:
    """Tests for Settings computed properties."""

    def test_resolved_log_file_path_default(self):
        """Should return default log file path when not set."""
        from vocabcards.config import Settings

        settings = Settings(data_dir=Path("/tmp/test"))
        assert settings.resolved_log_file_path == Path("/tmp/test/vocabcards.log")

    def test_resolved_log_file_path_custom(self):
        """Should return custom log file path when set."""
        from vocabcards.config import Settings

        settings = Settings(
            data_dir=Path("/tmp/test"),
            log_file_path=Path("/custom/path.log"),
        )
        assert settings.resolved_log_file_path == Path("/custom/path.log")

    def test_db_path(self):
        """Should return database path."""
        from vocabcards.config import Settings

        settings = Settings(data_dir=Path("/tmp/test"))
        assert settings.db_path == Path("/tmp/test/vocabcards.db")


class TestSettingsDefaults:
    """Tests for Settings default values."""

    def test_default_values(self, monkeypatch):
        """Should have sensible defaults when no env vars set."""
        from vocabcards.config import Settings

        # Clear environment variables that might override defaults
        for name in (
            "LOG_FILE_ENABLED",
            "LOG_LEVEL",
            "DICTIONARY_BASE_URL",
            "DICTIONARY_MAX_RETRIES",
            "DEFAULT_DECK",
            "BATCH_SIZE",
        ):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)  # Ignore .env file
        assert settings.log_level == "INFO"
        assert settings.log_file_enabled is False
        assert settings.dictionary_base_url == "https://www.verbformen.com"
        assert settings.dictionary_max_retries == 3
        assert settings.dictionary_retry_delay == 1.0
        assert settings.default_deck == "German Vocabulary"
        assert settings.batch_size == 1

    def test_env_override(self, monkeypatch):
        """Should read values from environment variables."""
        from vocabcards.config import Settings

        monkeypatch.setenv("DICTIONARY_MAX_RETRIES", "5")
        monkeypatch.setenv("DEFAULT_DECK", "Wortschatz")

        settings = Settings(_env_file=None)
        assert settings.dictionary_max_retries == 5
        assert settings.default_deck == "Wortschatz"


class TestSetupLogging:
    """Tests for logging configuration."""

    def test_console_handler_only_by_default(self, monkeypatch):
        """Should install a single console handler."""
        from vocabcards import logging_config

        monkeypatch.setattr(logging_config.settings, "log_file_enabled", False)
        logging_config.setup_logging()
        logging_config.setup_logging()

        root = logging.getLogger()
        stream_handlers = [h for h in root.handlers if type(h) is logging.StreamHandler]
        assert len(stream_handlers) == 1

    def test_level_override(self, monkeypatch):
        """Should use the explicit level over the configured one."""
        from vocabcards import logging_config

        monkeypatch.setattr(logging_config.settings, "log_file_enabled", False)
        logging_config.setup_logging("DEBUG")
        assert logging.getLogger().level == logging.DEBUG
        assert logging.getLogger("httpx").level == logging.WARNING
        logging_config.setup_logging("INFO")

    def test_rotating_file_handler(self, monkeypatch, tmp_path):
        """Should add a rotating file handler when file logging is enabled."""
        from logging.handlers import RotatingFileHandler

        from vocabcards import logging_config

        log_file = tmp_path / "logs" / "run.log"
        monkeypatch.setattr(logging_config.settings, "log_file_enabled", True)
        monkeypatch.setattr(logging_config.settings, "log_file_path", log_file)

        logging_config.setup_logging()
        root = logging.getLogger()
        file_handlers = [h for h in root.handlers if isinstance(h, RotatingFileHandler)]
        try:
            assert len(file_handlers) == 1
            assert log_file.parent.exists()
        finally:
            for handler in file_handlers:
                root.removeHandler(handler)
                handler.close()
