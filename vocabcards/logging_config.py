"""Logging configuration with console output and optional rotating log file."""

import logging
import sys
from logging.handlers import RotatingFileHandler

from vocabcards.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FORMAT_DETAILED = (
    "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s"
)

# Third-party loggers that log every request at INFO
NOISY_LOGGERS = ("httpx", "httpcore")


def setup_logging(level: str | None = None) -> None:
    """Configure the root logger for a CLI or server run.

    Args:
        level: Overrides ``settings.log_level`` (e.g. ``DEBUG`` for ``--verbose``).

    Console output always goes to stdout. A rotating file handler with the
    detailed format is added when ``settings.log_file_enabled`` is set.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level or settings.log_level))

    # Drop handlers from a previous call so repeated setup does not duplicate lines
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(console_handler)

    if settings.log_file_enabled:
        log_path = settings.resolved_log_file_path
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            filename=log_path,
            maxBytes=settings.log_file_max_bytes,
            backupCount=settings.log_file_backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT_DETAILED))
        root_logger.addHandler(file_handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
