"""Logging configuration."""

import logging
import sys
from typing import Optional

from balance_tracker.config.settings import get_settings

LOG_FORMAT = "%(asctime)s - %(threadName)s - %(name)s - %(levelname)s - %(message)s"

# Per-request HTTP chatter; retries are still reported at WARNING
NOISY_LOGGERS = ("urllib3", "urllib3.connectionpool", "requests")


def resolve_level(name: Optional[str]) -> int:
    """Map a level name such as "debug" to its logging constant; INFO if unknown."""
    level = logging.getLevelName((name or "").upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logging(level: Optional[str] = None) -> None:
    """Configure application logging from settings, or from an explicit level."""
    settings = get_settings()
    requested = level or settings.log_level

    logging.basicConfig(
        level=resolve_level(requested),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    if resolve_level(requested) == logging.INFO and requested.upper() != "INFO":
        logging.getLogger(__name__).warning("Unknown log level %r, using INFO", requested)
