# backend/pathbot/core/logging_config.py
import logging
import sys
from typing import Optional

from pathbot.core.config import settings  # For LOG_LEVEL

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(module)s:%(funcName)s:%(lineno)d - %(message)s"


def resolve_log_level(level_name: str) -> int:
    """Map a level name like 'debug' to its numeric value, falling back to INFO."""
    numeric_level = getattr(logging, level_name.upper(), None)
    if not isinstance(numeric_level, int):
        print(
            f"--- LOGGING_CONFIG.PY: Invalid log level: {level_name}. Defaulting to INFO. ---",
            flush=True,
        )
        return logging.INFO
    return numeric_level


def setup_logging(level_name: Optional[str] = None):
    """
    Configures logging for the application.
    Logs to stdout with a single handler on the root logger.
    The level comes from settings.LOG_LEVEL unless one is passed in.
    """
    numeric_level = resolve_log_level(level_name or settings.LOG_LEVEL)

    formatter = logging.Formatter(LOG_FORMAT)
    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)

    root_logger = logging.getLogger()

    # Clear existing handlers so repeated calls don't duplicate every line
    if root_logger.hasHandlers():
        root_logger.handlers.clear()

    root_logger.addHandler(stream_handler)
    root_logger.setLevel(numeric_level)

    logging.getLogger(__name__).debug(
        f"Logging setup complete. Root logger level set to {logging.getLevelName(numeric_level)}."
    )
