"""Logging configuration shared by the API server and the console."""

import logging
import logging.handlers
from pathlib import Path

from cms.config import get

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging():
    """Configure root logging from the `logging` config section."""
    log_file = get("logging.file")
    log_level = get("logging.level", "INFO")

    handlers = [logging.StreamHandler()]

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)

        # Time-based rotating file handler
        file_handler = logging.handlers.TimedRotatingFileHandler(
            log_file,
            when='midnight',  # Rotate at midnight
            interval=1,
            backupCount=7
        )
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handlers.append(file_handler)

    logging.basicConfig(
        level=getattr(logging, log_level),
        format=LOG_FORMAT,
        handlers=handlers,
    )
