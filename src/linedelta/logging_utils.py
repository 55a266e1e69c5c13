"""Logging setup shared by the CLI and the HTTP API."""

import logging
import os
from typing import Optional

_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# urllib3 logs every retried request at WARNING; keep it out of normal output.
_NOISY_LOGGERS = ("urllib3", "urllib3.connectionpool")


def configure_logging(level: Optional[str] = None) -> None:
    """Configure the root logger unless a handler is already installed."""
    if logging.getLogger().handlers:
        return

    log_level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(level=log_level, format=_LOG_FORMAT)

    if log_level != "DEBUG":
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.ERROR)
