"""Process-wide logging configuration."""

from __future__ import annotations

import logging

from config import Settings


def setup_logging(settings: Settings) -> None:
    """Configure root logging from settings and align uvicorn's loggers with it."""
    level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )

    for logger_name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logging.getLogger(logger_name).setLevel(level)
