"""Logging setup for the API process and the maintenance scripts."""

import logging
import sys

from teamauth.core.config import get_settings

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: int | None = None) -> None:
    """Configure the root logger once per process.

    Args:
        level: Explicit level; defaults to DEBUG when settings.debug, else INFO.
    """
    settings = get_settings()
    if level is None:
        level = logging.DEBUG if settings.debug else logging.INFO
    logging.basicConfig(
        level=level,
        format=_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    # SQL statements are logged by the engine itself when DATABASE_ECHO is set
    if not settings.database_echo:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Module logger; pass __name__."""
    return logging.getLogger(name)
