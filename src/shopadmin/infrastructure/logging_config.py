"""Logging setup for the command-line entry point."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | int = logging.WARNING) -> None:
    """Send log records to stderr at *level*; called once by the CLI."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)
    # httpx logs every request at INFO; keep that for --verbose only.
    logging.getLogger("httpx").setLevel(
        level if level <= logging.DEBUG else logging.WARNING
    )
