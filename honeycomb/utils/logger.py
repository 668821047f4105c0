"""Logging setup for the honeycomb CLI and library."""

from __future__ import annotations

import logging
import sys
from typing import Optional


def configure_logging(level: int = logging.WARNING) -> None:
    """Send log records for grid building and search to stderr.

    stdout is reserved for the found words, one per line, so a run can be
    piped without log lines mixing into the result list.
    """

    handler = logging.StreamHandler(sys.stderr)
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
    )
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger under the ``honeycomb`` namespace by default."""

    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name or "honeycomb")
