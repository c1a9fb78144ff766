"""Logging to stderr through rich."""

from __future__ import annotations

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

LOG_LEVEL_ENV = "SPARKGRAPH_LOG_LEVEL"


def setup_logging(verbose: bool = False) -> None:
    """Configure the sparkgraph logger once. Stdout stays graph-only."""
    if verbose:
        level = "DEBUG"
    else:
        level = os.getenv(LOG_LEVEL_ENV, "WARNING").upper()
        if not isinstance(logging.getLevelName(level), int):
            level = "WARNING"

    logger = logging.getLogger("sparkgraph")
    logger.setLevel(level)
    if not logger.handlers:
        handler = RichHandler(
            console=Console(stderr=True), show_time=False, show_path=verbose,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
        logger.propagate = False
