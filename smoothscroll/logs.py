"""Logging configuration for the pager.

The pager owns the terminal, so records go to a file or nowhere.
"""

from __future__ import annotations

import logging
from pathlib import Path

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "WARNING", filename: Path | None = None) -> None:
    """Send records at ``level`` and above to ``filename``.

    Without a file a ``NullHandler`` is installed so nothing reaches the
    terminal the pager draws on.
    """
    handlers: list[logging.Handler]
    if filename is not None:
        handlers = [logging.FileHandler(filename, encoding="utf-8")]
    else:
        handlers = [logging.NullHandler()]
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )
