"""
Logging configuration for the command-line entry point.

Player-facing text goes through the console UI; logging carries
diagnostics (save/load outcomes, battle flow, audio problems).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "WARNING", log_file: Optional[Path] = None) -> None:
    """
    Configure root logging.

    Args:
        level: Level name (DEBUG, INFO, WARNING, ...)
        log_file: Optional file that receives the log instead of stderr
    """
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.WARNING

    handlers: list[logging.Handler]
    if log_file is not None:
        handlers = [logging.FileHandler(log_file, encoding="utf-8")]
    else:
        handlers = [logging.StreamHandler()]

    logging.basicConfig(
        level=numeric_level,
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )
