"""Structured logging for the CLI, fetcher and remote cleaner."""

import logging
import sys
from pathlib import Path
from typing import Optional


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """Return a configured logger (creates handlers only once per name)."""
    from markup_cleaner.utils.config import settings

    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    effective_level = getattr(logging, (level or settings.log_level).upper(), logging.INFO)
    logger.setLevel(effective_level)

    # stderr, so converted output on stdout stays pipeable
    fmt = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt))
    logger.addHandler(handler)

    # Optional file handler
    if settings.log_file:
        log_path = Path(settings.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_path, encoding="utf-8")
        fh.setFormatter(logging.Formatter(fmt))
        logger.addHandler(fh)

    return logger


def set_level(level: int) -> None:
    """Change the level of every logger created through ``get_logger``."""
    for name in list(logging.root.manager.loggerDict):
        if name == "markup_cleaner" or name.startswith("markup_cleaner."):
            logging.getLogger(name).setLevel(level)
