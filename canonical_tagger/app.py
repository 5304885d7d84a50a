# canonical_tagger/app.py
"""
Core application wiring for canonical-tagger.

- AppContext: typed container for the site root and the logger

This module has _no_ project-local imports besides constants so every
service can take a context without import cycles.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import logging
from typing import Optional

from . import constants


@dataclass(slots=True)
class AppContext:
    """
    Shared, read-only application state.

    Attributes:
      root:    Site root (folder containing the HTML pages, scanned recursively).
      logger:  Preconfigured logger for the app.
    """
    root: Path
    logger: logging.Logger


def build_default_context(root: Optional[Path] = None, level: str = "INFO") -> AppContext:
    """
    Build an AppContext with sensible defaults.

    - root defaults to the current working directory and is resolved so the
      folder's own name is available for base-path URLs.
    - logger prints to stderr.
    """
    r = (Path(root) if root else Path.cwd()).expanduser().resolve()
    logger = _make_logger(constants.LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.debug("Initialized AppContext for %s", r)
    return AppContext(root=r, logger=logger)


# ---- internals -----------------------------------------------------------

def _make_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.setLevel(logging.INFO)
        ch = logging.StreamHandler()
        ch.setLevel(logging.DEBUG)
        fmt = logging.Formatter("[%(levelname)s] %(message)s")
        ch.setFormatter(fmt)
        logger.addHandler(ch)
        # Avoid duplicate logs if parent handlers exist
        logger.propagate = False
    return logger


__all__ = ["AppContext", "build_default_context"]
