# canonical_tagger/errors.py
"""Exceptions raised by canonical-tagger services."""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class TaggerError(Exception):
    """Base class for every error the tool raises on purpose."""


class InvalidDomainError(TaggerError):
    def __init__(self, raw: str):
        self.raw = raw
        super().__init__(f"Not a valid domain: {raw!r} (expected something like example.com)")


class InvalidPolicyError(TaggerError):
    def __init__(self, raw: str):
        self.raw = raw
        super().__init__(f"Unknown action {raw!r}; choose one of Skip, Replace, Remove")


class MissingTitleError(TaggerError):
    """No </title> to anchor the new canonical tag."""

    def __init__(self, path: Optional[Path] = None):
        self.path = path
        where = f" in {path}" if path else ""
        super().__init__(f"No </title> found{where}; cannot insert canonical tag")


class RootNotFoundError(TaggerError):
    def __init__(self, root: Path, reason: str = "not found"):
        self.root = root
        super().__init__(f"Root directory {reason}: {root}")
