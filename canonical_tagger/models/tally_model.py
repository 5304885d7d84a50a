# canonical_tagger/models/tally_model.py
"""
Per-file outcomes and the run tally.

- FileRecord: one discovered HTML file, split into the parts the URL needs
- FileOutcome: what happened to a single file
- RunTally: counters accumulated across the run and read once for the summary
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional, Tuple


class Status(Enum):
    PROCESSED = "processed"
    SKIPPED = "skipped"
    ERROR = "error"


class Action(Enum):
    NONE = "none"
    ADDED = "added"
    REPLACED = "replaced"
    REMOVED = "removed"


@dataclass(frozen=True, slots=True)
class FileRecord:
    path: Path                   # absolute path to the HTML file
    segments: Tuple[str, ...]    # directory parts relative to the root
    stem: str                    # filename without extension

    @property
    def relative_dir(self) -> str:
        return "/".join(self.segments)


@dataclass(slots=True)
class FileOutcome:
    path: Path
    status: Status
    action: Action = Action.NONE
    url: str = ""
    message: str = ""


@dataclass(slots=True)
class RunTally:
    found: int = 0
    processed: int = 0
    skipped: int = 0
    errored: int = 0
    added: int = 0
    replaced: int = 0
    removed: int = 0
    outcomes: List[FileOutcome] = field(default_factory=list)

    def record(self, outcome: FileOutcome) -> None:
        self.outcomes.append(outcome)
        if outcome.status is Status.PROCESSED:
            self.processed += 1
            if outcome.action is Action.ADDED:
                self.added += 1
            elif outcome.action is Action.REPLACED:
                self.replaced += 1
            elif outcome.action is Action.REMOVED:
                self.removed += 1
        elif outcome.status is Status.SKIPPED:
            self.skipped += 1
        else:
            self.errored += 1

    def errors(self) -> List[FileOutcome]:
        return [o for o in self.outcomes if o.status is Status.ERROR]

    def find(self, path: Path) -> Optional[FileOutcome]:
        for o in self.outcomes:
            if o.path == path:
                return o
        return None
