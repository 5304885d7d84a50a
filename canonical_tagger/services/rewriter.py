# canonical_tagger/services/rewriter.py
"""
Tag rewriter — applies the run's Policy to one document's text.

Pure text in, text out; file I/O belongs to BatchService.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..models.run_config import Policy
from ..models.tally_model import Action, Status
from ..utils import html as html_utils


@dataclass(frozen=True, slots=True)
class RewriteResult:
    text: str
    status: Status
    action: Action = Action.NONE

    @property
    def is_noop(self) -> bool:
        return self.status is Status.SKIPPED


def rewrite(text: str, url: str, policy: Policy) -> RewriteResult:
    """
    Skip:    existing tag -> untouched (skipped); otherwise add one.
    Replace: strip every existing tag, then add one.
    Remove:  strip every existing tag, never add.

    Raises MissingTitleError when a tag has to be added and there is no </title>.
    """
    found = html_utils.has_canonical(text)

    if policy is Policy.REMOVE:
        return RewriteResult(html_utils.strip_canonical(text), Status.PROCESSED, Action.REMOVED)

    if policy is Policy.SKIP and found:
        return RewriteResult(text, Status.SKIPPED)

    if policy is Policy.REPLACE and found:
        stripped = html_utils.strip_canonical(text)
        return RewriteResult(html_utils.insert_canonical(stripped, url), Status.PROCESSED, Action.REPLACED)

    return RewriteResult(html_utils.insert_canonical(text, url), Status.PROCESSED, Action.ADDED)
