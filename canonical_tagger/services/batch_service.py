# canonical_tagger/services/batch_service.py
"""
BatchService — walks the site and applies one RunConfig to every HTML page.

Per file: build FileRecord -> resolve URL -> rewrite -> write back.
A failing file is logged, counted and left as it was; the loop moves on.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, List, Optional

from ..app import AppContext
from ..errors import TaggerError, MissingTitleError
from ..models.run_config import Policy, RunConfig
from ..models.tally_model import FileOutcome, RunTally, Status, Action
from ..utils import html as html_utils
from .file_service import FileService, WriteOptions
from . import resolver
from . import rewriter

OutcomeHook = Callable[[FileOutcome], None]


class BatchService:
    def __init__(self, ctx: AppContext, config: RunConfig,
                 on_outcome: Optional[OutcomeHook] = None):
        self.ctx = ctx
        self.config = config
        self.fs = FileService(ctx)
        self.on_outcome = on_outcome

    # ---- Public API ------------------------------------------------------

    def discover(self) -> List[Path]:
        return self.fs.find_html_files()

    def run(self, paths: Optional[List[Path]] = None) -> RunTally:
        """Process every page (or the given ones) and return the tally."""
        files = self.discover() if paths is None else list(paths)
        tally = RunTally(found=len(files))
        self.ctx.logger.debug("Run config: %s", self.config.to_dict())
        for path in files:
            outcome = self.process_file(path)
            tally.record(outcome)
            if self.on_outcome:
                self.on_outcome(outcome)
        return tally

    def process_file(self, path: Path) -> FileOutcome:
        cfg = self.config
        url = ""
        try:
            record = resolver.file_record(cfg.root, path)
            url = resolver.canonical_url(cfg, record)
            text = self.fs.read_text(path, cfg.encoding)
            try:
                result = rewriter.rewrite(text, url, cfg.policy)
            except MissingTitleError:
                raise MissingTitleError(path) from None
            if result.is_noop:
                return FileOutcome(path, Status.SKIPPED, url=url,
                                   message="canonical tag already present")
            if not cfg.dry_run and (result.text != text or cfg.policy is Policy.REMOVE):
                self.fs.write_text(path, result.text,
                                   WriteOptions(make_backup=cfg.backup, encoding=cfg.encoding))
            return FileOutcome(path, Status.PROCESSED, result.action, url=url)
        except (OSError, UnicodeDecodeError, ValueError, TaggerError) as e:
            self.ctx.logger.warning("Failed on %s: %s", path, e)
            return FileOutcome(path, Status.ERROR, url=url, message=str(e))

    def undo(self, paths: Optional[List[Path]] = None) -> RunTally:
        """
        Strip tags with the exact shape this tool inserts for the run's domain.
        Pages without such a tag are reported as skipped and not rewritten.
        """
        files = self.discover() if paths is None else list(paths)
        tally = RunTally(found=len(files))
        opts = WriteOptions(make_backup=False, encoding=self.config.encoding)
        for path in files:
            try:
                text = self.fs.read_text(path, self.config.encoding)
                new_text = html_utils.strip_inserted(text, self.config.domain)
                if new_text == text:
                    outcome = FileOutcome(path, Status.SKIPPED, message="nothing to undo")
                else:
                    if not self.config.dry_run:
                        self.fs.write_text(path, new_text, opts)
                    outcome = FileOutcome(path, Status.PROCESSED, Action.REMOVED)
            except (OSError, UnicodeDecodeError) as e:
                self.ctx.logger.warning("Undo failed on %s: %s", path, e)
                outcome = FileOutcome(path, Status.ERROR, message=str(e))
            tally.record(outcome)
            if self.on_outcome:
                self.on_outcome(outcome)
        return tally
