# canonical_tagger/services/file_service.py
"""
FileService — safe disk I/O for canonical-tagger.

Goals:
- Read and write text without newline translation, so untouched regions keep
  their original line endings and no trailing newline is added
- Atomic writes (temp -> fsync -> replace) to avoid partial/corrupt pages
- Optional single-backup policy (filename.ext.bak) with opt-in
- Recursive HTML discovery under the site root

Notes:
- Path.replace() is atomic only on the same filesystem. We write the temp
  file to the same directory to preserve atomicity.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional
import io
import os
import tempfile

from ..app import AppContext
from .. import constants
from ..errors import RootNotFoundError


@dataclass(slots=True)
class WriteOptions:
    """Options for write_text()."""
    make_backup: bool = False      # create/refresh a single .bak file before replacing
    encoding: str = constants.DEFAULT_ENCODING


class FileService:
    def __init__(self, ctx: AppContext):
        self.ctx = ctx

    # ---- Public API ------------------------------------------------------

    def find_html_files(self) -> List[Path]:
        """Every *.html file under the root, recursively, in a stable order."""
        root = self.ctx.root
        if not root.exists():
            raise RootNotFoundError(root)
        if not root.is_dir():
            raise RootNotFoundError(root, "is not a directory")
        if not os.access(root, os.R_OK | os.X_OK):
            raise RootNotFoundError(root, "is not readable")
        paths = [p for p in root.rglob(constants.HTML_GLOB)
                 if p.is_file() and p.suffix == constants.HTML_SUFFIX]
        return sorted(paths)

    def read_text(self, path: Path, encoding: str = constants.DEFAULT_ENCODING) -> str:
        """Read file text verbatim (no newline translation)."""
        with io.open(path, mode="r", encoding=encoding, newline="") as f:
            return f.read()

    def write_text(self, path: Path, text: str, opts: Optional[WriteOptions] = None) -> None:
        """
        Safely write text to disk with atomic replace and optional single backup.

        Steps:
          1) (optional) write/refresh <file>.bak with current contents
          2) write to a temp file in the same directory
          3) fsync temp, then replace original
        """
        opts = opts or WriteOptions()

        # 1) optional single backup
        if opts.make_backup and path.exists():
            bak = self._bak_path(path)
            try:
                self._write_verbatim(bak, self.read_text(path, opts.encoding), opts.encoding)
            except OSError as e:
                self.ctx.logger.warning("Could not write backup %s: %s", bak, e)

        # 2) write temp in same folder
        tmp_path = self._write_temp(path.parent, text, opts.encoding)

        # 3) fsync & atomic replace
        self._atomic_replace(tmp_path, path)

    # ---- Internals -------------------------------------------------------

    def _bak_path(self, path: Path) -> Path:
        return path.with_suffix(path.suffix + ".bak")

    def _write_verbatim(self, path: Path, text: str, encoding: str) -> None:
        with io.open(path, mode="w", encoding=encoding, newline="") as f:
            f.write(text)

    def _write_temp(self, folder: Path, text: str, encoding: str) -> Path:
        """
        Write text to a temporary file within 'folder'. Return the temp Path.
        Ensures data is flushed and fsynced before returning.
        """
        fd, tmp_name = tempfile.mkstemp(prefix=".tmp_", dir=str(folder))
        tmp_path = Path(tmp_name)
        try:
            with io.open(fd, mode="w", encoding=encoding, newline="") as f:
                f.write(text)
                f.flush()
                os.fsync(f.fileno())
        except Exception:
            # Ensure temp is cleaned on failure
            try:
                tmp_path.unlink(missing_ok=True)
            finally:
                raise
        return tmp_path

    def _atomic_replace(self, src_tmp: Path, dst: Path) -> None:
        # mkstemp creates 0600; keep the page's original mode
        try:
            os.chmod(src_tmp, dst.stat().st_mode & 0o7777)
        except OSError as e:
            self.ctx.logger.debug("Could not copy mode to %s: %s", src_tmp, e)
        src_tmp.replace(dst)
