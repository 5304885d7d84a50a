# canonical_tagger/services/audit_service.py
"""
AuditService — read-only report of canonical tags across the site.

Parses each page with BeautifulSoup and flags pages whose canonical tags are
missing, duplicated, or (when a domain is known) point somewhere other than
the URL the resolver would generate. Never writes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from bs4 import BeautifulSoup

from ..app import AppContext
from .file_service import FileService
from . import resolver

OK = "ok"
MISSING = "missing"
MULTIPLE = "multiple"
MISMATCH = "mismatch"
UNREADABLE = "unreadable"


@dataclass(slots=True)
class AuditEntry:
    path: Path
    state: str
    hrefs: List[str] = field(default_factory=list)
    expected: str = ""


@dataclass(slots=True)
class AuditReport:
    entries: List[AuditEntry] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.entries)

    def counts(self) -> Dict[str, int]:
        c = {OK: 0, MISSING: 0, MULTIPLE: 0, MISMATCH: 0, UNREADABLE: 0}
        for e in self.entries:
            c[e.state] += 1
        return c

    def problems(self) -> List[AuditEntry]:
        return [e for e in self.entries if e.state != OK]


def canonical_links(html: str) -> List[str]:
    soup = BeautifulSoup(html, "html.parser")
    out = []
    for link in soup.find_all("link"):
        # rel is multi-valued in bs4; only a lone, lowercase "canonical" counts
        if link.get("rel") != ["canonical"]:
            continue
        out.append((link.get("href") or "").strip())
    return out


class AuditService:
    def __init__(self, ctx: AppContext, domain: Optional[str] = None,
                 include_base_path: bool = False, encoding: str = "utf-8"):
        self.ctx = ctx
        self.domain = domain
        self.include_base_path = include_base_path
        self.encoding = encoding
        self.fs = FileService(ctx)

    def audit(self) -> AuditReport:
        report = AuditReport()
        for path in self.fs.find_html_files():
            report.entries.append(self.audit_file(path))
        return report

    def audit_file(self, path: Path) -> AuditEntry:
        try:
            text = self.fs.read_text(path, self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            self.ctx.logger.warning("Could not read %s: %s", path, e)
            return AuditEntry(path, UNREADABLE)

        hrefs = canonical_links(text)
        expected = ""
        if self.domain:
            rec = resolver.file_record(self.ctx.root, path)
            expected = resolver.resolve(self.domain, self.ctx.root.name, rec.relative_dir,
                                        rec.stem, self.include_base_path)

        if not hrefs:
            state = MISSING
        elif len(hrefs) > 1:
            state = MULTIPLE
        elif expected and hrefs[0] != expected:
            state = MISMATCH
        else:
            state = OK
        return AuditEntry(path, state, hrefs, expected)
