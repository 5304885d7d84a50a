# canonical_tagger/services/resolver.py
"""
Domain/path resolver — turns a file's place in the site tree into its
canonical URL.

  https://{domain}/[{root name}/][{relative dir}/]{stem}.html

Everything here is pure; the domain is validated once before any file is
touched (parse_domain) and then passed around already normalized.
"""

from __future__ import annotations

from pathlib import Path, PurePath

from .. import constants
from ..errors import InvalidDomainError
from ..models.run_config import RunConfig
from ..models.tally_model import FileRecord


# ---- domain ----------------------------------------------------------------

def normalize_domain(raw: str) -> str:
    """Trim, drop a leading http(s):// and any trailing slash."""
    d = (raw or "").strip()
    d = constants.SCHEME_PREFIX_RX.sub("", d)
    d = d.rstrip("/")
    return d.strip()


def is_valid_domain(domain: str) -> bool:
    return bool(constants.DOMAIN_RX.match(domain or ""))


def parse_domain(raw: str) -> str:
    d = normalize_domain(raw)
    if not is_valid_domain(d):
        raise InvalidDomainError(raw)
    return d


# ---- paths -----------------------------------------------------------------

def relative_dir(root: Path, path: Path) -> str:
    """
    Directory of `path` relative to `root`, with forward slashes and no
    leading separator. Empty when the file sits directly in the root.
    """
    rel = PurePath(path).parent.relative_to(PurePath(root)).as_posix()
    rel = rel.lstrip("/")
    return "" if rel == "." else rel


def file_record(root: Path, path: Path) -> FileRecord:
    rel = relative_dir(root, path)
    segments = tuple(s for s in rel.split("/") if s)
    return FileRecord(path=Path(path), segments=segments, stem=PurePath(path).stem)


def build_url_path(base_name: str, relative: str, include_base_path: bool) -> str:
    if not include_base_path:
        return relative
    if relative:
        return f"{base_name}/{relative}"
    return base_name


def resolve(domain: str, base_name: str, relative: str, stem: str, include_base_path: bool) -> str:
    url_path = build_url_path(base_name, relative, include_base_path)
    prefix = f"{constants.URL_SCHEME}://{domain}"
    if url_path:
        return f"{prefix}/{url_path}/{stem}{constants.HTML_SUFFIX}"
    return f"{prefix}/{stem}{constants.HTML_SUFFIX}"


def canonical_url(config: RunConfig, record: FileRecord) -> str:
    return resolve(config.domain, config.base_name, record.relative_dir,
                   record.stem, config.include_base_path)


__all__ = [
    "normalize_domain", "is_valid_domain", "parse_domain",
    "relative_dir", "file_record", "build_url_path", "resolve", "canonical_url",
]
