"""Tests for domain normalization and canonical URL construction."""

from pathlib import Path

import pytest

from canonical_tagger.errors import InvalidDomainError
from canonical_tagger.services.resolver import (
    build_url_path, canonical_url, file_record, is_valid_domain,
    normalize_domain, parse_domain, relative_dir, resolve,
)
from canonical_tagger.models.run_config import Policy, RunConfig


class TestDomain:
    def test_strips_scheme_slash_and_whitespace(self):
        assert normalize_domain("  https://example.com/ ") == "example.com"

    def test_scheme_is_case_insensitive(self):
        assert normalize_domain("HTTP://Example.com") == "Example.com"

    def test_accepts_subdomains_and_hyphens(self):
        assert parse_domain("www.my-site.co.uk") == "www.my-site.co.uk"

    @pytest.mark.parametrize("raw", ["not a domain", "http://", "", "localhost", "example.c", "exa mple.com"])
    def test_rejects_invalid(self, raw):
        assert not is_valid_domain(normalize_domain(raw))
        with pytest.raises(InvalidDomainError):
            parse_domain(raw)

    def test_numeric_tld_rejected(self):
        assert not is_valid_domain("10.0.0.1")


class TestRelativeDir:
    def test_file_in_root_is_empty(self):
        assert relative_dir(Path("/srv/blog"), Path("/srv/blog/index.html")) == ""

    def test_nested_uses_forward_slashes(self):
        assert relative_dir(Path("/srv/blog"), Path("/srv/blog/posts/2024/a.html")) == "posts/2024"

    def test_file_record_parts(self):
        rec = file_record(Path("/srv/blog"), Path("/srv/blog/posts/a.html"))
        assert rec.segments == ("posts",)
        assert rec.stem == "a"
        assert rec.relative_dir == "posts"


class TestResolve:
    def test_with_base_path(self):
        assert resolve("example.com", "blog", "posts", "a", True) == "https://example.com/blog/posts/a.html"

    def test_base_path_for_root_file(self):
        assert resolve("example.com", "blog", "", "index", True) == "https://example.com/blog/index.html"

    def test_without_base_path(self):
        assert resolve("example.com", "blog", "posts", "a", False) == "https://example.com/posts/a.html"

    def test_root_file_without_base_path(self):
        assert resolve("example.com", "blog", "", "index", False) == "https://example.com/index.html"

    def test_base_name_never_leaks_without_flag(self):
        for rel in ("", "posts", "posts/2024"):
            url = resolve("example.com", "blog", rel, "a", False)
            assert "blog" not in url.split("/")

    def test_base_name_kept_when_also_in_relative_dir(self):
        url = resolve("example.com", "blog", "archive/blog", "a", False)
        assert url == "https://example.com/archive/blog/a.html"

    def test_build_url_path(self):
        assert build_url_path("blog", "", False) == ""
        assert build_url_path("blog", "", True) == "blog"
        assert build_url_path("blog", "x/y", True) == "blog/x/y"

    def test_canonical_url_from_config(self):
        cfg = RunConfig(root=Path("/srv/blog"), domain="example.com",
                        policy=Policy.SKIP, include_base_path=True)
        rec = file_record(cfg.root, Path("/srv/blog/posts/a.html"))
        assert canonical_url(cfg, rec) == "https://example.com/blog/posts/a.html"
