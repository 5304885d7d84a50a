"""Shared fixtures: a small on-disk site rooted at a folder named "blog"."""

from pathlib import Path
from typing import Callable, Dict, Iterable

import pytest

from canonical_tagger.app import build_default_context
from canonical_tagger.models.run_config import Policy, RunConfig

PAGE = "<html>\n<head>\n<title>{title}</title>\n</head>\n<body></body>\n</html>\n"


def page(title: str = "A", extra_head: str = "") -> str:
    html = PAGE.format(title=title)
    if extra_head:
        html = html.replace("</head>", extra_head + "\n</head>")
    return html


@pytest.fixture
def site(tmp_path) -> Path:
    root = tmp_path / "blog"
    (root / "posts").mkdir(parents=True)
    (root / "index.html").write_text(page("Home"), encoding="utf-8")
    (root / "posts" / "a.html").write_text(page("A"), encoding="utf-8")
    (root / "notes.txt").write_text("<title>not html</title>", encoding="utf-8")
    return root


@pytest.fixture
def ctx(site):
    return build_default_context(site)


@pytest.fixture
def make_config(ctx) -> Callable[..., RunConfig]:
    def _make(policy: Policy = Policy.SKIP, **kw) -> RunConfig:
        kw.setdefault("domain", "example.com")
        return RunConfig(root=ctx.root, policy=policy, **kw)
    return _make


def scripted(answers: Iterable[str]) -> Callable[[str], str]:
    """input() stand-in that replays answers, then behaves like a closed stdin."""
    it = iter(answers)

    def _input(prompt: str = "") -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None
    return _input


def snapshot(root: Path) -> Dict[str, str]:
    return {p.relative_to(root).as_posix(): p.read_text(encoding="utf-8")
            for p in sorted(root.rglob("*")) if p.is_file()}
