# canonical_tagger/ui/console.py
"""
Console prompts and reporting.

Prompts loop until they get a usable answer; EOFError/KeyboardInterrupt are
left to the caller (main) which treats them as a cancel.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional

from ..errors import InvalidDomainError, InvalidPolicyError
from ..models.run_config import Policy, RunConfig
from ..models.tally_model import Action, FileOutcome, RunTally, Status
from ..services import resolver
from ..services.audit_service import AuditReport, OK

InputFn = Callable[[str], str]

_MARKS = {
    Status.PROCESSED: "✅",
    Status.SKIPPED: "⏭️ ",
    Status.ERROR: "⚠️ ",
}


def banner(title: str, ch: str = "=", width: int = 72) -> str:
    line = ch * width
    return f"{line}\n{title}\n{line}"


def _rel(path: Path, root: Path) -> str:
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return str(path)


# ---- prompts -----------------------------------------------------------------

def ask_domain(input_fn: InputFn = input) -> str:
    while True:
        raw = input_fn("Domain (e.g. example.com): ")
        try:
            return resolver.parse_domain(raw)
        except InvalidDomainError:
            print("Please enter a valid domain like example.com (no spaces).")


def ask_yes_no(prompt: str, input_fn: InputFn = input) -> bool:
    while True:
        choice = input_fn(f"{prompt} [y/n]: ").strip().lower()
        if choice in ("y", "yes"):
            return True
        if choice in ("n", "no"):
            return False
        print("Please answer y or n.")


def ask_policy(input_fn: InputFn = input) -> Policy:
    print("\nWhat should happen to pages that already have a canonical tag?")
    for p in Policy:
        print(f"  {p.value:<8} {p.description}")
    while True:
        raw = input_fn("Action (Skip/Replace/Remove): ").strip()
        try:
            return Policy.parse(raw)
        except InvalidPolicyError:
            print("Type exactly Skip, Replace or Remove.")


# ---- reporting ---------------------------------------------------------------

def print_outcome(outcome: FileOutcome, root: Path) -> None:
    rel = _rel(outcome.path, root)
    mark = _MARKS[outcome.status]
    if outcome.status is Status.PROCESSED:
        if outcome.action is Action.REMOVED:
            print(f"{mark} Removed canonical: {rel}")
        else:
            verb = "Replaced" if outcome.action is Action.REPLACED else "Added"
            print(f"{mark} {verb}: {rel} -> {outcome.url}")
    elif outcome.status is Status.SKIPPED:
        print(f"{mark} Skipped: {rel} ({outcome.message})")
    else:
        print(f"{mark} Error: {rel}: {outcome.message}")


def print_summary(tally: RunTally, config: RunConfig, title: str = "SUMMARY") -> None:
    print()
    print(banner(title))
    print(f"Root               : {config.root}")
    print(f"Domain             : {config.domain}")
    print(f"HTML files found   : {tally.found}")
    print(f"Processed          : {tally.processed}"
          f"  (added {tally.added}, replaced {tally.replaced}, removed {tally.removed})")
    print(f"Skipped            : {tally.skipped}")
    print(f"Errors             : {tally.errored}")
    print(f"Include base path  : {'yes (' + config.base_name + ')' if config.include_base_path else 'no'}")
    print(f"Action             : {config.policy.value} - {config.policy.description}")
    if config.dry_run:
        print("Dry run            : yes (no files were written)")
    print("=" * 72)


def print_audit(report: AuditReport, root: Path, domain: Optional[str] = None) -> None:
    for e in report.problems():
        rel = _rel(e.path, root)
        if e.hrefs:
            hrefs = ", ".join(e.hrefs)
            extra = f" (expected {e.expected})" if e.expected else ""
            print(f"⚠️  {e.state:<10} {rel}: {hrefs}{extra}")
        else:
            print(f"⚠️  {e.state:<10} {rel}")
    counts = report.counts()
    print()
    print(banner("AUDIT"))
    print(f"HTML files scanned : {len(report)}")
    if domain:
        print(f"Checked against    : {domain}")
    for state, n in counts.items():
        label = "ok" if state == OK else state
        print(f"{label:<19}: {n}")
    print("=" * 72)
