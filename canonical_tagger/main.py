# canonical_tagger/main.py
"""
Entry point for canonical-tagger.

- Parses CLI flags (root, domain, action, base path, dry-run, backup, log level)
- Builds AppContext (root, logger)
- Asks for whatever was not preset, builds one immutable RunConfig
- Runs the batch, prints per-file lines and a summary
- Offers to undo the inserted tags and start over with fresh settings

Examples:
  # Interactive, scan the current folder
  canonical-tagger

  # Non-interactive
  canonical-tagger --root ./site --domain example.com --action Replace --base-path --batch

  # Report only
  canonical-tagger --root ./site --audit --domain example.com
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional

from .app import AppContext, build_default_context
from .errors import InvalidDomainError, InvalidPolicyError, TaggerError
from .models.run_config import Policy, RunConfig
from .services import resolver
from .services.audit_service import AuditService
from .services.batch_service import BatchService
from .ui import console

EXIT_OK = 0
EXIT_FILE_ERRORS = 1
EXIT_FATAL = 2


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="canonical-tagger",
        description="Insert, replace or remove <link rel=\"canonical\"> in every HTML page under a folder.",
    )
    p.add_argument("--root", type=Path, default=Path.cwd(),
                   help="Site root scanned recursively for *.html (default: CWD).")
    p.add_argument("--domain", type=str, default=None,
                   help="Domain for canonical URLs, e.g. example.com (prompted if omitted).")
    p.add_argument("--action", type=str, default=None, choices=[pol.value for pol in Policy],
                   help="What to do with existing canonical tags (prompted if omitted).")
    g = p.add_mutually_exclusive_group()
    g.add_argument("--base-path", dest="base_path", action="store_true", default=None,
                   help="Prefix URLs with the root folder's own name.")
    g.add_argument("--no-base-path", dest="base_path", action="store_false",
                   help="Never include the root folder's name in URLs.")
    p.set_defaults(base_path=None)
    p.add_argument("--dry-run", action="store_true", help="Report what would change, write nothing.")
    p.add_argument("--backup", action="store_true", help="Write .bak files before modifying.")
    p.add_argument("--batch", action="store_true",
                   help="Non-interactive: requires --domain and --action, no undo prompt.")
    p.add_argument("--audit", action="store_true",
                   help="Only report missing/duplicate/mismatched canonical tags.")
    p.add_argument("--log-level", type=str, default="INFO",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                   help="Console log level.")
    return p.parse_args(argv)


def build_config(ctx: AppContext, domain: Optional[str], action: Optional[str],
                 base_path: Optional[bool], *, dry_run: bool = False, backup: bool = False,
                 interactive: bool = True, input_fn: console.InputFn = input) -> RunConfig:
    """
    Turn presets + prompts into a RunConfig. Missing or invalid presets are
    asked for when interactive; otherwise they raise.
    """
    if domain is not None:
        try:
            d = resolver.parse_domain(domain)
        except InvalidDomainError as e:
            if not interactive:
                raise
            print(e)
            d = console.ask_domain(input_fn)
    elif interactive:
        d = console.ask_domain(input_fn)
    else:
        raise InvalidDomainError("")

    if base_path is None:
        if interactive:
            base_path = console.ask_yes_no(
                f"Include the base folder name '{ctx.root.name}' in URLs?", input_fn)
        else:
            base_path = False

    if action is not None:
        policy = Policy.parse(action)
    elif interactive:
        policy = console.ask_policy(input_fn)
    else:
        raise InvalidPolicyError("")

    return RunConfig(root=ctx.root, domain=d, policy=policy, include_base_path=base_path,
                     dry_run=dry_run, backup=backup)


def run_once(ctx: AppContext, config: RunConfig) -> Optional[int]:
    """One pass over the site. Returns None when there was nothing to do."""
    svc = BatchService(ctx, config, on_outcome=lambda o: console.print_outcome(o, ctx.root))
    files = svc.discover()
    if not files:
        print(f"No HTML files found under {ctx.root}")
        return None
    print(console.banner(f"{len(files)} HTML file(s) under {ctx.root}"))
    tally = svc.run(files)
    console.print_summary(tally, config)
    return tally.errored


def undo(ctx: AppContext, config: RunConfig) -> None:
    svc = BatchService(ctx, config, on_outcome=lambda o: console.print_outcome(o, ctx.root))
    tally = svc.undo()
    verb = "would be restored" if config.dry_run else "restored"
    print(f"Undo: {tally.processed} file(s) {verb}, {tally.errored} error(s).")


def _audit(ctx: AppContext, args: argparse.Namespace) -> int:
    domain = resolver.parse_domain(args.domain) if args.domain else None
    report = AuditService(ctx, domain=domain, include_base_path=bool(args.base_path)).audit()
    console.print_audit(report, ctx.root, domain)
    return EXIT_OK


def main(argv: list[str] | None = None, input_fn: console.InputFn = input) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    args = _parse_args(argv)
    ctx = build_default_context(args.root, args.log_level)

    interactive = not args.batch
    domain, action, base_path = args.domain, args.action, args.base_path
    try:
        if args.audit:
            return _audit(ctx, args)

        if args.batch and (domain is None or action is None):
            ctx.logger.error("--batch needs both --domain and --action")
            return EXIT_FATAL

        while True:
            config = build_config(ctx, domain, action, base_path,
                                  dry_run=args.dry_run, backup=args.backup,
                                  interactive=interactive, input_fn=input_fn)
            errored = run_once(ctx, config)
            if errored is None:
                return EXIT_OK
            rc = EXIT_FILE_ERRORS if errored else EXIT_OK
            if not interactive:
                return rc
            if not console.ask_yes_no("\nUndo the inserted tags and start over?", input_fn):
                return rc
            undo(ctx, config)
            # fresh settings for the next pass
            domain = action = base_path = None
    except (EOFError, KeyboardInterrupt):
        print("\nCancelled.")
        return EXIT_FATAL
    except TaggerError as e:
        ctx.logger.error("%s", e)
        return EXIT_FATAL
    except OSError as e:
        ctx.logger.error("Unexpected I/O failure: %s", e)
        return EXIT_FATAL


if __name__ == "__main__":
    raise SystemExit(main())
