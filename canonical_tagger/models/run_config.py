# canonical_tagger/models/run_config.py
"""
Run configuration for canonical-tagger.

- Policy: how pre-existing canonical tags are treated (one per run)
- RunConfig: immutable settings built once at startup and passed to every
  service call; a restart builds a fresh one
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from enum import Enum
from pathlib import Path
from typing import Any, Dict

from .. import constants
from ..errors import InvalidPolicyError


class Policy(Enum):
    SKIP = "Skip"
    REPLACE = "Replace"
    REMOVE = "Remove"

    @classmethod
    def parse(cls, raw: str) -> "Policy":
        """Case-sensitive lookup by value ("Skip", "Replace", "Remove")."""
        for policy in cls:
            if policy.value == raw:
                return policy
        raise InvalidPolicyError(raw)

    @property
    def description(self) -> str:
        return constants.POLICY_DESCRIPTIONS[self.value]


@dataclass(frozen=True, slots=True)
class RunConfig:
    root: Path
    domain: str                      # normalized, e.g. "example.com"
    policy: Policy
    include_base_path: bool = False  # prefix the root folder's own name
    dry_run: bool = False
    backup: bool = False
    encoding: str = constants.DEFAULT_ENCODING

    @property
    def base_name(self) -> str:
        return self.root.name

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly view used for debug logging."""
        data = asdict(self)
        data["root"] = str(self.root)
        data["policy"] = self.policy.value
        return data
