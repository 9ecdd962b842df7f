"""Rules for accepting GitHub push events."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from .env import optional_env_var

DEFAULT_RFD_REPOSITORY = "rfd"
DEFAULT_RFD_PATH_PREFIX = "rfd/"


@dataclass(frozen=True, slots=True)
class PushFilterRules:
    repository: str = DEFAULT_RFD_REPOSITORY
    path_prefix: str = DEFAULT_RFD_PATH_PREFIX
    # empty means every branch
    branches: frozenset[str] = field(default_factory=frozenset[str])


def get_push_filter_rules() -> PushFilterRules:
    raw_branches = os.getenv("GITHUB_PUSH_BRANCHES", "")
    branches = frozenset(part.strip() for part in raw_branches.split(",") if part.strip())
    return PushFilterRules(
        repository=optional_env_var("GITHUB_PUSH_REPOSITORY", DEFAULT_RFD_REPOSITORY),
        path_prefix=optional_env_var("GITHUB_PUSH_PATH_PREFIX", DEFAULT_RFD_PATH_PREFIX),
        branches=branches,
    )
