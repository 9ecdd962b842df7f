"""Decide whether a GitHub push event should trigger the RFD automations."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from airsync.config.github import PushFilterRules

    from .schema import GitHubPushEvent

log = getLogger(__name__)

PUSH_EVENT = "push"


@dataclass(frozen=True, slots=True)
class PushDecision:
    accepted: bool
    message: str
    branch: str = ""
    changed_files: tuple[str, ...] = field(default_factory=tuple[str, ...])


def _reject(message: str) -> PushDecision:
    log.info(f"[github] {message}")
    return PushDecision(accepted=False, message=message)


def evaluate_push_event(
    event: GitHubPushEvent,
    *,
    event_name: str,
    rules: PushFilterRules,
) -> PushDecision:
    """Accept a push whose first commit is distinct and touches ``rules.path_prefix``."""

    if event_name != PUSH_EVENT:
        return _reject(f"Aborted, not a `push` event, got `{event_name}`")

    repo_name = event.repository.name if event.repository is not None else ""
    if repo_name != rules.repository:
        return _reject(
            f"Aborted, `push` event was to the {repo_name} repo, "
            "no automations are set up for this repo yet"
        )

    branch = event.branch
    if rules.branches and branch not in rules.branches:
        return _reject(f"Aborted, `push` event was to branch `{branch}`")

    if not event.commits:
        return _reject("Aborted, `push` event has no commits")

    commit = event.commits[0]
    if not commit.distinct:
        return _reject(f"Aborted, `push` event commit `{commit.id}` is not distinct")

    changed = commit.changed_files_under(rules.path_prefix)
    if not changed:
        return _reject(
            f"Aborted, `push` event commit `{commit.id}` does not include any changes "
            f"to the `{rules.path_prefix}` directory"
        )

    log.info(f"[github] got push event to {repo_name} repo branch: {branch}")
    return PushDecision(
        accepted=True,
        message="Updated successfully",
        branch=branch,
        changed_files=tuple(changed),
    )
