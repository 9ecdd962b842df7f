"""Public interface for the GitHub push-event filter."""

from __future__ import annotations

from .schema import GitHubCommit, GitHubPushEvent, GitHubRepository
from .webhook import PushDecision, evaluate_push_event

__all__ = [
    "GitHubCommit",
    "GitHubPushEvent",
    "GitHubRepository",
    "PushDecision",
    "evaluate_push_event",
]
