from __future__ import annotations

import pytest

from airsync.adapters.github import GitHubPushEvent, evaluate_push_event
from airsync.config.github import PushFilterRules

RULES = PushFilterRules()


def _event(**overrides: object) -> GitHubPushEvent:
    payload: dict[str, object] = {
        "ref": "refs/heads/0042",
        "repository": {"name": "rfd", "full_name": "oxidecomputer/rfd"},
        "commits": [
            {
                "id": "abc123",
                "distinct": True,
                "added": ["rfd/0042/README.adoc"],
                "modified": ["Makefile"],
            }
        ],
    }
    payload.update(overrides)
    return GitHubPushEvent.model_validate(payload)


def test_accepts_distinct_commit_touching_rfds() -> None:
    decision = evaluate_push_event(_event(), event_name="push", rules=RULES)

    assert decision.accepted
    assert decision.message == "Updated successfully"
    assert decision.branch == "0042"
    assert decision.changed_files == ("rfd/0042/README.adoc",)


@pytest.mark.parametrize(
    ("event", "event_name", "message"),
    [
        (_event(), "ping", "Aborted, not a `push` event, got `ping`"),
        (
            _event(repository={"name": "omicron"}),
            "push",
            "Aborted, `push` event was to the omicron repo",
        ),
        (_event(commits=[]), "push", "Aborted, `push` event has no commits"),
        (
            _event(commits=[{"id": "abc123", "distinct": False, "added": ["rfd/1"]}]),
            "push",
            "is not distinct",
        ),
        (
            _event(commits=[{"id": "abc123", "distinct": True, "modified": ["README.md"]}]),
            "push",
            "does not include any changes to the `rfd/` directory",
        ),
    ],
)
def test_rejections(event: GitHubPushEvent, event_name: str, message: str) -> None:
    decision = evaluate_push_event(event, event_name=event_name, rules=RULES)

    assert not decision.accepted
    assert message in decision.message


def test_branch_allow_list() -> None:
    rules = PushFilterRules(branches=frozenset({"master"}))

    decision = evaluate_push_event(_event(), event_name="push", rules=rules)

    assert not decision.accepted
    assert decision.message == "Aborted, `push` event was to branch `0042`"
