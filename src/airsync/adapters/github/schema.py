"""Pydantic models for the parts of a GitHub push webhook payload we read."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class GitHubBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class GitHubRepository(GitHubBaseModel):
    name: str
    full_name: str = ""


class GitHubCommit(GitHubBaseModel):
    id: str = ""
    timestamp: datetime | None = None
    message: str = ""
    url: str = ""
    distinct: bool = False
    added: list[str] = Field(default_factory=list[str])
    modified: list[str] = Field(default_factory=list[str])
    removed: list[str] = Field(default_factory=list[str])

    def changed_files_under(self, prefix: str) -> list[str]:
        return [
            path
            for path in (*self.added, *self.modified, *self.removed)
            if path.startswith(prefix)
        ]


class GitHubPushEvent(GitHubBaseModel):
    ref: str = ""
    before: str = ""
    after: str = ""
    repository: GitHubRepository | None = None
    commits: list[GitHubCommit] = Field(default_factory=list[GitHubCommit])

    @property
    def branch(self) -> str:
        return self.ref.removeprefix("refs/heads/")
