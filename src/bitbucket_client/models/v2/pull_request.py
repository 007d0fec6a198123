"""Pull request, commit and comment models (API 2.0)."""

from datetime import datetime
from typing import Any

from pydantic import Field

from bitbucket_client.models.base import BitbucketModel
from bitbucket_client.models.v2.account import Account, Links
from bitbucket_client.models.v2.repository import Repository


class CommitAuthor(BitbucketModel):
    raw: str | None = None
    user: Account | None = None


class Commit(BitbucketModel):
    """A commit as listed under ``commits/`` or a pull request."""

    hash: str | None = None
    message: str | None = None
    date: datetime | None = None
    author: CommitAuthor | None = None
    parents: list[dict[str, Any]] = Field(default_factory=list)
    repository: Repository | None = None
    links: Links | None = None


class Comment(BitbucketModel):
    """A comment on a commit or pull request.

    ``content`` holds the ``raw``, ``markup`` and ``html`` renderings.
    """

    id: int | None = None
    content: dict[str, Any] | None = None
    user: Account | None = None
    parent: dict[str, Any] | None = None
    inline: dict[str, Any] | None = None
    created_on: datetime | None = None
    updated_on: datetime | None = None
    links: Links | None = None


class PullRequestEndpoint(BitbucketModel):
    """Source or destination side of a pull request."""

    branch: dict[str, Any] | None = None
    commit: dict[str, Any] | None = None
    repository: Repository | None = None


class PullRequestInfo(BitbucketModel):
    """Participant record returned when approving a pull request."""

    role: str | None = None
    approved: bool | None = None
    user: Account | None = None
    participated_on: datetime | None = None


class PullRequest(BitbucketModel):
    """Bitbucket pull request."""

    id: int | None = None
    title: str | None = None
    description: str | None = None
    state: str | None = None
    reason: str | None = None
    author: Account | None = None
    source: PullRequestEndpoint | None = None
    destination: PullRequestEndpoint | None = None
    merge_commit: dict[str, Any] | None = None
    close_source_branch: bool | None = None
    reviewers: list[Account] = Field(default_factory=list)
    participants: list[PullRequestInfo] = Field(default_factory=list)
    comment_count: int | None = None
    task_count: int | None = None
    created_on: datetime | None = None
    updated_on: datetime | None = None
    links: Links | None = None


class Merge(BitbucketModel):
    """Body for merge and decline calls."""

    message: str | None = None
    close_source_branch: bool | None = None
    merge_strategy: str | None = None


class Activity(BitbucketModel):
    """One entry of a pull request activity log.

    Exactly one of ``update``, ``approval`` or ``comment`` is normally set.
    """

    pull_request: dict[str, Any] | None = None
    update: dict[str, Any] | None = None
    approval: dict[str, Any] | None = None
    comment: Comment | None = None
