"""Data models for the Bitbucket 2.0 API."""

from bitbucket_client.models.v2.account import Account, Link, Links, Team
from bitbucket_client.models.v2.pull_request import (
    Activity,
    Comment,
    Commit,
    CommitAuthor,
    Merge,
    PullRequest,
    PullRequestEndpoint,
    PullRequestInfo,
)
from bitbucket_client.models.v2.repository import BranchRestriction, Fork, Repository

__all__ = [
    "Account",
    "Link",
    "Links",
    "Team",
    "Repository",
    "Fork",
    "BranchRestriction",
    "Commit",
    "CommitAuthor",
    "Comment",
    "PullRequest",
    "PullRequestEndpoint",
    "PullRequestInfo",
    "Merge",
    "Activity",
]
