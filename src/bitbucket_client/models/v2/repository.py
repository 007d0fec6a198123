"""Repository data models (API 2.0)."""

from datetime import datetime
from typing import Any

from pydantic import Field

from bitbucket_client.models.base import BitbucketModel
from bitbucket_client.models.v2.account import Account, Links


class Repository(BitbucketModel):
    """Bitbucket repository data."""

    uuid: str | None = None
    name: str | None = None
    slug: str | None = None
    full_name: str | None = None
    description: str | None = None
    scm: str | None = None
    language: str | None = None
    is_private: bool | None = None
    has_issues: bool | None = None
    has_wiki: bool | None = None
    fork_policy: str | None = None
    size: int | None = None  # Size in bytes
    owner: Account | None = None
    parent: "Repository | None" = None
    mainbranch: dict[str, Any] | None = None
    links: Links | None = None
    created_on: datetime | None = None
    updated_on: datetime | None = None


class Fork(Repository):
    """A repository listed as a fork of another one."""

    pass


class BranchRestriction(BitbucketModel):
    """Branch permission rule, e.g. ``{"kind": "push", "pattern": "main"}``."""

    id: int | None = None
    kind: str | None = None
    pattern: str | None = None
    value: int | None = None
    users: list[Account] = Field(default_factory=list)
    groups: list[dict[str, Any]] = Field(default_factory=list)
    links: Links | None = None
