"""Issue tracker models (API 1.0).

Timestamps are kept as the strings the 1.0 API sends
(``"2013-11-08 01:11:03+00:00"``).
"""

from pydantic import Field

from bitbucket_client.models.base import BitbucketModel
from bitbucket_client.models.v1.user import V1User


class Component(BitbucketModel):
    id: int | None = None
    name: str | None = None


class Version(BitbucketModel):
    id: int | None = None
    name: str | None = None


class Milestone(BitbucketModel):
    id: int | None = None
    name: str | None = None


class IssueMetadata(BitbucketModel):
    kind: str | None = None
    version: str | None = None
    component: str | None = None
    milestone: str | None = None


class Issue(BitbucketModel):
    """An issue in a repository's tracker."""

    local_id: int | None = None
    title: str | None = None
    content: str | None = None
    status: str | None = None
    priority: str | None = None
    reported_by: V1User | None = None
    responsible: V1User | None = None
    metadata: IssueMetadata | None = None
    comment_count: int | None = None
    follower_count: int | None = None
    is_spam: bool | None = None
    resource_uri: str | None = None
    created_on: str | None = None
    utc_last_updated: str | None = None


class IssuesInfo(BitbucketModel):
    """Result of listing issues; ``count`` reflects any filter applied."""

    count: int | None = None
    filter: dict | None = None
    search: str | None = None
    issues: list[Issue] = Field(default_factory=list)


class IssueFollowers(BitbucketModel):
    count: int | None = None
    followers: list[V1User] = Field(default_factory=list)


class IssueComment(BitbucketModel):
    """A comment on an issue."""

    comment_id: int | None = None
    content: str | None = None
    author_info: V1User | None = None
    is_spam: bool | None = None
    utc_created_on: str | None = None
    utc_updated_on: str | None = None
