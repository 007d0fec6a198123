"""User and account models (API 1.0)."""

from typing import Any

from pydantic import Field

from bitbucket_client.models.base import BitbucketModel


class V1User(BitbucketModel):
    """User summary as embedded in 1.0 responses."""

    username: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    display_name: str | None = None
    avatar: str | None = None
    resource_uri: str | None = None
    is_team: bool | None = None
    is_staff: bool | None = None


class V1Repository(BitbucketModel):
    """Repository as listed by the 1.0 ``user/`` resources."""

    owner: str | None = None
    name: str | None = None
    slug: str | None = None
    description: str | None = None
    scm: str | None = None
    language: str | None = None
    is_private: bool | None = None
    is_fork: bool | None = None
    has_issues: bool | None = None
    has_wiki: bool | None = None
    size: int | None = None
    resource_uri: str | None = None
    utc_created_on: str | None = None
    utc_last_updated: str | None = None


class UserInfo(BitbucketModel):
    """The authenticated user with their repositories."""

    user: V1User | None = None
    repositories: list[V1Repository] = Field(default_factory=list)


class Privileges(BitbucketModel):
    """Team privileges, e.g. ``{"teams": {"acme": "admin"}}``."""

    teams: dict[str, str] = Field(default_factory=dict)


class RepositoriesOverview(BitbucketModel):
    updated: list[V1Repository] = Field(default_factory=list)
    viewed: list[V1Repository] = Field(default_factory=list)


class Event(BitbucketModel):
    node: str | None = None
    event: str | None = None
    description: Any = None
    repository: V1Repository | None = None
    user: V1User | None = None
    created_on: str | None = None
    utc_created_on: str | None = None


class EventInfo(BitbucketModel):
    count: int | None = None
    events: list[Event] = Field(default_factory=list)


class Invitation(BitbucketModel):
    email: str | None = None
    permission: str | None = None
    invited_by: V1User | None = None
    repository: V1Repository | None = None
    utc_sent_on: str | None = None


class InvitationsInfo(BitbucketModel):
    count: int | None = None
    invitations: list[Invitation] = Field(default_factory=list)


class Followers(BitbucketModel):
    count: int | None = None
    followers: list[V1User] = Field(default_factory=list)


class Consumer(BitbucketModel):
    """An OAuth consumer registered on the account."""

    id: int | None = None
    key: str | None = None
    secret: str | None = None
    name: str | None = None
    description: str | None = None
    url: str | None = None
    callback_url: str | None = None


class SSHKey(BitbucketModel):
    pk: int | None = None
    key: str | None = None
    label: str | None = None


class SSHKeyDetailed(SSHKey):
    """SSH key lookup result, which also names the owning user."""

    user: V1User | None = None


class EmailInfo(BitbucketModel):
    email: str | None = None
    active: bool | None = None
    primary: bool | None = None
