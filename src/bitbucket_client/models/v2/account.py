"""Account, team and link models (API 2.0)."""

from datetime import datetime

from pydantic import Field

from bitbucket_client.models.base import BitbucketModel


class Link(BitbucketModel):
    """A hypermedia link, e.g. ``{"href": "...", "name": "https"}``."""

    href: str | None = None
    name: str | None = None


class Links(BitbucketModel):
    """The ``links`` object attached to most 2.0 resources."""

    self_link: Link | None = Field(default=None, alias="self")
    html: Link | None = None
    avatar: Link | None = None
    repositories: Link | None = None
    followers: Link | None = None
    following: Link | None = None
    commits: Link | None = None
    watchers: Link | None = None
    forks: Link | None = None
    pullrequests: Link | None = None
    clone: list[Link] = Field(default_factory=list)


class Account(BitbucketModel):
    """A user or team summary (members, followers, watchers, authors)."""

    username: str | None = None
    display_name: str | None = None
    nickname: str | None = None
    account_id: str | None = None
    uuid: str | None = None
    type: str | None = None
    links: Links | None = None


class Team(Account):
    """A team profile."""

    website: str | None = None
    location: str | None = None
    created_on: datetime | None = None
