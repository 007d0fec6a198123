"""Endpoints for the Bitbucket 2.0 API."""

from bitbucket_client.endpoints.v2.endpoint import EndPoint
from bitbucket_client.endpoints.v2.repositories import (
    PullRequestResource,
    PullRequestsResource,
    RepositoriesEndPoint,
    RepositoryResource,
)
from bitbucket_client.endpoints.v2.teams import TeamsEndPoint
from bitbucket_client.endpoints.v2.users import UsersEndPoint

__all__ = [
    "EndPoint",
    "RepositoriesEndPoint",
    "RepositoryResource",
    "PullRequestsResource",
    "PullRequestResource",
    "TeamsEndPoint",
    "UsersEndPoint",
]
