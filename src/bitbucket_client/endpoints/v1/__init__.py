"""Endpoints for the Bitbucket 1.0 API."""

from bitbucket_client.endpoints.v1.repositories import (
    IssueResource,
    IssuesResource,
    RepositoriesEndPoint,
)
from bitbucket_client.endpoints.v1.user import UserEndPoint
from bitbucket_client.endpoints.v1.users import UsersEndPoint

__all__ = [
    "RepositoriesEndPoint",
    "IssuesResource",
    "IssueResource",
    "UserEndPoint",
    "UsersEndPoint",
]
