"""Data models for the Bitbucket 1.0 API."""

from bitbucket_client.models.v1.branch import BranchInfo, FileInfo
from bitbucket_client.models.v1.issue import (
    Component,
    Issue,
    IssueComment,
    IssueFollowers,
    IssueMetadata,
    IssuesInfo,
    Milestone,
    Version,
)
from bitbucket_client.models.v1.user import (
    Consumer,
    EmailInfo,
    Event,
    EventInfo,
    Followers,
    Invitation,
    InvitationsInfo,
    Privileges,
    RepositoriesOverview,
    SSHKey,
    SSHKeyDetailed,
    UserInfo,
    V1Repository,
    V1User,
)

__all__ = [
    "BranchInfo",
    "FileInfo",
    "Component",
    "Issue",
    "IssueComment",
    "IssueFollowers",
    "IssueMetadata",
    "IssuesInfo",
    "Milestone",
    "Version",
    "Consumer",
    "EmailInfo",
    "Event",
    "EventInfo",
    "Followers",
    "Invitation",
    "InvitationsInfo",
    "Privileges",
    "RepositoriesOverview",
    "SSHKey",
    "SSHKeyDetailed",
    "UserInfo",
    "V1Repository",
    "V1User",
]
