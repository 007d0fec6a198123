"""Repository and issue tracker resources (API 1.0).

Issue tracker paths all hang off one repository:

    repositories/{account_name}/{repo_slug}/issues/...

Public issue trackers can be read anonymously, with a reduced set of
fields. Creating, updating and deleting requires a token.
"""

from typing import TYPE_CHECKING, Any

from bitbucket_client.models.result import Result
from bitbucket_client.models.v1 import (
    BranchInfo,
    Component,
    Issue,
    IssueComment,
    IssueFollowers,
    IssuesInfo,
    Milestone,
    Version,
)

if TYPE_CHECKING:
    from bitbucket_client.services.bitbucket_client import BitbucketClient


class RepositoriesEndPoint:
    """One repository of the 1.0 API."""

    def __init__(self, client: "BitbucketClient", account_name: str, repo_slug: str):
        self._client = client
        self.account_name = account_name
        self.repo_slug = repo_slug
        self._base_url = f"repositories/{account_name}/{repo_slug}/"

    @property
    def client(self) -> "BitbucketClient":
        return self._client

    def repository_path(self, append: str = "") -> str:
        return f"{self._base_url}{append}"

    async def list_branches(self) -> Result:
        """Get the tip of every branch, keyed by branch name."""
        return await self._client.get(
            self.repository_path("branches"), response_model=dict[str, BranchInfo]
        )

    def issues_resource(self) -> "IssuesResource":
        """Get a handle on the repository's issue tracker."""
        return IssuesResource(self)


class IssuesResource:
    """The issue tracker of one repository."""

    def __init__(self, repositories_end_point: RepositoriesEndPoint):
        self._end_point = repositories_end_point
        self._client = repositories_end_point.client

    def _path(self, append: str = "") -> str:
        return self._end_point.repository_path(f"issues/{append}")

    # Generic helpers for the components, versions and milestones collections

    async def _list(self, kind: str, model: Any) -> Result:
        return await self._client.get(self._path(kind), response_model=list[model])

    async def _get(self, kind: str, item_id: int, model: Any) -> Result:
        return await self._client.get(self._path(f"{kind}/{item_id}"), response_model=model)

    async def _post(self, kind: str, item: Any) -> Result:
        return await self._client.post(item, self._path(kind), response_model=type(item))

    async def _put(self, kind: str, item: Any) -> Result:
        return await self._client.put(item, self._path(f"{kind}/{item.id}"), response_model=type(item))

    async def _delete(self, kind: str, item_id: int) -> Result:
        return await self._client.delete(self._path(f"{kind}/{item_id}"))

    # Issues

    async def list_issues(self, **filters: Any) -> Result:
        """List the issues of the tracker.

        Unfiltered, ``count`` is the total number of issues. Keyword filters
        (``status="open"``, ``search="crash"``, ...) are sent as query
        parameters and ``count`` then reflects the filtered total.
        """
        return await self._client.get(self._path(), parameters=filters or None, response_model=IssuesInfo)

    async def get_issue(self, issue_id: int) -> Result:
        return await self._client.get(self._path(f"{issue_id}"), response_model=Issue)

    async def post_issue(self, issue: Issue) -> Result:
        """Create an issue. The authenticated user becomes ``reported_by``."""
        return await self._client.post(issue, self._path(), response_model=Issue)

    async def put_issue(self, issue: Issue) -> Result:
        """Update an issue, identified by ``issue.local_id``."""
        return await self._client.put(issue, self._path(f"{issue.local_id}"), response_model=Issue)

    async def delete_issue(self, issue_id: int) -> Result:
        return await self._client.delete(self._path(f"{issue_id}"))

    # Issue followers and comments

    async def list_issue_followers(self, issue_id: int) -> Result:
        return await self._client.get(
            self._path(f"{issue_id}/followers"), response_model=IssueFollowers
        )

    async def list_issue_comments(self, issue_id: int) -> Result:
        return await self._client.get(
            self._path(f"{issue_id}/comments"), response_model=list[IssueComment]
        )

    async def get_issue_comment(self, issue_id: int, comment_id: int) -> Result:
        return await self._client.get(
            self._path(f"{issue_id}/comments/{comment_id}"), response_model=IssueComment
        )

    async def post_issue_comment(self, issue_id: int, comment: IssueComment) -> Result:
        return await self._client.post(
            comment, self._path(f"{issue_id}/comments"), response_model=IssueComment
        )

    async def put_issue_comment(self, issue_id: int, comment: IssueComment) -> Result:
        """Update a comment, identified by ``comment.comment_id``."""
        return await self._client.put(
            comment,
            self._path(f"{issue_id}/comments/{comment.comment_id}"),
            response_model=IssueComment,
        )

    async def delete_issue_comment(self, issue_id: int, comment_id: int) -> Result:
        return await self._client.delete(self._path(f"{issue_id}/comments/{comment_id}"))

    # Components

    async def list_components(self) -> Result:
        return await self._list("components", Component)

    async def get_component(self, component_id: int) -> Result:
        return await self._get("components", component_id, Component)

    async def post_component(self, component: Component) -> Result:
        return await self._post("components", component)

    async def put_component(self, component: Component) -> Result:
        return await self._put("components", component)

    async def delete_component(self, component_id: int) -> Result:
        return await self._delete("components", component_id)

    # Versions

    async def list_versions(self) -> Result:
        return await self._list("versions", Version)

    async def get_version(self, version_id: int) -> Result:
        return await self._get("versions", version_id, Version)

    async def post_version(self, version: Version) -> Result:
        return await self._post("versions", version)

    async def put_version(self, version: Version) -> Result:
        return await self._put("versions", version)

    async def delete_version(self, version_id: int) -> Result:
        return await self._delete("versions", version_id)

    # Milestones

    async def list_milestones(self) -> Result:
        return await self._list("milestones", Milestone)

    async def get_milestone(self, milestone_id: int) -> Result:
        return await self._get("milestones", milestone_id, Milestone)

    async def post_milestone(self, milestone: Milestone) -> Result:
        return await self._post("milestones", milestone)

    async def put_milestone(self, milestone: Milestone) -> Result:
        return await self._put("milestones", milestone)

    async def delete_milestone(self, milestone_id: int) -> Result:
        return await self._delete("milestones", milestone_id)

    def issue_resource(self, issue_id: int) -> "IssueResource":
        """Get a handle on one issue."""
        return IssueResource(self, issue_id)


class IssueResource:
    """One issue, for callers that work on a single issue at a time."""

    def __init__(self, issues_resource: IssuesResource, issue_id: int):
        self._issues = issues_resource
        self.issue_id = issue_id

    async def get_issue(self) -> Result:
        return await self._issues.get_issue(self.issue_id)

    async def list_followers(self) -> Result:
        """List the followers of the issue."""
        return await self._issues.list_issue_followers(self.issue_id)

    async def list_comments(self) -> Result:
        return await self._issues.list_issue_comments(self.issue_id)

    async def get_comment(self, comment_id: int) -> Result:
        return await self._issues.get_issue_comment(self.issue_id, comment_id)

    async def post_comment(self, comment: IssueComment) -> Result:
        return await self._issues.post_issue_comment(self.issue_id, comment)

    async def put_comment(self, comment: IssueComment) -> Result:
        return await self._issues.put_issue_comment(self.issue_id, comment)

    async def delete_comment(self, comment_id: int) -> Result:
        return await self._issues.delete_issue_comment(self.issue_id, comment_id)
