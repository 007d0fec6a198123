"""Repositories endpoint and its per-repository resources (API 2.0).

For all repository resources you supply the owner's account name and a
repo slug that identifies the repository:

    repositories/{account_name}/{repo_slug}/...
"""

from typing import TYPE_CHECKING

from bitbucket_client.endpoints.v2.endpoint import EndPoint
from bitbucket_client.models.result import RawResponse, Result
from bitbucket_client.models.v2 import (
    Account,
    Activity,
    BranchRestriction,
    Comment,
    Commit,
    Fork,
    Merge,
    PullRequest,
    PullRequestInfo,
    Repository,
)

if TYPE_CHECKING:
    from bitbucket_client.services.bitbucket_client import BitbucketClient


class RepositoriesEndPoint(EndPoint):
    """The ``repositories/`` collection."""

    def __init__(self, client: "BitbucketClient"):
        super().__init__(client, "repositories/")

    async def list_repositories(self, account_name: str, max: int = 0) -> list[Repository]:
        """List the repositories of an account.

        Private repositories are included only when the caller is
        authenticated and authorized to see them.

        Args:
            account_name: Owner of the repositories
            max: Maximum number of repositories, 0 for all
        """
        return await self.get_paginated_values(f"{self._base_url}{account_name}/", Repository, max)

    async def list_public_repositories(self, max: int = 0) -> list[Repository]:
        """List all public repositories, oldest first.

        Args:
            max: Maximum number of repositories, 0 for all
        """
        return await self.get_paginated_values(self._base_url, Repository, max)

    def repository_path(self, account_name: str, repo_slug: str, append: str = "") -> str:
        """Format ``repositories/{account}/{slug}/{append}``."""
        return f"{self._base_url}{account_name}/{repo_slug}/{append}"

    def repository_resource(self, account_name: str, repo_slug: str) -> "RepositoryResource":
        """Get a handle on one repository."""
        return RepositoryResource(self, account_name, repo_slug)

    def pull_requests_resource(self, account_name: str, repo_slug: str) -> "PullRequestsResource":
        """Get a handle on the pull requests of one repository."""
        return PullRequestsResource(self, account_name, repo_slug)


class RepositoryResource:
    """One repository and its sub-resources.

    Use these calls with public or private repositories. Private
    repositories require a token with access to them.
    """

    def __init__(self, end_point: RepositoriesEndPoint, account_name: str, repo_slug: str):
        self._end_point = end_point
        self._client = end_point.client
        self.account_name = account_name
        self.repo_slug = repo_slug

    def _path(self, append: str = "") -> str:
        return self._end_point.repository_path(self.account_name, self.repo_slug, append)

    # Repository

    async def get_repository(self) -> Result:
        """Get the repository details."""
        return await self._client.get(self._path(), response_model=Repository)

    async def put_repository(self, repository: Repository) -> Result:
        """Update the repository."""
        return await self._client.put(repository, self._path(), response_model=Repository)

    async def post_repository(self, repository: Repository) -> Result:
        """Create the repository under this resource's account and slug."""
        return await self._client.post(repository, self._path(), response_model=Repository)

    async def delete_repository(self) -> Result:
        """Delete the repository. This cannot be undone."""
        return await self._client.delete(self._path())

    async def list_watchers(self, max: int = 0) -> list[Account]:
        """List the accounts watching the repository."""
        return await self._end_point.get_paginated_values(self._path("watchers"), Account, max)

    async def list_forks(self, max: int = 0) -> list[Fork]:
        """List the forks of the repository."""
        return await self._end_point.get_paginated_values(self._path("forks"), Fork, max)

    # Branch restrictions

    async def list_branch_restrictions(self, max: int = 0) -> list[BranchRestriction]:
        return await self._end_point.get_paginated_values(
            self._path("branch-restrictions/"), BranchRestriction, max
        )

    async def post_branch_restriction(self, restriction: BranchRestriction) -> Result:
        return await self._client.post(
            restriction, self._path("branch-restrictions/"), response_model=BranchRestriction
        )

    async def get_branch_restriction(self, restriction_id: int) -> Result:
        return await self._client.get(
            self._path(f"branch-restrictions/{restriction_id}"), response_model=BranchRestriction
        )

    async def put_branch_restriction(self, restriction: BranchRestriction) -> Result:
        """Update a branch restriction, identified by ``restriction.id``."""
        return await self._client.put(
            restriction,
            self._path(f"branch-restrictions/{restriction.id}"),
            response_model=BranchRestriction,
        )

    async def delete_branch_restriction(self, restriction_id: int) -> Result:
        return await self._client.delete(self._path(f"branch-restrictions/{restriction_id}"))

    # Diffs

    async def get_diff(self, spec: str) -> Result:
        """Get the raw diff for a revision spec such as ``"main..feature"``."""
        return await self._client.get(self._path(f"diff/{spec}"), response_model=RawResponse)

    async def get_patch(self, spec: str) -> Result:
        """Get the raw patch for a revision spec."""
        return await self._client.get(self._path(f"patch/{spec}"), response_model=RawResponse)

    # Commits

    async def list_commits(self, branch_or_tag: str | None = None, max: int = 0) -> list[Commit]:
        """List commits, optionally starting from a branch or tag."""
        path = self._path("commits/")
        if branch_or_tag:
            path += branch_or_tag
        return await self._end_point.get_paginated_values(path, Commit, max)

    async def get_commit(self, revision: str) -> Result:
        return await self._client.get(self._path(f"commit/{revision}"), response_model=Commit)

    async def list_commit_comments(self, revision: str, max: int = 0) -> list[Comment]:
        return await self._end_point.get_paginated_values(
            self._path(f"commit/{revision}/comments/"), Comment, max
        )

    async def get_commit_comment(self, revision: str, comment_id: int) -> Result:
        return await self._client.get(
            self._path(f"commit/{revision}/comments/{comment_id}/"), response_model=RawResponse
        )

    async def approve_commit(self, revision: str) -> Result:
        """Approve a commit as the authenticated user."""
        return await self._client.post(
            None, self._path(f"commit/{revision}/approve/"), response_model=RawResponse
        )

    async def delete_commit_approval(self, revision: str) -> Result:
        return await self._client.delete(self._path(f"commit/{revision}/approve/"))

    # Default reviewers

    async def put_default_reviewer(self, target_username: str) -> Result:
        """Add a user to the repository's default reviewers."""
        return await self._client.put(
            None, self._path(f"default-reviewers/{target_username}"), response_model=RawResponse
        )

    def pull_requests_resource(self) -> "PullRequestsResource":
        return PullRequestsResource(self._end_point, self.account_name, self.repo_slug)


class PullRequestsResource:
    """The pull requests of one repository."""

    def __init__(self, end_point: RepositoriesEndPoint, account_name: str, repo_slug: str):
        self._end_point = end_point
        self._client = end_point.client
        self.account_name = account_name
        self.repo_slug = repo_slug

    def _path(self, append: str = "") -> str:
        return self._end_point.repository_path(
            self.account_name, self.repo_slug, f"pullrequests/{append}"
        )

    async def list_pull_requests(self, max: int = 0) -> list[PullRequest]:
        """List the open pull requests of the repository."""
        return await self._end_point.get_paginated_values(self._path(), PullRequest, max)

    async def post_pull_request(self, pull_request: PullRequest) -> Result:
        """Open a new pull request."""
        return await self._client.post(pull_request, self._path(), response_model=PullRequest)

    async def put_pull_request(self, pull_request: PullRequest) -> Result:
        """Update a pull request, identified by ``pull_request.id``."""
        if pull_request.id is None:
            raise ValueError("Pull request id is required to update a pull request")
        return await self._client.put(
            pull_request, self._path(f"{pull_request.id}/"), response_model=PullRequest
        )

    async def get_pull_request_log(self, max: int = 0) -> list[Activity]:
        """Get the activity log of all pull requests of the repository."""
        return await self._end_point.get_paginated_values(self._path("activity/"), Activity, max)

    def pull_request_resource(self, pull_request_id: int) -> "PullRequestResource":
        """Get a handle on one pull request."""
        return PullRequestResource(self, pull_request_id)


class PullRequestResource:
    """One pull request."""

    def __init__(self, pull_requests: PullRequestsResource, pull_request_id: int):
        self._pull_requests = pull_requests
        self._end_point = pull_requests._end_point
        self._client = pull_requests._client
        self.pull_request_id = pull_request_id

    def _path(self, append: str = "") -> str:
        return self._pull_requests._path(f"{self.pull_request_id}/{append}")

    async def get_pull_request(self) -> Result:
        return await self._client.get(self._path(), response_model=PullRequest)

    async def list_commits(self, max: int = 0) -> list[Commit]:
        return await self._end_point.get_paginated_values(self._path("commits/"), Commit, max)

    async def approve_pull_request(self) -> Result:
        """Approve the pull request as the authenticated user."""
        return await self._client.post(None, self._path("approve/"), response_model=PullRequestInfo)

    async def remove_pull_request_approval(self) -> Result:
        return await self._client.delete(self._path("approve/"))

    async def get_diff(self) -> Result:
        return await self._client.get(self._path("diff/"), response_model=RawResponse)

    async def get_activity(self, max: int = 0) -> list[Activity]:
        return await self._end_point.get_paginated_values(self._path("activity/"), Activity, max)

    async def accept_and_merge(self, merge: Merge | None = None) -> Result:
        """Merge the pull request."""
        return await self._client.post(merge or Merge(), self._path("merge/"), response_model=PullRequest)

    async def decline(self, merge: Merge | None = None) -> Result:
        """Decline the pull request."""
        return await self._client.post(merge or Merge(), self._path("decline/"), response_model=PullRequest)

    async def list_comments(self, max: int = 0) -> list[Comment]:
        return await self._end_point.get_paginated_values(self._path("comments/"), Comment, max)

    async def get_comment(self, comment_id: int) -> Result:
        return await self._client.get(self._path(f"comments/{comment_id}/"), response_model=Comment)
