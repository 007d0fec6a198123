"""User endpoint for the authenticated account (API 1.0)."""

from typing import TYPE_CHECKING

from bitbucket_client.models.result import RawResponse, Result
from bitbucket_client.models.v1 import Privileges, RepositoriesOverview, UserInfo, V1Repository

if TYPE_CHECKING:
    from bitbucket_client.services.bitbucket_client import BitbucketClient


class UserEndPoint:
    """Information on the authenticated user (``user/``).

    Every call needs a token.
    """

    def __init__(self, client: "BitbucketClient"):
        self._client = client
        self._base_url = "user/"

    async def get_info(self) -> Result:
        """Get the user's profile and repositories."""
        return await self._client.get(self._base_url, response_model=UserInfo)

    async def list_privileges(self) -> Result:
        """List the user's team privileges."""
        return await self._client.get(f"{self._base_url}privileges", response_model=Privileges)

    async def list_follows(self) -> Result:
        """List the repositories the user follows."""
        return await self._client.get(f"{self._base_url}follows", response_model=list[V1Repository])

    async def list_repositories(self) -> Result:
        """List the repositories the user has access to."""
        return await self._client.get(
            f"{self._base_url}repositories", response_model=list[V1Repository]
        )

    async def repositories_overview(self) -> Result:
        """Get recently updated and viewed repositories."""
        return await self._client.get(
            f"{self._base_url}repositories/overview", response_model=RepositoriesOverview
        )

    async def get_repository_dashboard(self) -> Result:
        """Get the repository dashboard (unmodelled, returned raw)."""
        return await self._client.get(
            f"{self._base_url}repositories/dashboard", response_model=RawResponse
        )
