"""Teams endpoint (API 2.0)."""

from typing import TYPE_CHECKING

from bitbucket_client.endpoints.v2.endpoint import EndPoint
from bitbucket_client.models.result import Result
from bitbucket_client.models.v2 import Account, Repository, Team

if TYPE_CHECKING:
    from bitbucket_client.services.bitbucket_client import BitbucketClient


class TeamsEndPoint(EndPoint):
    """Profile, members and repositories of one team (``teams/{team}/``)."""

    def __init__(self, client: "BitbucketClient", team_name: str):
        super().__init__(client, f"teams/{team_name}/")
        self.team_name = team_name

    async def get_profile(self) -> Result:
        """Get the team's public profile.

        Private profiles require an authenticated caller authorized to view them.
        """
        return await self._client.get(self._base_url, response_model=Team)

    async def list_members(self, max: int = 0) -> list[Account]:
        """List the team's members."""
        return await self.get_paginated_values(f"{self._base_url}members/", Account, max)

    async def list_followers(self, max: int = 0) -> list[Account]:
        """List the accounts following the team."""
        return await self.get_paginated_values(f"{self._base_url}followers/", Account, max)

    async def list_following(self, max: int = 0) -> list[Account]:
        """List the accounts the team follows."""
        return await self.get_paginated_values(f"{self._base_url}following/", Account, max)

    async def list_repositories(self, max: int = 0) -> list[Repository]:
        """List the team's repositories.

        Private repositories appear only for authorized callers.
        """
        return await self.get_paginated_values(f"{self._base_url}repositories/", Repository, max)
