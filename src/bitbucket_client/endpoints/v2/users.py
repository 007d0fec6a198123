"""Users endpoint (API 2.0)."""

from typing import TYPE_CHECKING

from bitbucket_client.endpoints.v2.endpoint import EndPoint
from bitbucket_client.models.result import Result
from bitbucket_client.models.v2 import Account, Repository

if TYPE_CHECKING:
    from bitbucket_client.services.bitbucket_client import BitbucketClient


class UsersEndPoint(EndPoint):
    """Public profile and social data of one account (``users/{account}/``)."""

    def __init__(self, client: "BitbucketClient", account_name: str):
        super().__init__(client, f"users/{account_name}/")
        self.account_name = account_name

    async def get_profile(self) -> Result:
        """Get the account's public profile."""
        return await self._client.get(self._base_url, response_model=Account)

    async def list_followers(self, max: int = 0) -> list[Account]:
        return await self.get_paginated_values(f"{self._base_url}followers/", Account, max)

    async def list_following(self, max: int = 0) -> list[Account]:
        return await self.get_paginated_values(f"{self._base_url}following/", Account, max)

    async def list_repositories(self, max: int = 0) -> list[Repository]:
        """List the account's repositories (served from ``repositories/{account}/``)."""
        return await self.get_paginated_values(f"repositories/{self.account_name}/", Repository, max)
