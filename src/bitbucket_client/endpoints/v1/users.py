"""Users endpoint for any account (API 1.0)."""

from typing import TYPE_CHECKING

from bitbucket_client.models.result import RawResponse, Result
from bitbucket_client.models.v1 import (
    Consumer,
    EmailInfo,
    EventInfo,
    Followers,
    InvitationsInfo,
    Privileges,
    SSHKey,
    SSHKeyDetailed,
)

if TYPE_CHECKING:
    from bitbucket_client.services.bitbucket_client import BitbucketClient


class UsersEndPoint:
    """Account-level resources of ``users/{account_name}/``.

    Most of these require the caller to authenticate as the account itself.
    """

    def __init__(self, client: "BitbucketClient", account_name: str):
        self._client = client
        self.account_name = account_name
        self._base_url = f"users/{account_name}/"

    async def list_user_events(self) -> Result:
        """List the account's events."""
        return await self._client.get(f"{self._base_url}events/", response_model=EventInfo)

    async def list_user_privileges(self) -> Result:
        return await self._client.get(f"{self._base_url}privileges/", response_model=Privileges)

    async def list_invitations(self) -> Result:
        """List pending invitations sent by the account."""
        return await self._client.get(f"{self._base_url}invitations/", response_model=InvitationsInfo)

    async def get_invitations_for(self, email: str) -> Result:
        """Get the invitations sent to one email address (returned raw)."""
        return await self._client.get(
            f"{self._base_url}invitations/{email}", response_model=RawResponse
        )

    async def list_followers(self) -> Result:
        return await self._client.get(f"{self._base_url}followers/", response_model=Followers)

    async def list_consumers(self) -> Result:
        """List the account's OAuth consumers."""
        return await self._client.get(f"{self._base_url}consumers/", response_model=list[Consumer])

    async def get_consumer(self, consumer_id: int) -> Result:
        return await self._client.get(
            f"{self._base_url}consumers/{consumer_id}", response_model=Consumer
        )

    async def list_ssh_keys(self) -> Result:
        return await self._client.get(f"{self._base_url}ssh-keys/", response_model=list[SSHKey])

    async def get_ssh_key(self, pk: int) -> Result:
        return await self._client.get(f"{self._base_url}ssh-keys/{pk}", response_model=SSHKeyDetailed)

    async def list_emails(self) -> Result:
        """List the email addresses on the account."""
        return await self._client.get(f"{self._base_url}emails/", response_model=list[EmailInfo])

    async def get_email(self, email: str) -> Result:
        return await self._client.get(f"{self._base_url}emails/{email}", response_model=EmailInfo)
