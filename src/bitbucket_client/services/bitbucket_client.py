"""Bitbucket REST API clients (versions 2.0 and 1.0)."""

import logging
from typing import Any, Optional

import httpx

from bitbucket_client.config import Config, get_config
from bitbucket_client.endpoints.v1.repositories import RepositoriesEndPoint as V1RepositoriesEndPoint
from bitbucket_client.endpoints.v1.user import UserEndPoint
from bitbucket_client.endpoints.v1.users import UsersEndPoint as V1UsersEndPoint
from bitbucket_client.endpoints.v2.repositories import RepositoriesEndPoint
from bitbucket_client.endpoints.v2.teams import TeamsEndPoint
from bitbucket_client.endpoints.v2.users import UsersEndPoint
from bitbucket_client.exceptions import BitbucketDecodeError
from bitbucket_client.models.result import Failure, Result, Success
from bitbucket_client.services.request_executor import HttpMethod, execute_request

logger = logging.getLogger(__name__)

USER_AGENT = "bitbucket-client/0.1.0"


class BitbucketClient:
    """Async client session for one Bitbucket API base URL.

    The base URL and token are fixed at construction and shared read-only
    by every endpoint created from the client. Each request opens its own
    connection.

    Failures are reported in two ways:

    - transport failures (DNS, connect, timeouts) and unreadable bodies are
      logged and returned as ``Failure``;
    - non-2xx responses raise ``BitbucketAPIError``.
    """

    def __init__(
        self,
        base_url: str,
        token: Optional[str] = None,
        config: Optional[Config] = None,
    ):
        if not base_url.endswith("/"):
            base_url += "/"
        self._base_url = base_url
        self._token = token
        self.config = config or get_config()

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def token(self) -> Optional[str]:
        return self._token

    @property
    def is_authenticated(self) -> bool:
        """Check if an access token is configured."""
        return bool(self._token)

    async def __aenter__(self) -> "BitbucketClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def close(self) -> None:
        """Nothing to release: connections live for a single request."""
        pass

    def _create_http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self._base_url,
            headers={"Accept": "application/json", "User-Agent": USER_AGENT},
            timeout=self.config.request_timeout,
        )

    async def send(
        self,
        body: Any,
        method: "HttpMethod | str",
        path: str,
        token: Optional[str] = None,
        parameters: Optional[dict[str, Any]] = None,
        response_model: Any = None,
    ) -> Result:
        """Send one request and wrap the outcome in a Result.

        Args:
            body: Request body for POST/PUT, ignored otherwise
            method: HTTP verb
            path: Path relative to the base URL
            token: Access token, defaults to the session token
            parameters: Query parameters
            response_model: Type to decode the response into

        Returns:
            Success with the decoded value (possibly None), or Failure when
            the server could not be reached or the body could not be decoded
        """
        token = token if token is not None else self._token
        try:
            async with self._create_http_client() as http:
                value = await execute_request(
                    http,
                    path,
                    method,
                    body=body,
                    token=token,
                    parameters=parameters,
                    response_model=response_model,
                    max_attempts=self.config.max_attempts,
                )
        except (httpx.TransportError, BitbucketDecodeError) as e:
            logger.warning("%s %s failed: %s", getattr(method, "value", method), path, e)
            return Failure(e)

        return Success(value)

    async def get(
        self,
        path: str,
        token: Optional[str] = None,
        parameters: Optional[dict[str, Any]] = None,
        response_model: Any = None,
    ) -> Result:
        """Make a GET request."""
        return await self.send(None, HttpMethod.GET, path, token, parameters, response_model)

    async def post(
        self,
        body: Any,
        path: str,
        token: Optional[str] = None,
        response_model: Any = None,
    ) -> Result:
        """Make a POST request with a JSON body."""
        return await self.send(body, HttpMethod.POST, path, token, response_model=response_model)

    async def put(
        self,
        body: Any,
        path: str,
        token: Optional[str] = None,
        response_model: Any = None,
    ) -> Result:
        """Make a PUT request with a JSON body."""
        return await self.send(body, HttpMethod.PUT, path, token, response_model=response_model)

    async def delete(
        self,
        path: str,
        token: Optional[str] = None,
        response_model: Any = None,
    ) -> Result:
        """Make a DELETE request."""
        return await self.send(None, HttpMethod.DELETE, path, token, response_model=response_model)


class BitbucketClientV2(BitbucketClient):
    """Client for version 2.0 of the Bitbucket API.

    Example usage:
        ```python
        from bitbucket_client import BitbucketClientV2

        async with BitbucketClientV2(token="xxx") as client:
            repos = await client.repositories_end_point().list_repositories("atlassian", max=20)
            profile = await client.teams_end_point("atlassian").get_profile()
        ```
    """

    def __init__(
        self,
        token: Optional[str] = None,
        base_url: Optional[str] = None,
        config: Optional[Config] = None,
    ):
        config = config or get_config()
        super().__init__(base_url or config.api_v2_url, token, config)

    def repositories_end_point(self) -> RepositoriesEndPoint:
        """Get the repositories endpoint."""
        return RepositoriesEndPoint(self)

    def teams_end_point(self, team_name: str) -> TeamsEndPoint:
        """Get the teams endpoint for one team."""
        return TeamsEndPoint(self, team_name)

    def users_end_point(self, account_name: str) -> UsersEndPoint:
        """Get the users endpoint for one account."""
        return UsersEndPoint(self, account_name)


class BitbucketClientV1(BitbucketClient):
    """Client for version 1.0 of the Bitbucket API."""

    def __init__(
        self,
        token: Optional[str] = None,
        base_url: Optional[str] = None,
        config: Optional[Config] = None,
    ):
        config = config or get_config()
        super().__init__(base_url or config.api_v1_url, token, config)

    def user_end_point(self) -> UserEndPoint:
        """Get the endpoint for the authenticated user."""
        return UserEndPoint(self)

    def users_end_point(self, account_name: str) -> V1UsersEndPoint:
        """Get the users endpoint for one account."""
        return V1UsersEndPoint(self, account_name)

    def repositories_end_point(self, account_name: str, repo_slug: str) -> V1RepositoriesEndPoint:
        """Get the repositories endpoint for one repository."""
        return V1RepositoriesEndPoint(self, account_name, repo_slug)
