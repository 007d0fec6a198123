"""Bitbucket Client - Async client for the Bitbucket REST API (2.0 and 1.0).

This SDK wraps the Bitbucket REST API in typed endpoint objects:
- Repositories, forks, watchers, commits and branch restrictions
- Pull requests, their commits, comments and activity
- Teams and user profiles
- The 1.0 issue tracker and account resources

Example usage:
    ```python
    from bitbucket_client import BitbucketClientV2

    async with BitbucketClientV2(token="xxx") as client:
        repos = await client.repositories_end_point().list_repositories("atlassian", max=10)
        result = await client.teams_end_point("atlassian").get_profile()
        if result.ok:
            print(result.value.display_name)
    ```
"""

from bitbucket_client.config import Config
from bitbucket_client.exceptions import (
    BitbucketAPIError,
    BitbucketAuthError,
    BitbucketClientError,
    BitbucketDecodeError,
    BitbucketNotFoundError,
    InvalidMethodError,
)
from bitbucket_client.models import Failure, Page, RawResponse, Result, Success
from bitbucket_client.services import (
    BitbucketClient,
    BitbucketClientV1,
    BitbucketClientV2,
    HttpMethod,
)

__version__ = "0.1.0"

__all__ = [
    # Clients
    "BitbucketClient",
    "BitbucketClientV1",
    "BitbucketClientV2",
    "HttpMethod",
    # Configuration
    "Config",
    # Exceptions
    "BitbucketClientError",
    "BitbucketAPIError",
    "BitbucketNotFoundError",
    "BitbucketAuthError",
    "BitbucketDecodeError",
    "InvalidMethodError",
    # Results
    "Page",
    "Result",
    "Success",
    "Failure",
    "RawResponse",
]
