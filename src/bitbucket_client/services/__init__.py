"""HTTP services for the Bitbucket API."""

from bitbucket_client.services.bitbucket_client import (
    BitbucketClient,
    BitbucketClientV1,
    BitbucketClientV2,
)
from bitbucket_client.services.request_executor import HttpMethod, execute_request

__all__ = [
    "BitbucketClient",
    "BitbucketClientV1",
    "BitbucketClientV2",
    "HttpMethod",
    "execute_request",
]
