"""Data models for the Bitbucket client."""

from bitbucket_client.models.base import BitbucketModel
from bitbucket_client.models.page import Page
from bitbucket_client.models.result import Failure, RawResponse, Result, Success

__all__ = [
    "BitbucketModel",
    "Page",
    "Result",
    "Success",
    "Failure",
    "RawResponse",
]
