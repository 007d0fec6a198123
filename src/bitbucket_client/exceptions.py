"""Exceptions for the Bitbucket client.

Exception Hierarchy:
    BitbucketClientError (base)
    ├── BitbucketAPIError (HTTP responses with non-2xx status codes)
    │   ├── BitbucketNotFoundError (404 not found)
    │   └── BitbucketAuthError (401/403, token missing, invalid or lacking scope)
    ├── BitbucketDecodeError (body is not valid JSON or does not fit the model)
    └── InvalidMethodError (unknown HTTP verb, also a ValueError)

Usage:
    - BitbucketAPIError and its subclasses propagate to the caller of a
      single-item operation.
    - BitbucketDecodeError and transport failures (httpx.TransportError) are
      caught by the client and returned inside a Failure result.
"""

from typing import Any

__all__ = [
    "BitbucketClientError",
    "BitbucketAPIError",
    "BitbucketNotFoundError",
    "BitbucketAuthError",
    "BitbucketDecodeError",
    "InvalidMethodError",
]


class BitbucketClientError(Exception):
    """Base exception for all Bitbucket client errors."""

    pass


class BitbucketAPIError(BitbucketClientError):
    """Raised when the API answers with a non-success status code."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        url: str | None = None,
        response_body: Any = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.url = url
        self.response_body = response_body


class BitbucketNotFoundError(BitbucketAPIError):
    """Raised when a Bitbucket resource is not found (HTTP 404)."""

    def __init__(
        self,
        message: str,
        status_code: int | None = 404,
        url: str | None = None,
        response_body: Any = None,
    ):
        super().__init__(message, status_code=status_code, url=url, response_body=response_body)


class BitbucketAuthError(BitbucketAPIError):
    """Raised on HTTP 401/403."""

    pass


class BitbucketDecodeError(BitbucketClientError):
    """Raised when a response body cannot be decoded into the requested model."""

    def __init__(self, message: str, body: str | None = None):
        super().__init__(message)
        self.body = body


class InvalidMethodError(BitbucketClientError, ValueError):
    """Raised for an HTTP verb the executor does not know."""

    pass
