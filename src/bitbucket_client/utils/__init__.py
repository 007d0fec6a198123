"""Utility modules for the Bitbucket client."""

from bitbucket_client.utils.pagination import (
    DEFAULT_PAGE_LEN,
    PageIterator,
    build_request_url,
    collect_values,
    iterate_values,
    redact_token,
    to_query_string,
)

__all__ = [
    "DEFAULT_PAGE_LEN",
    "PageIterator",
    "build_request_url",
    "collect_values",
    "iterate_values",
    "redact_token",
    "to_query_string",
]
