"""Base class for 2.0 endpoints, with paginated list support."""

from collections.abc import AsyncIterator
from typing import TYPE_CHECKING, Any, TypeVar

from bitbucket_client.utils.pagination import (
    PageIterator,
    collect_values,
    effective_page_len,
    iterate_values,
)

if TYPE_CHECKING:
    from bitbucket_client.services.bitbucket_client import BitbucketClient

T = TypeVar("T")


class EndPoint:
    """Facade over one resource collection of the 2.0 API.

    Args:
        client: The client session every request goes through
        resource_path: Path of the collection relative to the API base URL,
            e.g. ``"repositories/"`` or ``"teams/atlassian/"``
    """

    def __init__(self, client: "BitbucketClient", resource_path: str):
        self._client = client
        self._base_url = resource_path

    @property
    def client(self) -> "BitbucketClient":
        return self._client

    @property
    def base_path(self) -> str:
        return self._base_url

    def _default_page_len(self) -> int:
        return self._client.config.default_page_len

    def iterate_pages(self, path: str, model: Any, page_len: int | None = None) -> PageIterator:
        """Lazily iterate over the pages of a list resource.

        Args:
            path: List resource path (no query string)
            model: Record type of the page values
            page_len: Items requested per page

        Returns:
            Async iterator yielding one list of values per page
        """
        return PageIterator(self._client, path, model, page_len or self._default_page_len())

    def iterate_values(self, path: str, model: Any, max: int = 0) -> AsyncIterator[Any]:
        """Lazily iterate over single values, at most ``max`` of them (0 for all)."""
        page_len = effective_page_len(max, self._default_page_len())
        return iterate_values(self.iterate_pages(path, model, page_len), max)

    async def get_paginated_values(self, path: str, model: Any, max: int = 0) -> list[Any]:
        """Return the values of a list resource.

        Args:
            path: List resource path (no query string)
            model: Record type of the values
            max: Maximum number of values to return, 0 for all

        Returns:
            Values in server order
        """
        page_len = effective_page_len(max, self._default_page_len())
        return await collect_values(self.iterate_pages(path, model, page_len), max)
