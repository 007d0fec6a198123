"""Query-string and pagination utilities for the Bitbucket API."""

import logging
import re
from collections.abc import AsyncIterator, Mapping
from typing import Any, Generic, Optional, TypeVar
from urllib.parse import quote

from bitbucket_client.models.page import Page

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Bitbucket's own default is 10, which needs lots of requests for larger collections
DEFAULT_PAGE_LEN = 50

_TOKEN_PATTERN = re.compile(r"(access_token=)[^&]+")


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        value = "true" if value else "false"
    return quote(str(value), safe="")


def to_query_string(parameters: Optional[Mapping[str, Any]]) -> str:
    """Serialize parameters as ``key=value`` pairs joined by ``&``.

    Insertion order is kept. Returns an empty string for no parameters.
    """
    if not parameters:
        return ""
    return "&".join(f"{key}={_format_value(value)}" for key, value in parameters.items())


def _append_query(url: str, query: str) -> str:
    url = url.rstrip("&")
    if url.endswith("?"):
        return f"{url}{query}"
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{query}"


def build_request_url(
    url: str,
    token: Optional[str] = None,
    parameters: Optional[Mapping[str, Any]] = None,
) -> str:
    """Build the final request URL.

    Parameters come first, the access token is always appended last:

        build_request_url("repositories/acme/", "abc", {"pagelen": 50})
        -> "repositories/acme/?pagelen=50&access_token=abc"

    No ``?`` is emitted when there is nothing to append and the result never
    ends with ``&``.
    """
    query = to_query_string(parameters)
    if query:
        url = _append_query(url, query)
    if token:
        url = _append_query(url, f"access_token={quote(token, safe='')}")
    return url.rstrip("&")


def redact_token(url: str) -> str:
    """Hide the access token in a URL before logging it."""
    return _TOKEN_PATTERN.sub(r"\1***", url)


def relative_path(path: str, base_url: str) -> str:
    """Strip the client's base URL from an absolute URL.

    ``next`` links and ``links.*.href`` values are absolute; requests are
    issued relative to the base URL.
    """
    if path.startswith(base_url):
        return path[len(base_url):]
    return path


class PageIterator(Generic[T]):
    """Lazy async iterator over the pages of a list endpoint.

    Each ``__anext__`` issues one GET and returns that page's values. The
    iterator keeps its own state (current page number, request parameters
    and the last ``next`` cursor seen) and stops when:

    - the server sends a page without a ``next`` cursor, or
    - the client returns no page (transport failure or an empty body).

    Neither case raises. Nothing is fetched until the consumer asks for the
    next page, so breaking out of the loop stops all further requests.
    """

    def __init__(self, client: Any, path: str, model: Any, page_len: int = DEFAULT_PAGE_LEN):
        if not path:
            raise ValueError("Pagination path must not be empty")
        path = relative_path(path, client.base_url)
        if "?" in path:
            raise ValueError(f"Pagination path must not carry a query string: {path}")

        self._client = client
        self._path = path
        self._page_model = Page[model]
        self.page = 1
        self.parameters: dict[str, Any] = {"pagelen": page_len}
        self.last_cursor: Optional[str] = None
        self.finished = False

    @property
    def path(self) -> str:
        return self._path

    def __aiter__(self) -> "PageIterator[T]":
        return self

    async def __anext__(self) -> list[T]:
        if self.finished:
            raise StopAsyncIteration

        logger.debug("Fetching page %d of %s", self.page, self._path)
        result = await self._client.get(
            self._path,
            parameters=dict(self.parameters),
            response_model=self._page_model,
        )
        page = result.value_or(None)

        if page is None:
            if not result.ok:
                logger.warning(
                    "Stopping pagination of %s at page %d: %s",
                    self._path,
                    self.page,
                    result.error,
                )
            self.finished = True
            raise StopAsyncIteration

        self.last_cursor = page.next
        self.page += 1
        self.parameters["page"] = self.page
        if not page.has_next:
            self.finished = True

        return list(page.values)


def effective_page_len(max_items: int, default_page_len: int = DEFAULT_PAGE_LEN) -> int:
    """Page length to request for a capped listing (0 means no cap)."""
    if max_items > 0 and max_items < default_page_len:
        return max_items
    return default_page_len


async def iterate_values(pages: AsyncIterator[list[T]], max_items: int = 0) -> AsyncIterator[T]:
    """Flatten pages into single items, stopping after ``max_items`` (0 for all)."""
    count = 0
    async for values in pages:
        for value in values:
            yield value
            count += 1
            if max_items > 0 and count >= max_items:
                return


async def collect_values(pages: AsyncIterator[list[T]], max_items: int = 0) -> list[T]:
    """Collect pages into one list of at most ``max_items`` items (0 for all).

    The last page is truncated to fill the cap exactly and no page is pulled
    once the cap is reached.
    """
    values: list[T] = []

    async for page in pages:
        if max_items > 0 and len(values) + len(page) >= max_items:
            values.extend(page[: max_items - len(values)])
            break
        values.extend(page)

    return values
