"""Single HTTP request execution against the Bitbucket API."""

import logging
from enum import Enum
from typing import Any, Optional

import httpx
from pydantic import TypeAdapter, ValidationError
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from bitbucket_client.exceptions import (
    BitbucketAPIError,
    BitbucketAuthError,
    BitbucketDecodeError,
    BitbucketNotFoundError,
    InvalidMethodError,
)
from bitbucket_client.models.base import BitbucketModel
from bitbucket_client.models.result import RawResponse
from bitbucket_client.utils.pagination import build_request_url, redact_token

logger = logging.getLogger(__name__)


class HttpMethod(str, Enum):
    """HTTP verbs supported by the API."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"

    @classmethod
    def parse(cls, method: "HttpMethod | str") -> "HttpMethod":
        """Normalize a verb, raising InvalidMethodError for unknown ones."""
        if isinstance(method, cls):
            return method
        try:
            return cls(str(method).upper())
        except ValueError:
            raise InvalidMethodError(f"Unsupported HTTP method: {method!r}") from None


def serialize_body(body: Any) -> Any:
    """Turn a request body into something JSON-serializable.

    Models carry only the fields the caller set. A missing body is sent as
    an empty JSON object.
    """
    if body is None:
        return {}
    if isinstance(body, BitbucketModel):
        return body.to_payload()
    if isinstance(body, list):
        return [serialize_body(item) for item in body]
    return body


def _error_body(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


def _error_message(body: Any, fallback: str) -> str:
    # 2.0 errors look like {"type": "error", "error": {"message": "..."}}
    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict) and error.get("message"):
            return error["message"]
    return fallback


def raise_for_status(response: httpx.Response, url: str) -> None:
    """Raise a BitbucketAPIError for any non-2xx response."""
    if response.is_success:
        return

    status = response.status_code
    body = _error_body(response)
    safe_url = redact_token(url)

    if status == 404:
        raise BitbucketNotFoundError(
            f"Resource not found: {safe_url}",
            url=safe_url,
            response_body=body,
        )
    elif status in (401, 403):
        raise BitbucketAuthError(
            f"Not authorized ({status}): {_error_message(body, safe_url)}",
            status_code=status,
            url=safe_url,
            response_body=body,
        )
    elif status >= 500:
        raise BitbucketAPIError(
            f"Server error: {status}",
            status_code=status,
            url=safe_url,
            response_body=body,
        )
    raise BitbucketAPIError(
        f"API error ({status}): {_error_message(body, 'Unknown error')}",
        status_code=status,
        url=safe_url,
        response_body=body,
    )


def decode_response(response: httpx.Response, response_model: Any) -> Any:
    """Deserialize a response body into ``response_model``.

    ``RawResponse`` returns the body text untouched. An empty body or a JSON
    ``null`` yields None.
    """
    if response_model is RawResponse:
        return RawResponse(
            text=response.text,
            status_code=response.status_code,
            content_type=response.headers.get("content-type"),
        )

    text = response.text
    if response_model is None or not text.strip() or text.strip() == "null":
        return None

    try:
        return TypeAdapter(response_model).validate_json(text)
    except ValidationError as e:
        raise BitbucketDecodeError(
            f"Response does not match {getattr(response_model, '__name__', response_model)}: {e}",
            body=text,
        ) from e


async def _send(
    http: httpx.AsyncClient,
    method: HttpMethod,
    url: str,
    body: Any,
) -> httpx.Response:
    if method is HttpMethod.GET:
        return await http.get(url)
    elif method is HttpMethod.POST:
        return await http.post(url, json=serialize_body(body))
    elif method is HttpMethod.PUT:
        return await http.put(url, json=serialize_body(body))
    elif method is HttpMethod.DELETE:
        return await http.delete(url)
    raise InvalidMethodError(f"No HTTP method matched: {method!r}")


async def execute_request(
    http: httpx.AsyncClient,
    url: str,
    method: "HttpMethod | str",
    *,
    body: Any = None,
    token: Optional[str] = None,
    parameters: Optional[dict[str, Any]] = None,
    response_model: Any = None,
    max_attempts: int = 1,
) -> Any:
    """Execute one request and return the deserialized result.

    Args:
        http: Client bound to the API base URL
        url: Path relative to the base URL (must not be empty)
        method: GET, POST, PUT or DELETE
        body: Request body for POST/PUT (pydantic model, dict or list)
        token: Access token, appended as the last query parameter
        parameters: Query parameters, appended in insertion order
        response_model: Type to decode the body into, ``RawResponse`` for
            the raw text, or None to ignore the body
        max_attempts: Attempts on transport errors (1 disables retries)

    Returns:
        The decoded body, a RawResponse, or None

    Raises:
        BitbucketAPIError: On any non-2xx status
        BitbucketDecodeError: If the body does not fit ``response_model``
        InvalidMethodError: For an unknown verb
        httpx.TransportError: When the server cannot be reached
    """
    if not url:
        raise ValueError("Request URL must not be empty")

    method = HttpMethod.parse(method)
    request_url = build_request_url(url, token, parameters)
    logger.debug("%s %s", method.value, redact_token(request_url))

    response: Optional[httpx.Response] = None
    async for attempt in AsyncRetrying(
        retry=retry_if_exception_type(httpx.TransportError),
        stop=stop_after_attempt(max(1, max_attempts)),
        wait=wait_exponential(multiplier=1, min=1, max=10),
        reraise=True,
    ):
        with attempt:
            response = await _send(http, method, request_url, body)

    raise_for_status(response, request_url)

    if method is HttpMethod.DELETE and response_model is not RawResponse:
        return None
    return decode_response(response, response_model)
