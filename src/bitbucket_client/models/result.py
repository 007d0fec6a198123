"""Result types returned by single-item client calls."""

import json
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """A call that reached the server and got a 2xx answer."""

    value: T

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        """Return the value."""
        return self.value

    def value_or(self, default: Any) -> T:
        return self.value


@dataclass(frozen=True)
class Failure:
    """A call that never produced a usable answer.

    ``error`` is the transport exception (an ``httpx.TransportError``) or a
    ``BitbucketDecodeError`` for an unreadable body.
    """

    error: BaseException

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> Any:
        """Re-raise the carried error."""
        raise self.error

    def value_or(self, default: Any) -> Any:
        return default


Result = Union[Success[T], Failure]


@dataclass(frozen=True)
class RawResponse:
    """Untyped response body for endpoints without a modelled schema.

    Diffs and patches are plain text; other unmodelled endpoints return JSON
    that can be decoded on demand with :meth:`json`.
    """

    text: str
    status_code: int = 200
    content_type: str | None = None

    def json(self) -> Any:
        """Decode the body as JSON."""
        return json.loads(self.text)
