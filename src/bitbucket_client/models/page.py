"""Page model for cursor-paged list responses."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class Page(BaseModel, Generic[T]):
    """One page of a paginated Bitbucket 2.0 collection.

    Example response:
        {"pagelen": 10, "size": 42, "page": 1,
         "next": "https://api.bitbucket.org/2.0/repositories/acme?page=2",
         "values": [...]}

    ``next`` is absent on the last page.
    """

    model_config = ConfigDict(extra="allow")

    values: list[T] = Field(default_factory=list)
    next: str | None = None
    previous: str | None = None
    size: int | None = None
    pagelen: int | None = None
    page: int | None = None

    @property
    def has_next(self) -> bool:
        """Check whether the server announced a further page."""
        return bool(self.next)
