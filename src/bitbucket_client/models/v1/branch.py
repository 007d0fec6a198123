"""Branch models (API 1.0)."""

from typing import Any

from pydantic import Field

from bitbucket_client.models.base import BitbucketModel


class FileInfo(BitbucketModel):
    file: str | None = None
    type: str | None = None  # added, modified, removed


class BranchInfo(BitbucketModel):
    """Tip commit of a branch, keyed by branch name in ``branches`` responses."""

    node: str | None = None
    raw_node: str | None = None
    branch: str | None = None
    message: str | None = None
    author: str | None = None
    raw_author: str | None = None
    timestamp: str | None = None
    utctimestamp: str | None = None
    parents: list[str] = Field(default_factory=list)
    files: list[FileInfo] = Field(default_factory=list)
    revision: Any = None
    size: int | None = None
