"""Job sources supplying raw job records."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from .base import JobLoadError, JobLoader, JobSourceError, extract_jobs
from .file import FileJobSource
from .remote import HTTPJobSource


@runtime_checkable
class JobSource(Protocol):
    """Parameterless fetch returning a mapping with a ``jobs`` list.

    Implementations raise ``JobSourceError`` with a readable message when the
    jobs cannot be retrieved.
    """

    def fetch(self) -> dict[str, Any]:
        """Return ``{"jobs": [...]}``."""


def build_source(
    *,
    path: str | None = None,
    url: str | None = None,
    timeout: float = 10.0,
    headers: dict[str, str] | None = None,
) -> JobSource:
    """Build a file or HTTP source; a path wins when both are given."""
    if path:
        return FileJobSource(path)
    if url:
        return HTTPJobSource(url, timeout=timeout, headers=headers)
    raise ValueError("A job source needs either a path or a url")


__all__ = [
    "FileJobSource",
    "HTTPJobSource",
    "JobLoadError",
    "JobLoader",
    "JobSource",
    "JobSourceError",
    "build_source",
    "extract_jobs",
]
