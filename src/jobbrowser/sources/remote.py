from __future__ import annotations

import json
from typing import Any
from urllib import error, request

import structlog

from .base import JobSourceError, extract_jobs


class HTTPJobSource:
    """Fetch jobs from a JSON HTTP endpoint."""

    def __init__(
        self,
        url: str,
        *,
        timeout: float = 10.0,
        headers: dict[str, str] | None = None,
    ):
        self._url = url
        self._timeout = timeout
        self._headers = {"Accept": "application/json", **(headers or {})}
        self._logger = structlog.get_logger(__name__)

    def fetch(self) -> dict[str, Any]:
        try:
            req = request.Request(self._url, headers=self._headers, method="GET")
            with request.urlopen(req, timeout=self._timeout) as resp:
                body = resp.read().decode("utf-8")
        except error.HTTPError as exc:
            self._logger.warning("source.http_error", url=self._url, status=exc.code)
            raise JobSourceError(f"Job request failed with HTTP {exc.code}") from exc
        except UnicodeDecodeError as exc:
            raise JobSourceError("Job response is not valid UTF-8") from exc
        except ValueError as exc:
            raise JobSourceError(f"Invalid job URL {self._url!r}: {exc}") from exc
        except OSError as exc:
            # URLError, timeouts and connection resets all land here.
            self._logger.warning("source.request_failed", url=self._url, error=str(exc))
            raise JobSourceError(f"Job request failed: {exc}") from exc

        try:
            data = json.loads(body) if body else {}
        except json.JSONDecodeError as exc:
            raise JobSourceError(f"Invalid job JSON: {exc}") from exc
        return {"jobs": extract_jobs(data)}
