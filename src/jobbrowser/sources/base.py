"""Job source errors and payload validation."""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from ..schemas import Job


class JobSourceError(RuntimeError):
    """Raised when a job source cannot deliver a usable payload."""


class JobLoadError(ValueError):
    """Raised when some job records fail validation."""

    def __init__(self, errors: list[str], partial: list[Job]):
        super().__init__("Job loading failed")
        self.errors = errors
        self.partial = partial

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"Job loading failed: {self.errors}"


def extract_jobs(payload: Any) -> list[Any]:
    """Return the ``jobs`` array of a fetch response."""
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict) and isinstance(payload.get("jobs"), list):
        return payload["jobs"]
    raise JobSourceError("Invalid response format")


class JobLoader:
    """Validate raw job records into ``Job`` models."""

    def load(self, payload: Any) -> list[Job]:
        jobs: list[Job] = []
        errors: list[str] = []
        for idx, record in enumerate(extract_jobs(payload), start=1):
            if not isinstance(record, dict):
                errors.append(f"record {idx}: expected an object, got {type(record).__name__}")
                continue
            try:
                jobs.append(Job.model_validate(record))
            except ValidationError as exc:
                errors.append(f"record {idx}: {exc.errors(include_url=False)}")
        if errors:
            raise JobLoadError(errors, jobs)
        return jobs
