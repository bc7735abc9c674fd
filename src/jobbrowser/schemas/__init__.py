"""Pydantic schema definitions for jobs, filter state and configuration."""

from __future__ import annotations

from .filters import (
    DEFAULT_SALARY_MAX,
    DEFAULT_SALARY_MIN,
    FilterState,
    SalaryRange,
    SortOption,
)
from .job import Job

__all__ = [
    "DEFAULT_SALARY_MAX",
    "DEFAULT_SALARY_MIN",
    "FilterState",
    "Job",
    "SalaryRange",
    "SortOption",
]
