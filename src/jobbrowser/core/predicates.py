"""Filter predicates applied by the engine, one per filter category."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..schemas import FilterState, Job
from .salary import parse_salary


@runtime_checkable
class JobPredicate(Protocol):
    """Contract for a single filter category."""

    name: str

    def is_active(self, filters: FilterState, query: str) -> bool:
        """Return True when this category constrains the result."""

    def matches(self, job: Job, filters: FilterState, query: str) -> bool:
        """Return True when ``job`` satisfies this category."""


class SearchPredicate:
    """Case-insensitive substring search over title, description and department."""

    name = "search"

    def is_active(self, filters: FilterState, query: str) -> bool:
        return bool(query)

    def matches(self, job: Job, filters: FilterState, query: str) -> bool:
        needle = query.lower()
        if needle in job.title.lower() or needle in job.description.lower():
            return True
        return bool(job.department) and needle in job.department.lower()


class CompanyPredicate:
    name = "company"

    def is_active(self, filters: FilterState, query: str) -> bool:
        return bool(filters.companies)

    def matches(self, job: Job, filters: FilterState, query: str) -> bool:
        return job.company_name in filters.companies


class LocationPredicate:
    """Match when any selected location is contained in the job location.

    Stored locations often carry qualifiers ("Austin, TX"), so selections are
    substring matched without regard to case.
    """

    name = "location"

    def is_active(self, filters: FilterState, query: str) -> bool:
        return bool(filters.locations)

    def matches(self, job: Job, filters: FilterState, query: str) -> bool:
        job_location = job.location.lower()
        return any(selected.lower() in job_location for selected in filters.locations)


class DepartmentPredicate:
    name = "department"

    def is_active(self, filters: FilterState, query: str) -> bool:
        return bool(filters.departments)

    def matches(self, job: Job, filters: FilterState, query: str) -> bool:
        return job.department is not None and job.department in filters.departments


class RemotePredicate:
    name = "remote"

    def is_active(self, filters: FilterState, query: str) -> bool:
        return filters.remote

    def matches(self, job: Job, filters: FilterState, query: str) -> bool:
        return job.remote


class SalaryRangePredicate:
    """Inclusive salary range check.

    Jobs without a parsable salary count as 0, so raising the minimum above
    0 drops them.
    """

    name = "salary"

    def is_active(self, filters: FilterState, query: str) -> bool:
        return filters.salary_active

    def matches(self, job: Job, filters: FilterState, query: str) -> bool:
        return filters.salary.contains(parse_salary(job.salary))


def default_predicates() -> list[JobPredicate]:
    """Return the predicates in evaluation order."""
    return [
        SearchPredicate(),
        CompanyPredicate(),
        LocationPredicate(),
        DepartmentPredicate(),
        RemotePredicate(),
        SalaryRangePredicate(),
    ]
