"""Facet value enumeration for filter selection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Literal

from ..schemas import Job
from .sorting import collation_key

FacetOrder = Literal["first-seen", "alphabetical"]


@dataclass(slots=True)
class FacetOptions:
    """Distinct values observed across a job set."""

    companies: list[str] = field(default_factory=list)
    locations: list[str] = field(default_factory=list)
    departments: list[str] = field(default_factory=list)

    def as_dict(self) -> dict[str, list[str]]:
        return {
            "companies": list(self.companies),
            "locations": list(self.locations),
            "departments": list(self.departments),
        }


def enumerate_facets(jobs: Iterable[Job], *, order: FacetOrder = "first-seen") -> FacetOptions:
    """Collect distinct company, location and department values.

    Every observed value is kept, empty strings included; only absent
    departments are skipped. Always computed from ``jobs`` as given; callers
    re-run it whenever the job set changes.
    """
    companies: dict[str, None] = {}
    locations: dict[str, None] = {}
    departments: dict[str, None] = {}

    for job in jobs:
        companies.setdefault(job.company_name, None)
        locations.setdefault(job.location, None)
        if job.department is not None:
            departments.setdefault(job.department, None)

    options = FacetOptions(
        companies=list(companies),
        locations=list(locations),
        departments=list(departments),
    )
    if order == "alphabetical":
        options.companies.sort(key=collation_key)
        options.locations.sort(key=collation_key)
        options.departments.sort(key=collation_key)
    elif order != "first-seen":
        raise ValueError(f"Unsupported facet order: {order!r}")
    return options
