"""Core filtering engine components."""

from __future__ import annotations

from .engine import FilterEngine
from .facets import FacetOptions, enumerate_facets
from .predicates import (
    CompanyPredicate,
    DepartmentPredicate,
    JobPredicate,
    LocationPredicate,
    RemotePredicate,
    SalaryRangePredicate,
    SearchPredicate,
    default_predicates,
)
from .salary import parse_salary
from .sorting import JobSorter, collation_key

__all__ = [
    "CompanyPredicate",
    "DepartmentPredicate",
    "FacetOptions",
    "FilterEngine",
    "JobPredicate",
    "JobSorter",
    "LocationPredicate",
    "RemotePredicate",
    "SalaryRangePredicate",
    "SearchPredicate",
    "collation_key",
    "default_predicates",
    "enumerate_facets",
    "parse_salary",
]
