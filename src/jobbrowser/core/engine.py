"""Filtering and sorting engine."""

from __future__ import annotations

from typing import Iterable, Sequence

import structlog

from ..schemas import FilterState, Job, SortOption
from .predicates import JobPredicate, default_predicates
from .sorting import JobSorter


class FilterEngine:
    """Narrow a job set by search and filter state, then order it.

    ``evaluate`` is a pure function of its arguments. It copies the input
    sequence before filtering and never mutates jobs or filter state, so
    callers may re-run it on every state change.
    """

    def __init__(
        self,
        predicates: Iterable[JobPredicate] | None = None,
        *,
        sorter: JobSorter | None = None,
    ) -> None:
        self._predicates = list(predicates) if predicates is not None else default_predicates()
        self._sorter = sorter or JobSorter()
        self._logger = structlog.get_logger(__name__)

    @property
    def predicates(self) -> list[JobPredicate]:
        return list(self._predicates)

    def evaluate(
        self,
        jobs: Sequence[Job],
        filters: FilterState,
        query: str = "",
        sort: SortOption | str | None = SortOption.NONE,
    ) -> list[Job]:
        query = query or ""
        results = list(jobs)

        for predicate in self._predicates:
            if not results:
                break
            if not predicate.is_active(filters, query):
                continue
            results = [job for job in results if predicate.matches(job, filters, query)]
            self._logger.debug("engine.stage", stage=predicate.name, remaining=len(results))

        return self._sorter.sort(results, sort)

    def active_filters(self, filters: FilterState, query: str = "") -> list[str]:
        """Names of the categories that would constrain ``evaluate``."""
        return [p.name for p in self._predicates if p.is_active(filters, query or "")]
