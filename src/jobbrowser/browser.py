"""Browser session holding search, filter and sort state."""

from __future__ import annotations

from enum import Enum

import structlog

from .core import FacetOptions, FilterEngine, enumerate_facets
from .core.facets import FacetOrder
from .schemas import FilterState, Job, SortOption
from .sources import JobLoadError, JobLoader, JobSource, JobSourceError


class SessionStatus(str, Enum):
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


class BrowserSession:
    """Owns the UI state and recomputes the visible jobs on every change.

    The engine only runs once jobs are loaded. A failed fetch leaves the
    session in ``ERROR`` with an empty visible list.
    """

    def __init__(
        self,
        *,
        source: JobSource,
        engine: FilterEngine,
        loader: JobLoader | None = None,
        filters: FilterState | None = None,
        query: str | None = "",
        sort: SortOption | str | None = SortOption.NONE,
        facet_order: FacetOrder | None = "first-seen",
    ) -> None:
        self._source = source
        self._engine = engine
        self._loader = loader or JobLoader()
        self._filters = filters.snapshot() if filters is not None else FilterState()
        self._query = query or ""
        self._sort = sort or SortOption.NONE
        self._facet_order = facet_order or "first-seen"
        self._jobs: list[Job] = []
        self._visible: list[Job] = []
        self._status = SessionStatus.LOADING
        self._error: str | None = None
        self._load_errors: list[str] = []
        self._logger = structlog.get_logger(__name__)

    @property
    def status(self) -> SessionStatus:
        return self._status

    @property
    def error(self) -> str | None:
        return self._error

    @property
    def load_errors(self) -> list[str]:
        return list(self._load_errors)

    @property
    def jobs(self) -> list[Job]:
        return list(self._jobs)

    @property
    def visible_jobs(self) -> list[Job]:
        return list(self._visible)

    @property
    def count(self) -> int:
        return len(self._visible)

    @property
    def count_label(self) -> str:
        return f"{self.count} jobs available"

    @property
    def query(self) -> str:
        return self._query

    @property
    def sort(self) -> SortOption | str:
        return self._sort

    @property
    def active_filters(self) -> list[str]:
        """Names of the filter categories constraining the visible jobs."""
        return self._engine.active_filters(self._filters, self._query)

    @property
    def filters(self) -> FilterState:
        """A copy of the current filter state."""
        return self._filters.snapshot()

    def load(self) -> SessionStatus:
        self._status = SessionStatus.LOADING
        self._error = None
        self._load_errors = []
        try:
            payload = self._source.fetch()
            jobs = self._loader.load(payload)
        except JobSourceError as exc:
            self._jobs = []
            self._visible = []
            self._error = str(exc)
            self._status = SessionStatus.ERROR
            self._logger.error("session.load_failed", error=self._error)
            return self._status
        except JobLoadError as exc:
            jobs = exc.partial
            self._load_errors = list(exc.errors)
            self._logger.warning("session.partial_load", errors=exc.errors, loaded=len(jobs))

        self._jobs = jobs
        self._status = SessionStatus.READY
        self._logger.info("session.loaded", total=len(jobs))
        self.refresh()
        return self._status

    def refresh(self) -> list[Job]:
        """Recompute the visible jobs from the current state."""
        if self._status is not SessionStatus.READY:
            self._visible = []
            return self.visible_jobs

        if self._filters.is_default() and not self._query and not self._sort:
            self._visible = list(self._jobs)
        else:
            self._visible = self._engine.evaluate(
                self._jobs, self._filters, self._query, self._sort
            )
        self._logger.debug("session.refreshed", visible=len(self._visible), total=len(self._jobs))
        return self.visible_jobs

    def facets(self) -> FacetOptions:
        return enumerate_facets(self._jobs, order=self._facet_order)

    def set_query(self, query: str) -> list[Job]:
        self._query = query or ""
        return self.refresh()

    def clear_query(self) -> list[Job]:
        return self.set_query("")

    def set_sort(self, sort: SortOption | str) -> list[Job]:
        self._sort = sort
        return self.refresh()

    def toggle_company(self, company: str) -> list[Job]:
        _toggle(self._filters.companies, company)
        return self.refresh()

    def toggle_location(self, location: str) -> list[Job]:
        _toggle(self._filters.locations, location)
        return self.refresh()

    def toggle_department(self, department: str) -> list[Job]:
        _toggle(self._filters.departments, department)
        return self.refresh()

    def set_remote(self, remote: bool) -> list[Job]:
        self._filters.remote = remote
        return self.refresh()

    def set_salary_range(self, minimum: int, maximum: int) -> list[Job]:
        self._filters.set_salary_range(minimum, maximum)
        return self.refresh()

    def clear_salary_range(self) -> list[Job]:
        self._filters.clear_salary_range()
        return self.refresh()

    def set_filters(self, filters: FilterState) -> list[Job]:
        self._filters = filters.snapshot()
        return self.refresh()

    def clear_filters(self) -> list[Job]:
        self._filters = FilterState()
        return self.refresh()


def _toggle(selection: set[str], value: str) -> None:
    if value in selection:
        selection.discard(value)
    else:
        selection.add(value)
