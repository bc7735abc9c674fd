"""Dependency injection container for the job browser."""

from __future__ import annotations

from typing import Any

from dependency_injector import containers, providers

from .browser import BrowserSession
from .core import (
    CompanyPredicate,
    DepartmentPredicate,
    FilterEngine,
    JobSorter,
    LocationPredicate,
    RemotePredicate,
    SalaryRangePredicate,
    SearchPredicate,
)
from .schemas import FilterState
from .schemas.config import load_config
from .sources import JobLoader, build_source


class BrowserContainer(containers.DeclarativeContainer):
    """Dependency-injector container definition."""

    config = providers.Configuration()

    search_predicate = providers.Singleton(SearchPredicate)
    company_predicate = providers.Singleton(CompanyPredicate)
    location_predicate = providers.Singleton(LocationPredicate)
    department_predicate = providers.Singleton(DepartmentPredicate)
    remote_predicate = providers.Singleton(RemotePredicate)
    salary_predicate = providers.Singleton(SalaryRangePredicate)

    predicates = providers.List(
        search_predicate,
        company_predicate,
        location_predicate,
        department_predicate,
        remote_predicate,
        salary_predicate,
    )

    sorter = providers.Singleton(JobSorter)

    engine = providers.Singleton(
        FilterEngine,
        predicates=predicates,
        sorter=sorter,
    )

    job_loader = providers.Singleton(JobLoader)

    source = providers.Factory(
        build_source,
        path=config.source.path,
        url=config.source.url,
        timeout=config.source.timeout,
        headers=config.source.headers,
    )

    default_filters = providers.Factory(FilterState)

    session = providers.Factory(
        BrowserSession,
        source=source,
        engine=engine,
        loader=job_loader,
        filters=default_filters,
        query=config.defaults.query,
        sort=config.defaults.sort,
        facet_order=config.facets.order,
    )


def create_container(*, settings: dict[str, Any] | None = None) -> BrowserContainer:
    """Instantiate container with optional overrides."""

    container = BrowserContainer()
    app_config = load_config(settings or {})
    container.config.from_dict(
        {
            "source": app_config.source.model_dump(),
            "defaults": {
                "query": app_config.defaults.query,
                "sort": app_config.defaults.sort,
            },
            "facets": app_config.facets.model_dump(),
        }
    )

    if app_config.defaults.filters is not None:
        filters = app_config.defaults.filters
        container.default_filters.override(providers.Factory(filters.snapshot))

    return container
