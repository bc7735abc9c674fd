"""Typer CLI entrypoint for browsing job listings."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Optional

import pendulum
import typer
import yaml
from pydantic import ValidationError

from . import __version__
from .browser import BrowserSession, SessionStatus
from .container import create_container
from .core import enumerate_facets
from .logging import configure_logging
from .schemas import FilterState, Job, SortOption

app = typer.Typer(help="Job listing browser CLI.")

_SORT_HELP = ", ".join(
    f"'{option.value}' ({option.label})" for option in SortOption if option is not SortOption.NONE
)


def _load_settings(config: Optional[Path]) -> dict[str, Any]:
    if not config:
        return {}
    with config.open("r", encoding="utf-8") as handle:
        loaded = yaml.safe_load(handle) or {}
    if not isinstance(loaded, dict):
        raise typer.BadParameter("Config file must be a YAML object", param_name="config")
    return loaded


def _open_session(
    *,
    jobs: Optional[Path],
    url: Optional[str],
    config: Optional[Path],
) -> BrowserSession:
    settings = _load_settings(config)
    if jobs or url:
        source = dict(settings.get("source") or {})
        source["path"] = str(jobs) if jobs else None
        source["url"] = url
        settings["source"] = source
    source_settings = settings.get("source") or {}
    if not (source_settings.get("path") or source_settings.get("url")):
        raise typer.BadParameter("Provide --jobs or --url (or a source in --config).")

    try:
        container = create_container(settings=settings)
    except ValidationError as exc:
        raise typer.BadParameter(f"Invalid config: {exc}", param_name="config") from exc

    session = container.session()
    if session.load() is SessionStatus.ERROR:
        typer.echo(f"Error: {session.error}", err=True)
        raise typer.Exit(code=1)
    for message in session.load_errors:
        typer.echo(f"Skipped invalid job {message}", err=True)
    return session


def _format_job(job: Job) -> str:
    parts = [job.title, job.company_name, job.location]
    if job.remote:
        parts.append("Remote")
    parts.append(job.salary or "-")
    return " | ".join(parts)


@app.command()
def search(
    jobs: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="Jobs JSON path."),
    url: Optional[str] = typer.Option(None, help="Jobs API endpoint returning {\"jobs\": [...]}."),
    query: Optional[str] = typer.Option(None, "--query", "-q", help="Search title, description and department."),
    company: List[str] = typer.Option([], help="Company to include (repeatable)."),
    location: List[str] = typer.Option([], help="Location substring to include (repeatable)."),
    department: List[str] = typer.Option([], help="Department to include (repeatable)."),
    remote: bool = typer.Option(False, "--remote", help="Only remote jobs."),
    salary_min: Optional[int] = typer.Option(None, help="Minimum salary (inclusive)."),
    salary_max: Optional[int] = typer.Option(None, help="Maximum salary (inclusive)."),
    sort: Optional[str] = typer.Option(None, help=f"Sort order: {_SORT_HELP}."),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    output: Optional[Path] = typer.Option(None, dir_okay=False, resolve_path=True, help="Write results as JSON."),
    log_level: str = typer.Option("WARNING", help="Log level for structured logging."),
) -> None:
    """Filter, sort and list jobs."""
    configure_logging(log_level)

    if sort is not None:
        try:
            SortOption.parse(sort)
        except ValueError as exc:
            raise typer.BadParameter(f"Unknown sort option {sort!r}", param_name="sort") from exc

    session = _open_session(jobs=jobs, url=url, config=config)

    filters: FilterState = session.filters
    filters.companies.update(company)
    filters.locations.update(location)
    filters.departments.update(department)
    if remote:
        filters.remote = True
    if salary_min is not None or salary_max is not None:
        filters.set_salary_range(
            salary_min if salary_min is not None else filters.salary.min,
            salary_max if salary_max is not None else filters.salary.max,
        )
    session.set_filters(filters)
    if query is not None:
        session.set_query(query)
    if sort is not None:
        session.set_sort(SortOption.parse(sort))

    typer.echo(session.count_label)
    if not session.visible_jobs:
        typer.echo("No jobs match the current filters.")
    for job in session.visible_jobs:
        typer.echo(_format_job(job))

    if output:
        payload = {
            "metadata": {
                "count": session.count,
                "total": len(session.jobs),
                "query": session.query,
                "active_filters": session.active_filters,
                "sort": SortOption.parse(session.sort).value,
                "errors": session.load_errors,
                "timestamp": pendulum.now().to_iso8601_string(),
                "app_version": __version__,
            },
            "jobs": [job.to_record() for job in session.visible_jobs],
        }
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
        typer.echo(f"Results saved to {output}.")


@app.command()
def facets(
    jobs: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="Jobs JSON path."),
    url: Optional[str] = typer.Option(None, help="Jobs API endpoint returning {\"jobs\": [...]}."),
    order: Optional[str] = typer.Option(None, help="Value order: 'first-seen' or 'alphabetical'."),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    log_level: str = typer.Option("WARNING", help="Log level for structured logging."),
) -> None:
    """List the company, location and department values available to filter on."""
    configure_logging(log_level)
    if order is not None and order not in ("first-seen", "alphabetical"):
        raise typer.BadParameter(f"Unknown facet order {order!r}", param_name="order")

    session = _open_session(jobs=jobs, url=url, config=config)
    if order is None:
        options = session.facets()
    else:
        options = enumerate_facets(session.jobs, order=order)  # type: ignore[arg-type]

    for group, values in options.as_dict().items():
        typer.echo(f"{group} ({len(values)}):")
        for value in values:
            typer.echo(f"  {value}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
