from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from jobbrowser.cli import app


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def jobs_path(tmp_path: Path) -> Path:
    path = tmp_path / "jobs.json"
    jobs = [
        {
            "id": "1",
            "title": "Engineer",
            "description": "Build APIs",
            "department": "Engineering",
            "companyName": "A",
            "location": "New York, NY",
            "remote": False,
            "salary": "$100,000",
        },
        {
            "id": "2",
            "title": "Analyst",
            "description": "Dashboards",
            "companyName": "B",
            "location": "San Francisco, CA",
            "remote": True,
            "salary": "$80,000",
        },
        {
            "id": "3",
            "title": "Designer",
            "description": "Product design",
            "department": "Design",
            "companyName": "A",
            "location": "Remote",
            "remote": True,
        },
    ]
    path.write_text(json.dumps({"jobs": jobs}), encoding="utf-8")
    return path


def test_cli_search_lists_all_jobs(runner: CliRunner, jobs_path: Path) -> None:
    result = runner.invoke(app, ["search", "--jobs", str(jobs_path)])

    assert result.exit_code == 0, result.output
    assert "3 jobs available" in result.output
    assert "Engineer | A | New York, NY | $100,000" in result.output
    assert "Designer | A | Remote | Remote | -" in result.output


def test_cli_search_filters_sorts_and_writes_output(
    tmp_path: Path, runner: CliRunner, jobs_path: Path
) -> None:
    output_path = tmp_path / "out" / "results.json"

    result = runner.invoke(
        app,
        [
            "search",
            "--jobs",
            str(jobs_path),
            "--remote",
            "--sort",
            "salary-high-low",
            "--output",
            str(output_path),
        ],
    )

    assert result.exit_code == 0, result.output
    assert "2 jobs available" in result.output
    rendered = json.loads(output_path.read_text(encoding="utf-8"))
    assert [job["title"] for job in rendered["jobs"]] == ["Analyst", "Designer"]
    assert rendered["jobs"][0]["companyName"] == "B"
    assert rendered["jobs"][0]["id"] == "2"
    assert rendered["metadata"]["count"] == 2
    assert rendered["metadata"]["total"] == 3
    assert rendered["metadata"]["sort"] == "salary-high-low"
    assert rendered["metadata"]["active_filters"] == ["remote"]


def test_cli_search_salary_and_query(runner: CliRunner, jobs_path: Path) -> None:
    result = runner.invoke(
        app,
        ["search", "--jobs", str(jobs_path), "--salary-min", "90000", "--query", "engineer"],
    )

    assert result.exit_code == 0, result.output
    assert "1 jobs available" in result.output
    assert "Engineer" in result.output


def test_cli_search_reports_no_matches(runner: CliRunner, jobs_path: Path) -> None:
    result = runner.invoke(app, ["search", "--jobs", str(jobs_path), "--company", "Nobody"])

    assert result.exit_code == 0, result.output
    assert "0 jobs available" in result.output
    assert "No jobs match the current filters." in result.output


def test_cli_search_uses_config_defaults(tmp_path: Path, runner: CliRunner, jobs_path: Path) -> None:
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        f"source:\n  path: {jobs_path}\ndefaults:\n  sort: alphabetical\n  filters:\n    companies: [A]\n",
        encoding="utf-8",
    )

    result = runner.invoke(app, ["search", "--config", str(config_path)])

    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert lines[0] == "2 jobs available"
    assert lines[1].startswith("Designer")
    assert lines[2].startswith("Engineer")


def test_cli_search_fetch_failure_exits_nonzero(tmp_path: Path, runner: CliRunner) -> None:
    bad_path = tmp_path / "jobs.json"
    bad_path.write_text('{"results": []}', encoding="utf-8")

    result = runner.invoke(app, ["search", "--jobs", str(bad_path)])

    assert result.exit_code == 1
    assert "Invalid response format" in result.output


def test_cli_search_rejects_unknown_sort(runner: CliRunner, jobs_path: Path) -> None:
    result = runner.invoke(app, ["search", "--jobs", str(jobs_path), "--sort", "newest"])

    assert result.exit_code != 0


def test_cli_search_requires_a_source(runner: CliRunner) -> None:
    result = runner.invoke(app, ["search"])

    assert result.exit_code != 0


def test_cli_facets_lists_values(runner: CliRunner, jobs_path: Path) -> None:
    result = runner.invoke(app, ["facets", "--jobs", str(jobs_path), "--order", "alphabetical"])

    assert result.exit_code == 0, result.output
    assert "companies (2):" in result.output
    assert "departments (2):" in result.output
    assert "  New York, NY" in result.output


@pytest.fixture
def split_runner() -> CliRunner:
    # Click 8.2 always keeps stderr apart; older releases need mix_stderr=False.
    try:
        return CliRunner(mix_stderr=False)
    except TypeError:
        return CliRunner()


def test_cli_search_keeps_logs_off_stdout(tmp_path: Path, split_runner: CliRunner, jobs_path: Path) -> None:
    payload = json.loads(jobs_path.read_text(encoding="utf-8"))
    payload["jobs"].append(42)
    mixed_path = tmp_path / "mixed.json"
    mixed_path.write_text(json.dumps(payload), encoding="utf-8")

    result = split_runner.invoke(
        app,
        ["search", "--jobs", str(mixed_path), "--sort", "alphabetical", "--log-level", "INFO"],
    )

    assert result.exit_code == 0, result.output
    assert result.stdout.splitlines() == [
        "3 jobs available",
        "Analyst | B | San Francisco, CA | Remote | $80,000",
        "Designer | A | Remote | Remote | -",
        "Engineer | A | New York, NY | $100,000",
    ]
    assert "session.partial_load" in result.stderr
    assert "Skipped invalid job record 4" in result.stderr
