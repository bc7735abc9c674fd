"""Stable job ordering for the supported sort options."""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from typing import Any, Callable

import structlog

from ..schemas import Job, SortOption
from .salary import parse_salary


def collation_key(text: str) -> tuple[str, str, tuple[bool, ...]]:
    """Locale-style sort key for display strings.

    Compares letters first ignoring accents and case, then accents, then
    case with lowercase ahead of uppercase.
    """
    decomposed = unicodedata.normalize("NFKD", text)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.casefold(), decomposed.casefold(), tuple(ch.isupper() for ch in decomposed)


@dataclass(frozen=True)
class SortRule:
    key: Callable[[Job], Any]
    reverse: bool = False


def _title_key(job: Job) -> tuple[str, str, tuple[bool, ...]]:
    return collation_key(job.title)


def _salary_key(job: Job) -> int:
    return parse_salary(job.salary)


class JobSorter:
    """Apply a sort option to a job list.

    ``list.sort`` is stable in both directions, so jobs with equal keys keep
    their filtered order.
    """

    RULES: dict[SortOption, SortRule] = {
        SortOption.ALPHABETICAL: SortRule(key=_title_key),
        SortOption.SALARY_HIGH_LOW: SortRule(key=_salary_key, reverse=True),
        SortOption.SALARY_LOW_HIGH: SortRule(key=_salary_key),
    }

    def __init__(self) -> None:
        self._logger = structlog.get_logger(__name__)

    def resolve(self, sort: SortOption | str | None) -> SortOption:
        try:
            return SortOption.parse(sort)
        except ValueError:
            self._logger.warning("sort.unknown_option", sort=sort)
            return SortOption.NONE

    def sort(self, jobs: list[Job], sort: SortOption | str | None) -> list[Job]:
        """Sort ``jobs`` in place and return it."""
        rule = self.RULES.get(self.resolve(sort))
        if rule is None:
            return jobs
        jobs.sort(key=rule.key, reverse=rule.reverse)
        return jobs
