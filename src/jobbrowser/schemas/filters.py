from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

DEFAULT_SALARY_MIN = 0
DEFAULT_SALARY_MAX = 500_000


class SortOption(str, Enum):
    """Ordering applied to the filtered job list."""

    NONE = ""
    ALPHABETICAL = "alphabetical"
    SALARY_HIGH_LOW = "salary-high-low"
    SALARY_LOW_HIGH = "salary-low-high"

    @property
    def label(self) -> str:
        return _SORT_LABELS[self]

    @classmethod
    def parse(cls, value: "SortOption | str | None") -> "SortOption":
        """Coerce a wire value; raises ValueError on unknown options."""
        if isinstance(value, cls):
            return value
        return cls(value or "")


_SORT_LABELS = {
    SortOption.NONE: "Default order",
    SortOption.ALPHABETICAL: "Alphabetical Order (A-Z)",
    SortOption.SALARY_LOW_HIGH: "Salary Range (Low to High)",
    SortOption.SALARY_HIGH_LOW: "Salary Range (High to Low)",
}


class SalaryRange(BaseModel):
    """Inclusive salary bounds."""

    min: int = DEFAULT_SALARY_MIN
    max: int = DEFAULT_SALARY_MAX

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="before")
    @classmethod
    def _from_pair(cls, data: Any) -> Any:
        if isinstance(data, (list, tuple)):
            if len(data) != 2:
                raise ValueError("Salary range must be a [min, max] pair")
            return {"min": data[0], "max": data[1]}
        return data

    def contains(self, value: int) -> bool:
        return self.min <= value <= self.max

    def is_default(self) -> bool:
        return self.min == DEFAULT_SALARY_MIN and self.max == DEFAULT_SALARY_MAX


class FilterState(BaseModel):
    """Facet, remote and salary selections held by the browser session.

    ``salary_active`` decides whether the salary range constrains results.
    When it is not given, a ``salary`` other than ``[0, 500000]`` turns it
    on and the default bounds leave it off. ``set_salary_range`` always turns
    it on, so a deliberately chosen ``[0, 500000]`` still filters.
    """

    companies: set[str] = Field(default_factory=set)
    locations: set[str] = Field(default_factory=set)
    departments: set[str] = Field(default_factory=set)
    remote: bool = False
    salary: SalaryRange = Field(default_factory=SalaryRange)
    salary_active: bool = False

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="before")
    @classmethod
    def _activate_changed_salary(cls, data: Any) -> Any:
        if not isinstance(data, dict) or data.get("salary") is None or "salary_active" in data:
            return data
        try:
            salary = SalaryRange.model_validate(data["salary"])
        except ValueError:
            return data
        return {**data, "salary_active": not salary.is_default()}

    def set_salary_range(self, minimum: int, maximum: int) -> None:
        self.salary = SalaryRange(min=minimum, max=maximum)
        self.salary_active = True

    def clear_salary_range(self) -> None:
        self.salary = SalaryRange()
        self.salary_active = False

    def is_default(self) -> bool:
        return not (
            self.companies
            or self.locations
            or self.departments
            or self.remote
            or self.salary_active
        )

    def snapshot(self) -> "FilterState":
        """Return an independent copy safe to hand to another caller."""
        return self.model_copy(deep=True)
