from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Job(BaseModel):
    """Job posting as supplied by a job source."""

    title: str = ""
    description: str = ""
    department: str | None = None
    company_name: str = Field(default="", alias="companyName")
    location: str = ""
    remote: bool = False
    salary: str | None = None

    model_config = ConfigDict(extra="allow", frozen=True, populate_by_name=True)

    @field_validator("title", "description", "company_name", "location", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("remote", mode="before")
    @classmethod
    def _none_as_false(cls, value: Any) -> Any:
        return False if value is None else value

    @field_validator("salary", mode="before")
    @classmethod
    def _stringify_salary(cls, value: Any) -> Any:
        # Numeric salaries are read through the same text parse as "$90,000".
        if isinstance(value, bool):
            return value
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        if isinstance(value, (int, float)):
            return str(value)
        return value

    def to_record(self) -> dict[str, Any]:
        """Serialize back to the camelCase record shape."""
        return self.model_dump(mode="json", by_alias=True)
