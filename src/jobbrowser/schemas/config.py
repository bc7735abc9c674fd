"""Pydantic configuration schema for CLI YAML input."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .filters import FilterState, SortOption

FacetOrder = Literal["first-seen", "alphabetical"]


class SourceConfig(BaseModel):
    path: str | None = None
    url: str | None = None
    timeout: float = 10.0
    headers: dict[str, str] = Field(default_factory=dict)

    model_config = ConfigDict(extra="forbid")


class DefaultsConfig(BaseModel):
    query: str = ""
    filters: FilterState | None = None
    sort: SortOption = SortOption.NONE

    model_config = ConfigDict(extra="forbid")


class FacetsConfig(BaseModel):
    order: FacetOrder = "first-seen"

    model_config = ConfigDict(extra="forbid")


class AppConfig(BaseModel):
    source: SourceConfig = Field(default_factory=SourceConfig)
    defaults: DefaultsConfig = Field(default_factory=DefaultsConfig)
    facets: FacetsConfig = Field(default_factory=FacetsConfig)


def load_config(raw: Any) -> AppConfig:
    if not isinstance(raw, dict):
        raise ValidationError.from_exception_data(
            "AppConfig",
            [{"type": "dict_type", "loc": ("config",), "input": raw}],
        )
    return AppConfig.model_validate(raw)
