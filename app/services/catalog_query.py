from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Mapping

from app.schemas.catalog import ResourceConfig
from app.services.catalog_values import parse_number_text

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10

SortOrder = Literal["asc", "desc"]


@dataclass(frozen=True)
class RangeBounds:
    min: float | None = None
    max: float | None = None

    def contains(self, number: float) -> bool:
        if self.min is not None and number < self.min:
            return False
        if self.max is not None and number > self.max:
            return False
        return True


@dataclass(frozen=True)
class CanonicalQuery:
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT
    search: str = ""
    sort_field: str = "Id"
    sort_order: SortOrder = "asc"
    categorical_filters: dict[str, frozenset[str]] = field(default_factory=dict)
    range_filters: dict[str, RangeBounds] = field(default_factory=dict)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


def _positive_int(raw: str | None, default: int) -> int:
    text = str(raw or "").strip()
    if not text:
        return default
    try:
        value = int(text)
    except ValueError:
        return default
    return value if value >= 1 else default


def _bound(raw: str | None) -> float | None:
    # same reading as stored values: "1.234,56", "1,234.56", "299,5"
    return parse_number_text(str(raw or ""))


def _param(raw: Mapping[str, str], config: ResourceConfig, field_name: str, suffix: str = "") -> str | None:
    value = raw.get(f"{field_name}{suffix}")
    if value is not None:
        return value
    for alias in config.aliases_for(field_name):
        value = raw.get(f"{alias}{suffix}")
        if value is not None:
            return value
    return None


def _selection(raw_value: str | None) -> frozenset[str]:
    if not raw_value:
        return frozenset()
    return frozenset(part for part in raw_value.split(",") if part)


def normalize_query(raw: Mapping[str, str], config: ResourceConfig) -> CanonicalQuery:
    """Turn raw query-string parameters into a CanonicalQuery.

    Never fails: malformed page/limit/sort/range values fall back to defaults
    and parameters for undeclared fields are ignored.
    """
    categorical: dict[str, frozenset[str]] = {}
    for field_name in config.filterable_fields:
        selected = _selection(_param(raw, config, field_name))
        if selected:
            categorical[field_name] = selected

    ranges: dict[str, RangeBounds] = {}
    for field_name in config.range_fields:
        low = _bound(_param(raw, config, field_name, "_min"))
        high = _bound(_param(raw, config, field_name, "_max"))
        if low is not None or high is not None:
            ranges[field_name] = RangeBounds(min=low, max=high)

    sort_field = str(raw.get("sortBy") or "")
    if sort_field not in config.known_fields:
        sort_field = config.id_field

    sort_order: SortOrder = "desc" if str(raw.get("sortOrder") or "").strip().lower() == "desc" else "asc"

    return CanonicalQuery(
        page=_positive_int(raw.get("page"), DEFAULT_PAGE),
        limit=_positive_int(raw.get("limit"), DEFAULT_LIMIT),
        search=str(raw.get("search") or ""),
        sort_field=sort_field,
        sort_order=sort_order,
        categorical_filters=categorical,
        range_filters=ranges,
    )
