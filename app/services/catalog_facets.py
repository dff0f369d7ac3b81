"""Facet computation with leave-one-out scoping.

Each categorical or range field is summarised over the items that pass every
active predicate component except that field's own. An item failing no
component is in every scope; an item failing exactly one component is only in
the scope of that component's field; anything failing two or more is in no
scope at all. That lets a single pass over the snapshot feed every facet.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Sequence

from app.schemas.catalog import FacetDescriptor, OptionCount, ResourceConfig
from app.services.catalog_predicates import CompiledPredicate, ComponentKey, categorical_key, range_key
from app.services.catalog_values import Item, ValueKind, numeric_value, scalar_token, value_kind


@dataclass(frozen=True)
class FacetEntry:
    value: str | float | int
    count: int


@dataclass(frozen=True)
class RangeFacet:
    min: float
    max: float

    @property
    def step(self) -> float:
        span = self.max - self.min
        if span > 1000:
            return 50
        if span > 100:
            return 10
        if span > 10:
            return 1
        return 0.1


@dataclass
class FacetSet:
    categorical: dict[str, list[FacetEntry]] = field(default_factory=dict)
    ranges: dict[str, RangeFacet] = field(default_factory=dict)

    def filter_options(self) -> dict[str, list[Any]]:
        return {name: [entry.value for entry in entries] for name, entries in self.categorical.items()}

    def filter_metadata(self, config: ResourceConfig) -> dict[str, dict[str, Any]]:
        metadata: dict[str, dict[str, Any]] = {}
        for name, entries in self.categorical.items():
            descriptor = FacetDescriptor(
                type="select" if name in config.single_select_fields else "multiselect",
                options=[entry.value for entry in entries],
                optionsWithCounts=[OptionCount(value=entry.value, count=entry.count) for entry in entries],
            )
            metadata[name] = descriptor.model_dump(exclude_none=True)
        for name, facet in self.ranges.items():
            descriptor = FacetDescriptor(type="range", min=facet.min, max=facet.max, step=facet.step)
            metadata[name] = descriptor.model_dump(exclude_none=True)
        return metadata


def _facet_values(value: Any) -> list[Any]:
    kind = value_kind(value)
    if kind is ValueKind.ABSENT:
        return []
    if kind is ValueKind.STRING_SEQUENCE:
        return [part for part in value if part is not None and part != ""]
    if value == "":
        return []
    return [value]


class _ValueTally:
    def __init__(self):
        self._counts: dict[tuple[str, str], int] = {}
        self._values: dict[tuple[str, str], Any] = {}

    def add_item(self, values: list[Any]) -> None:
        seen: set[tuple[str, str]] = set()
        for value in values:
            # 3 and "3" are different options; 3 and 3.0 are the same one.
            key = ("n" if value_kind(value) is ValueKind.NUMBER else "s", scalar_token(value))
            if key in seen:
                continue
            seen.add(key)
            if key not in self._values:
                self._values[key] = value
                self._counts[key] = 0
            self._counts[key] += 1

    def entries(self) -> list[FacetEntry]:
        ordered = sorted(self._counts.items(), key=lambda kv: (-kv[1], kv[0][1], kv[0][0]))
        return [FacetEntry(value=self._values[key], count=count) for key, count in ordered]


class _RangeTally:
    def __init__(self):
        self.low: float | None = None
        self.high: float | None = None

    def add(self, value: Any) -> None:
        number = numeric_value(value)
        if number is None:
            return
        self.low = number if self.low is None else min(self.low, number)
        self.high = number if self.high is None else max(self.high, number)

    def facet(self) -> RangeFacet:
        if self.low is None or self.high is None:
            return RangeFacet(min=0, max=0)
        return RangeFacet(min=self.low, max=self.high)


def compute_facets(config: ResourceConfig, predicate: CompiledPredicate, items: Sequence[Item]) -> FacetSet:
    categorical = {name: _ValueTally() for name in config.filterable_fields}
    ranges = {name: _RangeTally() for name in config.range_fields}

    for item in items:
        failing = predicate.failing_keys(item)
        if len(failing) > 1:
            continue
        excluded: ComponentKey | None = failing[0] if failing else None
        for name, tally in categorical.items():
            if excluded is None or excluded == categorical_key(name):
                tally.add_item(_facet_values(item.get(name)))
        for name, tally in ranges.items():
            if excluded is None or excluded == range_key(name):
                tally.add(item.get(name))

    return FacetSet(
        categorical={name: tally.entries() for name, tally in categorical.items()},
        ranges={name: tally.facet() for name, tally in ranges.items()},
    )
