from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Sequence

from app.schemas.catalog import ResourceConfig
from app.services.catalog_query import CanonicalQuery, RangeBounds
from app.services.catalog_values import Item, ValueKind, numeric_value, scalar_token, value_kind, value_tokens

SEARCH_KEY = ("search", "")

ComponentKey = tuple[str, str]


@dataclass(frozen=True)
class PredicateComponent:
    key: ComponentKey
    test: Callable[[Item], bool]

    def __call__(self, item: Item) -> bool:
        return self.test(item)


def categorical_key(field_name: str) -> ComponentKey:
    return ("categorical", field_name)


def range_key(field_name: str) -> ComponentKey:
    return ("range", field_name)


def _search_haystack(value: Any) -> list[str]:
    kind = value_kind(value)
    if kind is ValueKind.ABSENT:
        return []
    if kind is ValueKind.STRING_SEQUENCE:
        return [scalar_token(part).casefold() for part in value if part is not None]
    return [scalar_token(value).casefold()]


def search_predicate(fields: Sequence[str], search: str) -> Callable[[Item], bool]:
    needle = search.casefold()
    fields = tuple(fields)

    def _matches(item: Item) -> bool:
        for field_name in fields:
            for text in _search_haystack(item.get(field_name)):
                if needle in text:
                    return True
        return False

    return _matches


def categorical_predicate(field_name: str, selected: frozenset[str]) -> Callable[[Item], bool]:
    def _matches(item: Item) -> bool:
        return any(token in selected for token in value_tokens(item.get(field_name)))

    return _matches


def range_predicate(field_name: str, bounds: RangeBounds) -> Callable[[Item], bool]:
    def _matches(item: Item) -> bool:
        number = numeric_value(item.get(field_name))
        if number is None:
            return False
        return bounds.contains(number)

    return _matches


@dataclass(frozen=True)
class CompiledPredicate:
    """AND of independent components; each component can be left out for faceting."""

    components: tuple[PredicateComponent, ...]

    def __call__(self, item: Item) -> bool:
        return all(component(item) for component in self.components)

    def failing_keys(self, item: Item) -> list[ComponentKey]:
        return [component.key for component in self.components if not component(item)]

    def keys(self) -> list[ComponentKey]:
        return [component.key for component in self.components]


def build_predicate(config: ResourceConfig, query: CanonicalQuery) -> CompiledPredicate:
    components: list[PredicateComponent] = []
    if query.search and config.searchable_fields:
        components.append(PredicateComponent(SEARCH_KEY, search_predicate(config.searchable_fields, query.search)))
    for field_name in config.filterable_fields:
        selected = query.categorical_filters.get(field_name)
        if selected:
            components.append(PredicateComponent(categorical_key(field_name), categorical_predicate(field_name, selected)))
    for field_name in config.range_fields:
        bounds = query.range_filters.get(field_name)
        if bounds is not None:
            components.append(PredicateComponent(range_key(field_name), range_predicate(field_name, bounds)))
    return CompiledPredicate(tuple(components))
