from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Collection, Sequence

from app.services.catalog_query import CanonicalQuery
from app.services.catalog_values import Item, ValueKind, numeric_value, sort_key, value_kind


@dataclass(frozen=True)
class PageResult:
    items: list[Item]
    page: int
    limit: int
    total: int

    @property
    def total_pages(self) -> int:
        # integer ceiling; limit may be arbitrarily large
        return -(-self.total // self.limit)

    def pagination(self) -> dict[str, int]:
        return {"page": self.page, "limit": self.limit, "total": self.total, "totalPages": self.total_pages}


def _value_key(value: Any, numeric: bool) -> tuple | None:
    if numeric:
        number = numeric_value(value)
        return None if number is None else (0, number, "")
    if value_kind(value) is ValueKind.ABSENT:
        return None
    return sort_key(value)


def sort_items(
    items: Sequence[Item],
    sort_field: str,
    sort_order: str,
    id_field: str,
    numeric: bool = False,
) -> list[Item]:
    """Sort by one field with the identifier (ascending) as tie-break.

    With ``numeric`` the field is compared by its parsed number, so price
    strings such as "€ 1.149,00" order by amount. Items without a usable
    value for the sort field go last in either direction.
    """
    by_id = sorted(items, key=lambda item: _id_key(item.get(id_field)))
    keyed = [(_value_key(item.get(sort_field), numeric), item) for item in by_id]
    present = [(key, item) for key, item in keyed if key is not None]
    missing = [item for key, item in keyed if key is None]
    # list.sort is stable with reverse=True too, so equal keys keep id order
    present.sort(key=lambda pair: pair[0], reverse=sort_order == "desc")
    return [item for _, item in present] + missing


def _id_key(value: Any) -> tuple:
    if value_kind(value) is ValueKind.ABSENT:
        return (9, 0.0, "")
    return sort_key(value)


def paginate(
    items: Sequence[Item],
    predicate: Callable[[Item], bool],
    query: CanonicalQuery,
    id_field: str,
    numeric_fields: Collection[str] = (),
) -> PageResult:
    matching = [item for item in items if predicate(item)]
    ordered = sort_items(
        matching,
        query.sort_field,
        query.sort_order,
        id_field,
        numeric=query.sort_field in numeric_fields,
    )
    window = ordered[query.offset : query.offset + query.limit]
    return PageResult(items=window, page=query.page, limit=query.limit, total=len(matching))
