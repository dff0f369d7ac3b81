from __future__ import annotations

import math
import re
from decimal import Decimal
from enum import Enum
from typing import Any, Mapping

Item = Mapping[str, Any]

_CURRENCY_RE = re.compile(r"[€$£¥\s]")


class ValueKind(str, Enum):
    STRING = "string"
    NUMBER = "number"
    STRING_SEQUENCE = "string_sequence"
    ABSENT = "absent"


def value_kind(value: Any) -> ValueKind:
    if value is None:
        return ValueKind.ABSENT
    if isinstance(value, bool):
        return ValueKind.STRING
    if isinstance(value, (int, float, Decimal)):
        return ValueKind.NUMBER
    if isinstance(value, (list, tuple)):
        return ValueKind.STRING_SEQUENCE
    return ValueKind.STRING


def _format_number(value: int | float | Decimal) -> str:
    number = float(value)
    if math.isfinite(number) and number.is_integer():
        return str(int(number))
    return str(number)


def scalar_token(value: Any) -> str:
    """String form used to compare a stored value against a selected filter value."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float, Decimal)):
        return _format_number(value)
    return str(value)


def value_tokens(value: Any) -> list[str]:
    kind = value_kind(value)
    if kind is ValueKind.ABSENT:
        return []
    if kind is ValueKind.STRING_SEQUENCE:
        return [scalar_token(part) for part in value if part is not None]
    return [scalar_token(value)]


def parse_number_text(text: str) -> float | None:
    """Parse a price or measurement literal such as "€1.234,56", "1,234.56" or "6,1"."""
    clean = _CURRENCY_RE.sub("", text).strip()
    if not clean:
        return None
    last_comma = clean.rfind(",")
    last_period = clean.rfind(".")
    if last_comma > last_period:
        normalized = clean.replace(".", "").replace(",", ".")
    else:
        normalized = clean.replace(",", "")
    try:
        number = float(normalized)
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    return number


def numeric_value(value: Any) -> float | None:
    kind = value_kind(value)
    if kind is ValueKind.NUMBER:
        number = float(value)
        return number if math.isfinite(number) else None
    if kind is ValueKind.STRING and isinstance(value, str):
        return parse_number_text(value)
    return None


def sort_key(value: Any) -> tuple:
    """Natural ordering: numbers compare numerically, strings lexicographically (case-sensitive).

    Numbers sort before strings, strings before sequences, so a column of mixed
    kinds still has a total order.
    """
    kind = value_kind(value)
    if kind is ValueKind.NUMBER:
        number = float(value)
        if math.isnan(number):
            return (3, 0.0, "")
        return (0, number, "")
    if kind is ValueKind.STRING:
        return (1, 0.0, scalar_token(value))
    return (2, 0.0, "\x00".join(value_tokens(value)))
