"""Query-string parsing for list endpoints (sort, search, numeric paging).

sort:   "name:asc,createdAt:desc" -> {"name": 1, "createdAt": -1}
search: "name:admin,status:active" -> {"name": "admin", "status": "active"}

Malformed sort/search strings raise ValidationException (400). Numeric
paging values follow JavaScript Number() coercion, so garbage becomes NaN
instead of an error.
"""

from __future__ import annotations

import math
import re
from typing import Annotated, Any, Literal

from pydantic import BeforeValidator, StringConstraints, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from app.domain.exceptions import ValidationException

_SORT_DIRECTIONS: dict[str, int] = {"asc": 1, "desc": -1}

FieldName = Annotated[
    str, StringConstraints(strip_whitespace=True, pattern=r"^[A-Za-z_][A-Za-z0-9_.]*$")
]


def _split_pairs(value: Any) -> Any:
    """Turn "a:x,b:y" into {"a": "x", "b": "y"}. Blank items are skipped."""
    if value is None:
        return {}
    if not isinstance(value, str):
        return value
    pairs: dict[str, str] = {}
    for item in value.split(","):
        if not item.strip():
            continue
        field, sep, term = item.partition(":")
        if not sep:
            raise ValueError(f"expected 'field:value', got {item.strip()!r}")
        pairs[field.strip()] = term.strip()
    return pairs


def _sort_direction(value: Any) -> Any:
    if isinstance(value, str):
        direction = _SORT_DIRECTIONS.get(value.lower())
        if direction is None:
            raise ValueError(f"sort order must be 'asc' or 'desc', got {value!r}")
        return direction
    return value


SortDirection = Annotated[Literal[1, -1], BeforeValidator(_sort_direction)]
SearchTerm = Annotated[str, StringConstraints(min_length=1)]

SortHttpSchema: TypeAdapter[dict[str, int]] = TypeAdapter(
    Annotated[dict[FieldName, SortDirection], BeforeValidator(_split_pairs)]
)
SearchHttpSchema: TypeAdapter[dict[str, str]] = TypeAdapter(
    Annotated[dict[FieldName, SearchTerm], BeforeValidator(_split_pairs)]
)


def _errors_for_response(exc: PydanticValidationError) -> list[dict[str, Any]]:
    """Return JSON-safe error entries (pydantic ctx may hold exception objects)."""
    return [
        {"loc": list(err["loc"]), "msg": err["msg"], "type": err["type"]}
        for err in exc.errors()
    ]


def parse_sort(raw: str | None) -> dict[str, int]:
    """Parse a sort query string into {field: 1 | -1}.

    Raises:
        ValidationException: If the string is not a list of field:asc|desc pairs.
    """
    try:
        return SortHttpSchema.validate_python(raw)
    except PydanticValidationError as e:
        raise ValidationException(
            "Invalid sort query", field="sort", errors=_errors_for_response(e)
        ) from e


def parse_search(raw: str | None) -> dict[str, str]:
    """Parse a search query string into {field: value}.

    Raises:
        ValidationException: If the string is not a list of field:value pairs.
    """
    try:
        return SearchHttpSchema.validate_python(raw)
    except PydanticValidationError as e:
        raise ValidationException(
            "Invalid search query", field="search", errors=_errors_for_response(e)
        ) from e


_DECIMAL = re.compile(r"^[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?$")
_INFINITY = re.compile(r"^[+-]?Infinity$")
_RADIX_PREFIXED = re.compile(r"^0([xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)$")


def to_number(raw: str | None) -> int | float:
    """Coerce a query value the way JavaScript Number() does.

    None gives NaN, blank gives 0, decimal, exponent, 0x/0o/0b literals and
    Infinity are accepted; anything else gives NaN, including non-ASCII
    digits that float() would take. Integral finite results are returned
    as int.
    """
    if raw is None:
        return math.nan
    text = raw.strip()
    if not text:
        return 0
    if _RADIX_PREFIXED.match(text):
        return int(text, 0)
    if _INFINITY.match(text):
        return -math.inf if text.startswith("-") else math.inf
    if not _DECIMAL.match(text):
        return math.nan
    value = float(text)
    if math.isfinite(value) and value.is_integer():
        return int(value)
    return value
