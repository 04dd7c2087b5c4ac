"""Shared utilities: query-string parsing for list endpoints."""

from app.shared.utils.query import parse_search, parse_sort, to_number

__all__ = [
    "parse_search",
    "parse_sort",
    "to_number",
]
