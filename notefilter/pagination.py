"""Sorting and page slicing for record collections."""

import math
from typing import Any, Sequence

Comparators = Sequence[tuple[str, str]]


def _sort_key(field: str):
    def key(record) -> tuple[bool, Any]:
        value = record.get(field)
        if isinstance(value, str):
            value = value.lower()
        # Missing values sort before present ones
        return (value is not None, value if value is not None else 0)
    return key


def sort_records(records: Sequence, comparators: Comparators) -> list:
    """Sort records by a list of ``(field, direction)`` pairs.

    The first pair has the highest precedence. Records equal on every key
    keep their original order.
    """
    result = list(records)
    # Stable sorts applied from the least significant key up
    for field, direction in reversed(comparators):
        result.sort(key=_sort_key(field), reverse=(direction == "desc"))
    return result


def page_count(total: int, per_page: int) -> int:
    """Number of pages needed for ``total`` records. Always at least 1."""
    return max(1, math.ceil(total / per_page))


def clamp_page(page: int, total: int, per_page: int) -> int:
    return min(max(page, 1), page_count(total, per_page))


def paginate(records: Sequence, page: int, per_page: int) -> list:
    """Return the records on a 1-based page.

    Pages outside the valid range are clamped to the first or last page.
    """
    page = clamp_page(page, len(records), per_page)
    start = (page - 1) * per_page
    return list(records[start:start + per_page])
