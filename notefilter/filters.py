"""Named filters over note records.

Predicates only read records through ``get``, so they accept notes,
plain dicts or anything else with a compatible accessor.
"""

import re
from enum import Enum
from typing import Iterable, Sequence


class FilterKind(Enum):
    """Filters a collection can be narrowed with."""

    NONE = ""
    ACTIVE = "active"
    FAVORITE = "favorite"
    TRASHED = "trashed"
    NOTEBOOK = "notebook"
    TASK = "task"
    TAG = "tag"
    SEARCH = "search"


def parse_filter(name: str | None) -> FilterKind:
    """Map a filter name to its kind. Empty or unknown names map to NONE."""
    if not name:
        return FilterKind.NONE
    try:
        return FilterKind(name)
    except ValueError:
        return FilterKind.NONE


def task_filter(records: Iterable) -> list:
    """Find notes that have unfinished tasks."""
    return [
        record for record in records
        if (record.get("taskCompleted") or 0) < (record.get("taskAll") or 0)
    ]


def tag_filter(records: Iterable, tag_name: str | None) -> list:
    """Find notes tagged with ``tag_name`` that are not in the trash."""
    return [
        record for record in records
        if _has_tag(record, tag_name) and record.get("trash") == 0
    ]


def _has_tag(record, tag_name) -> bool:
    tags = record.get("tags")
    # Anything but a collection of tags never matches
    if not isinstance(tags, (list, tuple, set, frozenset)):
        return False
    return tag_name in tags


def search_filter(records: Sequence, text: str | None) -> Sequence:
    """Find all notes whose title or content contains ``text``.

    The text is a case-insensitive regular expression. Empty text returns
    ``records`` unchanged.

    Raises:
        re.error: If ``text`` is not a valid regular expression
    """
    if not text:
        return records

    pattern = re.compile(text, re.IGNORECASE | re.MULTILINE)
    return [record for record in records if _search_record(pattern, record)]


def _search_record(pattern: re.Pattern, record) -> bool:
    for key in ("title", "content"):
        value = record.get(key)
        if value is not None and pattern.search(str(value)):
            return True
    return False
