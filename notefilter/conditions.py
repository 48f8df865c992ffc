"""Conditions by which notes can be filtered.

A condition is a flat set of attribute equality constraints. Most are
static; the ones that need a value known only when the filter is invoked
(a notebook id, for example) are built from the query at that point.
"""

from dataclasses import dataclass
from typing import Any, Callable, Mapping

Constraints = Mapping[str, Any]


@dataclass(frozen=True)
class StaticCondition:
    """Constraints that never change."""

    constraints: Constraints

    def resolve(self, query: Any = None) -> Constraints:
        return self.constraints


@dataclass(frozen=True)
class ParametrizedCondition:
    """Constraints built from the query supplied at filter time."""

    build: Callable[[Any], Constraints]

    def resolve(self, query: Any = None) -> Constraints:
        return self.build(query)


Condition = StaticCondition | ParametrizedCondition


CONDITIONS: dict[str, Condition] = {
    "active": StaticCondition({"trash": 0}),
    "favorite": StaticCondition({"isFavorite": 1, "trash": 0}),
    "trashed": StaticCondition({"trash": 1}),
    "notebook": ParametrizedCondition(
        lambda query: {"notebookId": query, "trash": 0}
    ),
}


def get_condition(name: str | None) -> Condition | None:
    """Look up a condition by name."""
    if not name:
        return None
    return CONDITIONS.get(name)


def matches(record, constraints: Constraints) -> bool:
    """Check whether every constraint equals the record's attribute."""
    return all(record.get(key) == value for key, value in constraints.items())
