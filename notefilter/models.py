"""Data models for the note collection."""

from dataclasses import dataclass, field, fields
from typing import Any, Mapping

SORT_DIRECTIONS = ("asc", "desc")

# Wire names used by stored notes and filter conditions
FIELD_ALIASES = {
    "notebookId": "notebook_id",
    "isFavorite": "is_favorite",
    "taskAll": "task_all",
    "taskCompleted": "task_completed",
}


class ConfigError(ValueError):
    """Invalid collection configuration."""
    pass


@dataclass(frozen=True)
class Note:
    """Represents a single note."""

    id: str
    title: str = ""
    content: str = ""
    tags: list[str] = field(default_factory=list)
    notebook_id: str | None = None
    is_favorite: int = 0
    trash: int = 0
    task_all: int = 0
    task_completed: int = 0
    created: int = 0
    updated: int = 0

    def get(self, name: str, default: Any = None) -> Any:
        """Get an attribute by its field or wire name."""
        attr = FIELD_ALIASES.get(name, name)
        if attr not in self.__dataclass_fields__:
            return default
        value = getattr(self, attr)
        return default if value is None else value

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Note":
        """Build a note from a mapping using field or wire names."""
        known = {f.name for f in fields(cls)}
        values = {}
        for key, value in data.items():
            attr = FIELD_ALIASES.get(key, key)
            if attr in known:
                values[attr] = value
        values["id"] = str(values.get("id", ""))
        if values.get("tags") is None:
            values["tags"] = []
        return cls(**values)


@dataclass(frozen=True)
class CollectionOptions:
    """Options a collection is created with. Read-only for its lifetime."""

    sort_field: str = "created"
    sort_direction: str = "desc"
    per_page: int = 10

    def __post_init__(self):
        # Absent values fall back to the defaults
        for f in fields(self):
            if getattr(self, f.name) in (None, ""):
                object.__setattr__(self, f.name, f.default)

        if self.sort_direction not in SORT_DIRECTIONS:
            raise ConfigError(
                f"sort direction must be 'asc' or 'desc', got {self.sort_direction!r}"
            )
        if self.per_page < 1:
            raise ConfigError(f"per_page must be positive, got {self.per_page}")

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any] | None = None) -> "CollectionOptions":
        """Create options from a mapping. Missing or None values use the defaults."""
        options = options or {}

        def pick(*keys):
            for key in keys:
                if options.get(key) is not None:
                    return options[key]
            return None

        values = {}
        sort_field = pick("sortField", "sort_field")
        if sort_field:
            values["sort_field"] = sort_field
        sort_direction = pick("sortDirection", "sort_direction")
        if sort_direction:
            values["sort_direction"] = sort_direction
        per_page = pick("perPage", "per_page")
        if per_page is not None:
            values["per_page"] = int(per_page)
        return cls(**values)
