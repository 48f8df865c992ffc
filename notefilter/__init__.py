"""Filterable, sortable, paginated note collections."""

from .collection import NoteCollection
from .models import CollectionOptions, ConfigError, Note

__version__ = "0.1.0"

__all__ = ["NoteCollection", "CollectionOptions", "ConfigError", "Note", "__version__"]
