"""Filterable, sortable, paginated note collection."""

from typing import Any, Iterable, Iterator, Mapping

from .conditions import get_condition, matches
from .filters import FilterKind, parse_filter, search_filter, tag_filter, task_filter
from .fuzzy import FuzzyMatcher
from .logger import get_logger
from .models import CollectionOptions
from .pagination import page_count, paginate, sort_records

logger = get_logger("collection")


class NoteCollection:
    """A set of notes plus the filtered, sorted view of it.

    The backing set holds every known note and is only replaced through
    ``reset``. The visible set is derived from it by the active filter and
    the comparators, and is sliced into pages on request.
    """

    def __init__(
        self,
        records: Iterable = (),
        options: CollectionOptions | Mapping[str, Any] | None = None,
    ):
        if not isinstance(options, CollectionOptions):
            options = CollectionOptions.from_mapping(options)
        self.options = options
        self._fuzzy = FuzzyMatcher(keys=("title",))
        self.reset(records)

    def comparators(self) -> list[tuple[str, str]]:
        """Fields by which notes are sorted, most significant first."""
        return [
            (self.options.sort_field, self.options.sort_direction),
            ("isFavorite", "desc"),
        ]

    def reset(self, records: Iterable | None = None) -> None:
        """Drop the active filter, optionally replacing the backing set."""
        if records is not None:
            self._records = tuple(records)
        self._filter = FilterKind.NONE
        self._query = None
        self._set_view(self._records)

    def filter_list(self, name: str | None, query: Any = None) -> None:
        """Filter the collection by a named filter.

        Empty or unknown names leave the collection untouched. Otherwise the
        visible set is replaced with the notes of the backing set the filter
        selects; a previously active filter is discarded.

        Raises:
            re.error: If a search query is not a valid regular expression
        """
        kind = parse_filter(name)
        match kind:
            case FilterKind.NONE:
                if name:
                    logger.debug("Skipping unknown filter %r", name)
                return
            case FilterKind.ACTIVE | FilterKind.FAVORITE | FilterKind.TRASHED | FilterKind.NOTEBOOK:
                constraints = get_condition(kind.value).resolve(query)
                subset = [r for r in self._records if matches(r, constraints)]
            case FilterKind.TASK:
                subset = task_filter(self._records)
            case FilterKind.TAG:
                subset = tag_filter(self._records, query)
            case FilterKind.SEARCH:
                subset = search_filter(self._records, query)

        self._filter = kind
        self._query = query
        self._set_view(subset)
        logger.debug(
            "Filter %r (query=%r) kept %d of %d notes",
            kind.value, query, len(subset), len(self._records),
        )

    def fuzzy_search(self, text: str | None) -> list:
        """Find notes whose title approximately matches ``text``.

        Searches every note in the backing set, regardless of the active
        filter or page, and does not change the collection.
        """
        results = self._fuzzy.search(self._records, text)
        logger.debug("Fuzzy search %r matched %d notes", text, len(results))
        return results

    def fuzzy_search_scored(self, text: str | None) -> list[tuple]:
        """Like ``fuzzy_search`` but returns ``(note, distance)`` pairs."""
        return self._fuzzy.search_scored(self._records, text)

    def _set_view(self, subset: Iterable) -> None:
        self._visible = tuple(sort_records(subset, self.comparators()))

    @property
    def records(self) -> tuple:
        """The backing set."""
        return self._records

    @property
    def visible(self) -> tuple:
        """The filtered and sorted notes, across all pages."""
        return self._visible

    @property
    def filter_name(self) -> str | None:
        return self._filter.value or None

    @property
    def query(self) -> Any:
        return self._query

    @property
    def is_filtered(self) -> bool:
        return self._filter is not FilterKind.NONE

    @property
    def total_pages(self) -> int:
        return page_count(len(self._visible), self.options.per_page)

    def page(self, number: int = 1) -> list:
        """Return the visible notes on a 1-based page."""
        return paginate(self._visible, number, self.options.per_page)

    def __len__(self) -> int:
        return len(self._visible)

    def __iter__(self) -> Iterator:
        return iter(self._visible)
