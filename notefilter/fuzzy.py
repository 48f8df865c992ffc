"""Approximate title matching."""

import difflib
from typing import Iterable, Sequence

DEFAULT_THRESHOLD = 0.6


def similarity(query: str, text: str) -> float:
    """Score how closely ``query`` appears in ``text``, from 0.0 to 1.0.

    Takes the best ratio among the whole text, each of its words and each
    window of the text as long as the query, so a short query that matches
    the beginning of a long title still scores high.
    """
    query = query.lower()
    text = text.lower()
    if not query or not text:
        return 0.0

    candidates = [text]
    candidates.extend(text.split())
    width = len(query)
    if len(text) > width:
        candidates.extend(text[i:i + width] for i in range(len(text) - width + 1))

    matcher = difflib.SequenceMatcher(autojunk=False)
    matcher.set_seq2(query)
    best = 0.0
    for candidate in candidates:
        matcher.set_seq1(candidate)
        # Cheap upper bounds first
        if matcher.real_quick_ratio() <= best or matcher.quick_ratio() <= best:
            continue
        best = max(best, matcher.ratio())
        if best == 1.0:
            break
    return best


class FuzzyMatcher:
    """Rank records by how well a query approximates one of their keys.

    Distances go from 0.0 (perfect) to 1.0 (no resemblance). Records whose
    distance exceeds ``threshold`` are left out.
    """

    def __init__(self, keys: Sequence[str] = ("title",), threshold: float = DEFAULT_THRESHOLD):
        self.keys = tuple(keys)
        self.threshold = threshold

    def distance(self, record, query: str) -> float:
        scores = [
            similarity(query, str(record.get(key) or ""))
            for key in self.keys
        ]
        return 1.0 - max(scores, default=0.0)

    def search_scored(self, records: Iterable, query: str | None) -> list[tuple]:
        """Return ``(record, distance)`` pairs, best match first."""
        if not query:
            return []

        scored = []
        for record in records:
            distance = self.distance(record, query)
            if distance <= self.threshold:
                scored.append((record, distance))
        # sorted() is stable, so equal distances keep input order
        return sorted(scored, key=lambda pair: pair[1])

    def search(self, records: Iterable, query: str | None) -> list:
        """Return matching records, best match first."""
        return [record for record, _ in self.search_scored(records, query)]
