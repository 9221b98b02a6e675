"""Bridge between picker entries and a string-level fuzzy matcher."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Callable, Sequence

from ..file_model import Entry
from .fuzzy import match_labels

Matcher = Callable[[Sequence[str], str], Sequence[str]]


class FuzzyFilterAdapter:
    """Filter entries through an injected ``match(candidates, query)`` callable.

    The matcher sees display strings (directories end with ``/``) and returns
    the matching ones in its own relevance order. Returned strings that are not
    candidates are ignored, so the result is always drawn from ``candidates``.
    """

    def __init__(self, matcher: Matcher = match_labels) -> None:
        self.matcher = matcher

    def filter(self, candidates: Sequence[Entry], query: str) -> list[Entry]:
        if not query:
            return list(candidates)

        by_label: dict[str, deque[Entry]] = defaultdict(deque)
        for entry in candidates:
            by_label[entry.display_text].append(entry)

        matched: list[Entry] = []
        for label in self.matcher([entry.display_text for entry in candidates], query):
            pending = by_label.get(label)
            if not pending:
                continue
            matched.append(pending.popleft())
        return matched


__all__ = [
    "FuzzyFilterAdapter",
    "Matcher",
]
