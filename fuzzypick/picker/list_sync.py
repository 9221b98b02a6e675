"""Apply freshly filtered results to a session and decide selection policy."""

from __future__ import annotations

from dataclasses import dataclass

from ..file_model import Entry
from ..search import FuzzyFilterAdapter
from .session import Session


@dataclass(frozen=True)
class SyncResult:
    """Outcome of one sync: whether the selection was re-anchored to the top."""

    reset_selection: bool
    previous_count: int
    count: int


class ListSyncEngine:
    """Reconcile ``visible_entries`` with a new filtered list.

    The selection jumps back to the top when the result count or the query
    text changed since the previous sync; otherwise it stays where it was
    (clamped). A pure reorder with the same count and query keeps the index,
    even though it may now point at a different entry.
    """

    def __init__(self, filter_adapter: FuzzyFilterAdapter) -> None:
        self.filter_adapter = filter_adapter

    def sync(
        self,
        session: Session,
        filtered: list[Entry],
        query: str,
        force_reset: bool = False,
    ) -> SyncResult:
        previous_count = len(session.visible_entries)
        reset = force_reset or len(filtered) != previous_count or query != session.last_query

        session.visible_entries = list(filtered)
        session.query = query
        session.last_query = query
        if reset:
            session.selection.reset_to_top()
        else:
            session.selection.clamp()
        return SyncResult(reset_selection=reset, previous_count=previous_count, count=len(filtered))

    def refresh(self, session: Session, query: str, force_reset: bool = False) -> SyncResult:
        """Filter ``session.all_entries`` with ``query`` and sync the result."""
        filtered = self.filter_adapter.filter(session.all_entries, query)
        return self.sync(session, filtered, query, force_reset=force_reset)


__all__ = [
    "ListSyncEngine",
    "SyncResult",
]
