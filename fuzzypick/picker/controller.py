"""Session state machine wiring filtering, selection, and navigation."""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable
from pathlib import Path

from ..errors import DirectoryUnreadable, InvalidNavigationTarget, NoEntriesFound, PickerError
from ..file_model import Entry, FileEnumerator
from ..search import FuzzyFilterAdapter, Matcher, match_labels
from .events import Ascend, Cancel, Commit, NextDirectory, PickerEvent, QueryChanged, SelectionMoved
from .host import PickerHost
from .list_sync import ListSyncEngine
from .navigation import NavigationController
from .service import PickerService
from .session import Session

logger = logging.getLogger(__name__)


class PickerState(enum.Enum):
    IDLE = "idle"
    BROWSING = "browsing"
    COMMITTED = "committed"
    CANCELLED = "cancelled"


class SessionController:
    """Own at most one picker session and drive it from host events.

    ``COMMITTED`` and ``CANCELLED`` are returned by the transition that reaches
    them; the controller drops the session and is ``IDLE`` again right after,
    ready for the next ``open``.
    """

    def __init__(
        self,
        host: PickerHost,
        service: PickerService,
        *,
        enumerator: FileEnumerator | None = None,
        matcher: Matcher = match_labels,
    ) -> None:
        self.host = host
        self.service = service
        self.enumerator = enumerator if enumerator is not None else FileEnumerator()
        self.list_sync = ListSyncEngine(FuzzyFilterAdapter(matcher))
        self.navigation = NavigationController(self.enumerator, self.list_sync)
        self.session: Session | None = None
        self.state = PickerState.IDLE

    # lifecycle
    def open(self, start_directory: Path | None = None, previous_context: object | None = None) -> PickerState:
        """Start browsing ``start_directory`` (default: remembered dir or cwd)."""
        if self.state is not PickerState.IDLE:
            return self.state

        directory = start_directory if start_directory is not None else self.service.default_start_directory()
        try:
            directory = directory.resolve()
            entries = self.enumerator.list(directory)
            if not entries:
                raise NoEntriesFound(directory)
        except PickerError as exc:
            self._report(exc)
            return self.state
        except (OSError, RuntimeError) as exc:
            self._report(DirectoryUnreadable(directory, str(exc)))
            return self.state

        self.session = Session(
            origin_directory=directory,
            all_entries=entries,
            previous_context=previous_context,
        )
        self.service.remember(directory)
        self.state = PickerState.BROWSING
        logger.debug("session opened in %s", directory)
        self._render_directory()
        return self.state

    def handle(self, event: PickerEvent) -> PickerState:
        """Process one event to completion and return the resulting state."""
        if self.state is not PickerState.BROWSING or self.session is None:
            logger.debug("ignoring %r while %s", event, self.state.value)
            return self.state

        if isinstance(event, QueryChanged):
            self.on_query_changed(event.query)
        elif isinstance(event, SelectionMoved):
            self.on_selection_move(event.index, relative=event.relative)
        elif isinstance(event, Commit):
            return self.on_commit()
        elif isinstance(event, Cancel):
            return self.on_cancel()
        elif isinstance(event, NextDirectory):
            self.on_next_directory()
        elif isinstance(event, Ascend):
            self._navigate(self.navigation.ascend)
        else:
            raise TypeError(f"unsupported picker event: {event!r}")
        return self.state

    # events
    def on_query_changed(self, query: str) -> None:
        session = self._require_session()
        self.list_sync.refresh(session, query)
        self._render_list()

    def on_selection_move(self, index: int, relative: bool = False) -> None:
        session = self._require_session()
        previous = session.selected_index
        changed = session.selection.move_by(index) if relative else session.selection.move_to(index)
        if changed:
            self.host.render_selection(previous, session.selected_index)

    def on_commit(self) -> PickerState:
        session = self._require_session()
        if not session.visible_entries:
            return self.state
        if not 0 <= session.selected_index < len(session.visible_entries):
            raise InvalidNavigationTarget(
                f"selected index {session.selected_index} outside {len(session.visible_entries)} visible entries"
            )

        entry = session.selected_entry
        if entry.is_dir:
            self._navigate(lambda current: self.navigation.descend(current, entry))
            return self.state
        return self._commit_file(session, entry)

    def on_cancel(self) -> PickerState:
        session = self._require_session()
        self.host.restore_previous_context(session.previous_context)
        logger.debug("session cancelled in %s", session.origin_directory)
        return self._finish(PickerState.CANCELLED)

    def on_next_directory(self) -> None:
        self._navigate(self.navigation.find_next_directory_entry)

    # internals
    def _commit_file(self, session: Session, entry: Entry) -> PickerState:
        target = session.origin_directory / entry.name
        self.service.remember(session.origin_directory)
        logger.debug("committing %s", target)
        self.host.open_file(target)
        return self._finish(PickerState.COMMITTED)

    def _finish(self, outcome: PickerState) -> PickerState:
        self.session = None
        self.state = PickerState.IDLE
        return outcome

    def _navigate(self, step: Callable[[Session], bool]) -> None:
        session = self._require_session()
        try:
            moved = step(session)
        except DirectoryUnreadable as exc:
            self._report(exc)
            return
        if moved:
            self._render_directory()

    def _render_directory(self) -> None:
        session = self._require_session()
        self.host.render_title(session.origin_directory)
        self._render_list()

    def _render_list(self) -> None:
        session = self._require_session()
        self.host.render_list(session.display_lines(), session.selected_index)

    def _report(self, exc: PickerError) -> None:
        logger.warning("%s: %s", exc.kind, exc)
        self.host.report_error(exc.kind, str(exc))

    def _require_session(self) -> Session:
        if self.session is None:
            raise RuntimeError("no active picker session")
        return self.session


__all__ = [
    "PickerState",
    "SessionController",
]
