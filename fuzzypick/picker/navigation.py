"""Directory traversal for an active picker session."""

from __future__ import annotations

import logging

from ..errors import DirectoryUnreadable, InvalidNavigationTarget
from ..file_model import GO_UP_ENTRY, Entry, FileEnumerator
from .list_sync import ListSyncEngine
from .session import Session

logger = logging.getLogger(__name__)


class NavigationController:
    """Descend into directories and ascend via the go-up entry.

    Enumeration of the target always happens before the session is touched, so
    a ``DirectoryUnreadable`` failure leaves the session in its prior directory.
    """

    def __init__(self, enumerator: FileEnumerator, list_sync: ListSyncEngine) -> None:
        self.enumerator = enumerator
        self.list_sync = list_sync

    def descend(self, session: Session, target: Entry) -> bool:
        """Enter ``target`` and reset the query; return whether the directory changed."""
        if not target.is_dir:
            raise InvalidNavigationTarget(f"cannot descend into file {target.name!r}")

        joined = session.origin_directory / target.name
        try:
            directory = joined.resolve()
        except (OSError, RuntimeError) as exc:
            raise DirectoryUnreadable(joined, str(exc)) from exc

        if target.is_go_up and directory == session.origin_directory:
            # Filesystem root: ``/..`` resolves to ``/`` itself.
            logger.debug("ascend ignored at filesystem root %s", directory)
            return False

        entries = self.enumerator.list(directory)
        session.origin_directory = directory
        session.all_entries = entries
        self.list_sync.refresh(session, "", force_reset=True)
        logger.debug("entered %s (%d entries)", directory, len(entries))
        return True

    def ascend(self, session: Session) -> bool:
        return self.descend(session, GO_UP_ENTRY)

    def find_next_directory_entry(self, session: Session) -> bool:
        """Descend into the first visible directory (go-up included), if any."""
        for entry in session.visible_entries:
            if entry.is_dir:
                return self.descend(session, entry)
        return False


__all__ = ["NavigationController"]
