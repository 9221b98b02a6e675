"""Picker session core.

Groups the session state machine (``SessionController``) with the components
it drives: selection bounds, list sync policy, and directory navigation.
Nothing here touches the terminal; hosts plug in through ``PickerHost``.
"""

from __future__ import annotations

from .controller import PickerState, SessionController
from .events import Ascend, Cancel, Commit, NextDirectory, PickerEvent, QueryChanged, SelectionMoved
from .host import PickerHost
from .list_sync import ListSyncEngine, SyncResult
from .navigation import NavigationController
from .selection import SelectionController
from .service import PickerService
from .session import Session

__all__ = [
    "Ascend",
    "Cancel",
    "Commit",
    "ListSyncEngine",
    "NavigationController",
    "NextDirectory",
    "PickerEvent",
    "PickerHost",
    "PickerService",
    "PickerState",
    "QueryChanged",
    "SelectionController",
    "SelectionMoved",
    "Session",
    "SessionController",
    "SyncResult",
]
