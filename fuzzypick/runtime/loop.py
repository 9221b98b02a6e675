"""Main interactive event loop for the terminal picker.

Decodes keys, turns them into picker events, and flushes the host view.
Feature logic lives in ``SessionController``; this module only wires.
"""

from __future__ import annotations

import shutil
from collections.abc import Callable

from ..input import event_for_key, read_key
from ..picker import PickerState, SessionController
from .host import TerminalHost
from .terminal import TerminalController

KEY_POLL_TIMEOUT_MS = 120
TERMINAL_STATES = frozenset({PickerState.COMMITTED, PickerState.CANCELLED})


def run_picker_loop(
    controller: SessionController,
    host: TerminalHost,
    terminal: TerminalController,
    stdin_fd: int,
    *,
    read_key_fn: Callable[..., str] = read_key,
    terminal_size: Callable[[], tuple[int, int]] | None = None,
) -> PickerState:
    """Process keys until the session commits or is cancelled.

    Returns the terminal state reached. An idle controller (no session) ends
    the loop immediately with ``PickerState.IDLE``.
    """

    def current_size() -> tuple[int, int]:
        if terminal_size is not None:
            return terminal_size()
        term = shutil.get_terminal_size((80, 24))
        return term.columns, term.lines

    with terminal.raw_mode():
        while controller.session is not None:
            columns, lines = current_size()
            host.resize(columns, lines)
            host.expire_status()
            host.set_query(controller.session.query)
            if host.dirty:
                host.refresh()

            key = read_key_fn(stdin_fd, timeout_ms=KEY_POLL_TIMEOUT_MS)
            if key == "":
                continue
            event = event_for_key(key, controller.session.query, page_rows=host.list_rows())
            if event is None:
                continue
            outcome = controller.handle(event)
            if outcome in TERMINAL_STATES:
                return outcome
    return controller.state


__all__ = [
    "KEY_POLL_TIMEOUT_MS",
    "run_picker_loop",
]
