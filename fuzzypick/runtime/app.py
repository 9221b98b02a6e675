"""Bootstrap for one interactive picker run on the controlling terminal."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from ..file_model import FileEnumerator
from ..picker import PickerService, PickerState, SessionController
from ..render import resolve_theme
from . import config
from .host import TerminalHost
from .loop import run_picker_loop
from .terminal import TerminalController

TTY_PATH = "/dev/tty"
FALLBACK_TERMINAL_SIZE = (80, 24)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PickerOutcome:
    """Result of a picker run: final state plus the committed path or error."""

    state: PickerState
    path: Path | None = None
    error: str = ""


def _tty_size(fd: int) -> tuple[int, int]:
    try:
        size = os.get_terminal_size(fd)
    except OSError:
        return FALLBACK_TERMINAL_SIZE
    return size.columns, size.lines


def run_picker(
    start_directory: Path | None,
    *,
    show_hidden: bool,
    theme_name: str | None,
    no_color: bool,
    tty_path: str = TTY_PATH,
) -> PickerOutcome:
    """Run the picker on ``tty_path`` so stdout stays free for the chosen path."""
    service = PickerService(config.load_last_directory())
    fd = os.open(tty_path, os.O_RDWR)
    try:
        terminal = TerminalController(fd, fd)
        columns, lines = _tty_size(fd)
        host = TerminalHost(
            terminal.write,
            resolve_theme(theme_name, no_color=no_color),
            columns=columns,
            lines=lines,
        )
        controller = SessionController(host, service, enumerator=FileEnumerator(show_hidden=show_hidden))
        if controller.open(start_directory) is not PickerState.BROWSING:
            return PickerOutcome(PickerState.IDLE, error=host.status_message)
        outcome = run_picker_loop(
            controller,
            host,
            terminal,
            fd,
            terminal_size=lambda: _tty_size(fd),
        )
    finally:
        os.close(fd)

    logger.debug("picker finished: %s", outcome.value)
    if outcome is PickerState.COMMITTED and service.last_remembered_directory is not None:
        config.save_last_directory(service.last_remembered_directory)
    return PickerOutcome(outcome, path=host.opened_path)


__all__ = [
    "PickerOutcome",
    "run_picker",
]
