"""Terminal implementation of the picker host contract.

The host keeps just enough view state to compose a frame (prompt, list
window, status row). Core callbacks only mark the view dirty; the runtime
loop decides when to flush, and ``ScreenBuffer`` rewrites changed rows only.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from pathlib import Path

from ..render import (
    ScreenBuffer,
    UITheme,
    format_entry_row,
    format_prompt_row,
    format_status_row,
    list_window_rows,
    scroll_start,
)

STATUS_MESSAGE_SECONDS = 2.5


class TerminalHost:
    """Draw picker state into a terminal and record the session outcome."""

    def __init__(
        self,
        write: Callable[[str], None],
        theme: UITheme,
        *,
        columns: int = 80,
        lines: int = 24,
        monotonic: Callable[[], float] = time.monotonic,
    ) -> None:
        self.buffer = ScreenBuffer(write)
        self.theme = theme
        self.columns = max(1, columns)
        self.lines = max(3, lines)
        self._monotonic = monotonic

        self.entries: list[str] = []
        self.selected_index = 0
        self.list_start = 0
        self.title = ""
        self.query = ""
        self.status_message = ""
        self.status_message_until = 0.0
        self.dirty = True

        self.opened_path: Path | None = None

    # PickerHost
    def render_list(self, lines: list[str], selected_index: int) -> None:
        self.entries = list(lines)
        self.selected_index = selected_index
        self._follow_selection()
        self.dirty = True

    def render_selection(self, previous_index: int, selected_index: int) -> None:
        if previous_index == selected_index:
            return
        self.selected_index = selected_index
        self._follow_selection()
        self.dirty = True

    def render_title(self, directory: Path) -> None:
        self.title = str(directory)
        self.dirty = True

    def open_file(self, path: Path) -> None:
        self.opened_path = path

    def restore_previous_context(self, handle: object | None) -> None:
        """Forget any opened path; leaving ``raw_mode`` restores the terminal."""
        self.opened_path = None

    def report_error(self, kind: str, message: str) -> None:
        self.status_message = f"{kind}: {message}"
        self.status_message_until = self._monotonic() + STATUS_MESSAGE_SECONDS
        self.dirty = True

    # view state
    def set_query(self, query: str) -> None:
        if query != self.query:
            self.query = query
            self.dirty = True

    def resize(self, columns: int, lines: int) -> None:
        columns = max(1, columns)
        lines = max(3, lines)
        if (columns, lines) == (self.columns, self.lines):
            return
        self.columns = columns
        self.lines = lines
        self._follow_selection()
        self.buffer.invalidate()
        self.dirty = True

    def expire_status(self) -> None:
        if self.status_message and self._monotonic() >= self.status_message_until:
            self.status_message = ""
            self.status_message_until = 0.0
            self.dirty = True

    def list_rows(self) -> int:
        return list_window_rows(self.lines)

    def compose_frame(self) -> list[str]:
        theme = self.theme
        rows = [format_prompt_row(self.query, theme, self.columns)]
        window = self.entries[self.list_start : self.list_start + self.list_rows()]
        for offset, label in enumerate(window):
            selected = self.list_start + offset == self.selected_index
            rows.append(format_entry_row(label, theme, self.columns, selected))
        rows.extend("" for _ in range(self.list_rows() - len(window)))
        count_text = f"{self.selected_index + 1}/{len(self.entries)}" if self.entries else "0/0"
        rows.append(format_status_row(self.title, count_text, theme, self.columns, self.status_message))
        return rows

    def refresh(self) -> int:
        """Flush the current frame; returns the number of rows rewritten."""
        written = self.buffer.draw(self.compose_frame())
        self.dirty = False
        return written

    def _follow_selection(self) -> None:
        self.list_start = scroll_start(self.selected_index, self.list_start, self.list_rows(), len(self.entries))


__all__ = [
    "STATUS_MESSAGE_SECONDS",
    "TerminalHost",
]
