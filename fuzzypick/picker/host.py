"""Contract between the picker core and the interactive surface hosting it."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class PickerHost(Protocol):
    """Rendering and side-effect hooks the core calls into."""

    def render_list(self, lines: list[str], selected_index: int) -> None:
        """Show the visible entries (directories end with ``/``) and highlight."""

    def render_selection(self, previous_index: int, selected_index: int) -> None:
        """Move the single-row highlight without redrawing the list."""

    def render_title(self, directory: Path) -> None:
        """Show the directory currently being browsed."""

    def open_file(self, path: Path) -> None:
        """Open the committed file."""

    def restore_previous_context(self, handle: object | None) -> None:
        """Bring back whatever view the picker replaced."""

    def report_error(self, kind: str, message: str) -> None:
        """Surface a non-fatal error to the user."""


__all__ = ["PickerHost"]
