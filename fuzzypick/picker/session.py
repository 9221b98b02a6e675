"""Mutable state of one picker invocation."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ..file_model import Entry
from .selection import SelectionController


@dataclass
class Session:
    """Live picker state from ``open`` until commit or cancel.

    Navigation mutates the session in place; only ``previous_context`` is
    guaranteed to survive every descend/ascend untouched.
    """

    origin_directory: Path
    all_entries: list[Entry]
    previous_context: object | None = None
    query: str = ""
    visible_entries: list[Entry] = field(default_factory=list)
    last_query: str = ""
    selection: SelectionController = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.visible_entries and not self.query:
            self.visible_entries = list(self.all_entries)
        self.selection = SelectionController(lambda: len(self.visible_entries))

    @property
    def selected_index(self) -> int:
        return self.selection.selected_index

    @property
    def selected_entry(self) -> Entry | None:
        """Entry under the highlight, or ``None`` when nothing is visible."""
        if not self.visible_entries:
            return None
        return self.visible_entries[self.selected_index]

    def display_lines(self) -> list[str]:
        return [entry.display_text for entry in self.visible_entries]


__all__ = ["Session"]
