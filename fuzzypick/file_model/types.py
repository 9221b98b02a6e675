"""Domain datatypes for directory listing entries."""

from __future__ import annotations

from dataclasses import dataclass

GO_UP_NAME = ".."
DIRECTORY_MARKER = "/"


@dataclass(frozen=True)
class Entry:
    """One file or directory child of the browsed directory."""

    name: str
    is_dir: bool = False

    @property
    def display_text(self) -> str:
        """Rendered label; directories carry a trailing ``/``."""
        return self.name + DIRECTORY_MARKER if self.is_dir else self.name

    @property
    def is_go_up(self) -> bool:
        return self.is_dir and self.name == GO_UP_NAME


GO_UP_ENTRY = Entry(GO_UP_NAME, is_dir=True)


__all__ = [
    "DIRECTORY_MARKER",
    "Entry",
    "GO_UP_ENTRY",
    "GO_UP_NAME",
]
