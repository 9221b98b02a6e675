"""Process-wide picker state shared across sessions."""

from __future__ import annotations

from pathlib import Path


class PickerService:
    """Holds the directory the next session should start from.

    Created once at startup and passed by reference to every
    ``SessionController``; updated when a session starts and on file commit.
    """

    def __init__(self, last_remembered_directory: Path | None = None) -> None:
        self.last_remembered_directory = last_remembered_directory

    def default_start_directory(self) -> Path:
        if self.last_remembered_directory is not None:
            return self.last_remembered_directory
        return Path.cwd()

    def remember(self, directory: Path) -> None:
        self.last_remembered_directory = directory


__all__ = ["PickerService"]
