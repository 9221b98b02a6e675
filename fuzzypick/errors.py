"""Error kinds raised by the picker core.

``DirectoryUnreadable`` and ``NoEntriesFound`` abort only the attempted
transition and are reported to the host. ``InvalidNavigationTarget`` signals a
broken selection invariant and propagates to the caller.
"""

from __future__ import annotations

from pathlib import Path


class PickerError(Exception):
    """Base class for picker failures; ``kind`` is the host-facing error name."""

    kind = "PickerError"


class DirectoryUnreadable(PickerError):
    """Directory listing failed (missing path, permissions, not a directory)."""

    kind = "DirectoryUnreadable"

    def __init__(self, directory: Path, reason: str = "") -> None:
        self.directory = directory
        self.reason = reason
        message = f"cannot read directory {directory}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class NoEntriesFound(PickerError):
    """Initial listing produced no entries at all."""

    kind = "NoEntriesFound"

    def __init__(self, directory: Path) -> None:
        self.directory = directory
        super().__init__(f"no entries found in {directory}")


class InvalidNavigationTarget(PickerError):
    """Commit/descend addressed an entry that cannot be navigated to."""

    kind = "InvalidNavigationTarget"


__all__ = [
    "PickerError",
    "DirectoryUnreadable",
    "NoEntriesFound",
    "InvalidNavigationTarget",
]
