"""Filesystem enumeration of one directory level into picker entries."""

from __future__ import annotations

import os
from pathlib import Path

from ..errors import DirectoryUnreadable
from .types import GO_UP_ENTRY, Entry


def _child_is_dir(child: os.DirEntry) -> bool:
    """Directory test that follows symlinks; broken links count as files."""
    try:
        return child.is_dir()
    except OSError:
        return False


def list_directory_entries(directory: Path, show_hidden: bool = False) -> list[Entry]:
    """List immediate children of ``directory`` with the go-up entry first.

    Children are ordered directories first, then by case-insensitive name.
    Raises ``DirectoryUnreadable`` when the directory cannot be scanned.
    """
    children: list[Entry] = []
    try:
        with os.scandir(directory) as entries:
            for child in entries:
                name = child.name
                if not show_hidden and name.startswith("."):
                    continue
                children.append(Entry(name, is_dir=_child_is_dir(child)))
    except OSError as exc:
        raise DirectoryUnreadable(directory, exc.strerror or str(exc)) from exc

    children.sort(key=lambda item: (not item.is_dir, item.name.lower()))
    return [GO_UP_ENTRY, *children]


class FileEnumerator:
    """Directory lister bound to a hidden-file visibility preference."""

    def __init__(self, show_hidden: bool = False) -> None:
        self.show_hidden = show_hidden

    def list(self, directory: Path) -> list[Entry]:
        return list_directory_entries(directory, show_hidden=self.show_hidden)


__all__ = [
    "FileEnumerator",
    "list_directory_entries",
]
