"""Domain model for one-level directory listings.

This package contains non-UI listing primitives:
- the ``Entry`` datatype and the synthetic go-up entry
- filesystem enumeration into ordered entry lists
"""

from __future__ import annotations

from .fs import FileEnumerator, list_directory_entries
from .types import DIRECTORY_MARKER, GO_UP_ENTRY, GO_UP_NAME, Entry

__all__ = [
    "DIRECTORY_MARKER",
    "Entry",
    "FileEnumerator",
    "GO_UP_ENTRY",
    "GO_UP_NAME",
    "list_directory_entries",
]
