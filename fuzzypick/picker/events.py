"""User-originated events consumed by ``SessionController.handle``."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class QueryChanged:
    query: str


@dataclass(frozen=True)
class SelectionMoved:
    """Move the highlight to ``index``, or by ``index`` rows when ``relative``."""

    index: int
    relative: bool = False


@dataclass(frozen=True)
class Commit:
    pass


@dataclass(frozen=True)
class Cancel:
    pass


@dataclass(frozen=True)
class NextDirectory:
    pass


@dataclass(frozen=True)
class Ascend:
    pass


PickerEvent = QueryChanged | SelectionMoved | Commit | Cancel | NextDirectory | Ascend


__all__ = [
    "Ascend",
    "Cancel",
    "Commit",
    "NextDirectory",
    "PickerEvent",
    "QueryChanged",
    "SelectionMoved",
]
