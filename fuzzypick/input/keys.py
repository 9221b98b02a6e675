"""Translate decoded key tokens into picker events."""

from __future__ import annotations

from ..picker import Ascend, Cancel, Commit, NextDirectory, PickerEvent, QueryChanged, SelectionMoved

LAST_INDEX = 1_000_000_000


def delete_last_word(query: str) -> str:
    """Drop trailing whitespace plus the word before it (shell ``Ctrl+W``)."""
    trimmed = query.rstrip()
    cut = max(trimmed.rfind(" "), trimmed.rfind("/")) + 1
    return trimmed[:cut]


def event_for_key(key: str, query: str, page_rows: int = 10) -> PickerEvent | None:
    """Map one key token to an event, or ``None`` when the key is unbound.

    ``query`` is the current filter text; editing keys produce the full new
    query rather than a delta. Backspace on an empty query ascends.
    """
    page = max(1, page_rows)

    if key in {"ESC", "CTRL_C"}:
        return Cancel()
    if key == "ENTER":
        return Commit()
    if key == "TAB":
        return NextDirectory()
    if key == "LEFT":
        return Ascend()
    if key in {"UP", "CTRL_P"}:
        return SelectionMoved(-1, relative=True)
    if key in {"DOWN", "CTRL_N"}:
        return SelectionMoved(1, relative=True)
    if key in {"PAGE_UP", "CTRL_B"}:
        return SelectionMoved(-page, relative=True)
    if key in {"PAGE_DOWN", "CTRL_F"}:
        return SelectionMoved(page, relative=True)
    if key in {"HOME", "CTRL_A"}:
        return SelectionMoved(0)
    if key in {"END", "CTRL_E"}:
        return SelectionMoved(LAST_INDEX)
    if key == "BACKSPACE":
        if not query:
            return Ascend()
        return QueryChanged(query[:-1])
    if key == "CTRL_U":
        return QueryChanged("") if query else None
    if key == "CTRL_W":
        return QueryChanged(delete_last_word(query)) if query else None
    if len(key) == 1 and key.isprintable():
        return QueryChanged(query + key)
    return None


__all__ = [
    "delete_last_word",
    "event_for_key",
]
