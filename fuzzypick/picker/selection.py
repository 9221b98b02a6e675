"""Selected-row bookkeeping for the visible entry list."""

from __future__ import annotations

from collections.abc import Callable


class SelectionController:
    """Own the highlighted index and keep it inside the visible list bounds.

    ``visible_count`` is read on every move so the controller never caches a
    stale list length. Rendering the highlight is the caller's job; every
    method reports whether the index actually changed.
    """

    def __init__(self, visible_count: Callable[[], int]) -> None:
        self._visible_count = visible_count
        self.selected_index = 0

    def _bounded(self, target: int) -> int:
        count = self._visible_count()
        if count <= 0:
            return 0
        return max(0, min(target, count - 1))

    def move_to(self, target: int) -> bool:
        """Clamp ``target`` into ``[0, count - 1]`` (``0`` when empty) and select it."""
        previous = self.selected_index
        self.selected_index = self._bounded(target)
        return self.selected_index != previous

    def move_by(self, delta: int) -> bool:
        return self.move_to(self.selected_index + delta)

    def reset_to_top(self) -> bool:
        return self.move_to(0)

    def clamp(self) -> bool:
        """Re-apply bounds after the visible list changed underneath."""
        return self.move_to(self.selected_index)


__all__ = ["SelectionController"]
