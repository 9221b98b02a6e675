"""Row-diffing screen writer.

Keeps the last drawn frame and rewrites only rows whose content changed, so
moving the highlight or typing one character touches a handful of rows.
"""

from __future__ import annotations

from collections.abc import Callable

CLEAR_SCREEN = "\033[2J"
CLEAR_TO_EOL = "\033[K"
RESET = "\033[0m"


def _move_to_row(row: int) -> str:
    return f"\033[{row + 1};1H"


class ScreenBuffer:
    """Write frames through ``write`` touching only changed rows."""

    def __init__(self, write: Callable[[str], None]) -> None:
        self._write = write
        self._rows: list[str] | None = None

    def invalidate(self) -> None:
        """Forget the previous frame; the next draw repaints everything."""
        self._rows = None

    def draw(self, rows: list[str]) -> int:
        """Draw ``rows`` and return how many screen rows were rewritten."""
        out: list[str] = []
        previous = self._rows
        if previous is None:
            out.append(CLEAR_SCREEN)
            previous = []

        written = 0
        for idx, row in enumerate(rows):
            if idx < len(previous) and previous[idx] == row:
                continue
            out.append(f"{_move_to_row(idx)}{row}{RESET}{CLEAR_TO_EOL}")
            written += 1
        for idx in range(len(rows), len(previous)):
            out.append(f"{_move_to_row(idx)}{CLEAR_TO_EOL}")
            written += 1

        self._rows = list(rows)
        if out:
            self._write("".join(out))
        return written


__all__ = ["ScreenBuffer"]
