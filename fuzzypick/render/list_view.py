"""Row formatting and viewport math for the picker screen.

Screen layout: row 0 is the query prompt, the last row is the status line,
and everything in between is the entry list window.
"""

from __future__ import annotations

from .file_colors import color_for_label
from .text import clip_to_width, display_width, pad_to_width, sanitize_label
from .theme import UITheme

PROMPT = "> "
SELECTED_MARKER = "▌"
UNSELECTED_MARKER = " "


def list_window_rows(screen_rows: int) -> int:
    """Rows available for entries once prompt and status rows are reserved."""
    return max(1, screen_rows - 2)


def scroll_start(selected: int, start: int, visible_rows: int, total: int) -> int:
    """Return a window start that keeps ``selected`` inside the visible rows."""
    rows = max(1, visible_rows)
    if selected < start:
        start = selected
    elif selected >= start + rows:
        start = selected - rows + 1
    return max(0, min(start, max(0, total - rows)))


def format_prompt_row(query: str, theme: UITheme, width: int) -> str:
    text_width = max(0, width - len(PROMPT) - 1)
    shown = sanitize_label(query)
    # Keep the tail of long queries visible next to the cursor.
    while display_width(shown) > text_width and shown:
        shown = shown[1:]
    cursor = f"{theme.cursor} {theme.reset}" if theme.cursor else "_"
    return f"{theme.prompt}{PROMPT}{theme.reset}{theme.query}{shown}{theme.reset}{cursor}"


def format_entry_row(label: str, theme: UITheme, width: int, selected: bool) -> str:
    marker = SELECTED_MARKER if selected else UNSELECTED_MARKER
    body_width = max(0, width - 2)
    text = clip_to_width(sanitize_label(label), body_width)
    color = color_for_label(label, theme)
    if selected:
        if theme.reverse:
            body = f"{theme.reverse}{color}{pad_to_width(text, body_width)}{theme.reset}"
        else:
            body = text
        return f"{theme.selected_marker}{marker}{theme.reset} {body}"
    return f"{marker} {color}{text}{theme.reset}"


def format_status_row(
    title: str,
    count_text: str,
    theme: UITheme,
    width: int,
    message: str = "",
) -> str:
    """Status line: directory (or error message) left, position counter right."""
    usable = max(1, width - 1)
    right = clip_to_width(count_text, usable)
    left_limit = max(0, usable - display_width(right) - 1)
    if message:
        left = clip_to_width(sanitize_label(message), left_limit)
        left_color = theme.status_error
    else:
        left = clip_to_width(sanitize_label(title), left_limit)
        left_color = theme.status_title
    gap = " " * max(0, usable - display_width(left) - display_width(right))
    return f"{left_color}{left}{theme.reset}{gap}{theme.status_count}{right}{theme.reset}"


__all__ = [
    "PROMPT",
    "format_entry_row",
    "format_prompt_row",
    "format_status_row",
    "list_window_rows",
    "scroll_start",
]
