"""Rendering helpers for the terminal picker surface."""

from __future__ import annotations

from .list_view import (
    PROMPT,
    format_entry_row,
    format_prompt_row,
    format_status_row,
    list_window_rows,
    scroll_start,
)
from .screen import ScreenBuffer
from .theme import UITheme, available_theme_names, resolve_theme

__all__ = [
    "PROMPT",
    "ScreenBuffer",
    "UITheme",
    "available_theme_names",
    "format_entry_row",
    "format_prompt_row",
    "format_status_row",
    "list_window_rows",
    "resolve_theme",
    "scroll_start",
]
