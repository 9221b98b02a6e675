"""Display-width measurement and clipping for list labels.

File names may hold wide characters or raw control bytes; labels are made
safe to print and clipped by terminal cell width rather than code points.
"""

from __future__ import annotations

import unicodedata


def char_display_width(ch: str) -> int:
    """Return terminal column width for one printable character.

    Combining marks consume no columns and East Asian wide/fullwidth
    characters consume two.
    """
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def sanitize_label(text: str) -> str:
    """Replace control characters so a file name cannot emit escape codes."""
    return "".join(ch if ch.isprintable() else "?" for ch in text)


def display_width(text: str) -> int:
    return sum(char_display_width(ch) for ch in text)


def clip_to_width(text: str, max_cols: int) -> str:
    """Trim ``text`` to at most ``max_cols`` display columns."""
    if max_cols <= 0 or not text:
        return ""
    out: list[str] = []
    col = 0
    for ch in text:
        w = char_display_width(ch)
        if col + w > max_cols:
            break
        out.append(ch)
        col += w
    return "".join(out)


def pad_to_width(text: str, width: int) -> str:
    clipped = clip_to_width(text, width)
    return clipped + " " * max(0, width - display_width(clipped))


__all__ = [
    "char_display_width",
    "clip_to_width",
    "display_width",
    "pad_to_width",
    "sanitize_label",
]
