"""Pick list colors for entries by kind and recognized source language."""

from __future__ import annotations

from functools import lru_cache

from pygments.lexers import find_lexer_class_for_filename
from pygments.lexers.special import TextLexer

from ..file_model import DIRECTORY_MARKER, GO_UP_NAME
from .theme import UITheme


@lru_cache(maxsize=4096)
def is_source_file(name: str) -> bool:
    """Whether pygments knows a language lexer for ``name`` (plain text excluded)."""
    lexer_cls = find_lexer_class_for_filename(name)
    return lexer_cls is not None and lexer_cls is not TextLexer


def color_for_label(label: str, theme: UITheme) -> str:
    if label == GO_UP_NAME + DIRECTORY_MARKER:
        return theme.list_go_up
    if label.endswith(DIRECTORY_MARKER):
        return theme.list_dir
    if is_source_file(label):
        return theme.list_file_source
    return theme.list_file_default


__all__ = [
    "color_for_label",
    "is_source_file",
]
