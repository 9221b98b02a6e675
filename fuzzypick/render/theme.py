"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the prompt, entry list, and status row.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    reverse: str
    prompt: str
    query: str
    cursor: str
    list_dir: str
    list_go_up: str
    list_file_source: str
    list_file_default: str
    selected_marker: str
    status_title: str
    status_count: str
    status_error: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    reverse="\033[7m",
    prompt="\033[38;5;44m",
    query="\033[1;38;5;81m",
    cursor="\033[7m",
    list_dir="\033[1;34m",
    list_go_up="\033[2;38;5;250m",
    list_file_source="\033[38;5;110m",
    list_file_default="\033[38;5;252m",
    selected_marker="\033[38;5;81m",
    status_title="\033[2;38;5;250m",
    status_count="\033[38;5;229m",
    status_error="\033[1;38;5;203m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    reverse="\033[7m",
    prompt="\033[38;5;39m",
    query="\033[1;38;5;45m",
    cursor="\033[7m",
    list_dir="\033[1;38;5;45m",
    list_go_up="\033[2;38;5;110m",
    list_file_source="\033[38;5;117m",
    list_file_default="\033[38;5;252m",
    selected_marker="\033[38;5;45m",
    status_title="\033[2;38;5;110m",
    status_count="\033[38;5;153m",
    status_error="\033[1;38;5;210m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    reverse="",
    prompt="",
    query="",
    cursor="",
    list_dir="",
    list_go_up="",
    list_file_source="",
    list_file_default="",
    selected_marker="",
    status_title="",
    status_count="",
    status_error="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Resolve a theme object; ``no_color`` always yields the plain palette."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "UITheme",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
