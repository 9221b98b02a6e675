"""Public runtime entry points.

This package groups the terminal picker bootstrap (``run_picker``) and the
lower-level loop, host, and config pieces used by tests and the CLI.
"""

from __future__ import annotations


def run_picker(*args, **kwargs):
    """Lazily import picker bootstrap to keep ``termios`` out of plain imports."""
    from .app import run_picker as _run_picker

    return _run_picker(*args, **kwargs)


__all__ = ["run_picker"]
