"""Editor launch helper for committed files.

Runs ``$EDITOR`` on the chosen path once the picker has left the TUI.
Returns an error message string instead of raising for CLI-friendly handling.
"""

from __future__ import annotations

import os
import shlex
import subprocess
from pathlib import Path


def launch_editor(target: Path) -> str | None:
    editor_env = os.environ.get("EDITOR", "").strip()
    if not editor_env:
        return "Cannot edit: $EDITOR is not set."
    cmd = shlex.split(editor_env)
    if not cmd:
        return "Cannot edit: $EDITOR is empty."

    try:
        subprocess.run([*cmd, str(target)], check=False)
    except OSError as exc:
        return f"Failed to launch editor: {exc}"
    return None
