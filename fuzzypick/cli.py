"""Command-line front door for fuzzypick.

Parses CLI options, resolves the start directory and config preferences.
Then runs the interactive picker and prints or edits the chosen file.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .editor import launch_editor
from .picker import PickerState
from .render import available_theme_names
from .runtime import config, run_picker

CANCELLED_EXIT_CODE = 130
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _configure_logging(log_file: str | None) -> None:
    """Send debug logs to ``log_file``; the terminal itself belongs to the UI."""
    if not log_file:
        return
    logging.basicConfig(filename=log_file, level=logging.DEBUG, format=LOG_FORMAT)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fuzzypick",
        description="Pick a file by fuzzy-filtering directory listings in the terminal.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Directory to start in. Defaults to the last visited directory, then the current one.",
    )
    parser.add_argument(
        "--hidden",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Show dot-files (the choice is remembered).",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--edit", action="store_true", help="Open the chosen file in $EDITOR instead of printing it.")
    parser.add_argument("--log-file", metavar="PATH", default=None, help="Write debug logs to PATH.")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and run one picker session.

    Prints the committed file's absolute path on stdout (or launches the
    editor with ``--edit``). Cancelling exits with status 130.
    """
    args = build_parser().parse_args(argv)
    _configure_logging(args.log_file)

    start_directory: Path | None = None
    if args.path is not None:
        start_directory = Path(args.path).expanduser()
        if not start_directory.exists():
            raise SystemExit(f"Path not found: {start_directory}")
        if not start_directory.is_dir():
            raise SystemExit(f"Not a directory: {start_directory}")

    if args.hidden is None:
        show_hidden = config.load_show_hidden()
    else:
        show_hidden = args.hidden
        config.save_show_hidden(show_hidden)
    theme_name = args.theme if args.theme is not None else config.load_theme_name()

    try:
        outcome = run_picker(
            start_directory,
            show_hidden=show_hidden,
            theme_name=theme_name,
            no_color=args.no_color,
        )
    except OSError as exc:
        raise SystemExit(f"Cannot open terminal: {exc}") from exc

    if outcome.state is PickerState.CANCELLED:
        raise SystemExit(CANCELLED_EXIT_CODE)
    if outcome.state is not PickerState.COMMITTED or outcome.path is None:
        raise SystemExit(outcome.error or "No file selected.")

    if args.edit:
        error = launch_editor(outcome.path)
        if error:
            raise SystemExit(error)
        return
    sys.stdout.write(f"{outcome.path}\n")


if __name__ == "__main__":
    main()
