"""Command-line front door for moontree.

Resolves settings, captures and parses the moon task report, runs the
interactive picker, and hands the chosen task to ``moon run``.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
import termios
from pathlib import Path

from .config import REPO_ENV_VAR, resolve_settings
from .errors import MoontreeError
from .inventory import parse_report
from .log import setup_logging
from .moon import query_tasks, run_task
from .render import format_project_listing
from .runtime import run_picker
from .tree_model import TaskTree
from .ui_theme import available_theme_names, resolve_theme

logger = logging.getLogger(__name__)

NON_ZERO_STATUS_MESSAGE = "Command executed with a non-zero status"


def _fd_is_tty(stream) -> bool:
    try:
        return os.isatty(stream.fileno())
    except (AttributeError, OSError, ValueError):
        return False


def exit_status(returncode: int) -> int:
    """Return the shell-style exit status for a child return code.

    A child killed by signal N reports ``-N``; shells report that as ``128 + N``.
    """
    if returncode < 0:
        return 128 - returncode
    return returncode


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="moontree",
        description="Browse moon workspace projects and tasks as a tree and run the chosen task.",
    )
    parser.add_argument(
        "--repo",
        default=None,
        help=f"Workspace root (default: ${REPO_ENV_VAR}).",
    )
    parser.add_argument("--moon-bin", default=None, help="moon executable to invoke (default: moon).")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--list", action="store_true", help="Print the task tree and exit without the picker.")
    parser.add_argument("--log-file", type=Path, default=None, help="Write debug logs to this file.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr.")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments, pick a task interactively, and run it.

    Startup failures (missing workspace root, unreadable report, moon not
    runnable) exit with a one-line message. A task that exits non-zero is
    reported and its status becomes the process exit status.
    """
    args = build_parser().parse_args(argv)
    setup_logging(args.log_file, args.verbose)

    try:
        settings = resolve_settings(
            os.environ,
            repo=args.repo,
            moon_bin=args.moon_bin,
            theme=args.theme,
        )
        projects = parse_report(query_tasks(settings))
        tree = TaskTree.from_projects(projects)
    except MoontreeError as exc:
        raise SystemExit(exc.message) from exc
    logger.debug("parsed %d projects, %d nodes", len(projects), len(tree))

    if args.list or not _fd_is_tty(sys.stdin):
        sys.stdout.write(format_project_listing(projects))
        return

    theme = resolve_theme(settings.theme, no_color=args.no_color or not _fd_is_tty(sys.stdout))
    try:
        chosen = run_picker(tree, theme)
    except (OSError, EOFError, termios.error) as exc:
        raise SystemExit(f"Terminal error: {exc}") from exc
    if chosen is None:
        return

    try:
        status = run_task(settings, chosen)
    except MoontreeError as exc:
        raise SystemExit(exc.message) from exc
    if status != 0:
        print(NON_ZERO_STATUS_MESSAGE, file=sys.stderr)
        raise SystemExit(exit_status(status))


if __name__ == "__main__":
    main()
