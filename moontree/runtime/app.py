"""Picker bootstrap: wire tree state, renderer, key handler, and terminal."""

from __future__ import annotations

import sys

from ..input import TreeKeyHandler
from ..render import TreeViewRenderer
from ..tree_model import TaskTree
from ..tree_state import TreeState
from ..ui_theme import UITheme
from .loop import RuntimeLoopCallbacks, RuntimeLoopTiming, run_main_loop
from .terminal import TerminalController


def run_picker(tree: TaskTree, theme: UITheme | None = None) -> str | None:
    """Run the interactive picker on the process tty and return the chosen identifier."""
    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    state = TreeState(tree)
    renderer = TreeViewRenderer(theme)
    handler = TreeKeyHandler(state)

    def draw(columns: int, lines: int) -> None:
        renderer.draw(state, stdout_fd, columns, lines)

    terminal = TerminalController(stdin_fd, stdout_fd)
    return run_main_loop(
        terminal=terminal,
        stdin_fd=stdin_fd,
        timing=RuntimeLoopTiming(),
        callbacks=RuntimeLoopCallbacks(draw=draw, handle_key=handler.handle),
    )
