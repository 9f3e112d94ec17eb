"""Main interactive event loop for the task picker.

Polls for one input event at a time, dispatches it, and redraws behind a
leading-edge debounce so bursts of input collapse into a single frame.
The loop returns exactly once: the chosen task identifier, or ``None``.
"""

from __future__ import annotations

import logging
import math
import shutil
import time
from collections.abc import Callable
from dataclasses import dataclass

from ..input import EOF_KEY, RESIZE_KEY, KeyOutcome, read_key
from .terminal import TerminalController

logger = logging.getLogger(__name__)

# 60 frames per second.
DEBOUNCE_SECONDS = 0.016
IDLE_POLL_MS = 120


@dataclass(frozen=True)
class RuntimeLoopTiming:
    """Timing constants controlling interactive loop behavior."""

    debounce_seconds: float = DEBOUNCE_SECONDS
    idle_poll_ms: int = IDLE_POLL_MS


@dataclass(frozen=True)
class RuntimeLoopCallbacks:
    """Injected operations used by ``run_main_loop``."""

    draw: Callable[[int, int], None]
    handle_key: Callable[[str], KeyOutcome]


class RedrawDebounce:
    """Leading-edge redraw scheduler.

    ``mark`` starts the window on the first state change since the last
    redraw; later marks inside the window are absorbed. ``due`` turns true
    once the window has fully elapsed.
    """

    def __init__(self, window_seconds: float, monotonic: Callable[[], float] = time.monotonic) -> None:
        self.window_seconds = window_seconds
        self._monotonic = monotonic
        self._started: float | None = None

    @property
    def pending(self) -> bool:
        return self._started is not None

    def mark(self) -> None:
        """Start the window unless one is already running."""
        if self._started is None:
            self._started = self._monotonic()

    def timeout_ms(self, idle_ms: int) -> int:
        """Poll timeout: the rest of the window, or ``idle_ms`` when nothing is pending."""
        if self._started is None:
            return idle_ms
        remaining = self.window_seconds - (self._monotonic() - self._started)
        return max(0, math.ceil(remaining * 1000.0))

    def due(self) -> bool:
        """Whether a pending window has fully elapsed."""
        if self._started is None:
            return False
        return self._monotonic() - self._started >= self.window_seconds

    def reset(self) -> None:
        """Forget the pending window after a redraw."""
        self._started = None


def run_main_loop(
    terminal: TerminalController,
    stdin_fd: int,
    timing: RuntimeLoopTiming,
    callbacks: RuntimeLoopCallbacks,
    monotonic: Callable[[], float] = time.monotonic,
) -> str | None:
    """Run the picker until a task is chosen or the user quits.

    Terminal mode is restored on every exit path. ``OSError`` from reading
    input, and ``EOFError`` once input is closed, propagate after that.
    """
    debounce = RedrawDebounce(timing.debounce_seconds, monotonic)
    skip_next_lf = False

    with terminal.raw_mode():
        term = shutil.get_terminal_size((80, 24))
        size = (term.columns, term.lines)
        callbacks.draw(*size)

        while True:
            try:
                key = read_key(stdin_fd, timeout_ms=debounce.timeout_ms(timing.idle_poll_ms))
            except KeyboardInterrupt:
                continue
            if key == EOF_KEY:
                raise EOFError("terminal input closed")

            term = shutil.get_terminal_size((80, 24))
            if (term.columns, term.lines) != size:
                size = (term.columns, term.lines)
                if callbacks.handle_key(RESIZE_KEY).changed:
                    debounce.mark()

            # CR LF from one Enter press counts once; a lone LF is Ctrl-J.
            if key == "ENTER_LF" and skip_next_lf:
                skip_next_lf = False
                key = ""
            elif key == "ENTER_CR":
                key = "ENTER"
                skip_next_lf = True
            elif key:
                skip_next_lf = False
                if key == "ENTER_LF":
                    key = "CTRL_J"

            if key:
                outcome = callbacks.handle_key(key)
                if outcome.done:
                    logger.debug("picker finished with %r", outcome.chosen)
                    return outcome.chosen
                if outcome.changed:
                    debounce.mark()

            if debounce.due():
                callbacks.draw(*size)
                debounce.reset()
