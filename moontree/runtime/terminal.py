"""Terminal control for the picker session.

Owns raw-mode lifecycle, alternate-screen switching, cursor visibility,
and mouse reporting.
"""

from __future__ import annotations

import contextlib
import os
import termios
import tty

# Alternate screen, hidden cursor, button and drag mouse reporting in SGR form.
ENTER_TUI_SEQUENCE = b"\x1b[?1049h\x1b[?25l\x1b[?1000h\x1b[?1002h\x1b[?1006h"
# Same modes switched off in reverse order.
LEAVE_TUI_SEQUENCE = b"\x1b[?1000l\x1b[?1002l\x1b[?1006l\x1b[?25h\x1b[?1049l"


class TerminalController:
    """Switch the controlling terminal into and out of picker mode.

    The tty attributes are captured at construction, so building a controller
    on something that is not a terminal raises ``termios.error`` before any
    mode change.
    """

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty attributes of ``stdin_fd`` for later restore."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd)

    def enable_tui_mode(self) -> None:
        """Switch stdin to raw mode and enter the alternate screen with mouse reporting."""
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        os.write(self.stdout_fd, ENTER_TUI_SEQUENCE)

    def disable_tui_mode(self) -> None:
        """Leave picker mode; tty attributes are restored even if the write fails."""
        try:
            os.write(self.stdout_fd, LEAVE_TUI_SEQUENCE)
        finally:
            termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    @contextlib.contextmanager
    def raw_mode(self):
        """Run the enclosed block in picker mode, restoring the terminal on any exit."""
        try:
            self.enable_tui_mode()
            yield
        finally:
            self.disable_tui_mode()
