"""Keyboard and mouse dispatch for the task tree view."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ..tree_state import PAGE_SCROLL_ROWS, TreeState

QUIT_KEYS = ("q", "CTRL_C")
CONFIRM_KEY = "ENTER"
TOGGLE_KEYS = (" ", "CTRL_J")
RESIZE_KEY = "RESIZE"


@dataclass(frozen=True)
class KeyOutcome:
    """Result of handling one input event.

    ``changed`` requests a redraw. ``done`` ends the session, with ``chosen``
    holding the identifier to hand to ``moon run`` or ``None`` for a plain quit.
    """

    changed: bool = False
    done: bool = False
    chosen: str | None = None


@dataclass(frozen=True)
class KeyComboBinding:
    """Mapping from one or more key tokens to a state operation."""

    combos: tuple[str, ...]
    handler: Callable[[], bool]


class KeyComboRegistry:
    """Exact-match key token to handler table."""

    def __init__(self) -> None:
        self._handlers: dict[str, Callable[[], bool]] = {}

    def register_bindings(self, *bindings: KeyComboBinding) -> KeyComboRegistry:
        """Register all combos of each binding and return the registry."""
        for binding in bindings:
            for combo in binding.combos:
                self._handlers[combo] = binding.handler
        return self

    def dispatch(self, key: str) -> bool | None:
        """Run the handler bound to ``key``; ``None`` means the key is unbound."""
        handler = self._handlers.get(key)
        if handler is None:
            return None
        return handler()


def parse_mouse_col_row(mouse_key: str) -> tuple[int | None, int | None]:
    """Return ``(col, row)`` from a ``MOUSE_*:col:row`` token."""
    parts = mouse_key.split(":")
    if len(parts) < 3:
        return None, None
    try:
        return int(parts[1]), int(parts[2])
    except ValueError:
        return None, None


class TreeKeyHandler:
    """Map key tokens onto ``TreeState`` operations."""

    def __init__(self, state: TreeState) -> None:
        self.state = state
        self._registry = KeyComboRegistry().register_bindings(
            KeyComboBinding(TOGGLE_KEYS, state.toggle_selected),
            KeyComboBinding(("LEFT", "h"), state.key_left),
            KeyComboBinding(("RIGHT", "l"), state.key_right),
            KeyComboBinding(("DOWN", "j"), state.key_down),
            KeyComboBinding(("UP", "k"), state.key_up),
            KeyComboBinding(("ESC",), lambda: state.select([])),
            KeyComboBinding(("HOME",), state.select_first),
            KeyComboBinding(("END",), state.select_last),
            KeyComboBinding(("PAGE_DOWN",), lambda: state.scroll_down(PAGE_SCROLL_ROWS)),
            KeyComboBinding(("PAGE_UP",), lambda: state.scroll_up(PAGE_SCROLL_ROWS)),
            KeyComboBinding((RESIZE_KEY,), lambda: True),
        )

    def _confirm(self) -> KeyOutcome:
        """Step right, then finish with the last selected identifier if anything is selected."""
        changed = self.state.key_right()
        if self.state.selected:
            return KeyOutcome(changed=changed, done=True, chosen=self.state.selected[-1])
        return KeyOutcome(changed=changed)

    def _handle_mouse(self, key: str) -> bool:
        """Route wheel and left-press tokens; other mouse events are ignored."""
        if key.startswith("MOUSE_WHEEL_DOWN:"):
            return self.state.scroll_down(1)
        if key.startswith("MOUSE_WHEEL_UP:"):
            return self.state.scroll_up(1)
        if key.startswith("MOUSE_LEFT_DOWN:"):
            col, row = parse_mouse_col_row(key)
            if col is None or row is None:
                return False
            return self.state.click_at(col, row)
        return False

    def handle(self, key: str) -> KeyOutcome:
        """Apply one key token and report what the loop should do next."""
        if key in QUIT_KEYS:
            return KeyOutcome(done=True)
        if key == CONFIRM_KEY:
            return self._confirm()
        if key.startswith("MOUSE"):
            return KeyOutcome(changed=self._handle_mouse(key))
        changed = self._registry.dispatch(key)
        return KeyOutcome(changed=bool(changed))
