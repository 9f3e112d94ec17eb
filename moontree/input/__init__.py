"""Input-layer public API: raw key decoding and tree key dispatch."""

from .keys import (
    CONFIRM_KEY,
    QUIT_KEYS,
    RESIZE_KEY,
    TOGGLE_KEYS,
    KeyComboBinding,
    KeyComboRegistry,
    KeyOutcome,
    TreeKeyHandler,
    parse_mouse_col_row,
)
from .reader import EOF_KEY, ESC_SEQUENCE_TIMEOUT_MS, _PENDING_BYTES, read_key

__all__ = [
    "read_key",
    "_PENDING_BYTES",
    "EOF_KEY",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "CONFIRM_KEY",
    "QUIT_KEYS",
    "RESIZE_KEY",
    "TOGGLE_KEYS",
    "KeyComboBinding",
    "KeyComboRegistry",
    "KeyOutcome",
    "TreeKeyHandler",
    "parse_mouse_col_row",
]
