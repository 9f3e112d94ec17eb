"""Display-width helpers for ANSI-styled terminal text."""

from __future__ import annotations

import re
import unicodedata
from collections.abc import Iterator

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")


def char_display_width(ch: str) -> int:
    """Return terminal columns used by ``ch`` (0 for combining, 2 for wide)."""
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def _cells(text: str) -> Iterator[tuple[str, int]]:
    """Yield ``(piece, columns)``; escape sequences come through whole with 0 columns."""
    i = 0
    while i < len(text):
        if text[i] == "\x1b":
            match = ANSI_ESCAPE_RE.match(text, i)
            if match:
                yield match.group(0), 0
                i = match.end()
                continue
        yield text[i], char_display_width(text[i])
        i += 1


def display_width(text: str) -> int:
    """Return terminal column width of ``text`` ignoring escape sequences."""
    return sum(cols for _piece, cols in _cells(text))


def clip_ansi_line(text: str, max_cols: int) -> str:
    """Trim a styled line to at most ``max_cols`` display columns.

    Escape sequences before the cut are kept verbatim. A wide character that
    would straddle the limit is dropped.
    """
    out: list[str] = []
    used = 0
    for piece, cols in _cells(text):
        if used >= max_cols or used + cols > max_cols:
            break
        out.append(piece)
        used += cols
    return "".join(out)


def pad_ansi_line(text: str, cols: int) -> str:
    """Clip ``text`` to ``cols`` columns and right-pad it with spaces."""
    clipped = clip_ansi_line(text, cols)
    return clipped + " " * max(0, cols - display_width(clipped))
