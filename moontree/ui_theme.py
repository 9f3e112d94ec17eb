"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the tree view chrome, rows, and highlight.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the tree renderer."""

    name: str
    reset: str
    border: str
    title: str
    hint: str
    marker: str
    project: str
    task_name: str
    task_command: str
    highlight: str
    scrollbar_thumb: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    border="\033[38;5;245m",
    title="\033[1;38;5;252m",
    hint="\033[2;38;5;250m",
    marker="\033[38;5;44m",
    project="\033[1;34m",
    task_name="\033[38;5;252m",
    task_command="\033[2;38;5;250m",
    # Black on light green, bold.
    highlight="\033[1;30;102m",
    scrollbar_thumb="\033[38;5;250m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    border="\033[2;38;5;31m",
    title="\033[1;38;5;45m",
    hint="\033[2;38;5;110m",
    marker="\033[38;5;39m",
    project="\033[1;38;5;45m",
    task_name="\033[38;5;153m",
    task_command="\033[2;38;5;110m",
    highlight="\033[1;38;5;16;48;5;45m",
    scrollbar_thumb="\033[38;5;39m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    border="",
    title="",
    hint="",
    marker="",
    project="",
    task_name="",
    task_command="",
    highlight="",
    scrollbar_thumb="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    candidate = str(name or "").strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
