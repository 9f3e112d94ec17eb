"""Frame composition for the task tree view.

Draws a bordered, titled box with one row per visible node, a ``>> ``
highlight on the selected row, and a scrollbar on the right border. The
renderer records which node landed on which screen row so clicks can be
mapped back to the tree.
"""

from __future__ import annotations

import os

from .ansi import clip_ansi_line, display_width, pad_ansi_line
from .inventory import Project
from .tree_model import TreeNode
from .tree_state import TreeState
from .ui_theme import DEFAULT_THEME, UITheme

TITLE = "Workspace projects"
HINT = "q quit · enter run · space toggle"
HIGHLIGHT_SYMBOL = ">> "
OPEN_MARKER = "▼ "
CLOSED_MARKER = "▶ "
LEAF_MARKER = "  "
# Screen row (1-based) of the first tree row, just below the top border.
FIRST_TREE_ROW = 2


def scrollbar_thumb(total: int, height: int, offset: int) -> tuple[int, int] | None:
    """Return ``(start, length)`` of the thumb in rows, or ``None`` if all rows fit."""
    if height <= 0 or total <= height:
        return None
    length = max(1, (height * height) // total)
    max_offset = total - height
    start = ((height - length) * min(offset, max_offset)) // max_offset
    return start, length


class TreeViewRenderer:
    """Compose full-screen frames for a ``TreeState``."""

    def __init__(self, theme: UITheme | None = None) -> None:
        self.theme = theme or DEFAULT_THEME

    def _styled(self, style: str, text: str) -> str:
        if not style:
            return text
        return f"{style}{text}{self.theme.reset}"

    def _node_text(self, node: TreeNode, opened: set[str], styled: bool) -> str:
        """Return the row text for ``node``, styled unless it sits under the highlight."""
        indent = "  " * node.depth
        if not node.is_leaf:
            marker = OPEN_MARKER if node.identifier in opened else CLOSED_MARKER
            if not styled:
                return f"{indent}{marker}{node.label}"
            return f"{indent}{self._styled(self.theme.marker, marker)}{self._styled(self.theme.project, node.label)}"

        name, sep, command = node.label.partition("|")
        if not styled:
            return f"{indent}{LEAF_MARKER}{node.label}"
        text = self._styled(self.theme.task_name, name.rstrip())
        if sep:
            text += " " + self._styled(self.theme.task_command, f"| {command.strip()}")
        return f"{indent}{LEAF_MARKER}{text}"

    def _border_line(self, left: str, right: str, label: str, label_style: str, inner: int) -> str:
        """Return a top or bottom border with ``label`` inset after the corner."""
        label = clip_ansi_line(label, max(0, inner - 2))
        fill = "─" * max(0, inner - display_width(label) - (2 if label else 0))
        if label:
            body = self._styled(self.theme.border, "─") + self._styled(label_style, label) + self._styled(
                self.theme.border, "─" + fill
            )
        else:
            body = self._styled(self.theme.border, fill)
        return self._styled(self.theme.border, left) + body + self._styled(self.theme.border, right)

    def render(self, state: TreeState, columns: int, lines: int) -> str:
        """Return one ANSI frame and record row geometry on ``state``."""
        width = max(6, columns - 1)
        inner = width - 2
        height = max(1, lines - 2)

        state.viewport_height = height
        state.clamp_offset()
        visible = state.visible()
        shown = visible[state.offset : state.offset + height]
        state.rendered_top = FIRST_TREE_ROW
        state.rendered_rows = [state.tree.node(idx).identifier for idx in shown]

        selected = state.selected_index()
        thumb = scrollbar_thumb(len(visible), height, state.offset)
        row_width = inner - len(HIGHLIGHT_SYMBOL)

        out: list[str] = ["\033[H\033[J"]
        out.append(self._border_line("┌", "┐", f" {TITLE} ", self.theme.title, inner))
        for row in range(height):
            if row < len(shown):
                node = state.tree.node(shown[row])
                if shown[row] == selected:
                    text = HIGHLIGHT_SYMBOL + pad_ansi_line(self._node_text(node, state.opened, False), row_width)
                    cell = self._styled(self.theme.highlight, text)
                else:
                    cell = " " * len(HIGHLIGHT_SYMBOL) + pad_ansi_line(
                        self._node_text(node, state.opened, True), row_width
                    )
            else:
                cell = " " * inner
            if thumb is not None and thumb[0] <= row < thumb[0] + thumb[1]:
                right = self._styled(self.theme.scrollbar_thumb, "█")
            else:
                right = self._styled(self.theme.border, "│")
            out.append("\r\n" + self._styled(self.theme.border, "│") + cell + right)
        out.append("\r\n" + self._border_line("└", "┘", f" {HINT} ", self.theme.hint, inner))
        return "".join(out)

    def draw(self, state: TreeState, stdout_fd: int, columns: int, lines: int) -> None:
        """Render ``state`` and write the frame to ``stdout_fd``."""
        frame = self.render(state, columns, lines)
        os.write(stdout_fd, frame.encode("utf-8", errors="replace"))


def format_project_listing(projects: list[Project]) -> str:
    """Plain indented listing used when no interactive terminal is available."""
    out: list[str] = []
    for project in projects:
        out.append(project.name)
        out.extend(f"  {task.identifier}\t{task.label}" for task in project.tasks)
    return "".join(f"{line}\n" for line in out)
