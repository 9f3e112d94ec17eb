"""Cursor, open-set, and scroll state for the task tree view.

``TreeState`` only ever mutates its own fields; the ``TaskTree`` it navigates
is read-only. Every operation returns whether visible state changed so the
runtime loop can decide when a redraw is needed.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .tree_model import TaskTree

PAGE_SCROLL_ROWS = 3


@dataclass
class TreeState:
    """Selection path, opened projects, and viewport bookkeeping.

    ``rendered_rows`` and ``rendered_top`` are written by the renderer so mouse
    clicks can be mapped back to nodes. ``viewport_height`` is the number of
    tree rows the last frame could show.
    """

    tree: TaskTree
    selected: list[str] = field(default_factory=list)
    opened: set[str] = field(default_factory=set)
    offset: int = 0
    viewport_height: int = 0
    rendered_top: int = 0
    rendered_rows: list[str] = field(default_factory=list)
    ensure_selected_in_view: bool = False

    def visible(self) -> list[int]:
        """Node indices in display order for the current open set."""
        return self.tree.visible_indices(self.opened)

    def selected_index(self) -> int | None:
        """Index of the selected node, or ``None`` when nothing valid is selected."""
        return self.tree.resolve_path(self.selected)

    def select(self, path: list[str]) -> bool:
        """Replace the selection path and ask the next render to keep it in view."""
        self.ensure_selected_in_view = True
        changed = self.selected != path
        self.selected = list(path)
        return changed

    def select_index(self, index: int) -> bool:
        """Select the node at ``index`` by its full path."""
        return self.select(self.tree.path_of(index))

    def open(self, identifier: str) -> bool:
        """Open a project; tasks and already opened projects are left alone."""
        index = self.tree.index_of(identifier)
        if index is None or self.tree.node(index).is_leaf:
            return False
        if identifier in self.opened:
            return False
        self.opened.add(identifier)
        return True

    def close(self, identifier: str) -> bool:
        """Close ``identifier`` if it is open."""
        if identifier not in self.opened:
            return False
        self.opened.discard(identifier)
        return True

    def toggle_selected(self) -> bool:
        """Open or close the selected project; tasks and no selection are no-ops."""
        index = self.selected_index()
        if index is None or self.tree.node(index).is_leaf:
            return False
        self.ensure_selected_in_view = True
        identifier = self.tree.node(index).identifier
        if identifier in self.opened:
            return self.close(identifier)
        return self.open(identifier)

    def key_left(self) -> bool:
        """Close the selected project, otherwise move selection to the parent."""
        if not self.selected:
            return False
        self.ensure_selected_in_view = True
        if self.close(self.selected[-1]):
            return True
        self.selected.pop()
        return True

    def key_right(self) -> bool:
        """Open the selected project, otherwise descend to its first child."""
        index = self.selected_index()
        if index is None:
            return False
        node = self.tree.node(index)
        if node.is_leaf:
            return False
        self.ensure_selected_in_view = True
        if self.open(node.identifier):
            return True
        if not node.children:
            return False
        return self.select_index(node.children[0])

    def _select_relative(self, step: int) -> bool:
        visible = self.visible()
        if not visible:
            return False
        current = self.selected_index()
        if current is None or current not in visible:
            new_position = 0 if step > 0 else len(visible) - 1
        else:
            new_position = max(0, min(len(visible) - 1, visible.index(current) + step))
        return self.select_index(visible[new_position])

    def key_down(self) -> bool:
        """Select the next visible node, or the first one when nothing is selected."""
        return self._select_relative(1)

    def key_up(self) -> bool:
        """Select the previous visible node, or the last one when nothing is selected."""
        return self._select_relative(-1)

    def select_first(self) -> bool:
        """Select the first visible node."""
        visible = self.visible()
        if not visible:
            return False
        return self.select_index(visible[0])

    def select_last(self) -> bool:
        """Select the last visible node."""
        visible = self.visible()
        if not visible:
            return False
        return self.select_index(visible[-1])

    def max_offset(self) -> int:
        """Largest scroll offset that still fills the viewport."""
        return max(0, len(self.visible()) - max(1, self.viewport_height))

    def scroll_down(self, lines: int) -> bool:
        """Scroll the viewport down without moving the selection."""
        before = self.offset
        self.offset = min(self.max_offset(), self.offset + lines)
        self.ensure_selected_in_view = False
        return self.offset != before

    def scroll_up(self, lines: int) -> bool:
        """Scroll the viewport up without moving the selection."""
        before = self.offset
        self.offset = max(0, self.offset - lines)
        self.ensure_selected_in_view = False
        return self.offset != before

    def rendered_at(self, row: int) -> str | None:
        """Return the identifier of the node drawn on screen ``row`` (1-based)."""
        position = row - self.rendered_top
        if 0 <= position < len(self.rendered_rows):
            return self.rendered_rows[position]
        return None

    def click_at(self, col: int, row: int) -> bool:
        """Select the node drawn at ``row``; clicking the selected project toggles it."""
        if col < 1:
            return False
        identifier = self.rendered_at(row)
        if identifier is None:
            return False
        index = self.tree.index_of(identifier)
        if index is None:
            return False
        path = self.tree.path_of(index)
        if path == self.selected:
            return self.toggle_selected()
        return self.select(path)

    def clamp_offset(self) -> None:
        """Bring ``offset`` back into range and follow the selection when requested."""
        visible = self.visible()
        height = max(1, self.viewport_height)
        if self.ensure_selected_in_view:
            current = self.selected_index()
            if current is not None and current in visible:
                position = visible.index(current)
                if position < self.offset:
                    self.offset = position
                elif position >= self.offset + height:
                    self.offset = position - height + 1
            self.ensure_selected_in_view = False
        self.offset = max(0, min(self.offset, max(0, len(visible) - height)))
