"""Flat, index-addressed node table for the project/task tree.

Nodes are stored once in report order (each project followed by its tasks)
and reference each other by position, so the tree is never copied.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .errors import FormatError
from .inventory import Project


@dataclass(frozen=True)
class TreeNode:
    """One project (depth 0) or task (depth 1) node."""

    identifier: str
    label: str
    depth: int
    parent: int | None
    children: tuple[int, ...] = ()

    @property
    def is_leaf(self) -> bool:
        return self.depth > 0


class TaskTree:
    """Immutable tree built from parsed projects."""

    def __init__(self, nodes: tuple[TreeNode, ...], roots: tuple[int, ...]) -> None:
        self._nodes = nodes
        self._roots = roots
        self._index_by_identifier: dict[str, int] = {}
        for idx, node in enumerate(nodes):
            if node.identifier in self._index_by_identifier:
                raise FormatError(f"duplicate tree identifier: {node.identifier!r}")
            self._index_by_identifier[node.identifier] = idx

    @classmethod
    def from_projects(cls, projects: Iterable[Project]) -> "TaskTree":
        """Lay out each project followed by its tasks, in report order."""
        nodes: list[TreeNode] = []
        roots: list[int] = []
        for project in projects:
            project_idx = len(nodes)
            roots.append(project_idx)
            child_indices = tuple(range(project_idx + 1, project_idx + 1 + len(project.tasks)))
            nodes.append(TreeNode(project.name, project.name, 0, None, child_indices))
            for task in project.tasks:
                nodes.append(TreeNode(task.identifier, task.label, 1, project_idx))
        return cls(tuple(nodes), tuple(roots))

    def __len__(self) -> int:
        return len(self._nodes)

    @property
    def roots(self) -> tuple[int, ...]:
        return self._roots

    def node(self, index: int) -> TreeNode:
        """Return the node stored at ``index``."""
        return self._nodes[index]

    def index_of(self, identifier: str) -> int | None:
        """Return the index of ``identifier`` or ``None`` if unknown."""
        return self._index_by_identifier.get(identifier)

    def path_of(self, index: int) -> list[str]:
        """Return identifiers from the top level down to ``index``."""
        path: list[str] = []
        current: int | None = index
        while current is not None:
            node = self._nodes[current]
            path.append(node.identifier)
            current = node.parent
        path.reverse()
        return path

    def resolve_path(self, path: list[str]) -> int | None:
        """Return the node index addressed by ``path`` or ``None`` if it does not exist."""
        if not path:
            return None
        index = self.index_of(path[-1])
        if index is None or self.path_of(index) != list(path):
            return None
        return index

    def visible_indices(self, opened: set[str]) -> list[int]:
        """Depth-first node order, descending only into opened projects."""
        visible: list[int] = []
        for root in self._roots:
            visible.append(root)
            node = self._nodes[root]
            if node.identifier in opened:
                visible.extend(node.children)
        return visible
