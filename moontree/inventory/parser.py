"""Line scanner turning a tab-indented task report into projects.

Unindented lines open a project, tab-indented lines add tasks to it.
The last project is flushed at end of input, trailing blank line or not.
"""

from __future__ import annotations

from ..errors import FormatError
from .types import Project, Task

INDENT = "\t"


def parse_report(report: str) -> list[Project]:
    """Parse ``report`` into projects with their tasks in report order.

    Raises ``FormatError`` for a task line without a separator and for a task
    line that appears before any project header.
    """
    projects: list[Project] = []
    current_name: str | None = None
    current_tasks: list[Task] = []

    for line_number, line in enumerate(report.splitlines(), start=1):
        stripped = line.strip()
        if not stripped:
            continue

        if not line.startswith(INDENT):
            if current_name is not None:
                projects.append(Project(current_name, tuple(current_tasks)))
            current_name = stripped
            current_tasks = []
            continue

        if current_name is None:
            raise FormatError(f"task entry before any project: {stripped!r}", line_number, line)
        try:
            current_tasks.append(Task(current_name, stripped))
        except FormatError as exc:
            raise FormatError(exc.message, line_number, line) from exc

    if current_name is not None:
        projects.append(Project(current_name, tuple(current_tasks)))
    return projects
