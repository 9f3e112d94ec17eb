"""Task inventory model and report parser.

``parse_report`` converts ``moon query tasks`` output into ``Project``
records, each owning its ``Task`` records in report order.
"""

from __future__ import annotations

from .parser import parse_report
from .types import TASK_SEPARATOR, Project, Task

__all__ = [
    "Project",
    "Task",
    "TASK_SEPARATOR",
    "parse_report",
]
