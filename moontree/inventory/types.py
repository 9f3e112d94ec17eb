"""Project and task records parsed from a ``moon query tasks`` report."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..errors import FormatError

TASK_SEPARATOR = "|"


@dataclass(frozen=True)
class Task:
    """One runnable task row.

    ``label`` is the trimmed report entry (``":build | make"``). ``identifier``
    is derived from the owning project name and the part of the label before
    the first separator; it is what ``moon run`` receives.
    """

    project: str
    label: str
    name: str = field(init=False)
    command: str = field(init=False)
    identifier: str = field(init=False)

    def __post_init__(self) -> None:
        task_name, sep, command = self.label.partition(TASK_SEPARATOR)
        if not sep:
            raise FormatError(f"task entry has no {TASK_SEPARATOR!r} separator: {self.label!r}", line=self.label)
        name = task_name.strip()
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "command", command.strip())
        object.__setattr__(self, "identifier", f"{self.project}{name}")


@dataclass(frozen=True)
class Project:
    """Top-level group of tasks, in report order."""

    name: str
    tasks: tuple[Task, ...] = ()
