"""Exception hierarchy for moontree.

Every error the CLI turns into a one-line startup failure derives from
``MoontreeError``. Terminal I/O failures stay plain ``OSError``.
"""

from __future__ import annotations


class MoontreeError(Exception):
    """Base class for moontree errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(message={self.message!r})"


class ConfigError(MoontreeError):
    """Repository root missing or unusable."""


class FormatError(MoontreeError):
    """Malformed task report or conflicting node identifiers."""

    def __init__(self, message: str, line_number: int | None = None, line: str | None = None) -> None:
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number
        self.line = line


class ExecutionError(MoontreeError):
    """The build tool could not be spawned or failed to produce a report."""

    def __init__(self, message: str, returncode: int | None = None) -> None:
        super().__init__(message)
        self.returncode = returncode


__all__ = [
    "MoontreeError",
    "ConfigError",
    "FormatError",
    "ExecutionError",
]
