"""moon build-tool collaborators: capture the task report and run a task."""

from __future__ import annotations

import logging
import subprocess

from .config import Settings
from .errors import ExecutionError

logger = logging.getLogger(__name__)

QUERY_TASKS_ARGS = ("query", "tasks")


def query_tasks(settings: Settings) -> str:
    """Return ``moon query tasks`` output captured in the repository root."""
    command = [settings.moon_bin, *QUERY_TASKS_ARGS]
    logger.debug("running %s in %s", command, settings.repo_root)
    try:
        proc = subprocess.run(
            command,
            cwd=settings.repo_root,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
    except OSError as exc:
        raise ExecutionError(f"failed to execute `{' '.join(command)}`: {exc}") from exc
    if proc.returncode != 0:
        detail = proc.stderr.strip() or f"exit status {proc.returncode}"
        raise ExecutionError(f"`{' '.join(command)}` failed: {detail}", returncode=proc.returncode)
    logger.debug("captured %d bytes of task report", len(proc.stdout))
    return proc.stdout


def run_task(settings: Settings, identifier: str) -> int:
    """Run ``moon run <identifier>`` attached to the terminal and return its exit status."""
    command = [settings.moon_bin, "run", identifier]
    logger.info("running %s in %s", command, settings.repo_root)
    try:
        proc = subprocess.run(command, cwd=settings.repo_root, check=False)
    except OSError as exc:
        raise ExecutionError(f"failed to execute `{' '.join(command)}`: {exc}") from exc
    logger.info("%s exited with status %d", identifier, proc.returncode)
    return proc.returncode
