"""Logging setup.

The picker owns stdout, so records go to a file when one is requested and
to stderr otherwise.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(log_file: Path | None = None, verbose: bool = False) -> logging.Logger:
    """Configure the ``moontree`` logger and return it.

    With ``log_file`` everything from DEBUG up is written there. Without it,
    stderr receives WARNING and above, or DEBUG and above when ``verbose``.
    """
    logger = logging.getLogger("moontree")
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
        existing.close()

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
        level = logging.DEBUG
    else:
        handler = logging.StreamHandler(sys.stderr)
        level = logging.DEBUG if verbose else logging.WARNING

    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    handler.setLevel(level)
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger
