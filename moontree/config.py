"""Startup settings resolution.

The repository root comes from ``--repo`` or the ``MOON`` environment
variable. The moon binary and UI theme may also come from an optional JSON
config file, which is only ever read. All of it is resolved once into a
``Settings`` value that is passed to the collaborators explicitly.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from .errors import ConfigError

logger = logging.getLogger(__name__)

APP_NAME = "moontree"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
REPO_ENV_VAR = "MOON"
MOON_BIN_ENV_VAR = "MOONTREE_MOON_BIN"
DEFAULT_MOON_BIN = "moon"


@dataclass(frozen=True)
class Settings:
    """Resolved configuration for one session."""

    repo_root: Path
    moon_bin: str = DEFAULT_MOON_BIN
    theme: str | None = None


def load_config() -> dict[str, object]:
    """Load the JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.warning("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def _config_string(data: Mapping[str, object], key: str) -> str | None:
    """Return a stripped non-empty string value, else ``None``."""
    value = data.get(key)
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def resolve_repo_root(environ: Mapping[str, str], repo: str | None = None) -> Path:
    """Return the repository root from ``repo`` or ``$MOON``.

    Raises ``ConfigError`` when neither is set or the path is not a directory.
    """
    raw = repo if repo else environ.get(REPO_ENV_VAR, "")
    if not raw:
        raise ConfigError(f"{REPO_ENV_VAR} is not set; point it at the moon workspace root")
    root = Path(raw).expanduser()
    if not root.is_dir():
        raise ConfigError(f"Repository root is not a directory: {root}")
    return root.resolve()


def resolve_settings(
    environ: Mapping[str, str],
    repo: str | None = None,
    moon_bin: str | None = None,
    theme: str | None = None,
) -> Settings:
    """Combine CLI flags, environment, and config file into ``Settings``.

    Precedence is flag, then environment, then config file, then default.
    """
    config = load_config()
    repo_root = resolve_repo_root(environ, repo)
    resolved_bin = (
        moon_bin
        or environ.get(MOON_BIN_ENV_VAR, "").strip()
        or _config_string(config, "moon_bin")
        or DEFAULT_MOON_BIN
    )
    resolved_theme = theme or _config_string(config, "theme")
    return Settings(repo_root=repo_root, moon_bin=resolved_bin, theme=resolved_theme)
