"""User configuration and logging setup."""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Dict

_DEFAULT_RACES_FILE = "races.json"
_DEFAULT_LOG_LEVEL = "WARNING"
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"

logger = logging.getLogger(__name__)


def default_config() -> Dict[str, str]:
    # An empty definitions_path means "use the bundled definitions".
    return {
        "definitions_path": "",
        "races_file": _DEFAULT_RACES_FILE,
        "log_level": _DEFAULT_LOG_LEVEL,
    }


def get_user_data_dir() -> Path:
    """Return the per-user data directory."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "rpcore"
        return Path.home() / "rpcore"
    return Path.home() / ".config" / "rpcore"


def get_default_config_path() -> Path:
    """Return the default per-user config path."""
    return get_user_data_dir() / "config.json"


def _normalize_log_level(value: object) -> str:
    if isinstance(value, str) and value.upper() in _LOG_LEVELS:
        return value.upper()
    return _DEFAULT_LOG_LEVEL


def _normalize_races_file(value: object) -> str:
    if isinstance(value, str) and value.endswith(".json"):
        return value
    return _DEFAULT_RACES_FILE


def _normalize_definitions_path(value: object) -> str:
    return value if isinstance(value, str) else ""


def _normalize(raw: Dict[str, object]) -> Dict[str, str]:
    return {
        "definitions_path": _normalize_definitions_path(raw.get("definitions_path")),
        "races_file": _normalize_races_file(raw.get("races_file")),
        "log_level": _normalize_log_level(raw.get("log_level")),
    }


def load_config(path: Path | None = None) -> Dict[str, str]:
    """Load config from disk or return defaults."""
    config_path = path or get_default_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return default_config()
    except (OSError, ValueError):
        logger.warning("Ignoring unreadable config file %s", config_path)
        return default_config()
    if not isinstance(raw, dict):
        return default_config()
    return _normalize(raw)


def save_config(config: Dict[str, str], path: Path | None = None) -> None:
    """Persist config to disk."""
    config_path = path or get_default_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    payload = _normalize(dict(config))
    config_path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")


def configure_logging(level: str | None = None) -> None:
    """Send rpcore log records to stderr at the given level name."""
    logging.basicConfig(
        level=_normalize_log_level(level),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler()],
    )
