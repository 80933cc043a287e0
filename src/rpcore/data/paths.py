"""Helpers for resolving definition file locations."""
from __future__ import annotations

import os
from pathlib import Path

DEFINITIONS_ENV_VAR = "RPCORE_DEFINITIONS_PATH"


def get_package_root() -> Path:
    """Return the directory of the installed rpcore package."""
    return Path(__file__).resolve().parents[1]


def get_definitions_path(base_path: Path | str | None = None) -> Path:
    """Return the directory holding the JSON definition files.

    An explicit ``base_path`` wins, then the RPCORE_DEFINITIONS_PATH
    environment variable, then the definitions bundled with the package.
    """
    if base_path is not None:
        return Path(base_path)
    override = os.environ.get(DEFINITIONS_ENV_VAR)
    if override:
        return Path(override)
    return get_package_root() / "data" / "definitions"
