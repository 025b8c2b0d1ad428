"""Locate folioctl.toml.

The file is found by walking up from the working directory, so `folioctl`
works from any subdirectory of a site project. ``FOLIOCTL_CONFIG`` names a
file directly and disables the walk; ``--config`` bypasses discovery.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "folioctl.toml"
CONFIG_ENV_VAR = "FOLIOCTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for folioctl.toml.

    Returns the path to the config file, or None if not found.
    Checks FOLIOCTL_CONFIG env var first.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        if p.is_file():
            return p
        return None

    current = (start or Path.cwd()).resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None
