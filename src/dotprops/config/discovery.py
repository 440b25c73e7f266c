"""Locate the ``dotprops.toml`` that tunes extraction and output.

The file is optional. ``DOTPROPS_CONFIG`` names it explicitly; otherwise
the nearest ``dotprops.toml`` in the working directory or one of its
parents applies, so a project can keep one next to its properties files.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "dotprops.toml"
CONFIG_ENV_VAR = "DOTPROPS_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file that applies to *start* (default: cwd), if any.

    A ``DOTPROPS_CONFIG`` pointing at a missing file disables discovery
    rather than falling back to the walk.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
