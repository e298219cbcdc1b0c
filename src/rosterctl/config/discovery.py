"""Locate and read ``rosterctl.toml``.

The file is optional.  It is looked up in the working directory and its
parents, unless ``ROSTERCTL_CONFIG`` names one explicitly.  Reading is
the only step that can fail, and every failure names the offending file.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

import click

CONFIG_FILENAME = "rosterctl.toml"
CONFIG_ENV_VAR = "ROSTERCTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest rosterctl.toml at or above *start* (default: cwd).

    A set ``ROSTERCTL_CONFIG`` wins over the walk-up, and pointing it at a
    missing file disables discovery altogether.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    origin = (start or Path.cwd()).resolve()
    for directory in (origin, *origin.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def read_config(path: Path) -> dict[str, Any]:
    """Parse *path* as TOML.

    Raises:
        click.ClickException: the file cannot be read or is not valid TOML.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise click.ClickException(f"Cannot read {path}: {exc}") from exc
    try:
        return tomllib.loads(raw)
    except tomllib.TOMLDecodeError as exc:
        raise click.ClickException(f"Invalid TOML in {path}: {exc}") from exc
