"""Locating and reading ``customer-manager.toml``.

The file is searched from the working directory upwards, the way git finds
``.git/``. ``CUSTOMER_MANAGER_CONFIG`` pins an explicit file instead; the
``--config`` flag bypasses discovery entirely (see ``CmSettings.from_cli``).
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import ValidationError

from customer_manager.config.models import CmConfig

CONFIG_FILENAME = "customer-manager.toml"
CONFIG_ENV_VAR = "CUSTOMER_MANAGER_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file governing *start* (default: cwd), or None.

    An env var naming a missing file disables discovery rather than falling
    back to the walk-up.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        pinned = Path(env_path)
        return pinned if pinned.is_file() else None

    directory = (start or Path.cwd()).resolve()
    for candidate_dir in (directory, *directory.parents):
        candidate = candidate_dir / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def read_config(path: Path) -> dict[str, Any]:
    """Parse *path* and check it against :class:`CmConfig`.

    Returns the sparse table as written (only the keys the file sets), so
    callers can layer it under env vars and CLI flags.

    Raises:
        click.ClickException: The file is not valid TOML, or a section holds
            an unknown key or a value of the wrong type.
    """
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise click.ClickException(f"Invalid TOML in {path}: {exc}") from exc

    try:
        CmConfig.model_validate(data)
    except ValidationError as exc:
        raise click.ClickException(f"Invalid configuration in {path}: {exc}") from exc
    return data
