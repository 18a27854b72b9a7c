# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Resolve ruff's user-level configuration location."""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Final

RUFF_DIR_NAME: Final[str] = "ruff"
CONFIG_FILE_NAME: Final[str] = "pyproject.toml"
_XDG_CONFIG_HOME: Final[str] = "XDG_CONFIG_HOME"


def default_config_path(
    system: str | None = None,
    *,
    environ: Mapping[str, str] | None = None,
    home: Path | None = None,
) -> Path:
    """Return the global ruff ``pyproject.toml`` path for the current platform.

    Args:
        system: ``sys.platform`` style identifier; detected when omitted.
        environ: Environment used for ``XDG_CONFIG_HOME`` lookup.
        home: Home directory; detected when omitted.

    Returns:
        Path: Platform config directory joined with ``ruff/pyproject.toml``.
    """

    platform_name = system or sys.platform
    env = os.environ if environ is None else environ
    home_dir = home or Path.home()
    if platform_name == "win32":
        base = home_dir / "AppData" / "Roaming"
    elif platform_name == "darwin":
        base = home_dir / "Library" / "Application Support"
    else:
        xdg = env.get(_XDG_CONFIG_HOME)
        base = Path(xdg) if xdg else home_dir / ".config"
    return base / RUFF_DIR_NAME / CONFIG_FILE_NAME


__all__ = ["default_config_path"]
