# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Print the location of ruff's user-level configuration."""

from __future__ import annotations

import typer

from ...platform.paths import default_config_path


def global_config() -> None:
    """Print the platform path of ruff's global ``pyproject.toml``."""

    typer.echo(str(default_config_path()))


def register(app: typer.Typer) -> None:
    app.command(name="global-config")(global_config)


__all__ = ["global_config", "register"]
