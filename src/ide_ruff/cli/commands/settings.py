# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Show how the current configuration is translated for ruff."""

from __future__ import annotations

import json
import shlex
from pathlib import Path
from typing import Annotated

import typer

from ...settings.translator import build_check_args, initialization_options
from ..core.shared import CLIError, build_cli_logger
from ._options import ConfigFileOption, resolve_config


def settings(
    root: Annotated[
        Path,
        typer.Option("--root", "-r", help="Project directory used for configuration discovery."),
    ] = Path("."),
    config_file: ConfigFileOption = None,
    cli: Annotated[bool, typer.Option("--cli", help="Print ruff check flags instead of server settings.")] = False,
) -> None:
    """Print the server initialization options or the equivalent CLI flags."""

    try:
        config = resolve_config(root.resolve(), config_file)
    except CLIError as exc:
        build_cli_logger(emoji=False).fail(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc
    if cli:
        typer.echo(shlex.join(build_check_args(config)))
        return
    typer.echo(json.dumps(initialization_options(config), indent=2, sort_keys=True))


def register(app: typer.Typer) -> None:
    app.command(name="settings")(settings)


__all__ = ["register", "settings"]
