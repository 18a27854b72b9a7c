# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Option declarations shared by several commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from ...config.loaders.sources import load_config
from ...config.models import ConfigError, IdeRuffConfig
from ..core.shared import CLIError

ConfigFileOption = Annotated[
    Path | None,
    typer.Option(
        "--config-file",
        help="Read ide-ruff settings from this TOML file instead of discovering them.",
        exists=False,
        dir_okay=False,
    ),
]
EmojiOption = Annotated[bool, typer.Option("--emoji/--no-emoji", help="Toggle emoji in console output.")]
NoColorOption = Annotated[bool, typer.Option("--no-color", help="Disable ANSI colour output.")]
DebugOption = Annotated[bool, typer.Option("--debug", help="Emit debug logging.")]


def resolve_config(root: Path, config_file: Path | None) -> IdeRuffConfig:
    """Load the configuration for ``root``, converting failures to :class:`CLIError`.

    Raises:
        CLIError: If the configuration cannot be read or validated.
    """

    try:
        return load_config(root, config_file=config_file)
    except ConfigError as exc:
        raise CLIError(str(exc), exit_code=2) from exc


__all__ = ["ConfigFileOption", "DebugOption", "EmojiOption", "NoColorOption", "resolve_config"]
