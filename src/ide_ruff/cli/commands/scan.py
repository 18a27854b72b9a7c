# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Project-wide ruff scan from the command line."""

from __future__ import annotations

import json
import shutil
from collections.abc import Sequence
from pathlib import Path
from typing import Annotated

import typer

from ...config.models import IdeRuffConfig
from ...core.logging import configure_logging
from ...core.models import ScanResult
from ...core.runtime.process import run_command
from ...scanner.project import ProjectScanner
from ..core.shared import CLIError, CLILogger, build_cli_logger
from ..core.sink import ConsoleDelegate
from ._options import ConfigFileOption, DebugOption, EmojiOption, NoColorOption, resolve_config

EXIT_CLEAN = 0
EXIT_DIAGNOSTICS = 1
EXIT_UNAVAILABLE = 2


class _StaticConfig:
    def __init__(self, config: IdeRuffConfig) -> None:
        self._config = config

    def __call__(self) -> IdeRuffConfig:
        return self._config


class _StaticRoots:
    def __init__(self, roots: Sequence[Path]) -> None:
        self._roots = [str(root) for root in roots]

    def __call__(self) -> list[str]:
        return list(self._roots)


def _prepare_scanner(config: IdeRuffConfig, roots: Sequence[Path], sink: ConsoleDelegate) -> ProjectScanner:
    executable = shutil.which(config.ruff_executable)
    if executable is None:
        raise CLIError(f"ruff executable not found: {config.ruff_executable}", exit_code=EXIT_UNAVAILABLE)
    scanner = ProjectScanner(_StaticConfig(config), _StaticRoots(roots), runner=run_command)
    scanner.register(sink)
    scanner.set_executable_path(executable)
    return scanner


def _report(result: ScanResult, sink: ConsoleDelegate, *, logger: CLILogger, root: Path, as_json: bool) -> None:
    for failed in result.failed_roots:
        logger.warn(f"ruff produced no usable output for {failed}")
    if as_json:
        logger.echo(json.dumps(sink.messages, indent=2))
        return
    if not result.diagnostics:
        logger.ok("No ruff issues found.")
        return
    sink.render(logger.console, root=root)
    logger.warn(f"{len(result.diagnostics)} issue(s) found.")


def scan(
    roots: Annotated[
        list[Path] | None,
        typer.Argument(help="Project roots to scan; defaults to the current directory.", file_okay=False),
    ] = None,
    config_file: ConfigFileOption = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print host linter messages as JSON.")] = False,
    emoji: EmojiOption = True,
    no_color: NoColorOption = False,
    debug: DebugOption = False,
) -> None:
    """Lint every project root with ruff and report the findings."""

    root_paths = [path.resolve() for path in roots] if roots else [Path.cwd()]
    logger = build_cli_logger(emoji=emoji, debug=debug, no_color=no_color)
    sink = ConsoleDelegate()
    try:
        config = resolve_config(root_paths[0], config_file)
        configure_logging(debug or config.debug)
        scanner = _prepare_scanner(config, root_paths, sink)
    except CLIError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc

    logger.debug(f"roots={len(root_paths)} command={' '.join(scanner.build_command(str(root_paths[0]), config))}")
    result = scanner.run_scan()
    if result is None:
        logger.fail("Project scan did not complete.")
        raise typer.Exit(code=EXIT_UNAVAILABLE)
    _report(result, sink, logger=logger, root=root_paths[0], as_json=as_json)
    raise typer.Exit(code=EXIT_DIAGNOSTICS if result.diagnostics else EXIT_CLEAN)


def register(app: typer.Typer) -> None:
    app.command(name="scan")(scan)


__all__ = ["register", "scan"]
