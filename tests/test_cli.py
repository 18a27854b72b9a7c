# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the ide-ruff command line."""

from __future__ import annotations

import json
import shlex
from collections.abc import Callable
from pathlib import Path
from textwrap import dedent
from typing import Any

import pytest
from typer.testing import CliRunner

from ide_ruff.cli.app import app
from ide_ruff.cli.commands import scan as scan_command


@pytest.fixture
def cli() -> CliRunner:
    return CliRunner()


@pytest.fixture
def ruff_on_path(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(scan_command.shutil, "which", lambda name: f"/usr/bin/{name}")


def _write_local_config(root: Path) -> None:
    (root / ".ide-ruff.toml").write_text(
        dedent(
            """
            lineLength = 100

            [lint]
            select = ["E", "F"]
            """
        ),
        encoding="utf-8",
    )


def test_global_config_prints_platform_path(cli: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        "ide_ruff.cli.commands.global_config.default_config_path",
        lambda: Path("/home/dev/.config/ruff/pyproject.toml"),
    )
    result = cli.invoke(app, ["global-config"])
    assert result.exit_code == 0
    assert result.stdout.strip() == str(Path("/home/dev/.config/ruff/pyproject.toml"))


def test_settings_prints_cli_flags(cli: CliRunner, project_root: Path) -> None:
    _write_local_config(project_root)
    result = cli.invoke(app, ["settings", "--root", str(project_root), "--cli"])
    assert result.exit_code == 0
    assert shlex.split(result.stdout) == ["--line-length=100", "--select=E,F"]


def test_settings_prints_initialization_options(cli: CliRunner, project_root: Path) -> None:
    _write_local_config(project_root)
    result = cli.invoke(app, ["settings", "--root", str(project_root)])
    assert result.exit_code == 0
    assert json.loads(result.stdout) == {"settings": {"lineLength": 100, "lint": {"select": ["E", "F"]}}}


def test_settings_rejects_invalid_config(cli: CliRunner, project_root: Path) -> None:
    (project_root / ".ide-ruff.toml").write_text('lineLength = "wide"\n', encoding="utf-8")
    result = cli.invoke(app, ["settings", "--root", str(project_root), "--cli"])
    assert result.exit_code == 2


@pytest.mark.usefixtures("ruff_on_path")
def test_scan_clean_project_exits_zero(
    cli: CliRunner,
    project_root: Path,
    monkeypatch: pytest.MonkeyPatch,
    make_runner: Callable[..., Any],
) -> None:
    runner = make_runner()
    monkeypatch.setattr(scan_command, "run_command", runner)

    result = cli.invoke(app, ["scan", str(project_root), "--no-emoji", "--no-color"])

    assert result.exit_code == 0
    assert "No ruff issues found." in result.stdout
    args, options = runner.calls[0]
    assert args[:4] == ["/usr/bin/ruff", "check", "--quiet", "--output-format=json"]
    assert args[-1] == str(project_root.resolve())
    assert options is not None
    assert options.cwd == project_root.resolve()


@pytest.mark.usefixtures("ruff_on_path")
def test_scan_with_findings_exits_one_and_prints_json(
    cli: CliRunner,
    project_root: Path,
    monkeypatch: pytest.MonkeyPatch,
    make_runner: Callable[..., Any],
    make_completed: Callable[..., Any],
    make_finding: Callable[..., dict[str, Any]],
    ruff_json: Callable[..., str],
) -> None:
    root = str(project_root.resolve())
    file_path = f"{root}/pkg/mod.py"
    stdout = ruff_json(make_finding(filename=file_path), make_finding(code="F401", message="unused", filename=file_path))
    monkeypatch.setattr(scan_command, "run_command", make_runner({root: make_completed(stdout)}))

    result = cli.invoke(app, ["scan", root, "--json"])

    assert result.exit_code == 1
    messages = json.loads(result.stdout)
    assert [message["excerpt"] for message in messages] == ["E501 — Line too long", "F401 — unused"]
    assert messages[0]["location"] == {"file": file_path, "position": [[4, 0], [4, 79]]}


@pytest.mark.usefixtures("ruff_on_path")
def test_scan_table_output_lists_findings(
    cli: CliRunner,
    project_root: Path,
    monkeypatch: pytest.MonkeyPatch,
    make_runner: Callable[..., Any],
    make_completed: Callable[..., Any],
    make_finding: Callable[..., dict[str, Any]],
    ruff_json: Callable[..., str],
) -> None:
    root = str(project_root.resolve())
    stdout = ruff_json(make_finding(filename=f"{root}/pkg/mod.py"))
    monkeypatch.setattr(scan_command, "run_command", make_runner({root: make_completed(stdout)}))

    result = cli.invoke(app, ["scan", root, "--no-emoji", "--no-color"])

    assert result.exit_code == 1
    assert "pkg/mod.py" in result.stdout
    assert "1 issue(s) found." in result.stdout


def test_scan_without_ruff_exits_two(cli: CliRunner, project_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(scan_command.shutil, "which", lambda name: None)
    result = cli.invoke(app, ["scan", str(project_root), "--no-emoji", "--no-color"])
    assert result.exit_code == 2
    assert "ruff executable not found" in result.stdout
