# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import json
import subprocess
from collections.abc import Callable, Mapping, Sequence
from pathlib import Path
from typing import Any

import pytest

from ide_ruff.config import IdeRuffConfig
from ide_ruff.core.runtime.process import CommandOptions
from ide_ruff.interfaces.editor import NotificationButton


class RecordingDelegate:
    """Indie delegate double capturing every published batch."""

    def __init__(self, name: str = "delegate", delete_on_open: bool = False) -> None:
        self.name = name
        self.delete_on_open = delete_on_open
        self.batches: list[tuple[list[dict[str, Any]], bool]] = []
        self.cleared = 0
        self.disposed = False

    def set_all_messages(self, messages: Sequence[Mapping[str, Any]], *, show_project_view: bool = False) -> None:
        self.batches.append(([dict(message) for message in messages], show_project_view))

    def clear_messages(self) -> None:
        self.cleared += 1

    def dispose(self) -> None:
        self.disposed = True


class RecordingNotifier:
    """Notifier double storing every notification by kind."""

    def __init__(self) -> None:
        self.infos: list[str] = []
        self.successes: list[str] = []
        self.errors: list[dict[str, Any]] = []

    def add_info(self, message: str) -> None:
        self.infos.append(message)

    def add_success(self, message: str) -> None:
        self.successes.append(message)

    def add_error(
        self,
        message: str,
        *,
        description: str | None = None,
        dismissable: bool = False,
        buttons: Sequence[NotificationButton] = (),
    ) -> None:
        self.errors.append(
            {
                "message": message,
                "description": description,
                "dismissable": dismissable,
                "buttons": tuple(buttons),
            }
        )


class ScriptedRunner:
    """Command runner returning canned results keyed by the scanned root."""

    def __init__(self, results: Mapping[str, subprocess.CompletedProcess[str] | BaseException] | None = None) -> None:
        self.results = dict(results or {})
        self.calls: list[tuple[list[str], CommandOptions | None]] = []
        self.on_call: Callable[[], None] | None = None

    def __call__(self, args: Sequence[str], *, options: CommandOptions | None = None) -> subprocess.CompletedProcess[str]:
        self.calls.append((list(args), options))
        if self.on_call is not None:
            self.on_call()
        outcome = self.results.get(args[-1], completed("[]"))
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


def completed(stdout: str = "", stderr: str = "", returncode: int = 0) -> subprocess.CompletedProcess[str]:
    return subprocess.CompletedProcess(args=["ruff"], returncode=returncode, stdout=stdout, stderr=stderr)


def finding(
    code: str | None = "E501",
    message: str = "Line too long",
    filename: str = "pkg/mod.py",
    start: tuple[int, int] | None = (5, 1),
    end: tuple[int, int] | None = (5, 80),
) -> dict[str, Any]:
    entry: dict[str, Any] = {"code": code, "message": message, "filename": filename}
    if start is not None:
        entry["location"] = {"row": start[0], "column": start[1]}
    if end is not None:
        entry["end_location"] = {"row": end[0], "column": end[1]}
    return entry


@pytest.fixture
def delegate() -> RecordingDelegate:
    return RecordingDelegate(name="Ruff/Project", delete_on_open=True)


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def make_runner() -> Callable[..., ScriptedRunner]:
    return ScriptedRunner


@pytest.fixture
def make_completed() -> Callable[..., subprocess.CompletedProcess[str]]:
    return completed


@pytest.fixture
def make_finding() -> Callable[..., dict[str, Any]]:
    return finding


@pytest.fixture
def ruff_json() -> Callable[..., str]:
    def _dump(*entries: Mapping[str, Any]) -> str:
        return json.dumps(list(entries))

    return _dump


@pytest.fixture
def default_config() -> IdeRuffConfig:
    return IdeRuffConfig()


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    root = tmp_path / "project"
    root.mkdir()
    return root


@pytest.fixture
def make_delegate() -> Callable[..., RecordingDelegate]:
    return RecordingDelegate
