# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Terminal stand-in for the host's project message delegate."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.table import Table
from rich.text import Text

_SEVERITY_STYLES = {"error": "bold red", "warning": "yellow"}


class ConsoleDelegate:
    """Collect project scan messages and render them as a Rich table."""

    def __init__(self, *, name: str = "Ruff/Project") -> None:
        self.name = name
        self.messages: list[dict[str, Any]] = []
        self.show_project_view = False
        self.disposed = False

    def set_all_messages(self, messages: Sequence[Mapping[str, Any]], *, show_project_view: bool = False) -> None:
        self.messages = [dict(message) for message in messages]
        self.show_project_view = show_project_view

    def clear_messages(self) -> None:
        self.messages = []

    def dispose(self) -> None:
        self.disposed = True

    def render(self, console: Console, *, root: Path | None = None) -> None:
        """Print the collected messages as a table, one row per diagnostic.

        Args:
            console: Destination console.
            root: Directory used to shorten file paths when possible.
        """

        table = Table(title=self.name, show_lines=False)
        table.add_column("File", overflow="fold")
        table.add_column("Line", justify="right")
        table.add_column("Col", justify="right")
        table.add_column("Severity")
        table.add_column("Message", overflow="fold")
        for message in self.messages:
            location = message["location"]
            (row, column), _end = location["position"]
            severity = str(message["severity"])
            table.add_row(
                Text(_display_path(str(location["file"]), root)),
                str(row + 1),
                str(column + 1),
                Text(severity, style=_SEVERITY_STYLES.get(severity, "")),
                Text(str(message["excerpt"])),
            )
        console.print(table)


def _display_path(file_path: str, root: Path | None) -> str:
    if root is None:
        return file_path
    try:
        return Path(file_path).resolve().relative_to(root.resolve()).as_posix()
    except ValueError:
        return file_path


__all__ = ["ConsoleDelegate"]
