# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared CLI helpers."""

from __future__ import annotations

from .shared import CLIError, CLILogger, build_cli_logger
from .sink import ConsoleDelegate

__all__ = ["CLIError", "CLILogger", "ConsoleDelegate", "build_cli_logger"]
