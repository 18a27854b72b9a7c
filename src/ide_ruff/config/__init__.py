# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models and loaders."""

from __future__ import annotations

from .models import (
    CodeActionConfig,
    ConfigError,
    FormatConfig,
    IdeRuffConfig,
    LintConfig,
    ToggleConfig,
)

__all__ = [
    "CodeActionConfig",
    "ConfigError",
    "FormatConfig",
    "IdeRuffConfig",
    "LintConfig",
    "ToggleConfig",
]
