# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Translate ide-ruff configuration into ruff server settings and CLI flags."""

from __future__ import annotations

from .translator import (
    build_check_args,
    build_server_settings,
    initialization_options,
    workspace_configuration,
)

__all__ = [
    "build_check_args",
    "build_server_settings",
    "initialization_options",
    "workspace_configuration",
]
