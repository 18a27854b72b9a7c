# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Host editor lifecycle wiring."""

from __future__ import annotations

from .host import COMMAND_TARGET, RuffIntegration

__all__ = ["COMMAND_TARGET", "RuffIntegration"]
