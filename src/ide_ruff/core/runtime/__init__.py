# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Process execution helpers."""

from __future__ import annotations

from .process import CommandOptions, OutputLimitExceeded, SubprocessExecutionError, run_command

__all__ = ["CommandOptions", "OutputLimitExceeded", "SubprocessExecutionError", "run_command"]
