# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Project-wide ruff scans published through a replaceable message sink."""

from __future__ import annotations

from .project import (
    MAX_OUTPUT_BYTES,
    PROJECT_DELEGATE_NAME,
    SCAN_TIMEOUT_SECONDS,
    ProjectScanner,
)

__all__ = ["MAX_OUTPUT_BYTES", "PROJECT_DELEGATE_NAME", "SCAN_TIMEOUT_SECONDS", "ProjectScanner"]
