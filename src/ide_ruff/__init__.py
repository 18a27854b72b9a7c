# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Editor integration that supervises ruff and relays its diagnostics."""

from __future__ import annotations

PACKAGE_NAME = "ide-ruff"

__all__ = ["PACKAGE_NAME"]
