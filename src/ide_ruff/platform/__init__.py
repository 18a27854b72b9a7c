# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Platform specific path helpers."""

from __future__ import annotations

from .paths import default_config_path

__all__ = ["default_config_path"]
