# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared logging helpers."""

from __future__ import annotations

from .public import LOGGER_NAME, configure_logging, emoji, fail, info, ok, warn

__all__ = [
    "LOGGER_NAME",
    "configure_logging",
    "emoji",
    "fail",
    "info",
    "ok",
    "warn",
]
