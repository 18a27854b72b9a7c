# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Parsers for ruff output."""

from __future__ import annotations

from .ruff import parse_findings

__all__ = ["parse_findings"]
