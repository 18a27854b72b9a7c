# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Diagnostic normalisation helpers."""

from __future__ import annotations

from .conversion import RULE_CODE_SEPARATOR, convert_finding, prefix_rule_code

__all__ = ["RULE_CODE_SEPARATOR", "convert_finding", "prefix_rule_code"]
