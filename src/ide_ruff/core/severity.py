# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Severity related types and helpers."""

from __future__ import annotations

from enum import Enum
from typing import Final

SYNTAX_ERROR_CODE: Final[str] = "E999"


class Severity(str, Enum):
    """Severity levels understood by the host linter UI."""

    ERROR = "error"
    WARNING = "warning"


def is_syntax_error(code: str | None) -> bool:
    """Return ``True`` when ``code`` marks a ruff syntax failure.

    Ruff reports parse failures either without a rule code or, on older
    releases, with the dedicated ``E999`` code.

    Args:
        code: Rule code attached to the finding, ``None`` when absent.

    Returns:
        bool: ``True`` for syntax errors, ``False`` for ordinary rule violations.
    """

    return code is None or code == SYNTAX_ERROR_CODE


def severity_for_code(code: str | None) -> Severity:
    """Return the display severity for a ruff rule code.

    Args:
        code: Rule code attached to the finding.

    Returns:
        Severity: ``ERROR`` for syntax errors, ``WARNING`` otherwise.
    """

    return Severity.ERROR if is_syntax_error(code) else Severity.WARNING


__all__ = ["SYNTAX_ERROR_CODE", "Severity", "is_syntax_error", "severity_for_code"]
