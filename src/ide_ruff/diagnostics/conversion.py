# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Convert ruff findings into host linter diagnostics."""

from __future__ import annotations

from typing import Final

from ..core.models import Location, NormalizedDiagnostic, Point, RawFinding
from ..core.severity import is_syntax_error, severity_for_code

RULE_CODE_SEPARATOR: Final[str] = " — "


def prefix_rule_code(code: str | int | None, message: str) -> str:
    """Return ``message`` prefixed with ``code`` exactly once.

    Args:
        code: Rule code, ``None`` or empty when the diagnostic has none.
        message: Diagnostic message text.

    Returns:
        str: ``"<code> — <message>"`` or ``message`` unchanged.
    """

    if code is None or code == "":
        return message
    prefix = f"{code}{RULE_CODE_SEPARATOR}"
    if message.startswith(prefix):
        return message
    return f"{prefix}{message}"


def _zero_based(location: Location) -> Point:
    return location.row - 1, location.column - 1


def convert_finding(
    file_path: str,
    finding: RawFinding,
    *,
    show_syntax_errors: bool = True,
) -> NormalizedDiagnostic | None:
    """Normalise ``finding`` for display, or return ``None`` to drop it.

    Ruff reports one-based rows and columns; the host expects zero-based
    positions. A finding without an end location spans nothing past its start.

    Args:
        file_path: File the finding belongs to.
        finding: Decoded ruff JSON record.
        show_syntax_errors: ``False`` drops syntax errors entirely.

    Returns:
        NormalizedDiagnostic | None: Display record, or ``None`` when the
        finding has no location or is a suppressed syntax error.
    """

    if finding.location is None:
        return None
    syntax_error = is_syntax_error(finding.code)
    if syntax_error and not show_syntax_errors:
        return None
    start = _zero_based(finding.location)
    end = _zero_based(finding.end_location) if finding.end_location is not None else start
    return NormalizedDiagnostic(
        severity=severity_for_code(finding.code),
        excerpt=prefix_rule_code(finding.code, finding.message),
        file=file_path,
        position=(start, end),
    )


__all__ = ["RULE_CODE_SEPARATOR", "convert_finding", "prefix_rule_code"]
