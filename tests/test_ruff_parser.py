# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests covering the ruff JSON output parser."""

from __future__ import annotations

import pytest

from ide_ruff.errors import ErrorKind, ScanParseError
from ide_ruff.parsers import parse_findings


def test_parse_findings() -> None:
    stdout = """
    [
      {
        "code": "F401",
        "message": "`os` imported but unused",
        "filename": "/repo/pkg/mod.py",
        "location": {"row": 1, "column": 8},
        "end_location": {"row": 1, "column": 10},
        "fix": {"applicability": "safe", "edits": []},
        "noqa_row": 1,
        "url": "https://docs.astral.sh/ruff/rules/unused-import"
      },
      {"code": null, "message": "SyntaxError: Expected ')'", "filename": "/repo/bad.py",
       "location": {"row": 2, "column": 1}, "end_location": {"row": 2, "column": 2}}
    ]
    """
    findings = parse_findings(stdout)
    assert [item.code for item in findings] == ["F401", None]
    assert findings[0].filename == "/repo/pkg/mod.py"
    assert findings[0].location is not None and findings[0].location.column == 8


@pytest.mark.parametrize("stdout", ["", "   \n", "[]"])
def test_blank_output_has_no_findings(stdout: str) -> None:
    assert parse_findings(stdout) == []


def test_invalid_json_raises_parse_error() -> None:
    with pytest.raises(ScanParseError) as excinfo:
        parse_findings("error: Failed to parse pyproject.toml")
    assert excinfo.value.kind is ErrorKind.SCAN_PARSE_FAILURE


def test_malformed_entries_are_skipped() -> None:
    stdout = '[1, "x", {"code": "E1", "message": "ok", "filename": "a.py", "location": {"row": "bad"}}, {"code": "E2", "message": "ok", "filename": "b.py"}]'
    findings = parse_findings(stdout)
    assert [item.code for item in findings] == ["E2"]


def test_object_payload_is_ignored() -> None:
    assert parse_findings('{"diagnostics": []}') == []
