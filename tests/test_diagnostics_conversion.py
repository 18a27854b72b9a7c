# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for finding normalisation and rule-code prefixing."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from ide_ruff.core.models import RawFinding
from ide_ruff.core.severity import Severity, is_syntax_error
from ide_ruff.diagnostics import convert_finding, prefix_rule_code


def test_example_finding_is_normalised(make_finding: Callable[..., dict[str, Any]]) -> None:
    raw = RawFinding.model_validate(make_finding())
    diag = convert_finding("pkg/mod.py", raw)
    assert diag is not None
    assert diag.severity is Severity.WARNING
    assert diag.excerpt == "E501 — Line too long"
    assert diag.position == ((4, 0), (4, 79))
    assert diag.to_message() == {
        "severity": "warning",
        "excerpt": "E501 — Line too long",
        "location": {"file": "pkg/mod.py", "position": [[4, 0], [4, 79]]},
    }


def test_missing_location_is_dropped(make_finding: Callable[..., dict[str, Any]]) -> None:
    raw = RawFinding.model_validate(make_finding(start=None))
    assert convert_finding("pkg/mod.py", raw) is None


def test_missing_end_location_collapses_to_start(make_finding: Callable[..., dict[str, Any]]) -> None:
    raw = RawFinding.model_validate(make_finding(start=(3, 7), end=None))
    diag = convert_finding("pkg/mod.py", raw)
    assert diag is not None
    assert diag.position == ((2, 6), (2, 6))


@pytest.mark.parametrize("code", [None, "E999"])
def test_syntax_errors_are_errors(code: str | None, make_finding: Callable[..., dict[str, Any]]) -> None:
    raw = RawFinding.model_validate(make_finding(code=code, message="SyntaxError: invalid syntax"))
    diag = convert_finding("pkg/mod.py", raw)
    assert diag is not None
    assert diag.severity is Severity.ERROR
    if code is None:
        assert diag.excerpt == "SyntaxError: invalid syntax"


@pytest.mark.parametrize("code", [None, "E999"])
def test_syntax_errors_can_be_hidden(code: str | None, make_finding: Callable[..., dict[str, Any]]) -> None:
    raw = RawFinding.model_validate(make_finding(code=code))
    assert convert_finding("pkg/mod.py", raw, show_syntax_errors=False) is None


def test_hidden_syntax_errors_keep_other_findings(make_finding: Callable[..., dict[str, Any]]) -> None:
    raw = RawFinding.model_validate(make_finding(code="F401", message="unused import"))
    diag = convert_finding("pkg/mod.py", raw, show_syntax_errors=False)
    assert diag is not None
    assert diag.severity is Severity.WARNING


def test_prefix_rule_code_is_idempotent() -> None:
    once = prefix_rule_code("F401", "`os` imported but unused")
    assert once == "F401 — `os` imported but unused"
    assert prefix_rule_code("F401", once) == once


def test_prefix_rule_code_without_code() -> None:
    assert prefix_rule_code(None, "message") == "message"
    assert prefix_rule_code("", "message") == "message"


def test_prefix_rule_code_accepts_numeric_codes() -> None:
    assert prefix_rule_code(42, "numeric") == "42 — numeric"


def test_is_syntax_error() -> None:
    assert is_syntax_error(None)
    assert is_syntax_error("E999")
    assert not is_syntax_error("E501")


def test_empty_code_is_not_a_syntax_error(make_finding: Callable[..., dict[str, Any]]) -> None:
    raw = RawFinding.model_validate(make_finding(code="", message="unlabelled finding"))
    assert raw.code == ""
    diag = convert_finding("pkg/mod.py", raw, show_syntax_errors=False)
    assert diag is not None
    assert diag.severity is Severity.WARNING
    assert diag.excerpt == "unlabelled finding"


def test_only_error_and_warning_severities_exist() -> None:
    assert {severity.value for severity in Severity} == {"error", "warning"}
