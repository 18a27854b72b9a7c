# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the ruff settings translator."""

from __future__ import annotations

import pytest

from ide_ruff.config import IdeRuffConfig
from ide_ruff.settings import (
    build_check_args,
    build_server_settings,
    initialization_options,
    workspace_configuration,
)


def _config(**data: object) -> IdeRuffConfig:
    return IdeRuffConfig.from_mapping(data)


def test_defaults_emit_nothing() -> None:
    config = IdeRuffConfig()
    assert build_server_settings(config) == {}
    assert build_check_args(config) == []


@pytest.mark.parametrize(
    "data",
    [
        {"lineLength": 0},
        {"configuration": ""},
        {"targetVersion": ""},
        {"exclude": []},
        {"lint": {"select": [], "ignore": [], "extendSelect": [], "fixable": []}},
        {"lint": {"preview": False, "useNoqa": True, "syntax": True}},
        {"format": {"indentWidth": 0, "preview": False}},
        {"codeAction": {"fixViolation": {"enable": True}, "disableRuleComment": {"enable": True}}},
        {"organizeImports": True, "fixAll": True},
    ],
)
def test_zero_and_empty_values_are_omitted(data: dict[str, object]) -> None:
    config = _config(**data)
    assert build_server_settings(config) == {}
    assert build_check_args(config) == []


def test_cli_args_for_line_length_and_select() -> None:
    config = _config(lineLength=100, lint={"select": ["E", "F"]})
    assert build_check_args(config) == ["--line-length=100", "--select=E,F"]


def test_cli_args_follow_flag_order() -> None:
    config = _config(
        configuration="/etc/ruff.toml",
        lineLength=88,
        targetVersion="py311",
        exclude=["build", "dist"],
        lint={
            "preview": True,
            "useNoqa": False,
            "select": ["E"],
            "ignore": ["E501"],
            "extendSelect": ["B"],
            "extendIgnore": ["B008"],
            "fixable": ["ALL"],
            "unfixable": ["F401", "F841"],
        },
    )
    assert build_check_args(config) == [
        "--config=/etc/ruff.toml",
        "--line-length=88",
        "--target-version=py311",
        "--exclude=build",
        "--exclude=dist",
        "--preview",
        "--ignore-noqa",
        "--select=E",
        "--ignore=E501",
        "--extend-select=B",
        "--extend-ignore=B008",
        "--fixable=ALL",
        "--unfixable=F401,F841",
    ]


def test_server_settings_cover_every_section() -> None:
    config = _config(
        configuration="ruff.toml",
        lineLength=120,
        targetVersion="py312",
        exclude=["vendor"],
        lint={"enable": True, "preview": True, "select": ["E", "W"], "syntax": False},
        format={"preview": True, "indentStyle": "tab", "indentWidth": 2, "quoteStyle": "single"},
        codeAction={"fixViolation": {"enable": False}, "disableRuleComment": {"enable": False}},
        organizeImports=False,
        fixAll=False,
    )
    assert build_server_settings(config) == {
        "configuration": "ruff.toml",
        "lineLength": 120,
        "targetVersion": "py312",
        "exclude": ["vendor"],
        "lint": {"enable": True, "preview": True, "select": ["E", "W"]},
        "showSyntaxErrors": False,
        "format": {"preview": True, "indentStyle": "tab", "indentWidth": 2, "quoteStyle": "single"},
        "codeAction": {"fixViolation": {"enable": False}, "disableRuleComment": {"enable": False}},
        "organizeImports": False,
        "fixAll": False,
    }


def test_lint_enable_false_is_forwarded() -> None:
    assert build_server_settings(_config(lint={"enable": False})) == {"lint": {"enable": False}}


def test_use_noqa_false_is_asymmetric() -> None:
    config = _config(lint={"useNoqa": False})
    assert build_server_settings(config) == {"lint": {"ignoreNoqa": True}}
    assert build_check_args(config) == ["--ignore-noqa"]


def test_server_only_options_have_no_cli_flags() -> None:
    config = _config(format={"quoteStyle": "double"}, lint={"syntax": False}, fixAll=False)
    assert build_check_args(config) == []


def test_payload_wrappers() -> None:
    config = _config(lineLength=99)
    assert initialization_options(config) == {"settings": {"lineLength": 99}}
    assert workspace_configuration(config) == {"ruff": {"lineLength": 99}}
