# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Settings translation for the ruff language server and ``ruff check``.

Both representations only carry options the user set explicitly. Absent,
zero and empty values are dropped so ruff falls back to its own
``pyproject.toml``/``ruff.toml`` discovery.

The two outputs are not symmetric: ``lint.useNoqa = false`` becomes
``ignoreNoqa: true`` for the server but ``--ignore-noqa`` on the command line,
and several server-only options have no CLI counterpart.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Final

from ..config.models import IdeRuffConfig

SERVER_SECTION_KEY: Final[str] = "ruff"

_LINT_LIST_OPTIONS: Final[tuple[tuple[str, str, str], ...]] = (
    # (config attribute, server key, CLI flag)
    ("select", "select", "--select"),
    ("ignore", "ignore", "--ignore"),
    ("extend_select", "extendSelect", "--extend-select"),
    ("extend_ignore", "extendIgnore", "--extend-ignore"),
    ("fixable", "fixable", "--fixable"),
    ("unfixable", "unfixable", "--unfixable"),
)


def _non_empty(values: Sequence[str] | None) -> list[str] | None:
    if not values:
        return None
    return list(values)


def _positive(value: int | None) -> int | None:
    if value is None or value <= 0:
        return None
    return value


def _build_lint_settings(config: IdeRuffConfig) -> dict[str, Any]:
    lint = config.lint
    settings: dict[str, Any] = {}
    if lint.enable is not None:
        settings["enable"] = lint.enable
    if lint.preview is True:
        settings["preview"] = True
    if lint.use_noqa is False:
        settings["ignoreNoqa"] = True
    for attribute, key, _flag in _LINT_LIST_OPTIONS:
        values = _non_empty(getattr(lint, attribute))
        if values is not None:
            settings[key] = values
    return settings


def _build_format_settings(config: IdeRuffConfig) -> dict[str, Any]:
    fmt = config.format
    settings: dict[str, Any] = {}
    if fmt.preview is True:
        settings["preview"] = True
    if fmt.indent_style:
        settings["indentStyle"] = fmt.indent_style
    indent_width = _positive(fmt.indent_width)
    if indent_width is not None:
        settings["indentWidth"] = indent_width
    if fmt.quote_style:
        settings["quoteStyle"] = fmt.quote_style
    return settings


def _build_code_action_settings(config: IdeRuffConfig) -> dict[str, Any]:
    actions = config.code_action
    settings: dict[str, Any] = {}
    if actions.fix_violation.enable is False:
        settings["fixViolation"] = {"enable": False}
    if actions.disable_rule_comment.enable is False:
        settings["disableRuleComment"] = {"enable": False}
    return settings


def build_server_settings(config: IdeRuffConfig) -> dict[str, Any]:
    """Return the ruff server settings object for ``config``.

    Args:
        config: Validated ide-ruff configuration.

    Returns:
        dict[str, Any]: Settings suitable for ``initializationOptions.settings``.
    """

    settings: dict[str, Any] = {}
    if config.configuration:
        settings["configuration"] = config.configuration
    line_length = _positive(config.line_length)
    if line_length is not None:
        settings["lineLength"] = line_length
    if config.target_version:
        settings["targetVersion"] = config.target_version
    exclude = _non_empty(config.exclude)
    if exclude is not None:
        settings["exclude"] = exclude

    lint = _build_lint_settings(config)
    if lint:
        settings["lint"] = lint
    if config.lint.syntax is False:
        settings["showSyntaxErrors"] = False

    fmt = _build_format_settings(config)
    if fmt:
        settings["format"] = fmt
    code_action = _build_code_action_settings(config)
    if code_action:
        settings["codeAction"] = code_action

    if config.organize_imports is False:
        settings["organizeImports"] = False
    if config.fix_all is False:
        settings["fixAll"] = False
    return settings


def build_check_args(config: IdeRuffConfig) -> list[str]:
    """Return ``ruff check`` flags equivalent to ``config``.

    Args:
        config: Validated ide-ruff configuration.

    Returns:
        list[str]: Flags in ``--flag=value`` form, lists joined by commas.
    """

    args: list[str] = []
    if config.configuration:
        args.append(f"--config={config.configuration}")
    line_length = _positive(config.line_length)
    if line_length is not None:
        args.append(f"--line-length={line_length}")
    if config.target_version:
        args.append(f"--target-version={config.target_version}")
    args.extend(f"--exclude={pattern}" for pattern in config.exclude or ())

    lint = config.lint
    if lint.preview is True:
        args.append("--preview")
    if lint.use_noqa is False:
        args.append("--ignore-noqa")
    for attribute, _key, flag in _LINT_LIST_OPTIONS:
        values = _non_empty(getattr(lint, attribute))
        if values is not None:
            args.append(f"{flag}={','.join(values)}")
    return args


def initialization_options(config: IdeRuffConfig) -> dict[str, Any]:
    """Return the ``initializationOptions`` payload sent at server start."""

    return {"settings": build_server_settings(config)}


def workspace_configuration(config: IdeRuffConfig) -> dict[str, Any]:
    """Return the answer to a ``workspace/configuration`` pull."""

    return {SERVER_SECTION_KEY: build_server_settings(config)}


__all__ = [
    "SERVER_SECTION_KEY",
    "build_check_args",
    "build_server_settings",
    "initialization_options",
    "workspace_configuration",
]
