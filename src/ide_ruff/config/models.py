# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models mirroring the host's ``ide-ruff`` settings.

Every ruff option defaults to ``None``. An absent option means "let ruff use
its own file-based configuration", so translators must never turn a missing
value into an explicit flag.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


_MODEL_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    extra="ignore",
    frozen=True,
)


def _coerce_str_list(value: object) -> object:
    """Accept a comma separated string wherever a list of selectors is expected."""

    if isinstance(value, str):
        return [item.strip() for item in value.split(",") if item.strip()]
    return value


class ToggleConfig(BaseModel):
    """Single ``enable`` switch used by code action settings."""

    model_config = _MODEL_CONFIG

    enable: bool | None = None


class LintConfig(BaseModel):
    """Lint options forwarded to ruff."""

    model_config = _MODEL_CONFIG

    enable: bool | None = None
    preview: bool | None = None
    use_noqa: bool | None = None
    syntax: bool | None = None
    select: list[str] | None = None
    ignore: list[str] | None = None
    extend_select: list[str] | None = None
    extend_ignore: list[str] | None = None
    fixable: list[str] | None = None
    unfixable: list[str] | None = None

    @field_validator(
        "select",
        "ignore",
        "extend_select",
        "extend_ignore",
        "fixable",
        "unfixable",
        mode="before",
    )
    @classmethod
    def _split_selectors(cls, value: object) -> object:
        return _coerce_str_list(value)


class FormatConfig(BaseModel):
    """Formatter options forwarded to the ruff server."""

    model_config = _MODEL_CONFIG

    preview: bool | None = None
    indent_style: Literal["space", "tab"] | None = None
    indent_width: int | None = None
    quote_style: Literal["double", "single", "preserve"] | None = None


class CodeActionConfig(BaseModel):
    """Code action toggles exposed by the ruff server."""

    model_config = _MODEL_CONFIG

    fix_violation: ToggleConfig = Field(default_factory=ToggleConfig)
    disable_rule_comment: ToggleConfig = Field(default_factory=ToggleConfig)


class IdeRuffConfig(BaseModel):
    """Top-level ``ide-ruff`` configuration."""

    model_config = _MODEL_CONFIG

    ruff_executable: str = "ruff"
    debug: bool = False
    configuration: str | None = None
    line_length: int | None = None
    target_version: str | None = None
    exclude: list[str] | None = None
    lint: LintConfig = Field(default_factory=LintConfig)
    format: FormatConfig = Field(default_factory=FormatConfig)
    code_action: CodeActionConfig = Field(default_factory=CodeActionConfig)
    organize_imports: bool | None = None
    fix_all: bool | None = None

    @field_validator("exclude", mode="before")
    @classmethod
    def _split_exclude(cls, value: object) -> object:
        return _coerce_str_list(value)

    @field_validator("ruff_executable", mode="before")
    @classmethod
    def _default_executable(cls, value: object) -> object:
        if value is None or (isinstance(value, str) and not value.strip()):
            return "ruff"
        return value

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> IdeRuffConfig:
        """Validate a raw configuration mapping.

        Args:
            data: Host configuration mapping, possibly ``None`` or sparse.

        Returns:
            IdeRuffConfig: Validated configuration.

        Raises:
            ConfigError: If ``data`` contains values of the wrong shape.
        """

        try:
            return cls.model_validate(dict(data or {}))
        except ValidationError as exc:
            raise ConfigError(f"Invalid ide-ruff configuration: {exc}") from exc

    @property
    def uses_noqa(self) -> bool:
        """Return whether ``noqa`` comments are honoured; absent counts as ``True``."""

        return self.lint.use_noqa is not False

    @property
    def shows_syntax_errors(self) -> bool:
        """Return whether syntax errors should be displayed; absent counts as ``True``."""

        return self.lint.syntax is not False

    def with_toggled_noqa(self) -> IdeRuffConfig:
        """Return a copy with ``lint.useNoqa`` inverted."""

        lint = self.lint.model_copy(update={"use_noqa": not self.uses_noqa})
        return self.model_copy(update={"lint": lint})

    def to_mapping(self) -> dict[str, Any]:
        """Return the explicitly set options using the host's camelCase keys."""

        return self.model_dump(by_alias=True, exclude_none=True)


__all__ = [
    "CodeActionConfig",
    "ConfigError",
    "FormatConfig",
    "IdeRuffConfig",
    "LintConfig",
    "ToggleConfig",
]
