# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Concrete configuration sources (standalone TOML, pyproject)."""

from __future__ import annotations

import logging
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from ..models import ConfigError, IdeRuffConfig

LOGGER = logging.getLogger(__name__)

PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "ide-ruff"
LOCAL_CONFIG_NAME: Final[str] = ".ide-ruff.toml"
PYPROJECT_NAME: Final[str] = "pyproject.toml"


class TomlConfigSource:
    """Load configuration data from a standalone TOML document."""

    def __init__(self, path: Path, *, name: str | None = None) -> None:
        self.path = path
        self.name = name or str(path)

    def load(self) -> Mapping[str, Any]:
        """Return the parsed document, or an empty mapping when the file is missing.

        Raises:
            ConfigError: If the document cannot be read or is not valid TOML.
        """

        if not self.path.is_file():
            return {}
        try:
            with self.path.open("rb") as handle:
                data = tomllib.load(handle)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"Configuration at {self.path} is not valid TOML: {exc}") from exc
        except UnicodeDecodeError as exc:
            raise ConfigError(f"Configuration at {self.path} is not valid UTF-8: {exc}") from exc
        except OSError as exc:
            raise ConfigError(f"Configuration at {self.path} could not be read: {exc}") from exc
        return data

    def describe(self) -> str:
        return f"TOML configuration at {self.name}"


class PyProjectConfigSource(TomlConfigSource):
    """Read configuration from ``[tool.ide-ruff]`` within ``pyproject.toml``."""

    def load(self) -> Mapping[str, Any]:
        data = super().load()
        tool_section = data.get(PYPROJECT_TOOL_KEY)
        if not isinstance(tool_section, Mapping):
            return {}
        section = tool_section.get(PYPROJECT_SECTION_KEY)
        if section is None:
            return {}
        if not isinstance(section, Mapping):
            raise ConfigError(f"[tool.{PYPROJECT_SECTION_KEY}] in {self.path} must be a table")
        return section

    def describe(self) -> str:
        return f"pyproject.toml ({self.name})"


def _select_source(root: Path, config_file: Path | None) -> TomlConfigSource | None:
    if config_file is not None:
        if not config_file.is_file():
            raise ConfigError(f"Configuration file {config_file} does not exist")
        if config_file.name == PYPROJECT_NAME:
            return PyProjectConfigSource(config_file)
        return TomlConfigSource(config_file)
    local = root / LOCAL_CONFIG_NAME
    if local.is_file():
        return TomlConfigSource(local)
    pyproject = root / PYPROJECT_NAME
    if pyproject.is_file():
        return PyProjectConfigSource(pyproject)
    return None


def load_config(root: Path, *, config_file: Path | None = None) -> IdeRuffConfig:
    """Return the validated configuration for ``root``.

    An explicit ``config_file`` wins, then ``.ide-ruff.toml`` in ``root``,
    then ``[tool.ide-ruff]`` in ``root/pyproject.toml``. With no source the
    defaults apply, which defer every ruff option to ruff itself.

    Args:
        root: Project directory used for discovery.
        config_file: Optional explicit configuration document.

    Returns:
        IdeRuffConfig: Validated configuration.

    Raises:
        ConfigError: If the selected document is missing or malformed.
    """

    source = _select_source(root, config_file)
    if source is None:
        LOGGER.debug("No ide-ruff configuration found under %s; using defaults", root)
        return IdeRuffConfig()
    LOGGER.debug("Loading %s", source.describe())
    return IdeRuffConfig.from_mapping(source.load())


__all__ = ["LOCAL_CONFIG_NAME", "PyProjectConfigSource", "TomlConfigSource", "load_config"]
