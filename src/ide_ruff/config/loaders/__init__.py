# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration sources backed by TOML documents."""

from __future__ import annotations

from .sources import PyProjectConfigSource, TomlConfigSource, load_config

__all__ = ["PyProjectConfigSource", "TomlConfigSource", "load_config"]
