# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Protocol interfaces describing the host editor collaborators."""

from __future__ import annotations

from .editor import (
    Disposable,
    EditorHost,
    IndieDelegate,
    LanguageClient,
    NotificationButton,
    Notifier,
    RegisterIndie,
    ServerHooks,
)

__all__ = [
    "Disposable",
    "EditorHost",
    "IndieDelegate",
    "LanguageClient",
    "NotificationButton",
    "Notifier",
    "RegisterIndie",
    "ServerHooks",
]
