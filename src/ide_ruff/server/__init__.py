# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Language server process supervision."""

from __future__ import annotations

from .channel import ServerChannel
from .deadline import SHUTDOWN_DEADLINE_SECONDS, call_with_deadline
from .middleware import PUBLISH_DIAGNOSTICS, MiddlewareChain, default_middleware, prefix_diagnostic_codes
from .supervisor import ServerSupervisor

__all__ = [
    "PUBLISH_DIAGNOSTICS",
    "SHUTDOWN_DEADLINE_SECONDS",
    "MiddlewareChain",
    "ServerChannel",
    "ServerSupervisor",
    "call_with_deadline",
    "default_middleware",
    "prefix_diagnostic_codes",
]
