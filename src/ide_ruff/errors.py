# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Typed error taxonomy for server supervision and project scans.

Every failure is tagged with an :class:`ErrorKind` where it originates so the
reporting boundary can decide between a user notification and a silent
degradation without inspecting message text.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from enum import Enum

from .interfaces.editor import NotificationButton, Notifier

LOGGER = logging.getLogger(__name__)


class ErrorKind(str, Enum):
    """Enumerate the failure classes the integration distinguishes."""

    BINARY_NOT_FOUND = "binary_not_found"
    SPAWN_FAILURE = "spawn_failure"
    UNEXPECTED_EXIT = "unexpected_exit"
    SCAN_PARSE_FAILURE = "scan_parse_failure"
    TRANSIENT_STREAM = "transient_stream"


class IdeRuffError(RuntimeError):
    """Base class for integration failures carrying an :class:`ErrorKind`."""

    kind: ErrorKind = ErrorKind.SPAWN_FAILURE

    def __init__(self, message: str, *, detail: str | None = None) -> None:
        """Initialise the error with a headline and optional detail text.

        Args:
            message: Short human-readable summary of the failure.
            detail: Longer remediation or diagnostic text.
        """

        super().__init__(message)
        self.detail = detail


class BinaryNotFoundError(IdeRuffError):
    """Raised when the ruff executable cannot be resolved."""

    kind = ErrorKind.BINARY_NOT_FOUND

    def __init__(self, executable: str, *, detail: str | None = None) -> None:
        super().__init__(f"ruff executable not found: {executable}", detail=detail)
        self.executable = executable


class SpawnFailureError(IdeRuffError):
    """Raised when a resolved ruff binary could not be started."""

    kind = ErrorKind.SPAWN_FAILURE


class UnexpectedExitError(IdeRuffError):
    """Raised when the ruff server stops with a non-zero status."""

    kind = ErrorKind.UNEXPECTED_EXIT

    def __init__(self, returncode: int, *, detail: str | None = None) -> None:
        super().__init__("ruff language server stopped unexpectedly.", detail=detail)
        self.returncode = returncode


class ScanParseError(IdeRuffError):
    """Raised when ``ruff check`` output cannot be decoded."""

    kind = ErrorKind.SCAN_PARSE_FAILURE


class TransportError(IdeRuffError):
    """Raised by the server channel when the stdio stream fails."""

    kind = ErrorKind.TRANSIENT_STREAM

    def __init__(self, message: str, *, expected_during_shutdown: bool) -> None:
        super().__init__(message)
        self.expected_during_shutdown = expected_during_shutdown


class ErrorReporter:
    """Route integration failures to the user or to the debug log."""

    def __init__(self, notifier: Notifier) -> None:
        self._notifier = notifier

    def report(self, exc: BaseException, *, buttons: Sequence[NotificationButton] = ()) -> bool:
        """Report ``exc`` and return ``True`` when it reached the user.

        Transport errors tagged as expected during shutdown, and scan parse
        failures, are logged only. Everything else becomes a single error
        notification.

        Args:
            exc: Failure raised by a collaborator.
            buttons: Actions attached to the notification.

        Returns:
            bool: ``True`` when a notification was emitted.
        """

        if isinstance(exc, TransportError) and exc.expected_during_shutdown:
            LOGGER.debug("Suppressed stream error: %s", exc)
            return False
        if isinstance(exc, ScanParseError):
            LOGGER.warning("Project scan output could not be parsed: %s", exc)
            return False
        if isinstance(exc, IdeRuffError):
            self._notifier.add_error(str(exc), description=exc.detail, dismissable=True, buttons=buttons)
        else:
            self._notifier.add_error("ide-ruff encountered an error.", description=str(exc), dismissable=True)
        return True


__all__ = [
    "BinaryNotFoundError",
    "ErrorKind",
    "ErrorReporter",
    "IdeRuffError",
    "ScanParseError",
    "SpawnFailureError",
    "TransportError",
    "UnexpectedExitError",
]
