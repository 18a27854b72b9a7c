# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Lifecycle service binding the scanner and supervisor to a host editor.

The host constructs one :class:`RuffIntegration`, calls :meth:`activate` when
the package loads and :meth:`deactivate` when it unloads. Nothing is kept in
module globals.
"""

from __future__ import annotations

import logging
import time
from typing import Final

from ..config.models import IdeRuffConfig
from ..core.logging import configure_logging
from ..core.models import ScanResult
from ..errors import BinaryNotFoundError, ErrorReporter, TransportError
from ..interfaces.editor import (
    CommandCallback,
    Disposable,
    EditorHost,
    IndieDelegate,
    LanguageClient,
    RegisterIndie,
)
from ..platform.paths import default_config_path
from ..scanner.project import PROJECT_DELEGATE_NAME, ProjectScanner
from ..server.deadline import SHUTDOWN_DEADLINE_SECONDS, call_with_deadline
from ..server.supervisor import SPAWN_REMEDIATION, ServerSupervisor

LOGGER = logging.getLogger(__name__)

COMMAND_TARGET: Final[str] = "atom-workspace"
RESTART_COMMAND: Final[str] = "ide-ruff:restart-server"
LINT_PROJECT_COMMAND: Final[str] = "ide-ruff:lint-project"
TOGGLE_NOQA_COMMAND: Final[str] = "ide-ruff:toggle-noqa"
GLOBAL_CONFIG_COMMAND: Final[str] = "ide-ruff:global-pyproject"
USE_NOQA_KEY: Final[str] = "lint.useNoqa"


class RuffIntegration:
    """Own the ruff scanner and server supervisor for one host session."""

    def __init__(
        self,
        host: EditorHost,
        client: LanguageClient,
        *,
        scanner: ProjectScanner | None = None,
        supervisor: ServerSupervisor | None = None,
        deadline: float = SHUTDOWN_DEADLINE_SECONDS,
    ) -> None:
        self.host = host
        self.client = client
        self.deadline = deadline
        self.scanner = scanner or ProjectScanner(self.config, host.project_paths)
        self.supervisor = supervisor or ServerSupervisor(
            self.config,
            host.notifications,
            open_external=host.open_external,
            on_binary_resolved=self.scanner.set_executable_path,
        )
        self._reporter = ErrorReporter(host.notifications)
        self._commands: Disposable | None = None
        self._project_delegate: IndieDelegate | None = None
        self._missing_binary_reported = False

    def config(self) -> IdeRuffConfig:
        """Return the current host configuration, validated."""

        return IdeRuffConfig.from_mapping(self.host.get_config())

    def commands(self) -> dict[str, CommandCallback]:
        """Return the zero-argument commands exposed to the host."""

        return {
            RESTART_COMMAND: self.restart_server,
            LINT_PROJECT_COMMAND: self.lint_project,
            TOGGLE_NOQA_COMMAND: self.toggle_noqa,
            GLOBAL_CONFIG_COMMAND: self.open_global_config,
        }

    def activate(self) -> Disposable:
        """Apply the logging preference, hand the server hooks to the client and register commands."""

        configure_logging(self.config().debug)
        self.client.bind_server_hooks(self.supervisor.hooks())
        self._commands = self.host.add_commands(COMMAND_TARGET, self.commands())
        return self._commands

    def lint_project(self) -> ScanResult | None:
        """Run a project scan, reporting a missing ruff binary once per session.

        Returns:
            ScanResult | None: Published result, or ``None`` when nothing was scanned.
        """

        if self.supervisor.resolve_binary() is None:
            if not self._missing_binary_reported:
                self._missing_binary_reported = True
                self._reporter.report(BinaryNotFoundError(self.config().ruff_executable, detail=SPAWN_REMEDIATION))
            return None
        self._missing_binary_reported = False
        return self.scanner.run_scan()

    def toggle_noqa(self) -> bool:
        """Flip ``lint.useNoqa`` and restart running servers.

        Returns:
            bool: The new ``useNoqa`` value.
        """

        enabled = not self.config().uses_noqa
        self.host.set_config(USE_NOQA_KEY, enabled)
        LOGGER.debug("useNoqa toggled to: %s", enabled)
        if self.supervisor.running:
            self.restart_server()
        return enabled

    def open_global_config(self) -> None:
        """Open ruff's user-level ``pyproject.toml`` in the host."""

        self.host.open_path(str(default_config_path()))

    def restart_server(self) -> bool:
        """Restart every ruff server, waiting at most :attr:`deadline` seconds.

        Returns:
            bool: ``True`` when the restart completed successfully.
        """

        notifications = self.host.notifications
        LOGGER.debug("Restarting Ruff server...")
        notifications.add_info("Restarting Ruff server...")
        try:
            finished = call_with_deadline(self.client.restart_all_servers, self.deadline)
        except Exception as exc:  # noqa: BLE001 - surfaced to the user below
            LOGGER.debug("Restart error: %s", exc)
            notifications.add_error("Failed to restart Ruff server.", description=str(exc))
            return False
        if not finished:
            LOGGER.warning("Ruff server restart did not finish within %.1fs", self.deadline)
            notifications.add_error(
                "Failed to restart Ruff server.",
                description=f"The restart did not finish within {self.deadline:g} seconds.",
            )
            return False
        notifications.add_success("Ruff server restarted.")
        LOGGER.debug("Ruff server restarted successfully.")
        return True

    def consume_linter(self, register_indie: RegisterIndie) -> IndieDelegate:
        """Bind live diagnostics to the client and create the project scan delegate.

        Args:
            register_indie: Host factory for linter delegates.

        Returns:
            IndieDelegate: Delegate used by the language client for live diagnostics.
        """

        lsp_delegate = self.client.consume_linter(register_indie)
        project_delegate = register_indie(name=PROJECT_DELEGATE_NAME, delete_on_open=True)
        self._project_delegate = project_delegate
        self.scanner.register(project_delegate)
        return lsp_delegate

    def deactivate(self) -> None:
        """Release host registrations and stop the client and every server within one deadline."""

        if self._commands is not None:
            self._commands.dispose()
            self._commands = None
        if self._project_delegate is not None:
            self._project_delegate.dispose()
            self._project_delegate = None
        self.scanner.dispose()

        expires = time.monotonic() + self.deadline
        try:
            if not call_with_deadline(self.client.shutdown, self.deadline):
                LOGGER.debug("Client shutdown exceeded %.1fs; continuing", self.deadline)
        except TransportError as exc:
            self._reporter.report(exc)
        except Exception as exc:  # noqa: BLE001 - teardown continues regardless of outcome
            LOGGER.debug("Deactivate error (ignored): %s", exc)

        self.supervisor.stop_all(max(expires - time.monotonic(), 0.0))


__all__ = [
    "COMMAND_TARGET",
    "GLOBAL_CONFIG_COMMAND",
    "LINT_PROJECT_COMMAND",
    "RESTART_COMMAND",
    "TOGGLE_NOQA_COMMAND",
    "RuffIntegration",
]
