# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Spawn and supervise ``ruff server`` processes for a generic LSP client.

The language client owns the transport. The supervisor only resolves the
binary, launches and tracks the server processes, provides the settings
payloads, and turns spawn and exit failures into at most one notification.
"""

from __future__ import annotations

import logging
import shutil

# Bandit: the server binary is resolved through ``shutil.which`` and launched
# with an argument list; no shell is involved.
import subprocess  # nosec B404
import threading
import time
from collections.abc import Callable, Mapping, Sequence
from typing import Any, Final, TypeAlias

from ..config.models import IdeRuffConfig
from ..errors import ErrorReporter, SpawnFailureError, TransportError, UnexpectedExitError
from ..interfaces.editor import NotificationButton, Notifier, ServerHooks
from ..settings.translator import initialization_options, workspace_configuration
from .channel import ServerChannel
from .deadline import SHUTDOWN_DEADLINE_SECONDS
from .middleware import MiddlewareChain, default_middleware

LOGGER = logging.getLogger(__name__)

SERVER_ARGS: Final[tuple[str, ...]] = ("server",)
INSTALL_URL: Final[str] = "https://docs.astral.sh/ruff/installation/"
SPAWN_REMEDIATION: Final[str] = (
    "Install ruff and ensure it's in your PATH, or set the executable path in settings."
)
INSTALL_GUIDANCE: Final[str] = (
    "Make sure ruff is installed. You can install it via:\n"
    "```\n"
    "pip install ruff\n"
    "# or\n"
    "pipx install ruff\n"
    "# or\n"
    "brew install ruff\n"
    "```"
)

ServerProcess: TypeAlias = subprocess.Popen[bytes]
Which: TypeAlias = Callable[[str], str | None]
Popen: TypeAlias = Callable[..., ServerProcess]


class ServerSupervisor:
    """Launch ``ruff server`` processes and report their failures."""

    def __init__(
        self,
        config_provider: Callable[[], IdeRuffConfig],
        notifier: Notifier,
        *,
        which: Which = shutil.which,
        popen: Popen = subprocess.Popen,
        open_external: Callable[[str], object] | None = None,
        on_binary_resolved: Callable[[str], object] | None = None,
        middleware: MiddlewareChain | None = None,
    ) -> None:
        self._config_provider = config_provider
        self._reporter = ErrorReporter(notifier)
        self._which = which
        self._popen = popen
        self._open_external = open_external
        self._on_binary_resolved = on_binary_resolved
        self.middleware = middleware or default_middleware()
        self.processes: set[ServerProcess] = set()
        self._stopping: set[ServerProcess] = set()
        self._lock = threading.Lock()
        self.binary_path: str | None = None
        self.binary_found = False

    def resolve_binary(self) -> str | None:
        """Resolve the configured executable and remember the outcome.

        Returns:
            str | None: Absolute path to ruff, or ``None`` when it is missing.
        """

        name = self._config_provider().ruff_executable
        resolved = self._which(name)
        if resolved is None:
            LOGGER.debug("Ruff not found: %s", name)
            self.binary_path = name
            self.binary_found = False
            return None
        LOGGER.debug("Ruff found: %s", resolved)
        self.binary_path = resolved
        self.binary_found = True
        if self._on_binary_resolved is not None:
            self._on_binary_resolved(resolved)
        return resolved

    def start_server_process(self, project_path: str) -> ServerProcess | None:
        """Spawn ``ruff server`` for ``project_path``.

        A missing binary is not reported here; later spawn and exit callbacks
        stay silent for it as well.

        Args:
            project_path: Project root used as the server's working directory.

        Returns:
            ServerProcess | None: Running process, or ``None`` when nothing was spawned.
        """

        resolved = self.resolve_binary()
        if resolved is None:
            return None
        LOGGER.debug("Project: %s", project_path)
        try:
            # Bandit: argument list built from a resolved executable path.
            process = self._popen(  # nosec B603
                [resolved, *SERVER_ARGS],
                cwd=project_path,
                stdin=subprocess.PIPE,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
            )
        except OSError as exc:
            self.on_spawn_error(exc)
            return None
        self._track(process)
        return process

    def _track(self, process: ServerProcess) -> None:
        with self._lock:
            self.processes.add(process)
        if process.stderr is not None:
            threading.Thread(
                target=_drain_stderr,
                args=(process,),
                name=f"ide-ruff-server-{process.pid}-stderr",
                daemon=True,
            ).start()
        watcher = threading.Thread(
            target=self._watch,
            args=(process,),
            name=f"ide-ruff-server-{process.pid}",
            daemon=True,
        )
        watcher.start()

    def _watch(self, process: ServerProcess) -> None:
        returncode = process.wait()
        with self._lock:
            self.processes.discard(process)
            intentional = process in self._stopping
            self._stopping.discard(process)
        if intentional:
            LOGGER.debug("Ruff server %s stopped", process.pid)
            return
        if returncode < 0:
            self.on_spawn_close(None, -returncode)
        else:
            self.on_spawn_close(returncode, None)

    def on_spawn_error(self, exc: OSError) -> None:
        """Notify the user that ruff could not be started.

        Args:
            exc: Error raised while spawning the process.
        """

        if not self.binary_found:
            return
        if isinstance(exc, FileNotFoundError):
            description = f"ruff executable not found at `{self.binary_path}`."
        else:
            description = f"Could not spawn ruff at `{self.binary_path}`."
        error = SpawnFailureError(
            "`ide-ruff` could not start ruff.",
            detail=f"{description}\n\n{SPAWN_REMEDIATION}",
        )
        self._reporter.report(error)

    def on_spawn_close(self, code: int | None, signal: int | None) -> None:
        """Notify the user when the server stops with a failure status.

        Args:
            code: Exit status, ``None`` when the process was signalled.
            signal: Terminating signal number, ``None`` for a normal exit.
        """

        if not self.binary_found:
            return
        if signal is not None or code is None or code == 0:
            return
        buttons: Sequence[NotificationButton] = ()
        if self._open_external is not None:
            buttons = (NotificationButton("Install Instructions", self._open_install_instructions),)
        self._reporter.report(UnexpectedExitError(code, detail=INSTALL_GUIDANCE), buttons=buttons)

    def _open_install_instructions(self) -> None:
        if self._open_external is not None:
            self._open_external(INSTALL_URL)

    def initialize_params(self, base: Mapping[str, Any]) -> dict[str, Any]:
        """Return ``base`` LSP initialize params with ruff's initialization options."""

        params = dict(base)
        params["initializationOptions"] = initialization_options(self._config_provider())
        LOGGER.debug("InitializationOptions: %s", params["initializationOptions"])
        return params

    def map_configuration(self) -> dict[str, Any]:
        """Return the ``workspace/configuration`` answer for the ruff section."""

        payload = workspace_configuration(self._config_provider())
        LOGGER.debug("mapConfigurationObject: %s", payload)
        return payload

    def hooks(self) -> ServerHooks:
        """Return the callbacks a language client uses to drive this supervisor."""

        return ServerHooks(
            start_server_process=self.start_server_process,
            initialize_params=self.initialize_params,
            map_configuration=self.map_configuration,
            wrap_notification=self.middleware.wrap,
        )

    def stop_all(self, deadline: float = SHUTDOWN_DEADLINE_SECONDS) -> None:
        """Stop every tracked server within ``deadline`` seconds.

        ruff rejects the LSP ``shutdown`` request, so each process receives the
        ``exit`` notification, then ``terminate`` and finally ``kill``.

        Args:
            deadline: Total seconds allowed for all processes.
        """

        with self._lock:
            targets = list(self.processes)
            self._stopping.update(targets)
        expires = time.monotonic() + deadline
        for process in targets:
            try:
                ServerChannel(process.stdin).notify("exit")
            except TransportError as exc:
                self._reporter.report(exc)
            if process.poll() is None:
                process.terminate()
            remaining = max(expires - time.monotonic(), 0.0)
            try:
                process.wait(timeout=remaining)
            except subprocess.TimeoutExpired:
                LOGGER.debug("Killing ruff server %s after deadline", process.pid)
                process.kill()
        with self._lock:
            self.processes.clear()

    @property
    def running(self) -> bool:
        """Return ``True`` while at least one server process is tracked."""

        return bool(self.processes)


def _drain_stderr(process: ServerProcess) -> None:
    """Forward the server's stderr to the debug log until the pipe closes."""

    stream = process.stderr
    if stream is None:
        return
    with stream:
        for line in stream:
            LOGGER.debug("ruff server %s: %s", process.pid, line.decode(errors="replace").rstrip())


__all__ = [
    "INSTALL_GUIDANCE",
    "INSTALL_URL",
    "SERVER_ARGS",
    "ServerSupervisor",
]
