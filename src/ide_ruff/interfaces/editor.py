# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Host editor service interfaces consumed by the integration."""

# pylint: disable=too-few-public-methods -- Protocol definitions intentionally expose minimal method surfaces.

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Protocol, TypeAlias, runtime_checkable

CommandCallback: TypeAlias = Callable[[], object]


@dataclass(frozen=True, slots=True)
class NotificationButton:
    """Action button attached to a host notification."""

    text: str
    on_click: Callable[[], object]


@dataclass(frozen=True, slots=True)
class ServerHooks:
    """Callbacks a language client invokes around each ruff server it manages.

    Attributes:
        start_server_process: Spawn ``ruff server`` for a project path and return
            the process, or ``None`` when nothing could be started.
        initialize_params: Extend the base LSP ``initialize`` params.
        map_configuration: Answer ``workspace/configuration`` pulls.
        wrap_notification: Wrap a handler for an incoming server notification
            so the integration can rewrite its params first.
    """

    start_server_process: Callable[[str], object]
    initialize_params: Callable[[Mapping[str, Any]], dict[str, Any]]
    map_configuration: Callable[[], dict[str, Any]]
    wrap_notification: Callable[[str, Callable[[dict[str, Any]], object]], Callable[[dict[str, Any]], object]]


@runtime_checkable
class Disposable(Protocol):
    """Handle releasing a host registration."""

    def dispose(self) -> None:
        """Release the underlying registration."""

        raise NotImplementedError


@runtime_checkable
class Notifier(Protocol):
    """User-visible notification surface of the host."""

    def add_info(self, message: str) -> None:
        """Show an informational notification."""

        raise NotImplementedError

    def add_success(self, message: str) -> None:
        """Show a success notification."""

        raise NotImplementedError

    def add_error(
        self,
        message: str,
        *,
        description: str | None = None,
        dismissable: bool = False,
        buttons: Sequence[NotificationButton] = (),
    ) -> None:
        """Show an error notification with optional detail and actions."""

        raise NotImplementedError


@runtime_checkable
class IndieDelegate(Protocol):
    """Replaceable batch sink for linter messages outside the live stream."""

    def set_all_messages(self, messages: Sequence[Mapping[str, Any]], *, show_project_view: bool = False) -> None:
        """Replace every message owned by the delegate with ``messages``."""

        raise NotImplementedError

    def clear_messages(self) -> None:
        """Remove every message owned by the delegate."""

        raise NotImplementedError

    def dispose(self) -> None:
        """Unregister the delegate from the host."""

        raise NotImplementedError


@runtime_checkable
class RegisterIndie(Protocol):
    """Callable exposed by the host linter package to create delegates."""

    def __call__(self, *, name: str, delete_on_open: bool = False) -> IndieDelegate:
        """Return a new delegate registered under ``name``."""

        raise NotImplementedError


@runtime_checkable
class LanguageClient(Protocol):
    """Generic language-server client owning the LSP transport."""

    def bind_server_hooks(self, hooks: ServerHooks) -> None:
        """Route server spawning, settings and notifications through ``hooks``."""

        raise NotImplementedError

    def restart_all_servers(self) -> None:
        """Stop and relaunch every running server."""

        raise NotImplementedError

    def shutdown(self) -> None:
        """Stop every running server."""

        raise NotImplementedError

    def consume_linter(self, register_indie: RegisterIndie) -> IndieDelegate:
        """Bind live LSP diagnostics to a delegate created via ``register_indie``."""

        raise NotImplementedError


@runtime_checkable
class EditorHost(Protocol):
    """Editor services used by the integration lifecycle."""

    @property
    def notifications(self) -> Notifier:
        """Return the host notification surface."""

        raise NotImplementedError

    def get_config(self) -> Mapping[str, Any]:
        """Return the package configuration mapping."""

        raise NotImplementedError

    def set_config(self, key_path: str, value: object) -> None:
        """Persist ``value`` under the dotted ``key_path``."""

        raise NotImplementedError

    def project_paths(self) -> Sequence[str]:
        """Return the open project root directories."""

        raise NotImplementedError

    def open_path(self, path: str) -> None:
        """Open ``path`` in an editor pane."""

        raise NotImplementedError

    def open_external(self, url: str) -> None:
        """Open ``url`` in the system browser."""

        raise NotImplementedError

    def add_commands(self, target: str, commands: Mapping[str, CommandCallback]) -> Disposable:
        """Register zero-argument ``commands`` on ``target``."""

        raise NotImplementedError


__all__ = [
    "CommandCallback",
    "Disposable",
    "EditorHost",
    "IndieDelegate",
    "LanguageClient",
    "NotificationButton",
    "Notifier",
    "RegisterIndie",
    "ServerHooks",
]
