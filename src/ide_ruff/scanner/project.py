# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run ``ruff check`` over every project root and publish the findings.

Scans are best effort. A root whose invocation fails, writes to stderr or
prints unparsable output contributes nothing, and the remaining roots are
still reported. Roots are processed one at a time so at most one ruff child
process exists per scan.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Mapping, Sequence
from pathlib import Path
from subprocess import CompletedProcess
from typing import Any, Final, Protocol, TypeAlias

from pydantic import ValidationError

from ..config.models import IdeRuffConfig
from ..core.models import NormalizedDiagnostic, RawFinding, ScanResult
from ..core.runtime.process import (
    CommandOptions,
    OutputLimitExceeded,
    SubprocessExecutionError,
    run_command,
)
from ..diagnostics.conversion import convert_finding
from ..errors import ScanParseError
from ..interfaces.editor import IndieDelegate
from ..parsers.ruff import parse_findings
from ..settings.translator import build_check_args

LOGGER = logging.getLogger(__name__)

SCAN_TIMEOUT_SECONDS: Final[float] = 100.0
MAX_OUTPUT_BYTES: Final[int] = 100 * 1024 * 1024
PROJECT_DELEGATE_NAME: Final[str] = "Ruff/Project"
CHECK_BASE_ARGS: Final[tuple[str, ...]] = ("check", "--quiet", "--output-format=json")

ConfigProvider: TypeAlias = Callable[[], IdeRuffConfig]
RootsProvider: TypeAlias = Callable[[], Sequence[str]]


class CommandRunner(Protocol):
    """Callable executing a command and capturing its output."""

    def __call__(self, args: Sequence[str], *, options: CommandOptions | None = None) -> CompletedProcess[str]:
        """Run ``args`` and return the completed process."""

        raise NotImplementedError


class ProjectScanner:
    """Lint every open project root with ``ruff check`` and replace the sink's messages."""

    def __init__(
        self,
        config_provider: ConfigProvider,
        roots_provider: RootsProvider,
        *,
        runner: CommandRunner = run_command,
    ) -> None:
        self._config_provider = config_provider
        self._roots_provider = roots_provider
        self._runner = runner
        self._delegate: IndieDelegate | None = None
        self._executable: str | None = None
        self._scanning = False
        self._guard = threading.Lock()

    def register(self, delegate: IndieDelegate) -> None:
        """Store the sink that receives scan results."""

        self._delegate = delegate

    @property
    def delegate(self) -> IndieDelegate | None:
        return self._delegate

    @property
    def scanning(self) -> bool:
        """Return ``True`` while a scan is in flight."""

        return self._scanning

    def set_executable_path(self, path: str) -> None:
        """Use ``path`` as the ruff binary for subsequent scans."""

        self._executable = path

    def executable_path(self, config: IdeRuffConfig | None = None) -> str:
        """Return the resolved binary, falling back to the configured executable name."""

        if self._executable:
            return self._executable
        return (config or self._config_provider()).ruff_executable

    def build_command(self, root: str, config: IdeRuffConfig | None = None) -> list[str]:
        """Return the full ``ruff check`` command for ``root``.

        Args:
            root: Project directory to lint.
            config: Configuration snapshot; read from the provider when omitted.

        Returns:
            list[str]: Executable followed by its arguments.
        """

        active = config or self._config_provider()
        return [self.executable_path(active), *CHECK_BASE_ARGS, *build_check_args(active), root]

    def convert_message(
        self,
        file_path: str,
        finding: RawFinding | Mapping[str, Any],
        *,
        config: IdeRuffConfig | None = None,
    ) -> NormalizedDiagnostic | None:
        """Normalise one finding, honouring the syntax error display toggle.

        Args:
            file_path: File reported for the finding.
            finding: Decoded finding or the raw JSON mapping.
            config: Configuration snapshot; read from the provider when omitted.

        Returns:
            NormalizedDiagnostic | None: Display record or ``None`` when dropped.
        """

        if not isinstance(finding, RawFinding):
            try:
                finding = RawFinding.model_validate(dict(finding))
            except ValidationError as exc:
                LOGGER.debug("Dropping malformed finding for %s: %s", file_path, exc)
                return None
        active = config or self._config_provider()
        return convert_finding(file_path, finding, show_syntax_errors=active.shows_syntax_errors)

    def run_scan(self) -> ScanResult | None:
        """Scan every project root and replace the sink's messages.

        A call made while another scan is running, before a sink is
        registered, or with no project roots open does nothing.

        Returns:
            ScanResult | None: Published result, or ``None`` when nothing was published.
        """

        with self._guard:
            if self._delegate is None or self._scanning:
                return None
            self._scanning = True
        delegate = self._delegate
        try:
            roots = list(self._roots_provider())
            if not roots:
                return None
            config = self._config_provider()
            LOGGER.debug("Starting project scan of %d root(s)", len(roots))
            result = self._scan_roots(roots, config)
            delegate.set_all_messages(result.to_messages(), show_project_view=True)
            LOGGER.debug("Project scan complete: %d issues found", len(result.diagnostics))
            return result
        except Exception:  # noqa: BLE001 - a failed scan must never reach the host command loop
            LOGGER.exception("Project scan failed")
            return None
        finally:
            self._scanning = False

    def _scan_roots(self, roots: Sequence[str], config: IdeRuffConfig) -> ScanResult:
        diagnostics: list[NormalizedDiagnostic] = []
        failed: list[str] = []
        for root in roots:
            LOGGER.debug("Scanning: %s", root)
            findings = self._exec_ruff(root, config)
            if findings is None:
                failed.append(root)
                continue
            for finding in findings:
                if not finding.filename:
                    continue
                diagnostic = self.convert_message(finding.filename, finding, config=config)
                if diagnostic is not None:
                    diagnostics.append(diagnostic)
        return ScanResult(diagnostics=tuple(diagnostics), roots=tuple(roots), failed_roots=tuple(failed))

    def _exec_ruff(self, root: str, config: IdeRuffConfig) -> list[RawFinding] | None:
        """Return the findings for ``root`` or ``None`` when the invocation failed."""

        args = self.build_command(root, config)
        LOGGER.debug("Project scan args: %s", args)
        options = CommandOptions(
            cwd=Path(root),
            timeout=SCAN_TIMEOUT_SECONDS,
            max_output_bytes=MAX_OUTPUT_BYTES,
        )
        try:
            completed = self._runner(args, options=options)
        except (OSError, ValueError, OutputLimitExceeded, SubprocessExecutionError) as exc:
            LOGGER.warning("Project scan of %s failed: %s", root, exc)
            return None
        if completed.stderr:
            LOGGER.warning("Project scan stderr for %s: %s", root, completed.stderr.strip())
            return None
        try:
            return parse_findings(completed.stdout or "")
        except ScanParseError as exc:
            LOGGER.warning("Project scan JSON parse error for %s: %s", root, exc)
            return None

    def clear_messages(self) -> None:
        """Remove every project scan message from the sink."""

        if self._delegate is not None:
            self._delegate.clear_messages()

    def dispose(self) -> None:
        """Release the sink reference."""

        self._delegate = None


__all__ = [
    "CHECK_BASE_ARGS",
    "MAX_OUTPUT_BYTES",
    "PROJECT_DELEGATE_NAME",
    "SCAN_TIMEOUT_SECONDS",
    "CommandRunner",
    "ProjectScanner",
]
