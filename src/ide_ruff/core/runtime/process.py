# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Safe wrappers around ``subprocess`` execution."""

from __future__ import annotations

import shutil

# Bandit: subprocess usage is intentional; the wrapper normalises arguments
# and never enables ``shell=True``.
import subprocess  # nosec B404
import threading
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from subprocess import CompletedProcess
from typing import IO, Final

TIMEOUT_RETURNCODE: Final[int] = 124
_READ_CHUNK_BYTES: Final[int] = 64 * 1024


@dataclass(frozen=True, slots=True)
class CommandOptions:
    """Immutable command execution options."""

    cwd: Path | None = None
    env: Mapping[str, str] | None = None
    check: bool = False
    capture_output: bool = True
    text: bool = True
    timeout: float | None = None
    max_output_bytes: int | None = None


class SubprocessExecutionError(RuntimeError):
    """Raised when a subprocess exits with a non-zero status while ``check`` is true."""

    def __init__(
        self,
        command: Sequence[str],
        returncode: int,
        stdout: str | None,
        stderr: str | None,
    ) -> None:
        super().__init__(
            f"Command '{command[0]}' exited with status {returncode}. stderr: {stderr or '<none>'}",
        )
        self.command = tuple(command)
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr


class OutputLimitExceeded(RuntimeError):
    """Raised when captured output grows past :attr:`CommandOptions.max_output_bytes`."""

    def __init__(self, command: Sequence[str], size: int, limit: int) -> None:
        super().__init__(f"Command '{command[0]}' produced {size} bytes of output (limit {limit})")
        self.command = tuple(command)
        self.size = size
        self.limit = limit


def _ensure_text(value: str | bytes | None) -> str | None:
    if value is None or isinstance(value, str):
        return value
    return value.decode(errors="ignore")


def _normalize_args(args: Sequence[str]) -> list[str]:
    """Return ``args`` with the executable resolved to an absolute path.

    Args:
        args: Raw command arguments supplied by the caller.

    Returns:
        list[str]: Validated argument list suitable for subprocess execution.

    Raises:
        ValueError: If no arguments are provided.
        FileNotFoundError: If the executable cannot be resolved on ``PATH``.
    """

    if not args:
        msg = "subprocess command requires at least one argument"
        raise ValueError(msg)

    head, *rest = args
    head_path = Path(head)
    if head_path.is_absolute():
        return [str(head_path), *rest]

    resolved = shutil.which(head)
    if resolved is None:
        msg = f"Executable '{head}' was not found on PATH"
        raise FileNotFoundError(msg)
    return [resolved, *rest]


def _timed_out(
    command: Sequence[str],
    stdout: str | None,
    stderr: str | None,
    timeout: float | None,
) -> CompletedProcess[str]:
    timeout_msg = f"Command timed out after {timeout:.1f}s" if timeout is not None else "Command timed out"
    combined_stderr = f"{stderr}\n{timeout_msg}" if stderr else timeout_msg
    return subprocess.CompletedProcess(
        args=list(command),
        returncode=TIMEOUT_RETURNCODE,
        stdout=stdout or "",
        stderr=combined_stderr,
    )


class _OutputBudget:
    """Byte budget shared by the pipes of one process; kills it when spent."""

    def __init__(self, process: subprocess.Popen[bytes], limit: int) -> None:
        self._process = process
        self._lock = threading.Lock()
        self.limit = limit
        self.total = 0
        self.exceeded = False

    def consume(self, size: int) -> bool:
        """Charge ``size`` bytes and return ``False`` once the budget is exhausted."""

        with self._lock:
            self.total += size
            if self.total <= self.limit:
                return True
            if not self.exceeded:
                self.exceeded = True
                self._process.kill()
            return False


class _PipeReader:
    """Drain one pipe in chunks until EOF or until the budget runs out."""

    def __init__(self, stream: IO[bytes], budget: _OutputBudget) -> None:
        self._stream = stream
        self._budget = budget
        self._chunks: list[bytes] = []

    def __call__(self) -> None:
        with self._stream:
            while chunk := self._stream.read1(_READ_CHUNK_BYTES):
                if not self._budget.consume(len(chunk)):
                    return
                self._chunks.append(chunk)

    def decoded(self, text: bool) -> str | bytes:
        data = b"".join(self._chunks)
        return data.decode(errors="replace") if text else data


def _run_capped(command: list[str], options: CommandOptions, limit: int) -> CompletedProcess[str]:
    """Run ``command`` while enforcing ``limit`` on its combined output as it streams.

    Raises:
        OutputLimitExceeded: Once stdout and stderr together pass ``limit`` bytes;
            the child is killed at that point.
    """

    # Bandit: argument list from :func:`_normalize_args`, no shell involved.
    process = subprocess.Popen(  # nosec B603
        command,
        cwd=str(options.cwd) if options.cwd is not None else None,
        env=dict(options.env) if options.env is not None else None,
        stdin=subprocess.DEVNULL,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
    )
    budget = _OutputBudget(process, limit)
    assert process.stdout is not None and process.stderr is not None
    readers = (_PipeReader(process.stdout, budget), _PipeReader(process.stderr, budget))
    threads = [threading.Thread(target=reader, name="ide-ruff-pipe", daemon=True) for reader in readers]
    for thread in threads:
        thread.start()

    timed_out = False
    try:
        returncode = process.wait(timeout=options.timeout)
    except subprocess.TimeoutExpired:
        process.kill()
        returncode = process.wait()
        timed_out = True
    for thread in threads:
        thread.join()

    if budget.exceeded:
        raise OutputLimitExceeded(command, budget.total, limit)
    stdout, stderr = (_ensure_text(reader.decoded(options.text)) for reader in readers)
    if timed_out:
        return _timed_out(command, stdout, stderr, options.timeout)
    return subprocess.CompletedProcess(args=command, returncode=returncode, stdout=stdout, stderr=stderr)


def run_command(args: Sequence[str], *, options: CommandOptions | None = None) -> CompletedProcess[str]:
    """Execute ``args`` after normalising the executable path.

    A timeout does not raise; it yields a completed result with return code
    ``124`` and a note appended to stderr. With ``max_output_bytes`` set the
    pipes are read incrementally and the child is killed as soon as the cap
    is passed.

    Args:
        args: Command and argument sequence to execute.
        options: Options configuring execution semantics.

    Returns:
        CompletedProcess: Subprocess execution metadata.

    Raises:
        FileNotFoundError: If the executable cannot be resolved on ``PATH``.
        OutputLimitExceeded: When the output grows larger than the configured cap.
        SubprocessExecutionError: When ``check`` is true and the process exits
            with a non-zero status.
    """

    normalized = _normalize_args(args)
    resolved = options or CommandOptions()

    if resolved.max_output_bytes is not None and resolved.capture_output:
        completed = _run_capped(normalized, resolved, resolved.max_output_bytes)
    else:
        try:
            # Bandit: commands are built from validated settings and passed as an
            # argument list without shell expansion.
            completed = subprocess.run(  # nosec B603
                normalized,
                cwd=str(resolved.cwd) if resolved.cwd is not None else None,
                env=dict(resolved.env) if resolved.env is not None else None,
                check=False,
                capture_output=resolved.capture_output,
                text=resolved.text,
                timeout=resolved.timeout,
                stdin=subprocess.DEVNULL,
            )
        except subprocess.TimeoutExpired as exc:
            completed = _timed_out(normalized, _ensure_text(exc.stdout), _ensure_text(exc.stderr), resolved.timeout)

    if resolved.check and completed.returncode != 0:
        raise SubprocessExecutionError(
            normalized,
            completed.returncode,
            completed.stdout if isinstance(completed.stdout, str) else None,
            completed.stderr if isinstance(completed.stderr, str) else None,
        )

    return completed


__all__ = [
    "CommandOptions",
    "OutputLimitExceeded",
    "SubprocessExecutionError",
    "TIMEOUT_RETURNCODE",
    "run_command",
]
