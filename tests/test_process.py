# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the subprocess wrapper."""

from __future__ import annotations

import sys
import time
from pathlib import Path

import pytest

from ide_ruff.core.runtime.process import (
    TIMEOUT_RETURNCODE,
    CommandOptions,
    OutputLimitExceeded,
    SubprocessExecutionError,
    run_command,
)


def test_captures_stdout(tmp_path: Path) -> None:
    result = run_command(
        [sys.executable, "-c", "import os; print(os.getcwd())"],
        options=CommandOptions(cwd=tmp_path),
    )
    assert result.returncode == 0
    assert Path(result.stdout.strip()).resolve() == tmp_path.resolve()
    assert result.stderr == ""


def test_timeout_yields_completed_result() -> None:
    result = run_command(
        [sys.executable, "-c", "import time; time.sleep(10)"],
        options=CommandOptions(timeout=0.2),
    )
    assert result.returncode == TIMEOUT_RETURNCODE
    assert "timed out" in result.stderr


def test_output_limit_raises() -> None:
    with pytest.raises(OutputLimitExceeded) as excinfo:
        run_command(
            [sys.executable, "-c", "print('x' * 1000)"],
            options=CommandOptions(max_output_bytes=100),
        )
    assert excinfo.value.limit == 100
    assert excinfo.value.size > 100


def test_output_limit_stops_runaway_child() -> None:
    started = time.monotonic()
    with pytest.raises(OutputLimitExceeded) as excinfo:
        run_command(
            [sys.executable, "-c", "import sys\nwhile True:\n    sys.stdout.write(\"x\" * 4096)"],
            options=CommandOptions(timeout=30, max_output_bytes=64 * 1024),
        )
    assert time.monotonic() - started < 10
    assert excinfo.value.size > 64 * 1024


def test_output_within_limit_is_captured() -> None:
    result = run_command(
        [sys.executable, "-c", "import sys; print(\"out\"); sys.stderr.write(\"err\")"],
        options=CommandOptions(max_output_bytes=1024),
    )
    assert result.returncode == 0
    assert result.stdout.strip() == "out"
    assert result.stderr == "err"


def test_timeout_with_output_limit_yields_completed_result() -> None:
    result = run_command(
        [sys.executable, "-c", "import time; time.sleep(10)"],
        options=CommandOptions(timeout=0.2, max_output_bytes=1024),
    )
    assert result.returncode == TIMEOUT_RETURNCODE
    assert "timed out" in result.stderr


def test_check_raises_on_failure() -> None:
    with pytest.raises(SubprocessExecutionError) as excinfo:
        run_command(
            [sys.executable, "-c", "import sys; sys.stderr.write('boom'); sys.exit(3)"],
            options=CommandOptions(check=True),
        )
    assert excinfo.value.returncode == 3
    assert excinfo.value.stderr == "boom"


def test_missing_executable_raises() -> None:
    with pytest.raises(FileNotFoundError):
        run_command(["definitely-not-a-real-ruff-binary"])


def test_empty_command_rejected() -> None:
    with pytest.raises(ValueError):
        run_command([])
