# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run blocking calls with a wall-clock deadline."""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Final

SHUTDOWN_DEADLINE_SECONDS: Final[float] = 2.0


class _DeadlineCall:
    """Worker target capturing the outcome of ``func``."""

    def __init__(self, func: Callable[[], object]) -> None:
        self.func = func
        self.error: BaseException | None = None
        self.done = threading.Event()

    def __call__(self) -> None:
        try:
            self.func()
        except BaseException as exc:  # noqa: BLE001 - re-raised on the calling thread
            self.error = exc
        finally:
            self.done.set()


def call_with_deadline(func: Callable[[], object], timeout: float = SHUTDOWN_DEADLINE_SECONDS) -> bool:
    """Run ``func`` on a daemon thread and wait at most ``timeout`` seconds.

    A call that overruns keeps running in the background; the caller simply
    stops waiting for it.

    Args:
        func: Blocking callable to execute.
        timeout: Seconds to wait before giving up.

    Returns:
        bool: ``True`` when ``func`` finished in time, ``False`` otherwise.

    Raises:
        BaseException: Whatever ``func`` raised, when it finished in time.
    """

    call = _DeadlineCall(func)
    worker = threading.Thread(target=call, name="ide-ruff-deadline", daemon=True)
    worker.start()
    if not call.done.wait(timeout):
        return False
    if call.error is not None:
        raise call.error
    return True


__all__ = ["SHUTDOWN_DEADLINE_SECONDS", "call_with_deadline"]
