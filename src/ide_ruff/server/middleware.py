# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Ordered interceptors applied to incoming server notifications."""

from __future__ import annotations

import copy
from collections.abc import Callable, Mapping
from typing import Any, Final, TypeAlias

from ..diagnostics.conversion import prefix_rule_code

PUBLISH_DIAGNOSTICS: Final[str] = "textDocument/publishDiagnostics"

Params: TypeAlias = dict[str, Any]
Middleware: TypeAlias = Callable[[Params], Params]
Handler: TypeAlias = Callable[[Params], object]


def prefix_diagnostic_codes(params: Params) -> Params:
    """Return ``params`` with each diagnostic message prefixed by its rule code.

    Args:
        params: ``textDocument/publishDiagnostics`` payload.

    Returns:
        Params: Copy of the payload with rewritten messages.
    """

    diagnostics = params.get("diagnostics")
    if not diagnostics:
        return params
    updated = copy.deepcopy(params)
    for diagnostic in updated["diagnostics"]:
        if not isinstance(diagnostic, dict):
            continue
        code = diagnostic.get("code")
        message = diagnostic.get("message")
        if code and isinstance(message, str):
            diagnostic["message"] = prefix_rule_code(code, message)
    return updated


class MiddlewareChain:
    """Per-method list of interceptors run in registration order."""

    def __init__(self) -> None:
        self._middleware: dict[str, list[Middleware]] = {}

    def add(self, method: str, middleware: Middleware) -> None:
        """Append ``middleware`` to the chain for ``method``."""

        self._middleware.setdefault(method, []).append(middleware)

    def middleware_for(self, method: str) -> tuple[Middleware, ...]:
        return tuple(self._middleware.get(method, ()))

    def process(self, method: str, params: Mapping[str, Any]) -> Params:
        """Run every interceptor registered for ``method`` over ``params``."""

        payload: Params = dict(params)
        for middleware in self._middleware.get(method, ()):
            payload = middleware(payload)
        return payload

    def wrap(self, method: str, handler: Handler) -> Handler:
        """Return a handler that applies the chain before calling ``handler``."""

        return _ChainedHandler(self, method, handler)


class _ChainedHandler:
    """Handler running a middleware chain before the downstream callback."""

    def __init__(self, chain: MiddlewareChain, method: str, handler: Handler) -> None:
        self._chain = chain
        self._method = method
        self._handler = handler

    def __call__(self, params: Params) -> object:
        return self._handler(self._chain.process(self._method, params))


def default_middleware() -> MiddlewareChain:
    """Return the chain installed on every ruff server connection."""

    chain = MiddlewareChain()
    chain.add(PUBLISH_DIAGNOSTICS, prefix_diagnostic_codes)
    return chain


__all__ = [
    "PUBLISH_DIAGNOSTICS",
    "MiddlewareChain",
    "default_middleware",
    "prefix_diagnostic_codes",
]
