# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the server notification middleware chain."""

from __future__ import annotations

from typing import Any

from ide_ruff.server import PUBLISH_DIAGNOSTICS, MiddlewareChain, default_middleware, prefix_diagnostic_codes


def _params(*diagnostics: dict[str, Any]) -> dict[str, Any]:
    return {"uri": "file:///repo/a.py", "diagnostics": list(diagnostics)}


def test_prefixes_rule_codes_once() -> None:
    params = _params(
        {"code": "F401", "message": "`os` imported but unused"},
        {"message": "SyntaxError: unexpected indent"},
        {"code": "E501", "message": "E501 — Line too long"},
    )
    rewritten = prefix_diagnostic_codes(params)
    assert [diag["message"] for diag in rewritten["diagnostics"]] == [
        "F401 — `os` imported but unused",
        "SyntaxError: unexpected indent",
        "E501 — Line too long",
    ]
    assert prefix_diagnostic_codes(rewritten) == rewritten


def test_original_payload_is_untouched() -> None:
    params = _params({"code": "F401", "message": "unused"})
    prefix_diagnostic_codes(params)
    assert params["diagnostics"][0]["message"] == "unused"


def test_payload_without_diagnostics_passes_through() -> None:
    params = {"uri": "file:///repo/a.py"}
    assert prefix_diagnostic_codes(params) is params


def test_chain_runs_in_registration_order() -> None:
    chain = MiddlewareChain()
    chain.add("custom", lambda params: {**params, "trail": [*params.get("trail", []), "first"]})
    chain.add("custom", lambda params: {**params, "trail": [*params["trail"], "second"]})
    assert chain.process("custom", {})["trail"] == ["first", "second"]
    assert chain.process("other", {"untouched": True}) == {"untouched": True}


def test_wrap_feeds_rewritten_payload_downstream() -> None:
    received: list[dict[str, Any]] = []
    handler = default_middleware().wrap(PUBLISH_DIAGNOSTICS, received.append)
    handler(_params({"code": "W291", "message": "Trailing whitespace"}))
    assert received[0]["diagnostics"][0]["message"] == "W291 — Trailing whitespace"
    assert len(default_middleware().middleware_for(PUBLISH_DIAGNOSTICS)) == 1
