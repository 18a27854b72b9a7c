# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Parse ``ruff check --output-format=json`` output."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping, Sequence

from pydantic import ValidationError

from ..core.models import JsonValue, RawFinding
from ..errors import ScanParseError

LOGGER = logging.getLogger(__name__)


def _iter_dicts(payload: JsonValue) -> Iterable[Mapping[str, JsonValue]]:
    if isinstance(payload, Sequence) and not isinstance(payload, (str, bytes, bytearray)):
        for item in payload:
            if isinstance(item, Mapping):
                yield item


def parse_findings(stdout: str) -> list[RawFinding]:
    """Decode ruff's JSON array into :class:`RawFinding` records.

    Blank output means no findings. Entries that are not objects, or whose
    fields have the wrong shape, are skipped.

    Args:
        stdout: Text written by ``ruff check`` to standard output.

    Returns:
        list[RawFinding]: Findings in the order ruff emitted them.

    Raises:
        ScanParseError: If ``stdout`` is not valid JSON.
    """

    if not stdout or not stdout.strip():
        return []
    try:
        payload: JsonValue = json.loads(stdout)
    except json.JSONDecodeError as exc:
        raise ScanParseError(f"ruff output is not valid JSON: {exc}") from exc
    if isinstance(payload, Mapping):
        LOGGER.debug("ruff output is an object rather than an array; ignoring it")
        return []

    findings: list[RawFinding] = []
    for item in _iter_dicts(payload):
        try:
            findings.append(RawFinding.model_validate(item))
        except ValidationError as exc:
            LOGGER.debug("Skipping malformed ruff finding %r: %s", item, exc)
    return findings


__all__ = ["parse_findings"]
