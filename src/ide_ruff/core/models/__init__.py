# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core data models shared across the ide_ruff package."""

from __future__ import annotations

from typing import TypeAlias

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ide_ruff.core.severity import Severity

JsonScalar: TypeAlias = str | int | float | bool | None
JsonValue: TypeAlias = JsonScalar | list["JsonValue"] | dict[str, "JsonValue"]
Point: TypeAlias = tuple[int, int]
Position: TypeAlias = tuple[Point, Point]


class Location(BaseModel):
    """One-based row/column pair as emitted by ``ruff check``."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    row: int
    column: int


class RawFinding(BaseModel):
    """Capture one entry of ruff's JSON output prior to normalisation."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    filename: str | None = None
    code: str | None = None
    message: str = ""
    location: Location | None = None
    end_location: Location | None = None
    url: str | None = None

    @field_validator("message", mode="before")
    @classmethod
    def _coerce_message(cls, value: object) -> str:
        """Return ``value`` as text, treating ``None`` as an empty message.

        Args:
            value: Raw message value from the JSON payload.

        Returns:
            str: Message text.
        """

        if value is None:
            return ""
        return str(value)

    @field_validator("code", mode="before")
    @classmethod
    def _coerce_code(cls, value: object) -> str | None:
        """Return ``value`` as text, keeping ``None`` distinct from an empty code.

        Args:
            value: Raw rule code from the JSON payload.

        Returns:
            str | None: Rule code or ``None`` when the tool sent ``null``.
        """

        if value is None:
            return None
        return str(value)


class NormalizedDiagnostic(BaseModel):
    """Diagnostic ready for the host linter UI with zero-based positions."""

    model_config = ConfigDict(frozen=True)

    severity: Severity
    excerpt: str
    file: str
    position: tuple[tuple[int, int], tuple[int, int]]

    def to_message(self) -> dict[str, JsonValue]:
        """Return the host linter message mapping for this diagnostic.

        Returns:
            dict[str, JsonValue]: Mapping with ``severity``, ``excerpt`` and ``location`` keys.
        """

        (start_row, start_col), (end_row, end_col) = self.position
        return {
            "severity": self.severity.value,
            "excerpt": self.excerpt,
            "location": {
                "file": self.file,
                "position": [[start_row, start_col], [end_row, end_col]],
            },
        }


class ScanResult(BaseModel):
    """Aggregate diagnostics from one project-wide scan."""

    model_config = ConfigDict(frozen=True)

    diagnostics: tuple[NormalizedDiagnostic, ...] = Field(default_factory=tuple)
    roots: tuple[str, ...] = Field(default_factory=tuple)
    failed_roots: tuple[str, ...] = Field(default_factory=tuple)

    def to_messages(self) -> list[dict[str, JsonValue]]:
        """Return host linter messages in scan order."""

        return [diag.to_message() for diag in self.diagnostics]


__all__ = [
    "JsonScalar",
    "JsonValue",
    "Location",
    "NormalizedDiagnostic",
    "Point",
    "Position",
    "RawFinding",
    "ScanResult",
]
