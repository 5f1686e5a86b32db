# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core data models shared across the sqlfluff_review package."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .core.severity import DEFAULT_SEVERITY, Severity


class Violation(BaseModel):
    """Single sqlfluff finding as emitted by ``sqlfluff lint --format json``.

    Line and column numbers are 1-based.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    description: str
    start_line_no: int
    start_line_pos: int
    end_line_no: int
    end_line_pos: int
    code: str | None = None
    name: str | None = None
    warning: bool | None = None


class LintResult(BaseModel):
    """Findings reported by sqlfluff for one file."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    filepath: str
    violations: tuple[Violation, ...] = Field(default_factory=tuple)


class Position(BaseModel):
    """1-based line/column pair."""

    model_config = ConfigDict(frozen=True)

    line: int
    column: int


class Range(BaseModel):
    model_config = ConfigDict(frozen=True)

    start: Position
    end: Position


class Location(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: str
    range: Range


class DiagnosticRecord(BaseModel):
    """One reviewdog ``rdjsonl`` line.

    Field declaration order is the serialisation order.
    """

    model_config = ConfigDict(frozen=True)

    message: str
    location: Location
    severity: Severity = DEFAULT_SEVERITY


__all__ = [
    "DiagnosticRecord",
    "LintResult",
    "Location",
    "Position",
    "Range",
    "Violation",
]
