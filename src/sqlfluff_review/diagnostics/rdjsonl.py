# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Translate sqlfluff lint results into reviewdog ``rdjsonl`` diagnostics."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from pathlib import Path

from ..core.severity import DEFAULT_SEVERITY, Severity
from ..models import DiagnosticRecord, LintResult, Location, Position, Range, Violation


def violation_to_record(
    filepath: str,
    violation: Violation,
    *,
    severity: Severity = DEFAULT_SEVERITY,
) -> DiagnosticRecord:
    """Map one sqlfluff violation onto a diagnostic record.

    Args:
        filepath: Path of the linted file, as reported by sqlfluff.
        violation: Violation to convert.
        severity: Severity stamped on the record.

    Returns:
        DiagnosticRecord: Diagnostic with positions copied verbatim.
    """

    return DiagnosticRecord(
        message=violation.description,
        location=Location(
            path=filepath,
            range=Range(
                start=Position(line=violation.start_line_no, column=violation.start_line_pos),
                end=Position(line=violation.end_line_no, column=violation.end_line_pos),
            ),
        ),
        severity=severity,
    )


def translate_results(
    results: Iterable[LintResult],
    *,
    severity: Severity = DEFAULT_SEVERITY,
) -> list[DiagnosticRecord]:
    """Flatten ``results`` into diagnostics, file order first, then violation order.

    Nothing is filtered, merged or reordered, so the output length always
    equals the total number of violations.

    Args:
        results: Parsed sqlfluff results.
        severity: Severity stamped on every record.

    Returns:
        list[DiagnosticRecord]: One record per violation.
    """

    return [
        violation_to_record(result.filepath, violation, severity=severity)
        for result in results
        for violation in result.violations
    ]


def write_rdjsonl(records: Sequence[DiagnosticRecord], path: Path) -> int:
    """Write ``records`` to ``path`` as newline-terminated JSON objects.

    Existing content is overwritten; an empty sequence leaves a zero-byte file.

    Args:
        records: Diagnostics to serialise.
        path: Destination file.

    Returns:
        int: Number of lines written.
    """

    content = "".join(f"{record.model_dump_json()}\n" for record in records)
    path.write_text(content, encoding="utf-8")
    return len(records)


def read_rdjsonl(path: Path) -> list[DiagnosticRecord]:
    """Parse an ``rdjsonl`` file back into records, ignoring blank lines."""

    lines = path.read_text(encoding="utf-8").splitlines()
    return [DiagnosticRecord.model_validate_json(line) for line in lines if line.strip()]


def process_lint_output(results: Iterable[LintResult], path: Path) -> int:
    """Translate ``results`` and write them to ``path`` in one step.

    Returns:
        int: Number of diagnostics written.
    """

    return write_rdjsonl(translate_results(results), path)


__all__ = [
    "process_lint_output",
    "read_rdjsonl",
    "translate_results",
    "violation_to_record",
    "write_rdjsonl",
]
