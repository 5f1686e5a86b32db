# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the sqlfluff JSON parser."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from sqlfluff_review.parsers.sqlfluff import load_lint_results, parse_lint_results


def test_parse_keeps_file_and_violation_order(lint_payload: list[dict[str, object]]) -> None:
    results = parse_lint_results(lint_payload)

    assert [result.filepath for result in results] == ["models/a.sql", "models/b.sql"]
    assert [violation.code for violation in results[0].violations] == ["AM05", "LT01"]
    assert results[0].violations[0].name == "ambiguous.join"


def test_parse_ignores_statistics_and_timings(lint_payload: list[dict[str, object]]) -> None:
    results = parse_lint_results(lint_payload)

    assert not hasattr(results[0], "statistics")


def test_parse_empty_report() -> None:
    assert parse_lint_results([]) == []


def test_parse_rejects_non_array_payload() -> None:
    with pytest.raises(ValueError, match="JSON array"):
        parse_lint_results({"filepath": "a.sql"})


def test_parse_rejects_missing_filepath() -> None:
    with pytest.raises(ValidationError):
        parse_lint_results([{"violations": []}])


def test_parse_rejects_violation_without_end_position() -> None:
    templater_error = {
        "code": "TMP",
        "description": "Undefined jinja template variable: 'ref'",
        "start_line_no": 4,
        "start_line_pos": 8,
    }

    with pytest.raises(ValidationError, match="end_line_no"):
        parse_lint_results([{"filepath": "models/a.sql", "violations": [templater_error]}])


def test_violations_are_immutable(lint_payload: list[dict[str, object]]) -> None:
    violation = parse_lint_results(lint_payload)[0].violations[0]

    with pytest.raises(ValidationError):
        violation.description = "changed"


def test_load_reads_report_from_disk(tmp_path: Path, lint_payload: list[dict[str, object]]) -> None:
    report = tmp_path / "lint-results.json"
    report.write_text(json.dumps(lint_payload), encoding="utf-8")

    results = load_lint_results(report)

    assert sum(len(result.violations) for result in results) == 3


def test_load_propagates_invalid_json(tmp_path: Path) -> None:
    report = tmp_path / "lint-results.json"
    report.write_text("[{not json", encoding="utf-8")

    with pytest.raises(json.JSONDecodeError):
        load_lint_results(report)
