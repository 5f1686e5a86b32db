# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the sqlfluff lint step."""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path

import pytest

from sqlfluff_review.config import ActionConfig
from sqlfluff_review.context import StepContext
from sqlfluff_review.linting.sqlfluff import SqlfluffRunner, build_lint_command
from tests.helpers.runners import RecordingRunner


def _write_report(payload: object) -> object:
    def _writer(args: Sequence[str], context: StepContext) -> None:
        (context.workdir / args[-1]).write_text(json.dumps(payload), encoding="utf-8")

    return _writer


def test_build_lint_command_places_files_before_output_flags() -> None:
    command = build_lint_command("/ws/.venv/bin/sqlfluff", ["a.sql", "b.sql"], dialect="snowflake", templater="dbt")

    assert command == [
        "/ws/.venv/bin/sqlfluff",
        "lint",
        "--dialect",
        "snowflake",
        "--templater",
        "dbt",
        "a.sql",
        "b.sql",
        "--format",
        "json",
        "--write-output",
        "lint-results.json",
    ]


def test_lint_uses_venv_executable_and_config(workspace: Path, context: StepContext) -> None:
    runner = RecordingRunner(on_call=_write_report([]))
    config = ActionConfig(sqlfluff_dialect="bigquery", sqlfluff_templater="jinja")

    outcome = SqlfluffRunner(runner=runner, use_emoji=False).lint(["q.sql"], config, context)

    (command,) = runner.commands
    assert command[0] == str(workspace / ".venv" / "bin" / "sqlfluff")
    assert command[2:7] == ("--dialect", "bigquery", "--templater", "jinja", "q.sql")
    assert outcome.output_path == workspace / "lint-results.json"
    assert outcome.tolerated_failure is None
    assert outcome.has_report


def test_lint_failure_with_report_is_tolerated(context: StepContext, capsys: pytest.CaptureFixture[str]) -> None:
    runner = RecordingRunner(fail_on="sqlfluff", on_call=_write_report([{"filepath": "q.sql", "violations": []}]))

    outcome = SqlfluffRunner(runner=runner, use_emoji=False).lint(["q.sql"], ActionConfig(), context)

    assert outcome.tolerated_failure is not None
    assert outcome.has_report
    assert "sqlfluff exited with errors" in capsys.readouterr().out


def test_lint_spawn_failure_is_tolerated(context: StepContext) -> None:
    def _missing(args: Sequence[str], ctx: StepContext) -> None:
        raise FileNotFoundError(args[0])

    outcome = SqlfluffRunner(runner=_missing, use_emoji=False).lint(["q.sql"], ActionConfig(), context)

    assert outcome.output_path is None
    assert outcome.tolerated_failure is not None


def test_lint_removes_stale_report(workspace: Path, context: StepContext) -> None:
    (workspace / "lint-results.json").write_text("[]", encoding="utf-8")

    outcome = SqlfluffRunner(runner=RecordingRunner(), use_emoji=False).lint(["q.sql"], ActionConfig(), context)

    assert outcome.output_path is None
    assert not (workspace / "lint-results.json").exists()


def test_lint_runs_in_step_workdir(workspace: Path, context: StepContext) -> None:
    dbt_dir = workspace / "dbt"
    dbt_dir.mkdir()
    runner = RecordingRunner(on_call=_write_report([]))
    step_ctx = context.with_workdir(Path("dbt")).with_env(DBT_TARGET="sqlfluff")

    outcome = SqlfluffRunner(runner=runner, use_emoji=False).lint(["m.sql"], ActionConfig(), step_ctx)

    assert runner.calls[0][1] == dbt_dir
    assert runner.calls[0][2] == {"DBT_TARGET": "sqlfluff"}
    assert outcome.output_path == dbt_dir / "lint-results.json"
