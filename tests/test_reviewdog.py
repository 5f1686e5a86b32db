# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for publishing diagnostics through reviewdog."""

from __future__ import annotations

from pathlib import Path

import pytest

from sqlfluff_review.config import ActionConfig
from sqlfluff_review.context import StepContext
from sqlfluff_review.core.runtime.process import SubprocessExecutionError
from sqlfluff_review.reporting.reviewdog import DiagnosticsMissingError, ReviewdogPublisher, build_reviewdog_command
from tests.helpers.runners import StdinRecordingRunner


def test_build_command_uses_config_flags() -> None:
    config = ActionConfig.from_inputs(
        reviewdog_name="lint-sql",
        reviewdog_filter_mode="added",
        reviewdog_fail_on_error="false",
        reviewdog_reporter="github-pr-check",
    )

    assert build_reviewdog_command(config) == [
        "reviewdog",
        "-n=lint-sql",
        "-f=rdjsonl",
        "-filter-mode=added",
        "-reporter=github-pr-check",
        "-fail-on-error=false",
    ]


def test_build_command_defaults() -> None:
    assert build_reviewdog_command(ActionConfig()) == [
        "reviewdog",
        "-n=sqlfluff",
        "-f=rdjsonl",
        "-filter-mode=file",
        "-reporter=github-pr-review",
        "-fail-on-error=true",
    ]


def test_publish_feeds_file_bytes_on_stdin(workspace: Path, context: StepContext) -> None:
    diagnostics = workspace / "lint-results.rdjsonl"
    diagnostics.write_bytes(b'{"message":"x"}\n')
    runner = StdinRecordingRunner()
    step_ctx = context.with_workdir(Path("dbt"))

    ReviewdogPublisher(runner=runner, use_emoji=False).publish(diagnostics, ActionConfig(), step_ctx)

    ((command, payload, workdir),) = runner.calls
    assert command[0] == "reviewdog"
    assert payload == b'{"message":"x"}\n'
    assert workdir == workspace / "dbt"


def test_publish_empty_file_still_runs(workspace: Path, context: StepContext) -> None:
    diagnostics = workspace / "lint-results.rdjsonl"
    diagnostics.write_bytes(b"")
    runner = StdinRecordingRunner()

    ReviewdogPublisher(runner=runner, use_emoji=False).publish(diagnostics, ActionConfig(), context)

    assert runner.calls[0][1] == b""


def test_publish_without_diagnostics_file_fails(workspace: Path, context: StepContext) -> None:
    runner = StdinRecordingRunner()

    with pytest.raises(DiagnosticsMissingError):
        ReviewdogPublisher(runner=runner, use_emoji=False).publish(
            workspace / "lint-results.rdjsonl", ActionConfig(), context
        )
    assert runner.calls == []


def test_publish_propagates_reviewdog_failure(workspace: Path, context: StepContext) -> None:
    diagnostics = workspace / "lint-results.rdjsonl"
    diagnostics.write_text("", encoding="utf-8")

    with pytest.raises(SubprocessExecutionError):
        ReviewdogPublisher(runner=StdinRecordingRunner(returncode=1), use_emoji=False).publish(
            diagnostics, ActionConfig(), context
        )
