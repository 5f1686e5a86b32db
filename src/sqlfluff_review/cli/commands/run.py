# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""``run`` command: the full GitHub Action."""

from __future__ import annotations

import typer

from ...config import ActionConfig
from ...context import StepContext
from ...core.logging import ok
from ...orchestration.pipeline import RunStatus, run_action
from ...platform.github import workspace_dir
from ..errors import report_failures
from ..models import (
    BASE_REF_OPTION,
    DBT_PROFILES_OPTION,
    DBT_PROJECT_OPTION,
    DIALECT_OPTION,
    EMOJI_OPTION,
    FAIL_ON_ERROR_OPTION,
    FILTER_MODE_OPTION,
    PYPROJECT_OPTION,
    REPORTER_OPTION,
    REVIEWDOG_NAME_OPTION,
    TEMPLATER_OPTION,
)


def run_command(
    pyproject_path: PYPROJECT_OPTION = None,
    dbt_project_path: DBT_PROJECT_OPTION = None,
    dbt_profiles_path: DBT_PROFILES_OPTION = None,
    sqlfluff_dialect: DIALECT_OPTION = None,
    sqlfluff_templater: TEMPLATER_OPTION = None,
    review_dog_name: REVIEWDOG_NAME_OPTION = None,
    review_dog_filter_mode: FILTER_MODE_OPTION = None,
    review_dog_fail_on_error: FAIL_ON_ERROR_OPTION = None,
    review_dog_reporter: REPORTER_OPTION = None,
    base_ref: BASE_REF_OPTION = None,
    emoji: EMOJI_OPTION = True,
) -> None:
    """Lint changed SQL files and post the findings as pull-request review comments.

    Every option falls back to the matching GitHub Actions input
    (``INPUT_<NAME>``) when not given on the command line.
    """

    with report_failures(use_emoji=emoji):
        config = ActionConfig.from_inputs(
            dependency_file=pyproject_path,
            dbt_project_dir=dbt_project_path,
            dbt_profiles_dir=dbt_profiles_path,
            sqlfluff_dialect=sqlfluff_dialect,
            sqlfluff_templater=sqlfluff_templater,
            reviewdog_name=review_dog_name,
            reviewdog_filter_mode=review_dog_filter_mode,
            reviewdog_fail_on_error=review_dog_fail_on_error,
            reviewdog_reporter=review_dog_reporter,
            base_ref=base_ref,
            use_emoji=emoji,
        )
        outcome = run_action(config, StepContext.for_workspace(workspace_dir()))

    if outcome.status is RunStatus.SKIPPED:
        raise typer.Exit(code=0)
    ok(f"Reported {outcome.diagnostics} diagnostic(s) for {len(outcome.changed_files)} file(s).", use_emoji=emoji)


def register(app: typer.Typer) -> None:
    """Register the ``run`` command with ``app``."""

    app.command("run")(run_command)


__all__ = ["register", "run_command"]
