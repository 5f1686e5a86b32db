# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Preparation of an optional dbt sub-project before linting."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from subprocess import CompletedProcess

from ..config import DBT_TARGET, ActionConfig
from ..context import StepContext
from ..core.logging import info
from ..core.runtime.process import run_command

DBT_PROFILES_DIR_ENV = "DBT_PROFILES_DIR"
DBT_TARGET_ENV = "DBT_TARGET"

DbtRunner = Callable[[Sequence[str], StepContext], CompletedProcess[str]]


def prepare_dbt_project(
    config: ActionConfig,
    context: StepContext,
    *,
    runner: DbtRunner | None = None,
    use_emoji: bool = True,
) -> StepContext:
    """Return the context later steps run in, fetching dbt packages when needed.

    A configured project directory becomes the working directory. A configured
    profiles directory adds ``DBT_PROFILES_DIR``/``DBT_TARGET`` to the step
    environment and runs ``dbt deps`` from the workspace virtualenv.

    Args:
        config: Action configuration.
        context: Context rooted at the workspace.
        runner: Optional command runner; must raise on a non-zero exit.
        use_emoji: Whether log lines include emoji prefixes.

    Returns:
        StepContext: Context for the changed-file, lint and publish steps.

    Raises:
        SubprocessExecutionError: If ``dbt deps`` fails.
    """

    run = runner or _default_runner
    step_ctx = context
    if config.dbt_project_dir is not None:
        step_ctx = step_ctx.with_workdir(config.dbt_project_dir)
        info(f"DBT project directory set to: {config.dbt_project_dir}", use_emoji=use_emoji)
        info(f"Working directory for lint steps: {step_ctx.workdir}", use_emoji=use_emoji)

    if config.dbt_profiles_dir is not None:
        profiles = str(config.dbt_profiles_dir)
        info(f"DBT profiles directory set to: {profiles}", use_emoji=use_emoji)
        step_ctx = step_ctx.with_env(**{DBT_PROFILES_DIR_ENV: profiles, DBT_TARGET_ENV: DBT_TARGET})
        info(f"DBT target set to: {DBT_TARGET}", use_emoji=use_emoji)
        run([str(step_ctx.venv_executable("dbt")), "deps"], step_ctx)

    return step_ctx


def _default_runner(args: Sequence[str], context: StepContext) -> CompletedProcess[str]:
    return run_command(args, options=context.command_options())


__all__ = ["DBT_PROFILES_DIR_ENV", "DBT_TARGET_ENV", "DbtRunner", "prepare_dbt_project"]
