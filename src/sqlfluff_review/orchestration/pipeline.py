# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Sequence the installation, lint and review steps of the action."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path

from ..config import RDJSONL_FILENAME, ActionConfig, resolve_dependency_file
from ..context import StepContext
from ..core.logging import info, ok, step
from ..diagnostics.rdjsonl import process_lint_output
from ..discovery.git import ChangedFileLocator
from ..linting.dbt import DbtRunner, prepare_dbt_project
from ..linting.sqlfluff import LintOutcome, SqlfluffRunner
from ..parsers.sqlfluff import load_lint_results
from ..reporting.reviewdog import ReviewdogPublisher
from ..runtime.installers import ToolInstaller, dependencies_plan, reviewdog_plan, uv_plan


class RunStatus(StrEnum):
    """Terminal states of an action run."""

    SKIPPED = "skipped"
    PUBLISHED = "published"


@dataclass(slots=True)
class ActionOutcome:
    """Summary of a completed run."""

    status: RunStatus
    changed_files: list[str] = field(default_factory=list)
    diagnostics: int = 0
    lint: LintOutcome | None = None
    rdjsonl_file: Path | None = None


@dataclass(slots=True)
class ActionServices:
    """External collaborators, replaceable in tests."""

    installer: ToolInstaller
    locator: ChangedFileLocator
    linter: SqlfluffRunner
    publisher: ReviewdogPublisher
    dbt_runner: DbtRunner | None = None

    @classmethod
    def default(cls, *, use_emoji: bool = True) -> ActionServices:
        return cls(
            installer=ToolInstaller(use_emoji=use_emoji),
            locator=ChangedFileLocator(use_emoji=use_emoji),
            linter=SqlfluffRunner(use_emoji=use_emoji),
            publisher=ReviewdogPublisher(use_emoji=use_emoji),
        )


class ActionPipeline:
    """Run the action end to end for one :class:`ActionConfig`."""

    def __init__(self, config: ActionConfig, *, services: ActionServices | None = None) -> None:
        self._config = config
        self._services = services or ActionServices.default(use_emoji=config.use_emoji)
        self._use_emoji = config.use_emoji

    def run(self, context: StepContext) -> ActionOutcome:
        """Execute every step in order.

        Every step except the lint invocation is fatal: the first failure
        propagates and later steps do not run.

        Args:
            context: Context rooted at the workspace.

        Returns:
            ActionOutcome: ``SKIPPED`` when no SQL file changed, otherwise ``PUBLISHED``.
        """

        config = self._config
        services = self._services

        with step("Install uv"):
            services.installer.install(uv_plan(), context)

        dependency_file = resolve_dependency_file(config, context.workspace)
        with step("Install dependencies"):
            if config.dependency_file is None:
                info(
                    f"No custom path provided. Using default dependency file at: {dependency_file}",
                    use_emoji=self._use_emoji,
                )
            else:
                info(f"Received dependency file path: {dependency_file}", use_emoji=self._use_emoji)
            services.installer.install(dependencies_plan(dependency_file), context)

        step_ctx = prepare_dbt_project(config, context, runner=services.dbt_runner, use_emoji=self._use_emoji)

        with step("Detect changed SQL files"):
            changed = services.locator.locate(step_ctx, base_ref=config.base_ref)
            if not changed:
                info("No SQL files changed.", use_emoji=self._use_emoji)
                return ActionOutcome(status=RunStatus.SKIPPED)
            info(f"Changed SQL files: {', '.join(changed)}", use_emoji=self._use_emoji)

        with step("Lint with sqlfluff"):
            lint = services.linter.lint(changed, config, step_ctx)

        rdjsonl_file = context.workspace / RDJSONL_FILENAME
        rdjsonl_file.unlink(missing_ok=True)
        diagnostics = 0
        if lint.output_path is not None:
            results = load_lint_results(lint.output_path)
            diagnostics = process_lint_output(results, rdjsonl_file)
            info(f"Translated {diagnostics} violation(s) into {rdjsonl_file.name}", use_emoji=self._use_emoji)

        with step("Install reviewdog"):
            services.installer.install(reviewdog_plan(config.reviewdog_bin_dir), context)

        with step("Run reviewdog"):
            services.publisher.publish(rdjsonl_file, config, step_ctx)
        ok("Review comments published.", use_emoji=self._use_emoji)

        return ActionOutcome(
            status=RunStatus.PUBLISHED,
            changed_files=changed,
            diagnostics=diagnostics,
            lint=lint,
            rdjsonl_file=rdjsonl_file,
        )


def run_action(config: ActionConfig, context: StepContext, *, services: ActionServices | None = None) -> ActionOutcome:
    """Convenience wrapper building an :class:`ActionPipeline` and running it."""

    return ActionPipeline(config, services=services).run(context)


__all__ = ["ActionOutcome", "ActionPipeline", "ActionServices", "RunStatus", "run_action"]
