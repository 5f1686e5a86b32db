# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Invocation of ``sqlfluff lint`` against the changed files."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path
from subprocess import CompletedProcess

from ..config import LINT_OUTPUT_FILENAME, ActionConfig
from ..context import StepContext
from ..core.logging import info, ok, warn
from ..core.runtime.process import SubprocessExecutionError, run_command

LintRunnerFn = Callable[[Sequence[str], StepContext], CompletedProcess[str]]


@dataclass(frozen=True, slots=True)
class LintOutcome:
    """Result of a lint invocation.

    Attributes:
        command: Arguments sqlfluff was invoked with.
        output_path: JSON report location, or ``None`` when sqlfluff wrote none.
        tolerated_failure: Reason the invocation failed without aborting the run.
    """

    command: tuple[str, ...]
    output_path: Path | None
    tolerated_failure: str | None = None

    @property
    def has_report(self) -> bool:
        return self.output_path is not None


def build_lint_command(
    executable: Path | str,
    files: Sequence[str],
    *,
    dialect: str,
    templater: str,
    output_file: str = LINT_OUTPUT_FILENAME,
) -> list[str]:
    """Return the ``sqlfluff lint`` command writing a JSON report to ``output_file``."""

    return [
        str(executable),
        "lint",
        "--dialect",
        dialect,
        "--templater",
        templater,
        *files,
        "--format",
        "json",
        "--write-output",
        output_file,
    ]


class SqlfluffRunner:
    """Run sqlfluff from the workspace virtualenv."""

    def __init__(self, *, runner: LintRunnerFn | None = None, use_emoji: bool = True) -> None:
        self._runner = runner or _default_runner
        self._use_emoji = use_emoji

    def lint(self, files: Sequence[str], config: ActionConfig, context: StepContext) -> LintOutcome:
        """Lint ``files`` and return where the JSON report landed.

        Args:
            files: Paths relative to ``context.workdir``.
            config: Supplies dialect and templater.
            context: Step context the linter runs in.

        Returns:
            LintOutcome: Command, report path and any tolerated failure.
        """

        command = build_lint_command(
            context.venv_executable("sqlfluff"),
            files,
            dialect=config.sqlfluff_dialect,
            templater=config.sqlfluff_templater,
        )
        output_path = context.workdir / LINT_OUTPUT_FILENAME
        output_path.unlink(missing_ok=True)
        info(f"Linting {len(files)} SQL file(s) with sqlfluff", use_emoji=self._use_emoji)
        tolerated: str | None = None
        try:
            self._runner(command, context)
        except (SubprocessExecutionError, OSError) as exc:
            # Not fatal: sqlfluff exits non-zero whenever it reports violations,
            # so a failure here usually just means findings exist. A run that
            # produced no report is caught downstream.
            tolerated = str(exc)
            warn(f"sqlfluff exited with errors: {exc}", use_emoji=self._use_emoji)
        else:
            ok("sqlfluff reported no violations", use_emoji=self._use_emoji)

        return LintOutcome(
            command=tuple(command),
            output_path=output_path if output_path.exists() else None,
            tolerated_failure=tolerated,
        )


def _default_runner(args: Sequence[str], context: StepContext) -> CompletedProcess[str]:
    return run_command(args, options=context.command_options())


__all__ = ["LintOutcome", "LintRunnerFn", "SqlfluffRunner", "build_lint_command"]
