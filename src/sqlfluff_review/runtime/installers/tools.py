# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Installation of the package manager, lint dependencies and reviewdog."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from pathlib import Path
from subprocess import CompletedProcess
from typing import Final

from sqlfluff_review.context import StepContext
from sqlfluff_review.core.logging import fail, info, ok
from sqlfluff_review.core.runtime.process import SubprocessExecutionError, run_command

from .models import CommandSpec, InstallPlan

CommandRunner = Callable[[Sequence[str], StepContext], CompletedProcess[str]]

REVIEWDOG_INSTALL_SCRIPT: Final[str] = "https://raw.githubusercontent.com/reviewdog/reviewdog/master/install.sh"
DEFAULT_REVIEWDOG_BIN_DIR: Final[Path] = Path("/usr/local/bin")


def uv_plan(python: str | None = None) -> InstallPlan:
    """Return the commands installing ``uv`` through ``pipx``.

    Args:
        python: Interpreter used to bootstrap ``pipx``; defaults to the running one.

    Returns:
        InstallPlan: Plan installing ``pipx`` for the user and ``uv`` through it.
    """

    interpreter = python or sys.executable
    return InstallPlan(
        name="uv",
        commands=(
            CommandSpec(args=(interpreter, "-m", "pip", "install", "--user", "pipx"), description="Install pipx"),
            CommandSpec(args=(interpreter, "-m", "pipx", "install", "uv"), description="Install uv"),
        ),
        success_message="Successfully installed uv.",
    )


def dependencies_plan(dependency_file: Path) -> InstallPlan:
    """Return the commands creating the virtualenv and installing ``dependency_file`` into it."""

    return InstallPlan(
        name="dependencies",
        commands=(
            CommandSpec(args=("uv", "venv"), description="Create virtual env"),
            CommandSpec(
                args=("uv", "pip", "install", "-r", str(dependency_file)),
                description=f"Install dependencies from {dependency_file}",
            ),
        ),
        success_message="Successfully installed dependencies.",
    )


def reviewdog_plan(bin_dir: Path = DEFAULT_REVIEWDOG_BIN_DIR) -> InstallPlan:
    """Return the command fetching and running reviewdog's install script."""

    script = f"curl -sfL {REVIEWDOG_INSTALL_SCRIPT} | sh -s -- -b {bin_dir}"
    return InstallPlan(
        name="reviewdog",
        commands=(CommandSpec(args=("bash", "-c", script), description="Install reviewdog"),),
        success_message="Reviewdog installation completed.",
    )


class ToolInstaller:
    """Execute :class:`InstallPlan` objects, stopping at the first failure."""

    def __init__(self, *, runner: CommandRunner | None = None, use_emoji: bool = True) -> None:
        """Initialise the installer.

        Args:
            runner: Callable used to execute commands. It must raise on a
                non-zero exit; the default wraps :func:`run_command`.
            use_emoji: When ``True`` log lines include emoji markers.
        """

        self._runner = runner or _default_runner
        self._use_emoji = use_emoji

    def install(self, plan: InstallPlan, context: StepContext) -> None:
        """Run every command in ``plan`` inside the workspace.

        Args:
            plan: Commands to execute in order.
            context: Step context; commands always run from its workspace.

        Raises:
            SubprocessExecutionError: If a command exits non-zero.
            FileNotFoundError: If a command's executable is missing.
        """

        workspace_ctx = context.with_workdir(context.workspace)
        for command in plan.commands:
            info(f"{command.describe()}: {command.render()}", use_emoji=self._use_emoji)
            try:
                self._runner(command.args, workspace_ctx)
            except (SubprocessExecutionError, FileNotFoundError) as exc:
                fail(f"Failed to install {plan.name}: {exc}", use_emoji=self._use_emoji)
                raise
        if plan.success_message:
            ok(plan.success_message, use_emoji=self._use_emoji)


def _default_runner(args: Sequence[str], context: StepContext) -> CompletedProcess[str]:
    return run_command(args, options=context.command_options())


__all__ = [
    "DEFAULT_REVIEWDOG_BIN_DIR",
    "REVIEWDOG_INSTALL_SCRIPT",
    "CommandRunner",
    "ToolInstaller",
    "dependencies_plan",
    "reviewdog_plan",
    "uv_plan",
]
