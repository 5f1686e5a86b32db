# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Publish rdjsonl diagnostics as pull-request review comments via reviewdog."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path
from subprocess import CompletedProcess
from typing import Final

from ..config import ActionConfig
from ..context import StepContext
from ..core.logging import info
from ..core.runtime.process import run_command
from ..utils.bool_utils import format_bool_flag

RDJSONL_FORMAT: Final[str] = "rdjsonl"

ReviewdogRunner = Callable[[Sequence[str], bytes, StepContext], CompletedProcess[str]]


class DiagnosticsMissingError(FileNotFoundError):
    """Raised when there is no rdjsonl file to hand to reviewdog."""


def build_reviewdog_command(config: ActionConfig, executable: str = "reviewdog") -> list[str]:
    """Return the reviewdog invocation reading rdjsonl from stdin."""

    return [
        executable,
        f"-n={config.reviewdog_name}",
        f"-f={RDJSONL_FORMAT}",
        f"-filter-mode={config.reviewdog_filter_mode.value}",
        f"-reporter={config.reviewdog_reporter}",
        f"-fail-on-error={format_bool_flag(config.reviewdog_fail_on_error)}",
    ]


class ReviewdogPublisher:
    """Feed an rdjsonl file to reviewdog."""

    def __init__(self, *, runner: ReviewdogRunner | None = None, use_emoji: bool = True) -> None:
        """Create a publisher.

        Args:
            runner: Callable receiving the command, stdin bytes and context. It
                must raise on a non-zero exit; the default wraps :func:`run_command`.
            use_emoji: Whether log lines include emoji prefixes.
        """

        self._runner = runner or _default_runner
        self._use_emoji = use_emoji

    def publish(self, rdjsonl_file: Path, config: ActionConfig, context: StepContext) -> None:
        """Pipe ``rdjsonl_file`` into reviewdog.

        Args:
            rdjsonl_file: Diagnostics produced by the translator.
            config: Supplies reviewdog flags.
            context: Step context reviewdog runs in.

        Raises:
            DiagnosticsMissingError: If ``rdjsonl_file`` does not exist.
            SubprocessExecutionError: If reviewdog exits non-zero, which with
                ``-fail-on-error=true`` includes the case where it posted findings.
        """

        if not rdjsonl_file.is_file():
            raise DiagnosticsMissingError(
                f"Diagnostics file {rdjsonl_file} was not produced; sqlfluff wrote no lint report"
            )
        payload = rdjsonl_file.read_bytes()
        command = build_reviewdog_command(config)
        info(f"Running reviewdog: {' '.join(command)}", use_emoji=self._use_emoji)
        self._runner(command, payload, context)


def _default_runner(args: Sequence[str], payload: bytes, context: StepContext) -> CompletedProcess[str]:
    return run_command(args, options=context.command_options(), overrides={"stdin_data": payload})


__all__ = [
    "RDJSONL_FORMAT",
    "DiagnosticsMissingError",
    "ReviewdogPublisher",
    "ReviewdogRunner",
    "build_reviewdog_command",
]
