# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Git-based discovery of SQL files changed in a pull request."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Final

from ..context import StepContext
from ..core.logging import info
from ..core.runtime.process import run_command
from ..platform.github import GITHUB_BASE_REF_ENV

DEFAULT_BASE_REF: Final[str] = "main"
DEFAULT_GLOB: Final[str] = "*.sql"
DEFAULT_REMOTE: Final[str] = "origin"
# Added, Copied, Modified, Renamed, Updated (unmerged).
DIFF_FILTER: Final[str] = "ACMRU"

GitRunner = Callable[[Sequence[str], StepContext], str]


def resolve_base_ref(context: StepContext) -> str:
    """Return the branch to diff against, falling back to :data:`DEFAULT_BASE_REF`."""

    return context.get(GITHUB_BASE_REF_ENV) or DEFAULT_BASE_REF


def parse_diff_output(stdout: str) -> list[str]:
    """Return de-duplicated, non-blank paths from ``git diff --name-only`` output.

    Args:
        stdout: Raw diff output.

    Returns:
        list[str]: Paths in first-seen order.
    """

    seen: dict[str, None] = {}
    for raw in stdout.splitlines():
        stripped = raw.strip()
        if stripped:
            seen.setdefault(stripped, None)
    return list(seen)


class ChangedFileLocator:
    """Collect files matching a glob that changed relative to the base branch."""

    def __init__(
        self,
        *,
        glob: str = DEFAULT_GLOB,
        remote: str = DEFAULT_REMOTE,
        runner: GitRunner | None = None,
        use_emoji: bool = True,
        quiet: bool = False,
    ) -> None:
        """Create a locator.

        Args:
            glob: Pathspec restricting the diff (``*.sql`` by default).
            remote: Remote the base branch is fetched from.
            runner: Optional command runner used to execute git commands. The
                default runs git through :func:`run_command` and raises on
                failure.
            use_emoji: Whether log lines include emoji prefixes.
            quiet: Suppress progress logging so stdout carries only results.
        """

        self._glob = glob
        self._remote = remote
        self._runner = runner or self._default_runner
        self._use_emoji = use_emoji
        self._quiet = quiet

    def diff_command(self, base_ref: str) -> list[str]:
        """Return the ``git diff`` invocation comparing the worktree with ``base_ref``."""

        return [
            "git",
            "diff",
            "--name-only",
            f"--diff-filter={DIFF_FILTER}",
            "--relative",
            f"{self._remote}/{base_ref}",
            "--",
            self._glob,
        ]

    def locate(self, context: StepContext, *, base_ref: str | None = None) -> list[str]:
        """Fetch the base branch and return the changed paths.

        ``--relative`` restricts results to the context's working directory and
        reports paths relative to it. An empty list means nothing relevant
        changed; it is not an error.

        Args:
            context: Step context providing the working directory and environment.
            base_ref: Explicit base branch; defaults to ``GITHUB_BASE_REF`` or ``main``.

        Returns:
            list[str]: Changed paths in diff order.

        Raises:
            SubprocessExecutionError: If ``git fetch`` or ``git diff`` fails.
        """

        ref = base_ref or resolve_base_ref(context)
        if not self._quiet:
            info(f"Fetching {self._remote}/{ref}...", use_emoji=self._use_emoji)
        self._runner(["git", "fetch", self._remote, ref], context)
        return parse_diff_output(self._runner(self.diff_command(ref), context))

    @staticmethod
    def _default_runner(cmd: Sequence[str], context: StepContext) -> str:
        cp = run_command(cmd, options=context.command_options(capture_output=True))
        return cp.stdout or ""


__all__ = [
    "DEFAULT_BASE_REF",
    "DEFAULT_GLOB",
    "ChangedFileLocator",
    "GitRunner",
    "parse_diff_output",
    "resolve_base_ref",
]
