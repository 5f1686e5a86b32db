# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""``changed-files`` command: list files the action would lint."""

from __future__ import annotations

from pathlib import Path

import typer

from ...context import StepContext
from ...discovery.git import DEFAULT_GLOB, ChangedFileLocator
from ..errors import report_failures
from ..models import BASE_REF_OPTION, EMOJI_OPTION, GLOB_OPTION


def changed_files_command(
    base_ref: BASE_REF_OPTION = None,
    glob: GLOB_OPTION = DEFAULT_GLOB,
    emoji: EMOJI_OPTION = True,
) -> None:
    """Print files matching GLOB that changed against the base branch, one per line."""

    locator = ChangedFileLocator(glob=glob, use_emoji=emoji, quiet=True)
    with report_failures(use_emoji=emoji):
        files = locator.locate(StepContext.for_workspace(Path.cwd()), base_ref=base_ref)
    for path in files:
        typer.echo(path)


def register(app: typer.Typer) -> None:
    """Register the ``changed-files`` command with ``app``."""

    app.command("changed-files")(changed_files_command)


__all__ = ["changed_files_command", "register"]
