# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""GitHub Actions environment variables and workflow commands."""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Final

GITHUB_ACTIONS_ENV: Final[str] = "GITHUB_ACTIONS"
GITHUB_BASE_REF_ENV: Final[str] = "GITHUB_BASE_REF"
GITHUB_WORKSPACE_ENV: Final[str] = "GITHUB_WORKSPACE"
INPUT_PREFIX: Final[str] = "INPUT_"


def running_in_actions(environ: Mapping[str, str] | None = None) -> bool:
    """Return ``True`` when executing inside a GitHub Actions runner."""

    env = os.environ if environ is None else environ
    return env.get(GITHUB_ACTIONS_ENV, "").lower() == "true"


def input_env_names(name: str) -> list[str]:
    """Return the environment variable names GitHub may use for input ``name``.

    JavaScript and Docker actions receive ``INPUT_<NAME>`` with hyphens kept,
    while composite actions usually export an underscored variant by hand.

    Args:
        name: Input name as declared in ``action.yml`` (e.g. ``sqlfluff-dialect``).

    Returns:
        list[str]: Candidate environment variable names in lookup order.
    """

    upper = name.replace(" ", "_").upper()
    names = [f"{INPUT_PREFIX}{upper}"]
    underscored = upper.replace("-", "_")
    if underscored != upper:
        names.append(f"{INPUT_PREFIX}{underscored}")
    return names


def workspace_dir(environ: Mapping[str, str] | None = None) -> Path:
    """Return the checked-out workspace, defaulting to the current directory."""

    env = os.environ if environ is None else environ
    raw = env.get(GITHUB_WORKSPACE_ENV)
    return Path(raw).resolve() if raw else Path.cwd().resolve()


def _escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def set_failed(message: str) -> None:
    """Emit an ``::error::`` workflow command so the step is marked failed.

    The caller remains responsible for exiting with a non-zero status.

    Args:
        message: Human-readable failure reason recorded on the step.
    """

    sys.stdout.write(f"::error::{_escape_data(message)}\n")
    sys.stdout.flush()


def start_group(title: str) -> None:
    """Open a collapsible log group."""

    sys.stdout.write(f"::group::{_escape_data(title)}\n")
    sys.stdout.flush()


def end_group() -> None:
    """Close the most recently opened log group."""

    sys.stdout.write("::endgroup::\n")
    sys.stdout.flush()


__all__ = [
    "GITHUB_ACTIONS_ENV",
    "GITHUB_BASE_REF_ENV",
    "GITHUB_WORKSPACE_ENV",
    "end_group",
    "input_env_names",
    "running_in_actions",
    "set_failed",
    "start_group",
    "workspace_dir",
]
