# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Typer option declarations shared by the CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from typer.models import OptionInfo

from ..config import RDJSONL_FILENAME
from ..discovery.git import DEFAULT_GLOB
from ..platform.github import input_env_names

_INPUTS_PANEL = "Action inputs"
_REVIEWDOG_PANEL = "reviewdog"


def _input_option(name: str, help_text: str, *, panel: str = _INPUTS_PANEL) -> OptionInfo:
    """Return an option for ``--<name>`` that falls back to the matching ``INPUT_*`` variable."""

    return typer.Option(
        f"--{name}",
        envvar=input_env_names(name),
        show_envvar=False,
        help=help_text,
        rich_help_panel=panel,
    )


PYPROJECT_OPTION = Annotated[
    str | None,
    _input_option("pyproject-path", "Dependency file installed with uv; defaults to the bundled manifest."),
]
DBT_PROJECT_OPTION = Annotated[
    str | None,
    _input_option("dbt-project-path", "dbt project directory the lint steps run in."),
]
DBT_PROFILES_OPTION = Annotated[
    str | None,
    _input_option("dbt-profiles-path", "dbt profiles directory; enables 'dbt deps' before linting."),
]
DIALECT_OPTION = Annotated[str | None, _input_option("sqlfluff-dialect", "sqlfluff --dialect value.")]
TEMPLATER_OPTION = Annotated[str | None, _input_option("sqlfluff-templater", "sqlfluff --templater value.")]
REVIEWDOG_NAME_OPTION = Annotated[
    str | None,
    _input_option("review-dog-name", "Name reported by reviewdog.", panel=_REVIEWDOG_PANEL),
]
FILTER_MODE_OPTION = Annotated[
    str | None,
    _input_option(
        "review-dog-filter-mode",
        "reviewdog -filter-mode (added, diff_context, file, nofilter).",
        panel=_REVIEWDOG_PANEL,
    ),
]
FAIL_ON_ERROR_OPTION = Annotated[
    str | None,
    _input_option("review-dog-fail-on-error", "reviewdog -fail-on-error (true/false).", panel=_REVIEWDOG_PANEL),
]
REPORTER_OPTION = Annotated[
    str | None,
    _input_option("review-dog-reporter", "reviewdog -reporter value.", panel=_REVIEWDOG_PANEL),
]
BASE_REF_OPTION = Annotated[
    str | None,
    typer.Option("--base-ref", help="Branch to diff against; defaults to $GITHUB_BASE_REF or 'main'."),
]
GLOB_OPTION = Annotated[str, typer.Option("--glob", help="Pathspec limiting the diff.")]
LINT_JSON_ARGUMENT = Annotated[
    Path,
    typer.Argument(exists=True, dir_okay=False, readable=True, help="sqlfluff JSON report."),
]
OUTPUT_OPTION = Annotated[Path, typer.Option("--output", "-o", help="Destination rdjsonl file.")]
EMOJI_OPTION = Annotated[bool, typer.Option("--emoji/--no-emoji", help="Toggle emoji in CLI output.")]

DEFAULT_OUTPUT = Path(RDJSONL_FILENAME)

__all__ = [
    "BASE_REF_OPTION",
    "DBT_PROFILES_OPTION",
    "DBT_PROJECT_OPTION",
    "DEFAULT_GLOB",
    "DEFAULT_OUTPUT",
    "DIALECT_OPTION",
    "EMOJI_OPTION",
    "FAIL_ON_ERROR_OPTION",
    "FILTER_MODE_OPTION",
    "GLOB_OPTION",
    "LINT_JSON_ARGUMENT",
    "OUTPUT_OPTION",
    "PYPROJECT_OPTION",
    "REPORTER_OPTION",
    "REVIEWDOG_NAME_OPTION",
    "TEMPLATER_OPTION",
]
