# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the explicit step context."""

from __future__ import annotations

import os
from pathlib import Path

from sqlfluff_review.context import StepContext


def test_with_workdir_resolves_relative_to_workspace(workspace: Path) -> None:
    ctx = StepContext.for_workspace(workspace, environ={})

    nested = ctx.with_workdir(Path("transform/dbt"))

    assert nested.workdir == workspace / "transform" / "dbt"
    assert nested.workspace == workspace
    assert ctx.workdir == workspace


def test_with_env_layers_variables_without_touching_process(workspace: Path) -> None:
    ctx = StepContext.for_workspace(workspace, environ={"PATH": "/bin", "KEEP": "1"})

    updated = ctx.with_env(DBT_TARGET="sqlfluff")

    assert updated.environment() == {"PATH": "/bin", "KEEP": "1", "DBT_TARGET": "sqlfluff"}
    assert ctx.environment() == {"PATH": "/bin", "KEEP": "1"}
    assert os.environ.get("DBT_TARGET") != "sqlfluff"
    assert updated.get("DBT_TARGET") == "sqlfluff"
    assert updated.get("MISSING", "fallback") == "fallback"


def test_command_options_bind_directory_and_environment(workspace: Path) -> None:
    ctx = StepContext.for_workspace(workspace, environ={"A": "1"}).with_env(B="2")

    options = ctx.command_options(capture_output=True)

    assert options.cwd == workspace
    assert dict(options.env or {}) == {"A": "1", "B": "2"}
    assert options.capture_output is True
    assert options.check is True


def test_venv_executable_lives_in_workspace(workspace: Path) -> None:
    ctx = StepContext.for_workspace(workspace, environ={}).with_workdir(Path("dbt"))

    assert ctx.venv_executable("sqlfluff") == workspace / ".venv" / "bin" / "sqlfluff"
