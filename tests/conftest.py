# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from sqlfluff_review.context import StepContext
from sqlfluff_review.runtime.console.manager import get_console_manager


@pytest.fixture(autouse=True)
def _plain_console(monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test outside GitHub Actions with fresh consoles."""

    monkeypatch.delenv("GITHUB_ACTIONS", raising=False)
    get_console_manager().clear()


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Return an empty checked-out workspace directory."""

    root = tmp_path / "workspace"
    root.mkdir()
    return root.resolve()


@pytest.fixture
def context(workspace: Path) -> StepContext:
    """Return a step context rooted at ``workspace`` with a minimal environment."""

    return StepContext.for_workspace(workspace, environ={"PATH": os.environ.get("PATH", "")})


@pytest.fixture
def lint_payload() -> list[dict[str, object]]:
    """Return a sqlfluff JSON report covering two files."""

    return [
        {
            "filepath": "models/a.sql",
            "violations": [
                {
                    "code": "AM05",
                    "name": "ambiguous.join",
                    "description": "bad join",
                    "warning": False,
                    "start_line_no": 3,
                    "start_line_pos": 1,
                    "end_line_no": 3,
                    "end_line_pos": 10,
                },
                {
                    "code": "LT01",
                    "description": "Expected only single space.",
                    "start_line_no": 7,
                    "start_line_pos": 12,
                    "end_line_no": 7,
                    "end_line_pos": 14,
                },
            ],
            "statistics": {"source_chars": 120},
            "timings": {"parsing": 0.01},
        },
        {
            "filepath": "models/b.sql",
            "violations": [
                {
                    "code": "CP01",
                    "description": "Keywords must be consistently upper case.",
                    "start_line_no": 1,
                    "start_line_pos": 1,
                    "end_line_no": 1,
                    "end_line_pos": 7,
                },
            ],
        },
    ]
