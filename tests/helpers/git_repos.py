# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Throwaway git repositories with a local bare ``origin``."""

from __future__ import annotations

import os
import subprocess
from pathlib import Path


def git(args: list[str], cwd: Path) -> None:
    subprocess.run(["git", *args], cwd=cwd, check=True, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)


def git_env() -> dict[str, str]:
    """Return a minimal environment that lets git commit without global config."""

    return {
        "PATH": os.environ.get("PATH", ""),
        "HOME": os.environ.get("HOME", "/tmp"),
        "GIT_AUTHOR_NAME": "Reviewer",
        "GIT_AUTHOR_EMAIL": "reviewer@example.com",
        "GIT_COMMITTER_NAME": "Reviewer",
        "GIT_COMMITTER_EMAIL": "reviewer@example.com",
        "GITHUB_BASE_REF": "main",
    }


def feature_clone(tmp_path: Path) -> Path:
    """Create ``origin`` with a ``main`` branch and return a clone on a feature branch.

    The feature branch modifies ``models/existing.sql``, adds ``models/new.sql``
    and touches ``README.md``. The caller must export :func:`git_env` first.
    """

    origin = tmp_path / "origin.git"
    seed = tmp_path / "seed"
    clone = tmp_path / "clone"
    git(["init", "--bare", str(origin)], tmp_path)
    seed.mkdir()
    git(["init"], seed)
    git(["checkout", "-b", "main"], seed)
    (seed / "models").mkdir()
    (seed / "models" / "existing.sql").write_text("select 1\n", encoding="utf-8")
    (seed / "README.md").write_text("seed\n", encoding="utf-8")
    git(["add", "."], seed)
    git(["commit", "-m", "initial"], seed)
    git(["remote", "add", "origin", str(origin)], seed)
    git(["push", "origin", "main"], seed)

    git(["clone", "--branch", "main", str(origin), str(clone)], tmp_path)
    git(["checkout", "-b", "feature"], clone)
    (clone / "models" / "existing.sql").write_text("select 2\n", encoding="utf-8")
    (clone / "models" / "new.sql").write_text("select 3\n", encoding="utf-8")
    (clone / "README.md").write_text("changed\n", encoding="utf-8")
    git(["add", "."], clone)
    git(["commit", "-m", "feature"], clone)
    return clone
