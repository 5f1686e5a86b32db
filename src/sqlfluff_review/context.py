# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Explicit working directory and environment shared by orchestration steps."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from pathlib import Path
from types import MappingProxyType

from .core.runtime.process import CommandOptions

VENV_DIR_NAME = ".venv"


@dataclass(frozen=True, slots=True)
class StepContext:
    """Where and with which environment external tools are executed.

    Steps never call :func:`os.chdir` or write to :data:`os.environ`; they
    derive a new context instead and hand it to the subprocess wrapper.

    Attributes:
        workspace: Checked-out repository root; the virtualenv lives here.
        workdir: Directory subprocesses run in (the dbt project when configured).
        base_env: Environment inherited from the runner.
        env_overrides: Variables layered on top of ``base_env``.
    """

    workspace: Path
    workdir: Path
    base_env: Mapping[str, str] = field(default_factory=lambda: MappingProxyType(dict(os.environ)))
    env_overrides: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def for_workspace(cls, workspace: Path, environ: Mapping[str, str] | None = None) -> StepContext:
        """Return a context rooted at ``workspace`` with an immutable copy of ``environ``."""

        resolved = workspace.resolve()
        base = dict(os.environ if environ is None else environ)
        return cls(workspace=resolved, workdir=resolved, base_env=MappingProxyType(base))

    def with_workdir(self, path: Path) -> StepContext:
        """Return a copy whose subprocesses run in ``path`` (relative paths resolve against the workspace)."""

        target = path if path.is_absolute() else self.workspace / path
        return replace(self, workdir=target.resolve())

    def with_env(self, **variables: str) -> StepContext:
        """Return a copy with ``variables`` added to the subprocess environment."""

        merged = {**self.env_overrides, **variables}
        return replace(self, env_overrides=MappingProxyType(merged))

    def environment(self) -> dict[str, str]:
        """Return the full environment handed to subprocesses."""

        return {**self.base_env, **self.env_overrides}

    def get(self, name: str, default: str | None = None) -> str | None:
        """Look up ``name`` in the effective environment."""

        return self.env_overrides.get(name, self.base_env.get(name, default))

    def command_options(self, *, check: bool = True, capture_output: bool = False) -> CommandOptions:
        """Return :class:`CommandOptions` bound to this context's directory and environment."""

        return CommandOptions(cwd=self.workdir, env=self.environment(), check=check, capture_output=capture_output)

    def venv_executable(self, name: str) -> Path:
        """Return the path of ``name`` inside the workspace virtualenv."""

        return self.workspace / VENV_DIR_NAME / "bin" / name


__all__ = ["StepContext", "VENV_DIR_NAME"]
