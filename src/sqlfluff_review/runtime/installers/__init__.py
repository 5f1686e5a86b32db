# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Installers for the external tools the action drives."""

from __future__ import annotations

from .models import CommandSpec, InstallPlan
from .tools import (
    DEFAULT_REVIEWDOG_BIN_DIR,
    REVIEWDOG_INSTALL_SCRIPT,
    CommandRunner,
    ToolInstaller,
    dependencies_plan,
    reviewdog_plan,
    uv_plan,
)

__all__ = [
    "DEFAULT_REVIEWDOG_BIN_DIR",
    "REVIEWDOG_INSTALL_SCRIPT",
    "CommandRunner",
    "CommandSpec",
    "InstallPlan",
    "ToolInstaller",
    "dependencies_plan",
    "reviewdog_plan",
    "uv_plan",
]
