# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Lint changed SQL files with sqlfluff and publish the findings through reviewdog."""

from __future__ import annotations

__version__ = "0.1.0"

__all__ = ["__version__"]
