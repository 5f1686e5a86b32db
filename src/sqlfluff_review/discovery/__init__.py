# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Changed-file discovery."""

from __future__ import annotations

from .git import ChangedFileLocator, parse_diff_output, resolve_base_ref

__all__ = ["ChangedFileLocator", "parse_diff_output", "resolve_base_ref"]
