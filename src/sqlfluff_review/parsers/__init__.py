# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Parsers for linter output."""

from __future__ import annotations

from .sqlfluff import load_lint_results, parse_lint_results

__all__ = ["load_lint_results", "parse_lint_results"]
