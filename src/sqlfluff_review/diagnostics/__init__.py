# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Diagnostic translation and serialisation."""

from __future__ import annotations

from .rdjsonl import process_lint_output, read_rdjsonl, translate_results, write_rdjsonl

__all__ = ["process_lint_output", "read_rdjsonl", "translate_results", "write_rdjsonl"]
