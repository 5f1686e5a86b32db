# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared logging helpers."""

from __future__ import annotations

from .public import emoji, fail, info, ok, section, step, warn

__all__ = [
    "emoji",
    "fail",
    "info",
    "ok",
    "section",
    "step",
    "warn",
]
