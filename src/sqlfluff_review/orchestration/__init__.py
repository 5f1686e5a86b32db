# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Action orchestration."""

from __future__ import annotations

from .pipeline import ActionOutcome, ActionPipeline, ActionServices, RunStatus, run_action

__all__ = ["ActionOutcome", "ActionPipeline", "ActionServices", "RunStatus", "run_action"]
