# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Severity vocabulary understood by reviewdog's rdjson formats."""

from __future__ import annotations

from enum import Enum
from typing import Final


class Severity(str, Enum):
    """Severity levels this action writes into rdjsonl diagnostics."""

    ERROR = "ERROR"
    WARNING = "WARNING"


# sqlfluff findings are always reported as errors; its own ``warning`` flag is
# not consulted.
DEFAULT_SEVERITY: Final[Severity] = Severity.ERROR

__all__ = ["DEFAULT_SEVERITY", "Severity"]
