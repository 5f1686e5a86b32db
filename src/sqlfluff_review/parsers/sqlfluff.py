# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Parser for ``sqlfluff lint --format json`` output."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Final

from pydantic import TypeAdapter

from ..models import LintResult

_RESULTS_ADAPTER: Final[TypeAdapter[list[LintResult]]] = TypeAdapter(list[LintResult])


def parse_lint_results(payload: object) -> list[LintResult]:
    """Validate decoded sqlfluff JSON into :class:`LintResult` objects.

    Malformed entries are not skipped; a missing or mistyped field surfaces as
    a :class:`pydantic.ValidationError` so a broken lint run fails loudly.

    Args:
        payload: Decoded JSON document produced by sqlfluff.

    Returns:
        list[LintResult]: One result per file, in the order sqlfluff reported them.

    Raises:
        ValueError: If ``payload`` is not a JSON array or an entry is invalid.
    """

    if not isinstance(payload, list):
        raise ValueError(f"sqlfluff output must be a JSON array, got {type(payload).__name__}")
    return _RESULTS_ADAPTER.validate_python(payload)


def load_lint_results(path: Path) -> list[LintResult]:
    """Read and parse the sqlfluff JSON report stored at ``path``."""

    return parse_lint_results(json.loads(path.read_text(encoding="utf-8")))


__all__ = ["load_lint_results", "parse_lint_results"]
