# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""``translate`` command: convert a sqlfluff JSON report to rdjsonl."""

from __future__ import annotations

import typer

from ...core.logging import ok
from ...diagnostics.rdjsonl import process_lint_output
from ...parsers.sqlfluff import load_lint_results
from ..errors import report_failures
from ..models import DEFAULT_OUTPUT, EMOJI_OPTION, LINT_JSON_ARGUMENT, OUTPUT_OPTION


def translate_command(
    lint_json: LINT_JSON_ARGUMENT,
    output: OUTPUT_OPTION = DEFAULT_OUTPUT,
    emoji: EMOJI_OPTION = True,
) -> None:
    """Write one rdjsonl diagnostic per sqlfluff violation found in LINT_JSON."""

    with report_failures(use_emoji=emoji):
        count = process_lint_output(load_lint_results(lint_json), output)
    ok(f"Wrote {count} diagnostic(s) to {output}", use_emoji=emoji)


def register(app: typer.Typer) -> None:
    """Register the ``translate`` command with ``app``."""

    app.command("translate")(translate_command)


__all__ = ["register", "translate_command"]
