# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Top-level failure reporting for CLI commands."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

import typer

from ..core.logging import fail
from ..platform.github import set_failed


@contextmanager
def report_failures(*, use_emoji: bool) -> Iterator[None]:
    """Turn any exception raised by the body into a failed workflow step.

    The error message is recorded with an ``::error::`` workflow command and
    the command exits with status 1.

    Args:
        use_emoji: Whether the console failure line includes an emoji.

    Yields:
        None: Control returns to the command body.

    Raises:
        typer.Exit: With ``code=1`` when the body raised a fatal error.
    """

    try:
        yield
    except typer.Exit:
        raise
    except Exception as exc:
        message = str(exc) or type(exc).__name__
        fail(message, use_emoji=use_emoji)
        set_failed(message)
        raise typer.Exit(code=1) from exc


__all__ = ["report_failures"]
