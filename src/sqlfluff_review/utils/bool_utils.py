# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Boolean parsing helpers for string-valued action inputs."""

from __future__ import annotations

from typing import Final

TRUTHY_LITERALS: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})
FALSY_LITERALS: Final[frozenset[str]] = frozenset({"0", "false", "no", "off"})


def coerce_bool_literal(value: str) -> bool:
    """Return the boolean represented by ``value`` or raise ``ValueError``.

    Args:
        value: Raw string containing a boolean literal.

    Returns:
        bool: ``True`` for truthy literals, ``False`` for falsy literals.

    Raises:
        ValueError: If ``value`` does not match a known boolean literal.
    """

    normalized = value.strip().lower()
    if normalized in TRUTHY_LITERALS:
        return True
    if normalized in FALSY_LITERALS:
        return False
    raise ValueError(f"Unsupported boolean literal: {value!r}")


def format_bool_flag(value: bool) -> str:
    """Render ``value`` the way Go-style CLI flags expect (``true``/``false``)."""

    return "true" if value else "false"


__all__ = ["coerce_bool_literal", "format_bool_flag"]
