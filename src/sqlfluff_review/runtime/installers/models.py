# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Data models describing tool installation plans."""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CommandSpec(BaseModel):
    """A single installation command and a short description for the logs."""

    model_config = ConfigDict(frozen=True)

    args: tuple[str, ...]
    description: str | None = None

    @field_validator("args", mode="before")
    @classmethod
    def _coerce_args(cls, value: Sequence[str] | str) -> tuple[str, ...]:
        """Return ``value`` coerced into an immutable tuple of argument strings.

        Args:
            value: Sequence or scalar representing command arguments.

        Returns:
            tuple[str, ...]: Normalised command arguments.

        Raises:
            TypeError: If *value* cannot be coerced into a sequence of strings.
            ValueError: If *value* is empty.
        """

        if isinstance(value, str):
            return (value,)
        if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
            if not value:
                raise ValueError("CommandSpec.args must not be empty")
            return tuple(str(entry) for entry in value)
        raise TypeError("CommandSpec.args must be a sequence of strings")

    def render(self) -> str:
        """Return the arguments joined with single spaces for logging."""

        return " ".join(self.args)

    def describe(self) -> str:
        return self.description or self.render()


class InstallPlan(BaseModel):
    """Ordered commands that together install one tool."""

    model_config = ConfigDict(frozen=True)

    name: str
    commands: tuple[CommandSpec, ...] = Field(default_factory=tuple)
    success_message: str | None = None


__all__ = ["CommandSpec", "InstallPlan"]
