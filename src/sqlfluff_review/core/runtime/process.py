# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Safe wrappers around ``subprocess`` execution."""

from __future__ import annotations

import shutil

# Bandit: subprocess usage is intentional; every external tool the action drives
# goes through this wrapper, which never enables ``shell=True``.
import subprocess  # nosec B404 suppression_valid: Shell-free subprocess wrapper enforces safe execution.
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, replace
from pathlib import Path
from subprocess import CompletedProcess
from typing import Final, Literal

CommandOverrideValue = Path | Mapping[str, str] | bytes | bool | None
CommandOptionKey = Literal["cwd", "env", "check", "capture_output", "stdin_data"]
CommandOverrideMapping = Mapping[CommandOptionKey, CommandOverrideValue]

_COMMAND_KEYS: Final[frozenset[CommandOptionKey]] = frozenset(
    {"cwd", "env", "check", "capture_output", "stdin_data"}
)


@dataclass(frozen=True, slots=True)
class CommandOptions:
    """Immutable command execution options.

    Attributes:
        cwd: Working directory for the child process; ``None`` inherits ours.
        env: Complete environment for the child process; ``None`` inherits ours.
        check: Raise :class:`SubprocessExecutionError` on a non-zero exit.
        capture_output: Capture stdout/stderr instead of streaming them.
        stdin_data: Raw bytes written to the child's standard input.
    """

    cwd: Path | None = None
    env: Mapping[str, str] | None = None
    check: bool = True
    capture_output: bool = False
    stdin_data: bytes | None = None

    def with_overrides(self, overrides: CommandOverrideMapping) -> CommandOptions:
        """Return a copy of the options with ``overrides`` applied.

        Args:
            overrides: Mapping of option names to replacement values.

        Returns:
            CommandOptions: Updated options instance.

        Raises:
            TypeError: If ``overrides`` names an unknown option or a value has
                the wrong type.
        """

        unknown = [key for key in overrides if key not in _COMMAND_KEYS]
        if unknown:
            raise TypeError(f"Unknown command option(s): {', '.join(sorted(unknown))}")
        updates: dict[str, object] = {}
        for key, value in overrides.items():
            updates[key] = _coerce_override(key, value)
        return replace(self, **updates)


def _coerce_override(key: CommandOptionKey, value: CommandOverrideValue) -> object:
    """Validate a single override value for ``key``."""

    if key == "cwd":
        if value is None or isinstance(value, Path):
            return value
        raise TypeError("cwd override must be a pathlib.Path or None")
    if key == "env":
        if value is None:
            return None
        if not isinstance(value, Mapping):
            raise TypeError("env override must be a mapping of strings to strings")
        validated: dict[str, str] = {}
        for name, entry in value.items():
            if not isinstance(name, str) or not isinstance(entry, str):
                raise TypeError("env override must map strings to strings")
            validated[name] = entry
        return validated
    if key == "stdin_data":
        if value is None or isinstance(value, bytes):
            return value
        raise TypeError("stdin_data override must be bytes or None")
    if isinstance(value, bool):
        return value
    raise TypeError(f"{key} override must be a boolean value")


class SubprocessExecutionError(RuntimeError):
    """Raised when a subprocess exits with a non-zero status while ``check`` is true."""

    def __init__(
        self,
        command: Sequence[str],
        returncode: int,
        stdout: str | None,
        stderr: str | None,
    ) -> None:
        """Initialise the error with captured subprocess metadata.

        Args:
            command: Normalised command sequence that was executed.
            returncode: Exit status reported by the subprocess.
            stdout: Captured standard output stream.
            stderr: Captured standard error stream.
        """
        name = Path(command[0]).name if command else "<unknown>"
        detail = f" stderr: {stderr.strip()}" if stderr and stderr.strip() else ""
        super().__init__(f"Command '{name}' exited with status {returncode}.{detail}")
        self.command = tuple(command)
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr


def _ensure_text(value: str | bytes | None) -> str | None:
    """Return ``value`` decoded to text when supplied as ``bytes``."""

    if value is None or isinstance(value, str):
        return value
    return value.decode(errors="replace")


def _normalize_args(args: Sequence[str], search_path: str | None = None) -> list[str]:
    """Resolve the executable of ``args`` against ``PATH``.

    Args:
        args: Raw command arguments supplied by the caller.
        search_path: ``PATH`` value to search; ``None`` uses the current environment.

    Returns:
        list[str]: Argument list with an absolute executable path.

    Raises:
        ValueError: If no arguments are provided.
        FileNotFoundError: If the executable cannot be found on ``PATH``.
    """

    if not args:
        raise ValueError("subprocess command requires at least one argument")

    head, *rest = args
    head_path = Path(head)
    if head_path.is_absolute():
        return [str(head_path), *rest]

    resolved = shutil.which(head, path=search_path)
    if resolved is None:
        raise FileNotFoundError(f"Executable '{head}' was not found on PATH")
    return [resolved, *rest]


def run_command(
    args: Sequence[str],
    *,
    options: CommandOptions | None = None,
    overrides: CommandOverrideMapping | None = None,
) -> CompletedProcess[str]:
    """Execute ``args`` after normalising the executable path.

    Output is always returned as text. When ``stdin_data`` is supplied the
    process runs in binary mode so the bytes reach the child untouched, and the
    captured streams are decoded afterwards.

    Args:
        args: Command and argument sequence to execute.
        options: Base options configuring execution semantics.
        overrides: Keyword overrides applied to a copy of ``options``.

    Returns:
        CompletedProcess[str]: Subprocess execution metadata.

    Raises:
        FileNotFoundError: If the executable cannot be resolved on ``PATH``.
        SubprocessExecutionError: When ``check`` is true and the process exits
            with a non-zero status.
        TypeError: If an unknown override key is supplied.
    """

    resolved = (options or CommandOptions()).with_overrides(dict(overrides or {}))
    normalized = _normalize_args(args, resolved.env.get("PATH") if resolved.env is not None else None)
    binary = resolved.stdin_data is not None

    # Bandit: argument lists are passed directly without shell expansion.
    raw = subprocess.run(  # nosec B603 - controlled arguments, not user supplied
        normalized,
        cwd=str(resolved.cwd) if resolved.cwd is not None else None,
        env=dict(resolved.env) if resolved.env is not None else None,
        check=False,
        capture_output=resolved.capture_output,
        text=not binary,
        input=resolved.stdin_data,
    )
    completed: CompletedProcess[str] = CompletedProcess(
        args=normalized,
        returncode=raw.returncode,
        stdout=_ensure_text(raw.stdout),
        stderr=_ensure_text(raw.stderr),
    )

    if resolved.check and completed.returncode != 0:
        raise SubprocessExecutionError(normalized, completed.returncode, completed.stdout, completed.stderr)

    return completed


__all__ = [
    "CommandOptionKey",
    "CommandOptions",
    "CommandOverrideMapping",
    "CommandOverrideValue",
    "SubprocessExecutionError",
    "run_command",
]
