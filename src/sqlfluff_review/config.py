# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Action configuration built from GitHub Actions inputs."""

from __future__ import annotations

from enum import StrEnum
from importlib.resources import files
from pathlib import Path
from typing import Final

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .runtime.installers import DEFAULT_REVIEWDOG_BIN_DIR
from .utils.bool_utils import coerce_bool_literal

DEFAULT_DIALECT: Final[str] = "ansi"
DEFAULT_TEMPLATER: Final[str] = "jinja"
DEFAULT_REVIEWDOG_NAME: Final[str] = "sqlfluff"
DEFAULT_REVIEWDOG_REPORTER: Final[str] = "github-pr-review"
DBT_TARGET: Final[str] = "sqlfluff"
LINT_OUTPUT_FILENAME: Final[str] = "lint-results.json"
RDJSONL_FILENAME: Final[str] = "lint-results.rdjsonl"
BUNDLED_DEPENDENCY_FILE: Final[str] = "pyproject.toml"


class ConfigError(ValueError):
    """Raised when configuration input is invalid."""


class FilterMode(StrEnum):
    """reviewdog ``-filter-mode`` values."""

    ADDED = "added"
    DIFF_CONTEXT = "diff_context"
    FILE = "file"
    NOFILTER = "nofilter"


class ActionConfig(BaseModel):
    """Immutable settings for one action run.

    Optional paths left empty by the workflow are normalised to ``None``.
    """

    model_config = ConfigDict(frozen=True)

    dependency_file: Path | None = None
    dbt_project_dir: Path | None = None
    dbt_profiles_dir: Path | None = None
    sqlfluff_dialect: str = DEFAULT_DIALECT
    sqlfluff_templater: str = DEFAULT_TEMPLATER
    reviewdog_name: str = DEFAULT_REVIEWDOG_NAME
    reviewdog_filter_mode: FilterMode = FilterMode.FILE
    reviewdog_fail_on_error: bool = True
    reviewdog_reporter: str = DEFAULT_REVIEWDOG_REPORTER
    reviewdog_bin_dir: Path = DEFAULT_REVIEWDOG_BIN_DIR
    base_ref: str | None = None
    use_emoji: bool = True

    @field_validator("dependency_file", "dbt_project_dir", "dbt_profiles_dir", "base_ref", mode="before")
    @classmethod
    def _blank_to_none(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("reviewdog_fail_on_error", mode="before")
    @classmethod
    def _parse_fail_on_error(cls, value: object) -> object:
        if isinstance(value, str):
            return coerce_bool_literal(value)
        return value

    @field_validator("reviewdog_filter_mode", mode="before")
    @classmethod
    def _normalise_filter_mode(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @classmethod
    def from_inputs(cls, **values: object) -> ActionConfig:
        """Build a config from raw input values, dropping ones that were not supplied.

        ``None`` and empty strings fall back to the field default.

        Raises:
            ConfigError: If a supplied value is invalid.
        """

        supplied = {key: value for key, value in values.items() if value is not None and value != ""}
        try:
            return cls(**supplied)
        except ValidationError as exc:
            problems = "; ".join(
                f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
            )
            raise ConfigError(f"Invalid action inputs: {problems}") from exc


def bundled_dependency_file() -> Path:
    """Return the dependency manifest shipped with the package."""

    return Path(str(files("sqlfluff_review").joinpath("data", BUNDLED_DEPENDENCY_FILE)))


def resolve_dependency_file(config: ActionConfig, workspace: Path) -> Path:
    """Return the dependency file to install: the configured one, else the bundled default.

    Args:
        config: Action configuration.
        workspace: Directory relative paths are resolved against.

    Returns:
        Path: Absolute path to the dependency file.
    """

    if config.dependency_file is None:
        return bundled_dependency_file()
    path = config.dependency_file
    return path if path.is_absolute() else (workspace / path).resolve()


__all__ = [
    "DBT_TARGET",
    "LINT_OUTPUT_FILENAME",
    "RDJSONL_FILENAME",
    "ActionConfig",
    "ConfigError",
    "FilterMode",
    "bundled_dependency_file",
    "resolve_dependency_file",
]
