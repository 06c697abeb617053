# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models and TOML loading for lint-lab."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import LintLabError
from .report import UNKNOWN_CHECK_NAME
from .stats import DEFAULT_LOCKFILE, StatsFormat

PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "lintlab"
STANDALONE_FILENAME: Final[str] = ".lintlab.toml"


class ConfigError(LintLabError):
    """Raised when configuration input is invalid."""


class ReportConfig(BaseModel):
    """Settings applied when writing code quality reports."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    indent: int = Field(default=2, ge=0)
    unknown_check_name: str = Field(default=UNKNOWN_CHECK_NAME, min_length=1)


class StatsConfig(BaseModel):
    """Settings for the ``stats`` command."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    lockfile: Path = DEFAULT_LOCKFILE
    format: StatsFormat = StatsFormat.JSON


class Config(BaseModel):
    """Top-level lint-lab configuration."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    report: ReportConfig = Field(default_factory=ReportConfig)
    stats: StatsConfig = Field(default_factory=StatsConfig)


class DefaultConfigSource:
    """Return the built-in defaults as a configuration fragment."""

    name = "defaults"

    def load(self) -> Mapping[str, Any]:
        """Return an empty fragment so every model default applies.

        Returns:
            Mapping[str, Any]: Empty mapping.
        """

        return {}

    def describe(self) -> str:
        """Return a label for diagnostics.

        Returns:
            str: Human readable source description.
        """

        return "Built-in defaults"


class TomlConfigSource:
    """Load configuration data from a standalone TOML document."""

    def __init__(self, path: Path) -> None:
        self.path = path
        self.name = str(path)

    def _read(self) -> dict[str, Any]:
        """Parse the TOML document at ``path``.

        Returns:
            dict[str, Any]: Parsed document.

        Raises:
            ConfigError: If the file cannot be read or is not valid TOML.
        """

        try:
            with self.path.open("rb") as handle:
                return tomllib.load(handle)
        except OSError as exc:
            raise ConfigError(f"Unable to read configuration {self.path}: {exc.strerror or exc}") from exc
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"Invalid TOML in {self.path}: {exc}") from exc

    def load(self) -> Mapping[str, Any]:
        """Return the whole document as the configuration fragment.

        Returns:
            Mapping[str, Any]: Parsed configuration data.

        Raises:
            ConfigError: If the file cannot be read or is not valid TOML.
        """

        return self._read()

    def describe(self) -> str:
        """Return a label for diagnostics.

        Returns:
            str: Human readable source description.
        """

        return f"TOML configuration at {self.name}"


class PyProjectConfigSource(TomlConfigSource):
    """Read configuration from ``[tool.lintlab]`` within ``pyproject.toml``."""

    def load(self) -> Mapping[str, Any]:
        """Return the ``[tool.lintlab]`` table.

        Returns:
            Mapping[str, Any]: Section contents, or an empty mapping when the
            section is missing.

        Raises:
            ConfigError: If the file cannot be read or is not valid TOML.
        """

        return _pyproject_section(self._read()) or {}

    def describe(self) -> str:
        """Return a label for diagnostics.

        Returns:
            str: Human readable source description.
        """

        return f"pyproject.toml ({self.name})"


ConfigSource = DefaultConfigSource | TomlConfigSource


def _pyproject_section(document: Mapping[str, Any]) -> Mapping[str, Any] | None:
    tool_section = document.get(PYPROJECT_TOOL_KEY)
    if not isinstance(tool_section, Mapping):
        return None
    section = tool_section.get(PYPROJECT_SECTION_KEY)
    if not isinstance(section, Mapping):
        return None
    return section


def _has_pyproject_section(path: Path) -> bool:
    if not path.is_file():
        return False
    try:
        with path.open("rb") as handle:
            document = tomllib.load(handle)
    except (OSError, tomllib.TOMLDecodeError):
        return False
    return _pyproject_section(document) is not None


def resolve_config_source(explicit: Path | None = None, *, root: Path | None = None) -> ConfigSource:
    """Select the configuration source to use.

    An explicit path always wins; otherwise ``[tool.lintlab]`` in
    ``pyproject.toml`` is preferred over ``.lintlab.toml`` in ``root``.

    Args:
        explicit: Path given with ``--config``, if any.
        root: Directory searched for implicit sources; defaults to the cwd.

    Returns:
        ConfigSource: Source to load configuration from.

    Raises:
        ConfigError: If ``explicit`` does not name an existing file.
    """

    if explicit is not None:
        if not explicit.is_file():
            raise ConfigError(f"Configuration file {explicit} does not exist")
        if explicit.name == PYPROJECT_FILENAME:
            return PyProjectConfigSource(explicit)
        return TomlConfigSource(explicit)

    base = root if root is not None else Path.cwd()
    pyproject = base / PYPROJECT_FILENAME
    if _has_pyproject_section(pyproject):
        return PyProjectConfigSource(pyproject)
    standalone = base / STANDALONE_FILENAME
    if standalone.is_file():
        return TomlConfigSource(standalone)
    return DefaultConfigSource()


def load_config(explicit: Path | None = None, *, root: Path | None = None) -> Config:
    """Load the configuration from the resolved source.

    Args:
        explicit: Path given with ``--config``, if any.
        root: Directory searched for implicit sources; defaults to the cwd.

    Returns:
        Config: Validated configuration.

    Raises:
        ConfigError: If the source cannot be read or contains invalid values.
    """

    source = resolve_config_source(explicit, root=root)
    data = source.load()
    try:
        return Config.model_validate(dict(data))
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
        )
        raise ConfigError(f"Invalid configuration in {source.describe()}: {problems}") from exc


__all__ = [
    "Config",
    "ConfigError",
    "ConfigSource",
    "DefaultConfigSource",
    "PyProjectConfigSource",
    "ReportConfig",
    "StatsConfig",
    "TomlConfigSource",
    "load_config",
    "resolve_config_source",
]
