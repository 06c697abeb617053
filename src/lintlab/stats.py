# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Project statistics derived from a Cargo lockfile."""

from __future__ import annotations

import json
import tomllib
from enum import Enum
from pathlib import Path
from typing import Final

from prometheus_client import CollectorRegistry, Gauge
from prometheus_client.openmetrics.exposition import generate_latest
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import LockfileError

DEFAULT_LOCKFILE: Final[Path] = Path("Cargo.lock")
DEPENDENCIES_METRIC: Final[str] = "dependencies"
DEPENDENCIES_HELP: Final[str] = "number of dependencies"


class StatsFormat(str, Enum):
    """Output encodings supported by ``lint-lab stats``."""

    JSON = "json"
    OPEN_METRICS = "open-metrics"


class LockedPackage(BaseModel):
    """``[[package]]`` entry of a Cargo lockfile."""

    model_config = ConfigDict(frozen=True)

    name: str
    version: str
    source: str | None = None
    checksum: str | None = None
    dependencies: tuple[str, ...] = Field(default_factory=tuple)


class Lockfile(BaseModel):
    """Parsed Cargo lockfile."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    version: int | None = None
    packages: tuple[LockedPackage, ...] = Field(default_factory=tuple, alias="package")


class DependencyStats(BaseModel):
    """Statistics reported for a project."""

    model_config = ConfigDict(frozen=True)

    dependencies: int


def load_lockfile(path: Path) -> Lockfile:
    """Read and validate the lockfile at ``path``.

    Args:
        path: Location of ``Cargo.lock``.

    Returns:
        Lockfile: Validated lockfile model.

    Raises:
        LockfileError: If the file cannot be read or is not a valid lockfile.
    """

    try:
        with path.open("rb") as handle:
            document = tomllib.load(handle)
    except OSError as exc:
        raise LockfileError(path, exc.strerror or str(exc)) from exc
    except tomllib.TOMLDecodeError as exc:
        raise LockfileError(path, str(exc)) from exc
    try:
        return Lockfile.model_validate(document)
    except ValidationError as exc:
        raise LockfileError(path, f"{exc.error_count()} invalid field(s)") from exc


def collect_stats(lockfile: Lockfile) -> DependencyStats:
    """Return the statistics for ``lockfile``.

    Args:
        lockfile: Validated lockfile model.

    Returns:
        DependencyStats: Count of locked packages.
    """

    return DependencyStats(dependencies=len(lockfile.packages))


def render_json(stats: DependencyStats) -> str:
    """Render ``stats`` as a pretty-printed JSON object."""
    return json.dumps(stats.model_dump(mode="json"), indent=2) + "\n"


def render_open_metrics(stats: DependencyStats) -> str:
    """Render ``stats`` in the OpenMetrics text exposition format.

    Gauge values are floats in the exposition, so 42 dependencies render as
    ``dependencies 42.0``.

    Args:
        stats: Aggregated lockfile statistics.

    Returns:
        str: Exposition text terminated by ``# EOF``.
    """

    registry = CollectorRegistry(auto_describe=True)
    gauge = Gauge(DEPENDENCIES_METRIC, DEPENDENCIES_HELP, registry=registry)
    gauge.set(stats.dependencies)
    return generate_latest(registry).decode("utf-8")


def render_stats(stats: DependencyStats, fmt: StatsFormat) -> str:
    """Render ``stats`` using the requested ``fmt``.

    Args:
        stats: Aggregated lockfile statistics.
        fmt: Output format selected on the command line or in configuration.

    Returns:
        str: Rendered statistics ending in a newline.
    """

    if fmt is StatsFormat.OPEN_METRICS:
        return render_open_metrics(stats)
    return render_json(stats)


__all__ = [
    "DEFAULT_LOCKFILE",
    "DependencyStats",
    "LockedPackage",
    "Lockfile",
    "StatsFormat",
    "collect_stats",
    "load_lockfile",
    "render_json",
    "render_open_metrics",
    "render_stats",
]
