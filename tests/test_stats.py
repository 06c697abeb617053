# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for lockfile statistics."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from lintlab.errors import LockfileError
from lintlab.stats import (
    DependencyStats,
    StatsFormat,
    collect_stats,
    load_lockfile,
    render_stats,
)

LOCKFILE = """\
# This file is automatically @generated by Cargo.
# It is not intended for manual editing.
version = 3

[[package]]
name = "demo"
version = "0.1.0"
dependencies = [
 "serde",
]

[[package]]
name = "serde"
version = "1.0.200"
source = "registry+https://github.com/rust-lang/crates.io-index"
checksum = "ddc6f9cc94d67c0e21aaf7eda3a010fd3af78ebf6e096aa6e2e13c79749cce4f"
"""


def _write_lockfile(tmp_path: Path, text: str = LOCKFILE) -> Path:
    path = tmp_path / "Cargo.lock"
    path.write_text(text, encoding="utf-8")
    return path


def test_load_lockfile_counts_packages(tmp_path: Path) -> None:
    lockfile = load_lockfile(_write_lockfile(tmp_path))

    assert lockfile.version == 3
    assert [package.name for package in lockfile.packages] == ["demo", "serde"]
    assert collect_stats(lockfile) == DependencyStats(dependencies=2)


def test_empty_lockfile_has_no_dependencies(tmp_path: Path) -> None:
    lockfile = load_lockfile(_write_lockfile(tmp_path, "version = 4\n"))
    assert collect_stats(lockfile).dependencies == 0


def test_missing_lockfile_raises(tmp_path: Path) -> None:
    with pytest.raises(LockfileError) as excinfo:
        load_lockfile(tmp_path / "Cargo.lock")
    assert "Cargo.lock" in str(excinfo.value)


def test_invalid_lockfile_raises(tmp_path: Path) -> None:
    with pytest.raises(LockfileError):
        load_lockfile(_write_lockfile(tmp_path, "[[package]\nname = "))
    with pytest.raises(LockfileError):
        load_lockfile(_write_lockfile(tmp_path, '[[package]]\nname = "demo"\n'))


def test_render_json() -> None:
    rendered = render_stats(DependencyStats(dependencies=42), StatsFormat.JSON)

    assert json.loads(rendered) == {"dependencies": 42}
    assert rendered.endswith("\n")


def test_render_open_metrics() -> None:
    rendered = render_stats(DependencyStats(dependencies=42), StatsFormat.OPEN_METRICS)
    lines = rendered.splitlines()

    assert "# HELP dependencies number of dependencies" in lines
    assert "# TYPE dependencies gauge" in lines
    assert "dependencies 42.0" in lines
    assert lines[-1] == "# EOF"
