# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared Typer parameter declarations and CLI state."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import typer

from ..config import Config
from ..stats import StatsFormat

INPUT_OPTION = Annotated[
    str,
    typer.Option("--input", "-i", help="File to read tool JSON output from; use - for stdin."),
]
OUTPUT_OPTION = Annotated[
    str,
    typer.Option("--output", "-o", help="File to write the code quality report to; use - for stdout."),
]
STATS_OUTPUT_OPTION = Annotated[
    str,
    typer.Option("--output", "-o", help="File to write statistics to; use - for stdout."),
]
LOCKFILE_OPTION = Annotated[
    Path | None,
    typer.Option("--lockfile", help="Cargo lockfile to analyse (default: Cargo.lock)."),
]
FORMAT_OPTION = Annotated[
    StatsFormat | None,
    typer.Option("--format", "-f", case_sensitive=False, help="Statistics output format (default: json)."),
]
CONFIG_OPTION = Annotated[
    Path | None,
    typer.Option(
        "--config",
        help="Configuration file; defaults to [tool.lintlab] in pyproject.toml or .lintlab.toml.",
    ),
]
VERBOSE_OPTION = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Log skipped lines and dropped diagnostics."),
]
NO_COLOR_OPTION = Annotated[bool, typer.Option("--no-color", help="Disable ANSI colour output.")]
NO_EMOJI_OPTION = Annotated[bool, typer.Option("--no-emoji", help="Disable emoji in status output.")]


@dataclass(slots=True)
class CLIState:
    """Global options resolved once per invocation and shared with commands."""

    config: Config
    verbose: bool
    use_color: bool
    use_emoji: bool


def get_state(ctx: typer.Context) -> CLIState:
    """Return the :class:`CLIState` stored on the root context."""

    state = ctx.find_root().obj
    if not isinstance(state, CLIState):
        raise RuntimeError("lint-lab CLI state was not initialised")
    return state


__all__ = [
    "CLIState",
    "CONFIG_OPTION",
    "FORMAT_OPTION",
    "INPUT_OPTION",
    "LOCKFILE_OPTION",
    "NO_COLOR_OPTION",
    "NO_EMOJI_OPTION",
    "OUTPUT_OPTION",
    "STATS_OUTPUT_OPTION",
    "VERBOSE_OPTION",
    "get_state",
]
