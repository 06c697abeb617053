# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI command reporting project statistics."""

from __future__ import annotations

import typer

from ..errors import LintLabError
from ..logging import fail
from ..stats import collect_stats, load_lockfile, render_stats
from ..streams import describe_stream, open_output
from ._options import FORMAT_OPTION, LOCKFILE_OPTION, STATS_OUTPUT_OPTION, get_state
from .typer_ext import SortedTyper


def stats_command(
    ctx: typer.Context,
    lockfile: LOCKFILE_OPTION = None,
    fmt: FORMAT_OPTION = None,
    output_path: STATS_OUTPUT_OPTION = "-",
) -> None:
    """Print out project statistics such as the number of locked dependencies."""

    state = get_state(ctx)
    lockfile_path = lockfile if lockfile is not None else state.config.stats.lockfile
    output_format = fmt if fmt is not None else state.config.stats.format
    try:
        stats = collect_stats(load_lockfile(lockfile_path))
        with open_output(output_path) as writer:
            writer.write(render_stats(stats, output_format))
            writer.flush()
    except LintLabError as exc:
        fail(str(exc), use_emoji=state.use_emoji, use_color=state.use_color)
        raise typer.Exit(code=1) from exc
    except OSError as exc:
        fail(
            f"Error: {exc.strerror or exc}. Unable to write statistics to "
            f"{describe_stream(output_path, output=True)}",
            use_emoji=state.use_emoji,
            use_color=state.use_color,
        )
        raise typer.Exit(code=1) from exc


def register(app: SortedTyper) -> None:
    """Register the statistics command with ``app``."""
    app.command("stats")(stats_command)


__all__ = ["register", "stats_command"]
