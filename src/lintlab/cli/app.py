# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands and shared options."""

from __future__ import annotations

from typing import Annotated

import typer

from .. import __version__
from ..config import ConfigError, load_config
from ..logging import configure_logging, fail
from . import convert, stats
from ._options import CONFIG_OPTION, NO_COLOR_OPTION, NO_EMOJI_OPTION, VERBOSE_OPTION, CLIState
from .typer_ext import create_typer

app = create_typer(
    name="lint-lab",
    help="Convert Rust tool output into GitLab code quality reports and metrics.",
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode=None,
)


def _print_version(value: bool) -> None:
    if value:
        typer.echo(f"lint-lab {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    config_path: CONFIG_OPTION = None,
    verbose: VERBOSE_OPTION = False,
    no_color: NO_COLOR_OPTION = False,
    no_emoji: NO_EMOJI_OPTION = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_print_version,
            is_eager=True,
            help="Show the version and exit.",
        ),
    ] = False,
) -> None:
    """Load configuration and logging shared by every command."""

    del version
    use_color = not no_color
    use_emoji = not no_emoji
    configure_logging(verbose=verbose, use_color=use_color)
    try:
        config = load_config(config_path)
    except ConfigError as exc:
        fail(str(exc), use_emoji=use_emoji, use_color=use_color)
        raise typer.Exit(code=1) from exc
    ctx.obj = CLIState(config=config, verbose=verbose, use_color=use_color, use_emoji=use_emoji)


convert.register(app)
stats.register(app)

__all__ = ["app", "main"]
