# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI commands converting tool output into GitLab code quality reports."""

from __future__ import annotations

from typing import NoReturn

import typer

from ..errors import LintLabError
from ..logging import fail, ok
from ..parsers import MessageStreamParser, clippy_parser, rustfmt_parser
from ..reporting import write_code_quality_report
from ..streams import describe_stream, open_input, open_output
from ._options import INPUT_OPTION, OUTPUT_OPTION, CLIState, get_state
from .typer_ext import SortedTyper


def lints_command(ctx: typer.Context, input_path: INPUT_OPTION, output_path: OUTPUT_OPTION) -> None:
    """Convert clippy JSON output to a GitLab code quality report.

    Example: cargo clippy --message-format=json | lint-lab lints -i - -o gl-code-quality-report.json
    """

    state = get_state(ctx)
    parser = clippy_parser(unknown_check_name=state.config.report.unknown_check_name)
    convert_stream(parser, input_path, output_path, state=state)


def rustfmt_command(ctx: typer.Context, input_path: INPUT_OPTION, output_path: OUTPUT_OPTION) -> None:
    """Convert rustfmt JSON output (nightly) to a GitLab code quality report.

    Example: cargo +nightly fmt -- --emit json | lint-lab rustfmt -i - -o gl-code-quality-report.json
    """

    convert_stream(rustfmt_parser(), input_path, output_path, state=get_state(ctx))


def convert_stream(parser: MessageStreamParser, source: str, target: str, *, state: CLIState) -> int:
    """Read ``source``, convert it with ``parser`` and write the report to ``target``.

    The whole input is converted before ``target`` is opened, so a failed
    read never leaves a truncated report behind.

    Args:
        parser: Stream parser turning input lines into report entries.
        source: Input file path, or ``-`` for stdin.
        target: Output file path, or ``-`` for stdout.
        state: Resolved global CLI options.

    Returns:
        int: Number of entries written.

    Raises:
        typer.Exit: With status 1 when a stream cannot be opened, read or written.
    """

    try:
        with open_input(source) as reader:
            entries = parser.parse(reader)
    except LintLabError as exc:
        _abort(str(exc), state=state, exc=exc)
    except OSError as exc:
        _abort(
            f"Error: {exc.strerror or exc}. Unable to read {describe_stream(source, output=False)}",
            state=state,
            exc=exc,
        )

    try:
        with open_output(target) as writer:
            count = write_code_quality_report(entries, writer, indent=state.config.report.indent)
    except LintLabError as exc:
        _abort(str(exc), state=state, exc=exc)
    except OSError as exc:
        _abort(
            f"Error: {exc.strerror or exc}. Unable to write report to {describe_stream(target, output=True)}",
            state=state,
            exc=exc,
        )

    ok(
        f"Wrote {count} code quality entries to {describe_stream(target, output=True)}",
        use_emoji=state.use_emoji,
        use_color=state.use_color,
    )
    return count


def _abort(message: str, *, state: CLIState, exc: Exception) -> NoReturn:
    fail(message, use_emoji=state.use_emoji, use_color=state.use_color)
    raise typer.Exit(code=1) from exc


def register(app: SortedTyper) -> None:
    """Register the conversion commands with ``app``."""

    app.command("lints")(lints_command)
    app.command("rustfmt")(rustfmt_command)


__all__ = ["convert_stream", "lints_command", "register", "rustfmt_command"]
