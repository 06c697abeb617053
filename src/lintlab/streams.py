# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Open named files or the standard streams for reading and writing."""

from __future__ import annotations

import io
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Final, TextIO

from .errors import StreamError

STDIO_SENTINEL: Final[str] = "-"


def is_stdio(target: str | Path) -> bool:
    """Return whether ``target`` selects a standard stream.

    Args:
        target: Path or ``-`` sentinel supplied on the command line.

    Returns:
        bool: ``True`` when ``target`` is ``-``.
    """

    return str(target) == STDIO_SENTINEL


@contextmanager
def open_input(source: str | Path) -> Iterator[TextIO]:
    """Yield a readable text stream for ``source`` (``-`` for stdin).

    Input is decoded as UTF-8 and undecodable bytes are replaced, for stdin as
    well as for named files. stdin itself is left open.

    Args:
        source: File path, or ``-`` for stdin.

    Yields:
        TextIO: Stream positioned at the start of the input.

    Raises:
        StreamError: If the named file cannot be opened.
    """

    if is_stdio(source):
        buffer = getattr(sys.stdin, "buffer", None)
        if buffer is None:
            yield sys.stdin
            return
        wrapper = io.TextIOWrapper(buffer, encoding="utf-8", errors="replace")
        try:
            yield wrapper
        finally:
            wrapper.detach()
        return
    path = Path(source)
    try:
        handle = path.open("r", encoding="utf-8", errors="replace")
    except OSError as exc:
        raise StreamError(path, exc.strerror or str(exc)) from exc
    with handle:
        yield handle


@contextmanager
def open_output(target: str | Path) -> Iterator[TextIO]:
    """Yield a writable text stream for ``target`` (``-`` for stdout).

    stdout is never closed; named files are created or truncated as UTF-8.

    Args:
        target: File path, or ``-`` for stdout.

    Yields:
        TextIO: Stream ready for writing.

    Raises:
        StreamError: If the named file cannot be created.
    """

    if is_stdio(target):
        yield sys.stdout
        return
    path = Path(target)
    try:
        handle = path.open("w", encoding="utf-8")
    except OSError as exc:
        raise StreamError(path, exc.strerror or str(exc)) from exc
    with handle:
        yield handle


def describe_stream(target: str | Path, *, output: bool) -> str:
    """Return a human readable name for ``target``.

    Args:
        target: Path or ``-`` sentinel supplied on the command line.
        output: Whether ``target`` names an output stream.

    Returns:
        str: ``stdout``/``stdin`` for the sentinel, otherwise the path text.
    """

    if is_stdio(target):
        return "stdout" if output else "stdin"
    return str(target)


__all__ = [
    "STDIO_SENTINEL",
    "describe_stream",
    "is_stdio",
    "open_input",
    "open_output",
]
