# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Convert rustc and clippy diagnostics into code quality entries."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from functools import partial

from ..report import UNKNOWN_CHECK_NAME, ReportEntry
from ..severity import severity_for_level
from .base import MessageStreamParser
from .messages import CompilerMessage, Diagnostic, DiagnosticSpan, Message

LOGGER = logging.getLogger(__name__)

DESCRIPTION_SEPARATOR = ". "


def span_text(span: DiagnosticSpan) -> str:
    """Return the span's source lines, trimmed and joined without separators."""
    return "".join(line.text.strip() for line in span.text)


def entry_from_diagnostic(
    diagnostic: Diagnostic,
    *,
    unknown_check_name: str = UNKNOWN_CHECK_NAME,
) -> ReportEntry | None:
    """Return the report entry for ``diagnostic`` or ``None`` when it is not reportable.

    Only the first span is used. Diagnostics without spans, or whose level has
    no code quality severity, are dropped.
    """

    severity = severity_for_level(diagnostic.level)
    if severity is None:
        LOGGER.debug("dropping diagnostic with level %r: %s", diagnostic.level, diagnostic.message)
        return None
    if not diagnostic.spans:
        LOGGER.debug("dropping diagnostic without spans: %s", diagnostic.message)
        return None

    span = diagnostic.spans[0]
    check_name = diagnostic.code.code if diagnostic.code is not None else unknown_check_name
    return ReportEntry.create(
        check_name=check_name,
        severity=severity,
        description=f"{diagnostic.message}{DESCRIPTION_SEPARATOR}{span_text(span)}",
        path=span.file_name,
        line=span.line_start,
    )


def entry_from_compiler_message(
    message: CompilerMessage,
    *,
    unknown_check_name: str = UNKNOWN_CHECK_NAME,
) -> ReportEntry | None:
    """Unwrap ``message`` and delegate to :func:`entry_from_diagnostic`."""
    return entry_from_diagnostic(message.message, unknown_check_name=unknown_check_name)


def _entries_from_message(message: Message, *, unknown_check_name: str) -> Iterable[ReportEntry]:
    if not isinstance(message, CompilerMessage):
        return ()
    entry = entry_from_compiler_message(message, unknown_check_name=unknown_check_name)
    return () if entry is None else (entry,)


def clippy_parser(*, unknown_check_name: str = UNKNOWN_CHECK_NAME) -> MessageStreamParser:
    """Return a stream parser for ``cargo clippy --message-format=json`` output.

    Args:
        unknown_check_name: Check name used for diagnostics without a code.

    Returns:
        MessageStreamParser: Parser emitting one entry per reportable diagnostic.
    """

    return MessageStreamParser(transform=partial(_entries_from_message, unknown_check_name=unknown_check_name))


def parse_clippy(
    lines: Iterable[str] | str,
    *,
    unknown_check_name: str = UNKNOWN_CHECK_NAME,
) -> list[ReportEntry]:
    """Return code quality entries for every reportable compiler message in ``lines``.

    Args:
        lines: Text blob or iterable of cargo JSON lines.
        unknown_check_name: Check name used for diagnostics without a code.

    Returns:
        list[ReportEntry]: Entries in input order.
    """

    return clippy_parser(unknown_check_name=unknown_check_name).parse(lines)


__all__ = [
    "clippy_parser",
    "entry_from_compiler_message",
    "entry_from_diagnostic",
    "parse_clippy",
    "span_text",
]
