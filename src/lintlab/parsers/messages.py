# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Typed records for the line-oriented ``cargo --message-format=json`` protocol.

Each input line is decoded into one of the records below. Lines that are not a
recognised JSON record become :class:`TextLine` instances; tools such as
``rustfmt`` use those to carry their own payloads.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Annotated, Literal, TypeAlias

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

LOGGER = logging.getLogger(__name__)


class DiagnosticSpanLine(BaseModel):
    """Literal source line covered by a span."""

    model_config = ConfigDict(frozen=True)

    text: str
    highlight_start: int = 0
    highlight_end: int = 0


class DiagnosticSpan(BaseModel):
    """Source region attached to a compiler diagnostic."""

    model_config = ConfigDict(frozen=True)

    file_name: str
    line_start: int
    line_end: int | None = None
    column_start: int | None = None
    column_end: int | None = None
    byte_start: int | None = None
    byte_end: int | None = None
    is_primary: bool = False
    text: tuple[DiagnosticSpanLine, ...] = Field(default_factory=tuple)
    label: str | None = None
    suggested_replacement: str | None = None
    suggestion_applicability: str | None = None


class DiagnosticCode(BaseModel):
    """Lint or error code such as ``clippy::needless_return`` or ``E0308``."""

    model_config = ConfigDict(frozen=True)

    code: str
    explanation: str | None = None


class Diagnostic(BaseModel):
    """Diagnostic emitted by rustc or clippy."""

    model_config = ConfigDict(frozen=True)

    message: str
    level: str
    code: DiagnosticCode | None = None
    spans: tuple[DiagnosticSpan, ...] = Field(default_factory=tuple)
    children: tuple[Diagnostic, ...] = Field(default_factory=tuple)
    rendered: str | None = None


class CompilerMessage(BaseModel):
    """``compiler-message`` record wrapping a :class:`Diagnostic`."""

    model_config = ConfigDict(frozen=True)

    reason: Literal["compiler-message"]
    package_id: str = ""
    manifest_path: str | None = None
    message: Diagnostic


class CompilerArtifact(BaseModel):
    """``compiler-artifact`` record describing a built target."""

    model_config = ConfigDict(frozen=True)

    reason: Literal["compiler-artifact"]
    package_id: str = ""
    filenames: tuple[str, ...] = Field(default_factory=tuple)
    executable: str | None = None
    fresh: bool = False


class BuildScriptExecuted(BaseModel):
    """``build-script-executed`` record."""

    model_config = ConfigDict(frozen=True)

    reason: Literal["build-script-executed"]
    package_id: str = ""
    out_dir: str | None = None


class BuildFinished(BaseModel):
    """``build-finished`` record closing a cargo run."""

    model_config = ConfigDict(frozen=True)

    reason: Literal["build-finished"]
    success: bool


@dataclass(frozen=True, slots=True)
class TextLine:
    """Line that is not a recognised cargo JSON record."""

    text: str


JsonMessage: TypeAlias = Annotated[
    CompilerMessage | CompilerArtifact | BuildScriptExecuted | BuildFinished,
    Field(discriminator="reason"),
]
Message: TypeAlias = CompilerMessage | CompilerArtifact | BuildScriptExecuted | BuildFinished | TextLine

_MESSAGE_ADAPTER: TypeAdapter[JsonMessage] = TypeAdapter(JsonMessage)


def parse_message(line: str) -> Message:
    """Decode ``line`` into a typed record.

    Args:
        line: One line of cargo output, with or without its line terminator.

    Returns:
        Message: The decoded record, or :class:`TextLine` when ``line`` is not
        a recognised JSON record.
    """

    text = line.rstrip("\r\n")
    try:
        return _MESSAGE_ADAPTER.validate_json(text)
    except ValidationError:
        return TextLine(text=text)


def iter_messages(lines: Iterable[str]) -> Iterator[Message]:
    """Yield one decoded record per line of ``lines``.

    Non-blank lines that do not decode are logged at ``DEBUG`` and still
    yielded as :class:`TextLine`.

    Args:
        lines: Iterable of raw output lines.

    Yields:
        Message: Decoded record for each line, in input order.
    """

    for lineno, line in enumerate(lines, start=1):
        message = parse_message(line)
        if isinstance(message, TextLine) and message.text.strip():
            LOGGER.debug("line %d is not a cargo message", lineno)
        yield message


__all__ = [
    "BuildFinished",
    "BuildScriptExecuted",
    "CompilerArtifact",
    "CompilerMessage",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticSpan",
    "DiagnosticSpanLine",
    "Message",
    "TextLine",
    "iter_messages",
    "parse_message",
]
