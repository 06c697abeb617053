# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Convert ``rustfmt --message-format=json`` mismatch reports into code quality entries."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from ..errors import IdenticalMismatchError
from ..report import ReportEntry
from ..severity import Severity
from .base import MessageStreamParser
from .messages import Message, TextLine

LOGGER = logging.getLogger(__name__)

RUSTFMT_CHECK_NAME: Final[str] = "rustfmt"
RUSTFMT_SEVERITY: Final[Severity] = Severity.MINOR


class Mismatch(BaseModel):
    """Formatting discrepancy within a single file."""

    model_config = ConfigDict(frozen=True)

    original_begin_line: int
    original_end_line: int | None = None
    expected_begin_line: int | None = None
    expected_end_line: int | None = None
    original: str | None = None
    expected: str | None = None

    @property
    def has_text(self) -> bool:
        """Return ``True`` when both the original and expected text are present."""
        return self.original is not None and self.expected is not None


class RustfmtFile(BaseModel):
    """All mismatches rustfmt reported for one file."""

    model_config = ConfigDict(frozen=True)

    name: str
    mismatches: tuple[Mismatch, ...] = Field(default_factory=tuple)


_BATCHES_ADAPTER: TypeAdapter[list[RustfmtFile]] = TypeAdapter(list[RustfmtFile])


def first_difference(original: str, expected: str) -> int:
    """Return the index of the first character at which the texts differ.

    When one text is a prefix of the other the length of the shorter text is
    returned.

    Args:
        original: Source text as found in the file.
        expected: Source text as rustfmt would write it.

    Returns:
        int: Character offset of the first difference.

    Raises:
        IdenticalMismatchError: If both texts are identical.
    """

    for index, (left, right) in enumerate(zip(original, expected)):
        if left != right:
            return index
    if len(original) == len(expected):
        raise IdenticalMismatchError(original, expected)
    return min(len(original), len(expected))


def describe_mismatch(original: str, expected: str) -> str:
    """Return the report description for a mismatch carrying both texts."""
    offset = first_difference(original, expected)
    return f"Difference at byte: {offset}.\noriginal: {original}. expected: {expected}"


def entry_from_mismatch(path: str, mismatch: Mismatch) -> ReportEntry:
    """Build the entry for a mismatch that carries original and expected text."""

    if mismatch.original is None or mismatch.expected is None:
        raise ValueError("mismatch does not carry original and expected text")
    return ReportEntry.create(
        check_name=RUSTFMT_CHECK_NAME,
        severity=RUSTFMT_SEVERITY,
        description=describe_mismatch(mismatch.original, mismatch.expected),
        path=path,
        line=mismatch.original_begin_line,
    )


def entries_from_batch(batch: RustfmtFile) -> list[ReportEntry]:
    """Return the entries for every mismatch in ``batch``.

    Batches where every mismatch carries text yield one entry per mismatch.
    Otherwise a single entry with an empty description marks the first
    mismatching line of the file.
    """

    if not batch.mismatches:
        return []

    if not all(mismatch.has_text for mismatch in batch.mismatches):
        first = batch.mismatches[0]
        return [
            ReportEntry.create(
                check_name=RUSTFMT_CHECK_NAME,
                severity=RUSTFMT_SEVERITY,
                description="",
                path=batch.name,
                line=first.original_begin_line,
            ),
        ]

    entries: list[ReportEntry] = []
    for mismatch in batch.mismatches:
        try:
            entries.append(entry_from_mismatch(batch.name, mismatch))
        except IdenticalMismatchError:
            LOGGER.warning(
                "skipping rustfmt mismatch in %s at line %d: original and expected text are identical",
                batch.name,
                mismatch.original_begin_line,
            )
    return entries


def parse_batches(text: str) -> list[RustfmtFile]:
    """Decode a JSON array of batches, returning an empty list when ``text`` is not one."""

    try:
        return _BATCHES_ADAPTER.validate_json(text)
    except ValidationError:
        if text.strip():
            LOGGER.debug("ignoring line that is not a rustfmt batch array")
        return []


def _entries_from_message(message: Message) -> Iterable[ReportEntry]:
    if not isinstance(message, TextLine):
        return ()
    entries: list[ReportEntry] = []
    for batch in parse_batches(message.text):
        entries.extend(entries_from_batch(batch))
    return entries


def rustfmt_parser() -> MessageStreamParser:
    """Return a stream parser for ``rustfmt --message-format=json`` output."""
    return MessageStreamParser(transform=_entries_from_message)


def parse_rustfmt(lines: Iterable[str] | str) -> list[ReportEntry]:
    """Return code quality entries for every rustfmt batch found in ``lines``.

    Args:
        lines: Text blob or iterable of rustfmt output lines.

    Returns:
        list[ReportEntry]: Entries in batch order.
    """

    return rustfmt_parser().parse(lines)


__all__ = [
    "Mismatch",
    "RUSTFMT_CHECK_NAME",
    "RustfmtFile",
    "describe_mismatch",
    "entries_from_batch",
    "entry_from_mismatch",
    "first_difference",
    "parse_batches",
    "parse_rustfmt",
    "rustfmt_parser",
]
