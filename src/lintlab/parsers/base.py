# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared parser infrastructure."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass

from ..report import ReportEntry
from .messages import Message, iter_messages

MessageTransform = Callable[[Message], Iterable[ReportEntry]]


def _ensure_lines(value: Iterable[str] | str) -> Iterable[str]:
    """Normalise string-based input into an iterable of lines."""
    if isinstance(value, str):
        return value.splitlines()
    return value


@dataclass(slots=True)
class MessageStreamParser:
    """Decode a cargo message stream and delegate each record to a transform."""

    transform: MessageTransform

    def iter_entries(self, lines: Iterable[str] | str) -> Iterator[ReportEntry]:
        """Yield report entries for ``lines`` in input order."""

        for message in iter_messages(_ensure_lines(lines)):
            yield from self.transform(message)

    def parse(self, lines: Iterable[str] | str) -> list[ReportEntry]:
        """Return every report entry produced from ``lines``.

        Args:
            lines: Text blob or iterable of raw output lines.

        Returns:
            list[ReportEntry]: Entries in input order.
        """

        return list(self.iter_entries(lines))


__all__ = ["MessageStreamParser", "MessageTransform"]
