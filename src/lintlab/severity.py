# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Severity related types and helpers."""

from __future__ import annotations

from enum import Enum
from typing import Final


class Severity(str, Enum):
    """Severity levels understood by the GitLab code quality widget, lowest first."""

    INFO = "info"
    MINOR = "minor"
    MAJOR = "major"
    CRITICAL = "critical"
    BLOCKER = "blocker"


class DiagnosticLevel(str, Enum):
    """Levels emitted by rustc and clippy in JSON diagnostics."""

    ICE = "error: internal compiler error"
    ERROR = "error"
    WARNING = "warning"
    FAILURE_NOTE = "failure-note"
    NOTE = "note"
    HELP = "help"


_LEVEL_TO_SEVERITY: Final[dict[str, Severity]] = {
    DiagnosticLevel.NOTE.value: Severity.INFO,
    DiagnosticLevel.HELP.value: Severity.INFO,
    DiagnosticLevel.WARNING.value: Severity.MINOR,
    DiagnosticLevel.ERROR.value: Severity.MAJOR,
}


def severity_for_level(level: DiagnosticLevel | str) -> Severity | None:
    """Map a compiler diagnostic level onto a code quality severity.

    Levels are matched exactly as rustc spells them, so ``"Warning"`` or
    ``" error "`` are unrecognised. Internal compiler errors, failure notes and
    unrecognised levels map to ``None``; such diagnostics are not reported.

    Args:
        level: Diagnostic level enum member or the raw ``level`` string.

    Returns:
        Severity | None: Matching severity, or ``None`` when not reportable.
    """

    key = level.value if isinstance(level, DiagnosticLevel) else level
    return _LEVEL_TO_SEVERITY.get(key)


__all__ = [
    "DiagnosticLevel",
    "Severity",
    "severity_for_level",
]
