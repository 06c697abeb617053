# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy shared across lint-lab."""

from __future__ import annotations

from pathlib import Path


class LintLabError(Exception):
    """Base class for errors raised by lint-lab."""


class StreamError(LintLabError):
    """Raised when an input or output stream cannot be opened."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Error: {reason}. Unable to open {self.path}")


class LockfileError(LintLabError):
    """Raised when a dependency lockfile is missing or malformed."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"unable to load lockfile {self.path}: {reason}")


class IdenticalMismatchError(LintLabError):
    """Raised when a formatter mismatch has no differing character."""

    def __init__(self, original: str, expected: str) -> None:
        self.original = original
        self.expected = expected
        super().__init__("formatter mismatch has identical original and expected text")


__all__ = [
    "IdenticalMismatchError",
    "LintLabError",
    "LockfileError",
    "StreamError",
]
