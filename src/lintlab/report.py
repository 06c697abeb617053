# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""GitLab code quality report entries.

The schema is documented at
https://docs.gitlab.com/ee/ci/testing/code_quality.html#implement-a-custom-tool.
GitLab uses ``fingerprint`` to match findings between pipelines, so the value
must only depend on the file path and the description.
"""

from __future__ import annotations

import hashlib
from typing import Final

from pydantic import BaseModel, ConfigDict

from .severity import Severity

UNKNOWN_CHECK_NAME: Final[str] = "unknown"
FINGERPRINT_SEPARATOR: Final[bytes] = b"\xff"
_FINGERPRINT_KEY: Final[bytes] = b"lint-lab"
_FINGERPRINT_DIGEST_SIZE: Final[int] = 8


def compute_fingerprint(path: str, description: str) -> str:
    """Return the lowercase hex fingerprint for ``path`` and ``description``.

    The digest is a keyed 64-bit BLAKE2b hash over the UTF-8 path, a ``0xff``
    separator and the UTF-8 description. It is stable across processes but is a
    hash, not a perfect key: distinct inputs collide with negligible probability.

    Args:
        path: Source path the finding refers to.
        description: Finding description written to the report.

    Returns:
        str: Sixteen lowercase hex characters.
    """

    hasher = hashlib.blake2b(digest_size=_FINGERPRINT_DIGEST_SIZE, key=_FINGERPRINT_KEY)
    hasher.update(path.encode("utf-8"))
    hasher.update(FINGERPRINT_SEPARATOR)
    hasher.update(description.encode("utf-8"))
    return hasher.hexdigest()


class Lines(BaseModel):
    """Line range of a finding; only the first line is reported."""

    model_config = ConfigDict(frozen=True)

    begin: int


class Location(BaseModel):
    """File location attached to a report entry."""

    model_config = ConfigDict(frozen=True)

    path: str
    lines: Lines


class ReportEntry(BaseModel):
    """Single finding in a GitLab code quality report."""

    model_config = ConfigDict(frozen=True)

    description: str
    check_name: str
    fingerprint: str
    severity: Severity
    location: Location

    @classmethod
    def create(
        cls,
        check_name: str,
        severity: Severity,
        description: str,
        path: str,
        line: int,
    ) -> ReportEntry:
        """Build an entry and compute its fingerprint from ``path`` and ``description``.

        Args:
            check_name: Lint or tool identifier such as ``clippy::needless_return``.
            severity: Code quality severity of the finding.
            description: Human readable finding text.
            path: Source path the finding refers to.
            line: First line of the finding.

        Returns:
            ReportEntry: Immutable entry with its fingerprint populated.
        """

        return cls(
            description=description,
            check_name=check_name,
            fingerprint=compute_fingerprint(path, description),
            severity=severity,
            location=Location(path=path, lines=Lines(begin=line)),
        )

    def to_payload(self) -> dict[str, object]:
        """Return the JSON-friendly mapping written to the report."""
        return self.model_dump(mode="json")


__all__ = [
    "FINGERPRINT_SEPARATOR",
    "Lines",
    "Location",
    "ReportEntry",
    "UNKNOWN_CHECK_NAME",
    "compute_fingerprint",
]
