# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Emit machine-readable code quality reports."""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import TextIO

from ..report import ReportEntry


def render_code_quality_report(entries: Iterable[ReportEntry], *, indent: int = 2) -> str:
    """Return the GitLab code quality JSON array for ``entries``."""
    payload = [entry.to_payload() for entry in entries]
    return json.dumps(payload, indent=indent, ensure_ascii=False)


def write_code_quality_report(
    entries: Iterable[ReportEntry],
    stream: TextIO,
    *,
    indent: int = 2,
) -> int:
    """Write ``entries`` to ``stream`` as a pretty-printed JSON array.

    Returns:
        int: Number of entries written.
    """

    materialised = list(entries)
    stream.write(render_code_quality_report(materialised, indent=indent))
    stream.write("\n")
    stream.flush()
    return len(materialised)


__all__ = ["render_code_quality_report", "write_code_quality_report"]
