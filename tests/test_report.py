# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for code quality report entries and fingerprints."""

from __future__ import annotations

import hashlib

import pytest
from pydantic import ValidationError

from lintlab.report import ReportEntry, compute_fingerprint
from lintlab.severity import Severity


def test_fingerprint_is_deterministic() -> None:
    first = compute_fingerprint("src/lib.rs", "unused variable")
    second = compute_fingerprint("src/lib.rs", "unused variable")
    assert first == second
    assert len(first) == 16
    assert first == first.lower()
    int(first, 16)


def test_fingerprint_matches_keyed_blake2b() -> None:
    expected = hashlib.blake2b(b"src/lib.rs\xffmessage", digest_size=8, key=b"lint-lab").hexdigest()
    assert compute_fingerprint("src/lib.rs", "message") == expected


@pytest.mark.parametrize(
    ("left", "right"),
    [
        (("src/lib.rs", "a"), ("src/main.rs", "a")),
        (("src/lib.rs", "a"), ("src/lib.rs", "b")),
        (("ab", "c"), ("a", "bc")),
    ],
)
def test_fingerprint_distinguishes_inputs(left: tuple[str, str], right: tuple[str, str]) -> None:
    assert compute_fingerprint(*left) != compute_fingerprint(*right)


def test_fingerprint_handles_unicode() -> None:
    assert compute_fingerprint("src/ünï.rs", "naïve ✓") == compute_fingerprint("src/ünï.rs", "naïve ✓")


def test_create_builds_location_and_fingerprint() -> None:
    entry = ReportEntry.create(
        check_name="clippy::needless_return",
        severity=Severity.MINOR,
        description="unneeded `return` statement. return x;",
        path="src/main.rs",
        line=12,
    )

    assert entry.location.path == "src/main.rs"
    assert entry.location.lines.begin == 12
    assert entry.fingerprint == compute_fingerprint("src/main.rs", entry.description)


def test_payload_uses_gitlab_field_names() -> None:
    entry = ReportEntry.create("rustfmt", Severity.MAJOR, "desc", "src/lib.rs", 4)

    assert entry.to_payload() == {
        "description": "desc",
        "check_name": "rustfmt",
        "fingerprint": compute_fingerprint("src/lib.rs", "desc"),
        "severity": "major",
        "location": {"path": "src/lib.rs", "lines": {"begin": 4}},
    }


def test_entries_are_immutable() -> None:
    entry = ReportEntry.create("rustfmt", Severity.MINOR, "", "src/lib.rs", 1)
    with pytest.raises(ValidationError):
        entry.description = "changed"  # type: ignore[misc]
