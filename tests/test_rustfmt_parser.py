# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the rustfmt mismatch normaliser."""

from __future__ import annotations

import json
import logging

import pytest

from lintlab.errors import IdenticalMismatchError
from lintlab.parsers import entries_from_batch, parse_rustfmt
from lintlab.parsers.rustfmt import Mismatch, RustfmtFile, first_difference, parse_batches
from lintlab.severity import Severity


def _rich(line: int, original: str, expected: str) -> dict[str, object]:
    return {
        "original_begin_line": line,
        "original_end_line": line,
        "expected_begin_line": line,
        "expected_end_line": line,
        "original": original,
        "expected": expected,
    }


def test_rich_mismatch_produces_entry_with_offset() -> None:
    line = json.dumps([{"name": "src/lib.rs", "mismatches": [_rich(10, "fn foo(){}", "fn foo() {}")]}])
    entries = parse_rustfmt([line])

    assert len(entries) == 1
    entry = entries[0]
    assert entry.location.path == "src/lib.rs"
    assert entry.location.lines.begin == 10
    assert entry.check_name == "rustfmt"
    assert entry.severity is Severity.MINOR
    assert entry.description == "Difference at byte: 8.\noriginal: fn foo(){}. expected: fn foo() {}"


def test_one_entry_per_mismatch_in_order() -> None:
    batch = RustfmtFile.model_validate(
        {
            "name": "src/main.rs",
            "mismatches": [_rich(3, "a  b", "a b"), _rich(1, "x=1", "x = 1")],
        },
    )
    entries = entries_from_batch(batch)

    assert [entry.location.lines.begin for entry in entries] == [3, 1]
    assert entries[0].description.startswith("Difference at byte: 2.")
    assert entries[1].description.startswith("Difference at byte: 1.")


def test_minimal_shape_emits_single_entry() -> None:
    line = json.dumps(
        [{"name": "src/lib.rs", "mismatches": [{"original_begin_line": 4}, {"original_begin_line": 9}]}],
    )
    entries = parse_rustfmt(line)

    assert len(entries) == 1
    assert entries[0].description == ""
    assert entries[0].location.lines.begin == 4
    assert entries[0].check_name == "rustfmt"
    assert entries[0].severity is Severity.MINOR


def test_empty_mismatch_list_produces_nothing() -> None:
    assert entries_from_batch(RustfmtFile(name="src/lib.rs", mismatches=())) == []
    assert parse_rustfmt([json.dumps([{"name": "src/lib.rs", "mismatches": []}])]) == []


def test_identical_texts_are_skipped(caplog: pytest.LogCaptureFixture) -> None:
    batch = RustfmtFile(
        name="src/lib.rs",
        mismatches=(
            Mismatch.model_validate(_rich(2, "same", "same")),
            Mismatch.model_validate(_rich(5, "let x=1;", "let x = 1;")),
        ),
    )
    with caplog.at_level(logging.WARNING, logger="lintlab.parsers.rustfmt"):
        entries = entries_from_batch(batch)

    assert [entry.location.lines.begin for entry in entries] == [5]
    assert "identical" in caplog.text


def test_first_difference() -> None:
    assert first_difference("abc", "abd") == 2
    assert first_difference("abc", "abcd") == 3
    assert first_difference("", "x") == 0
    with pytest.raises(IdenticalMismatchError):
        first_difference("abc", "abc")


def test_non_batch_lines_are_ignored() -> None:
    batches = json.dumps([{"name": "src/a.rs", "mismatches": [_rich(1, "a", "b")]}])
    lines = [
        "Diff in src/a.rs at line 1:",
        '{"reason": "build-finished", "success": true}',
        "[1, 2, 3]",
        batches,
        "{broken",
    ]
    entries = parse_rustfmt(lines)

    assert [entry.location.path for entry in entries] == ["src/a.rs"]


def test_parse_batches_rejects_non_arrays() -> None:
    assert parse_batches('{"name": "src/a.rs", "mismatches": []}') == []
    assert parse_batches("") == []
    assert parse_batches("[]") == []


def test_multiple_batches_on_one_line() -> None:
    line = json.dumps(
        [
            {"name": "src/a.rs", "mismatches": [_rich(1, "a", "b")]},
            {"name": "src/b.rs", "mismatches": [_rich(2, "c", "d")]},
        ],
    )
    assert [entry.location.path for entry in parse_rustfmt([line])] == ["src/a.rs", "src/b.rs"]
