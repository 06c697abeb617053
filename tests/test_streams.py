# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the input and output stream helpers."""

from __future__ import annotations

import io
import sys
from pathlib import Path

import pytest

from lintlab.errors import StreamError
from lintlab.streams import describe_stream, open_input, open_output


def test_dash_selects_standard_streams(monkeypatch: pytest.MonkeyPatch) -> None:
    fake_in = io.StringIO("line\n")
    fake_out = io.StringIO()
    monkeypatch.setattr(sys, "stdin", fake_in)
    monkeypatch.setattr(sys, "stdout", fake_out)

    with open_input("-") as reader, open_output("-") as writer:
        writer.write(reader.read())

    assert fake_out.getvalue() == "line\n"
    assert not fake_out.closed


def test_named_files_round_trip(tmp_path: Path) -> None:
    source = tmp_path / "in.json"
    source.write_text("hello\n", encoding="utf-8")
    target = tmp_path / "out.json"

    with open_input(str(source)) as reader, open_output(target) as writer:
        writer.write(reader.read())

    assert target.read_text(encoding="utf-8") == "hello\n"


def test_missing_input_names_path(tmp_path: Path) -> None:
    missing = tmp_path / "missing.json"
    with pytest.raises(StreamError) as excinfo:
        with open_input(missing):
            pass

    assert excinfo.value.path == missing
    assert str(missing) in str(excinfo.value)


def test_uncreatable_output_names_path(tmp_path: Path) -> None:
    target = tmp_path / "no-such-dir" / "report.json"
    with pytest.raises(StreamError) as excinfo:
        with open_output(target):
            pass

    assert "Unable to open" in str(excinfo.value)
    assert str(target) in str(excinfo.value)


def test_describe_stream() -> None:
    assert describe_stream("-", output=True) == "stdout"
    assert describe_stream("-", output=False) == "stdin"
    assert describe_stream("report.json", output=True) == "report.json"


def test_stdin_bytes_are_decoded_with_replacement(monkeypatch: pytest.MonkeyPatch) -> None:
    raw = io.BytesIO(b"\xff bad\nok\n")
    fake_stdin = io.TextIOWrapper(raw, encoding="utf-8", errors="strict")
    monkeypatch.setattr(sys, "stdin", fake_stdin)

    with open_input("-") as reader:
        lines = reader.read().splitlines()

    assert lines == ["\ufffd bad", "ok"]
    assert not raw.closed
