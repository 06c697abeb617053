# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import json
from collections.abc import Callable, Iterator
from typing import Any

import pytest

from lintlab.console import get_console_manager

MessageFactory = Callable[..., str]


def _span(
    file_name: str = "src/lib.rs",
    line_start: int = 3,
    text: tuple[str, ...] = ("    let x = 1;",),
) -> dict[str, Any]:
    return {
        "file_name": file_name,
        "byte_start": 10,
        "byte_end": 20,
        "line_start": line_start,
        "line_end": line_start + max(len(text) - 1, 0),
        "column_start": 5,
        "column_end": 15,
        "is_primary": True,
        "text": [{"text": line, "highlight_start": 5, "highlight_end": 15} for line in text],
        "label": None,
        "suggested_replacement": None,
        "suggestion_applicability": None,
        "expansion": None,
    }


@pytest.fixture
def span() -> Callable[..., dict[str, Any]]:
    """Return a factory producing rustc span payloads."""
    return _span


@pytest.fixture
def compiler_message() -> MessageFactory:
    """Return a factory producing one ``compiler-message`` JSON line."""

    def _build(
        *,
        level: str = "warning",
        message: str = "unused variable: `x`",
        code: str | None = "unused_variables",
        spans: list[dict[str, Any]] | None = None,
    ) -> str:
        payload = {
            "reason": "compiler-message",
            "package_id": "demo 0.1.0 (path+file:///work/demo)",
            "manifest_path": "/work/demo/Cargo.toml",
            "target": {"kind": ["lib"], "name": "demo", "src_path": "/work/demo/src/lib.rs"},
            "message": {
                "rendered": f"{level}: {message}\n",
                "$message_type": "diagnostic",
                "children": [],
                "code": None if code is None else {"code": code, "explanation": None},
                "level": level,
                "message": message,
                "spans": [_span()] if spans is None else spans,
            },
        }
        return json.dumps(payload)

    return _build


@pytest.fixture(autouse=True)
def _fresh_consoles() -> Iterator[None]:
    """Drop cached Rich consoles so output binds to the streams of each test."""
    get_console_manager().clear()
    yield
    get_console_manager().clear()
