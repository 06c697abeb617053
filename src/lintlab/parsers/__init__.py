# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Public parser exports for converting tool output into report entries."""

from __future__ import annotations

from .base import MessageStreamParser
from .clippy import clippy_parser, entry_from_compiler_message, entry_from_diagnostic, parse_clippy
from .messages import CompilerMessage, Diagnostic, DiagnosticSpan, TextLine, iter_messages, parse_message
from .rustfmt import Mismatch, RustfmtFile, entries_from_batch, parse_rustfmt, rustfmt_parser

__all__ = [
    "CompilerMessage",
    "Diagnostic",
    "DiagnosticSpan",
    "Mismatch",
    "MessageStreamParser",
    "RustfmtFile",
    "TextLine",
    "clippy_parser",
    "entries_from_batch",
    "entry_from_compiler_message",
    "entry_from_diagnostic",
    "iter_messages",
    "parse_clippy",
    "parse_message",
    "parse_rustfmt",
    "rustfmt_parser",
]
