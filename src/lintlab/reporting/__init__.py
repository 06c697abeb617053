# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Reporting helpers for code quality output."""

from __future__ import annotations

from .emitters import render_code_quality_report, write_code_quality_report

__all__ = ["render_code_quality_report", "write_code_quality_report"]
