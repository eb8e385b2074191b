"""Report exporters for proofreading results."""

from __future__ import annotations

from .report_utils import (
    CSV_HEADER,
    build_report_csv,
    build_report_markdown,
    build_report_text,
    issue_count_label,
    render_csv,
)

__all__ = [
    "CSV_HEADER",
    "build_report_csv",
    "build_report_markdown",
    "build_report_text",
    "issue_count_label",
    "render_csv",
]
